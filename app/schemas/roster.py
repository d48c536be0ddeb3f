# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas — API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


def _reject_null(value):
    if value is None:
        raise ValueError("field may be omitted but not set to null")
    return value


# ── Roster Schemas ──

class RosterRowCreateRequest(BaseModel):
    crew_id: str = Field(default="", max_length=64, description="Crew master id")
    crew_name: str = Field(..., min_length=1, max_length=255)
    post: str = Field(default="", max_length=255)
    client: str = Field(default="", max_length=64)
    location: str = Field(default="", max_length=255)
    roles_em: Optional[str] = None
    cycle_number: Optional[int] = Field(default=None, ge=1, description="Defaults to 1")
    sign_on: Optional[str] = Field(default=None, description="YYYY-MM-DD or YYYY-Mon-DD")
    sign_off: Optional[str] = Field(default=None, description="YYYY-MM-DD or YYYY-Mon-DD")


class RosterRowUpdateRequest(BaseModel):
    """Partial update model for PATCH /api/v1/roster/{id}."""
    crew_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    post: Optional[str] = None
    client: Optional[str] = None
    location: Optional[str] = None
    roles_em: Optional[str] = None
    cycle_number: Optional[int] = Field(default=None, ge=1)
    sign_on: Optional[str] = None
    sign_off: Optional[str] = None
    is_offshore: Optional[bool] = None
    notes: Optional[str] = None
    relief_all: Optional[float] = None
    standby_all: Optional[float] = None
    day_relief: Optional[float] = None
    day_standby: Optional[float] = None
    medevac_dates: Optional[list[str]] = None

    reject_null = field_validator(
        "crew_name", "post", "client", "location", "cycle_number", mode="before"
    )(_reject_null)


class RosterBulkItem(BaseModel):
    id: int
    updates: RosterRowUpdateRequest


class RosterBulkUpdateRequest(BaseModel):
    items: list[RosterBulkItem] = Field(..., min_length=1)


class RosterRowResponse(BaseModel):
    id: int
    crew_id: str
    crew_name: str
    post: str
    client: str
    location: str
    cycle_number: int
    sign_on: Optional[str] = None
    sign_off: Optional[str] = None


# ── Staff Schemas ──

class StaffCreateRequest(BaseModel):
    id: Optional[str] = Field(default=None, max_length=64)
    crew_name: str = Field(..., min_length=1, max_length=255)
    clean_name: Optional[str] = None
    post: str = Field(default="", max_length=255)
    client: str = Field(default="", max_length=64)
    location: str = Field(default="", max_length=255)
    status: Optional[str] = None
    salary: float = Field(default=0, ge=0)
    fixed_allowance: float = Field(default=0, ge=0)
    relief_rate: float = Field(default=0, ge=0)
    standby_rate: float = Field(default=0, ge=0)


class StaffUpdateRequest(BaseModel):
    crew_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    clean_name: Optional[str] = None
    post: Optional[str] = None
    client: Optional[str] = None
    location: Optional[str] = None
    status: Optional[str] = None
    salary: Optional[float] = Field(default=None, ge=0)
    fixed_allowance: Optional[float] = Field(default=None, ge=0)
    relief_rate: Optional[float] = Field(default=None, ge=0)
    standby_rate: Optional[float] = Field(default=None, ge=0)

    reject_null = field_validator(
        "crew_name", "post", "client", "location",
        "salary", "fixed_allowance", "relief_rate", "standby_rate",
        mode="before",
    )(_reject_null)


# ── Training Matrix Schemas ──

MATRIX_FIELD_PATTERN = "^(attended_date|expiry_date|plan_date|cert_no)$"


class MatrixCellUpdateRequest(BaseModel):
    field: str = Field(..., pattern=MATRIX_FIELD_PATTERN)
    value: Optional[str] = None


class MatrixRecordCreateRequest(BaseModel):
    crew_id: str = Field(..., min_length=1)
    cert_type: str = Field(..., min_length=1)
    field: str = Field(..., pattern=MATRIX_FIELD_PATTERN)
    value: str

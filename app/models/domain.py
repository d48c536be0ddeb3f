# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
"""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class Trade(str, Enum):
    """Closed set of trades a free-text post can classify into."""

    OFFSHORE_MEDIC = "OFFSHORE MEDIC"
    ESCORT_MEDIC = "ESCORT MEDIC"
    IMP_OHN = "IMP / OHN"
    UNCLASSIFIED = "UNCLASSIFIED"

    @property
    def is_office_based(self) -> bool:
        return self is Trade.IMP_OHN


class CertStatus(str, Enum):
    VALID = "valid"
    EXPIRING = "expiring"
    EXPIRED = "expired"
    NO_DATA = "no-data"


class DayStatus(str, Enum):
    """Calendar cell state in the monthly roster."""

    PRIMARY = "PRIMARY"
    SECONDARY = "SECONDARY"
    OFF = "OFF"
    OHN_WEEKDAY = "OHN_WEEKDAY"
    OHN_WEEKEND = "OHN_WEEKEND"


class Cycle(BaseModel):
    """One rotation period. Dates stay raw; the calculator parses them."""

    id: Optional[int] = None
    sign_on: Optional[str] = None
    sign_off: Optional[str] = None
    is_offshore: Optional[bool] = None
    notes: Optional[str] = None
    relief_all: Optional[float] = None
    standby_all: Optional[float] = None
    day_relief: Optional[float] = None
    day_standby: Optional[float] = None
    medevac_dates: Optional[list[str]] = None


class RosterEntry(BaseModel):
    """One person's full rotation record, cycles keyed by cycle number."""

    crew_id: str = ""
    crew_name: str = ""
    post: str = ""
    client: str = ""
    location: str = ""
    roles_em: Optional[str] = None
    trade: Trade = Trade.UNCLASSIFIED
    cycles: dict[int, Cycle] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _classify_trade(self) -> "RosterEntry":
        # Imported here: the classifier module depends on Trade above.
        from app.services.trade import classify_post

        self.trade = classify_post(self.post)
        return self


class ActiveRange(BaseModel):
    start: Optional[date] = None
    end: Optional[date] = None

    @property
    def is_active(self) -> bool:
        return self.start is not None and self.end is not None


class PersonnelStatus(BaseModel):
    is_on_board: bool
    days_on_board: int
    rotation_start: Optional[date] = None
    rotation_end: Optional[date] = None
    departure_imminent: bool = False
    long_stay: bool = False

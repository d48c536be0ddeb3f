# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Staff directory — crew master records.
"""

from typing import Any

from app.core.logging import get_logger
from app.metrics.prometheus import STAFF_RECORDS
from app.models.domain import RosterEntry, Trade
from app.repositories.history_repository import HistoryRepository
from app.repositories.matrix_repository import MatrixRepository
from app.repositories.staff_repository import StaffRepository
from app.services.trade import classify_post

logger = get_logger(__name__)

NUMERIC_FIELDS: tuple[str, ...] = (
    "salary", "fixed_allowance", "relief_rate", "standby_rate",
)


class StaffService:
    """Business logic for the crew master table."""

    def __init__(
        self,
        staff_repo: StaffRepository,
        matrix_repo: MatrixRepository,
        history_repo: HistoryRepository,
    ) -> None:
        self._staff = staff_repo
        self._matrix = matrix_repo
        self._history = history_repo

    # ── Commands ──

    def create_staff(self, data: dict[str, Any]) -> dict[str, Any]:
        if not (data.get("crew_name") or "").strip():
            raise ValueError("crew_name is required")
        record = dict(data)
        for field in NUMERIC_FIELDS:
            record[field] = record.get(field) or 0
        stored = self._staff.insert(record)

        STAFF_RECORDS.set(self._staff.count())
        self._history.record_event(
            "staff_created", stored["id"], {"crew_name": stored["crew_name"]}
        )
        logger.info("Staff record created: id=%s, name=%s", stored["id"], stored["crew_name"])
        return stored

    def update_staff(self, staff_id: str, updates: dict[str, Any]) -> dict[str, Any]:
        record = self._staff.update(staff_id, updates)
        if record is None:
            raise KeyError(f"Staff record '{staff_id}' not found")
        self._history.record_event(
            "staff_updated", staff_id, {"fields": sorted(updates)}
        )
        logger.info("Staff record updated: id=%s, fields=%s", staff_id, sorted(updates))
        return record

    # ── Queries ──

    def list_staff(self) -> list[dict[str, Any]]:
        return self._staff.get_all()

    def get_staff(self, staff_id: str) -> dict[str, Any]:
        record = self._staff.get_by_id(staff_id)
        if record is None:
            raise KeyError(f"Staff record '{staff_id}' not found")
        return record

    def get_staff_matrix(self, staff_id: str) -> list[dict[str, Any]]:
        if not self._staff.exists(staff_id):
            raise KeyError(f"Staff record '{staff_id}' not found")
        return self._matrix.get_by_crew(staff_id)

    def office_staff(self) -> list[RosterEntry]:
        """Office-based staff as cycle-less entries for the on-board view."""
        return [
            RosterEntry(
                crew_id=s["id"],
                crew_name=s.get("crew_name") or "",
                post=s.get("post") or "",
                client=s.get("client") or "",
                location=s.get("location") or "",
            )
            for s in self._staff.get_all()
            if classify_post(s.get("post")) is Trade.IMP_OHN
        ]

    # ── Seed ──

    def seed_defaults(self) -> None:
        default_staff = [
            {"id": "C001", "crew_name": "AHMAD FAIZAL", "post": "OFFSHORE MEDIC",
             "client": "SKA", "location": "BARAM", "status": "ACTIVE"},
            {"id": "C002", "crew_name": "BRENDA LAU", "post": "OFFSHORE MEDIC",
             "client": "SBA", "location": "SAMARANG (SM)", "status": "ACTIVE"},
            {"id": "C003", "crew_name": "CHONG WEI MING", "post": "ESCORT MEDIC",
             "client": "SKA", "location": "MIRI", "status": "ACTIVE"},
            {"id": "C004", "crew_name": "DIANA RAJ", "post": "OHN",
             "client": "SBA", "location": "SBA OFFICE", "status": "ACTIVE"},
        ]
        for record in default_staff:
            for field in NUMERIC_FIELDS:
                record.setdefault(field, 0)
            self._staff.insert(record)
        STAFF_RECORDS.set(self._staff.count())
        logger.info("Seeded %d default staff records", len(default_staff))

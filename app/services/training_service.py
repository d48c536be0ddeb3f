# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Training matrix — certification records joined with crew master
data, plus expiry-tier summaries.
"""

from datetime import date, timedelta
from typing import Any, Optional

from app.core.config import settings
from app.core.logging import get_logger
from app.metrics.prometheus import CERT_UPDATES
from app.models.domain import CertStatus
from app.repositories.history_repository import HistoryRepository
from app.repositories.matrix_repository import MatrixRepository
from app.repositories.staff_repository import StaffRepository
from app.services.certification import ALL_COURSES, cert_status

logger = get_logger(__name__)

EDITABLE_FIELDS: tuple[str, ...] = ("attended_date", "expiry_date", "plan_date", "cert_no")

_CREW_FIELDS: tuple[str, ...] = ("crew_name", "post", "client", "location")


class TrainingService:
    """Business logic for the certification matrix."""

    def __init__(
        self,
        matrix_repo: MatrixRepository,
        staff_repo: StaffRepository,
        history_repo: HistoryRepository,
    ) -> None:
        self._matrix = matrix_repo
        self._staff = staff_repo
        self._history = history_repo

    # ── Queries ──

    def get_matrix(self) -> list[dict[str, Any]]:
        """
        Every certification record joined with its crew's details. With no
        records at all, one empty placeholder per crew member is returned.
        """
        crew = {s["id"]: s for s in self._staff.get_all()}
        records = self._matrix.get_all()

        if records:
            joined = []
            for record in records:
                person = crew.get(record["crew_id"], {})
                row = {
                    "id": record["id"],
                    "crew_id": record["crew_id"],
                    "cert_type": record.get("cert_type") or "",
                    "cert_no": record.get("cert_no"),
                    "expiry_date": record.get("expiry_date"),
                    "attended_date": record.get("attended_date"),
                    "plan_date": record.get("plan_date"),
                }
                row.update({f: person.get(f) or "" for f in _CREW_FIELDS})
                joined.append(row)
            return joined

        return [
            {
                "id": s["id"],
                "crew_id": s["id"],
                "cert_type": "",
                "cert_no": None,
                "expiry_date": None,
                "attended_date": None,
                "plan_date": None,
                **{f: s.get(f) or "" for f in _CREW_FIELDS},
            }
            for s in crew.values()
        ]

    def summary(self, today: Optional[date] = None) -> dict[str, Any]:
        """Valid / expiring / expired counts per course and overall."""
        today = today or date.today()
        counts = {c: {"valid": 0, "expiring": 0, "expired": 0} for c in ALL_COURSES}
        for record in self._matrix.get_all():
            course = record.get("cert_type")
            if course not in counts:
                continue
            status = cert_status(
                record.get("expiry_date"), today, settings.CERT_EXPIRING_DAYS
            )
            if status is not CertStatus.NO_DATA:
                counts[course][status.value] += 1

        totals = {"valid": 0, "expiring": 0, "expired": 0}
        for course_counts in counts.values():
            for key, value in course_counts.items():
                totals[key] += value
        return {
            "date": today.isoformat(),
            "total_personnel": self._staff.count(),
            "totals": totals,
            "courses": counts,
        }

    # ── Commands ──

    def update_cell(self, record_id: str, field: str, value: Optional[str]) -> dict[str, Any]:
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Field '{field}' is not editable")
        record = self._matrix.update_field(record_id, field, value)
        if record is None:
            raise KeyError(f"Matrix record '{record_id}' not found")
        CERT_UPDATES.labels(field=field).inc()
        self._history.record_event(
            "cert_updated",
            record["crew_id"],
            {"record_id": record_id, "cert_type": record["cert_type"], "field": field},
        )
        logger.info("Matrix cell updated: id=%s, field=%s", record_id, field)
        return record

    def create_record(
        self, crew_id: str, cert_type: str, field: str, value: Optional[str]
    ) -> dict[str, Any]:
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Field '{field}' is not editable")
        if not self._staff.exists(crew_id):
            raise KeyError(f"Staff record '{crew_id}' not found")
        record = self._matrix.insert(
            {
                "crew_id": crew_id,
                "cert_type": cert_type,
                "cert_no": None,
                "attended_date": None,
                "expiry_date": None,
                "plan_date": None,
                field: value,
            }
        )
        CERT_UPDATES.labels(field=field).inc()
        self._history.record_event(
            "cert_created", crew_id, {"record_id": record["id"], "cert_type": cert_type}
        )
        logger.info("Matrix record created: crew=%s, cert=%s", crew_id, cert_type)
        return record

    # ── Seed ──

    def seed_defaults(self, today: Optional[date] = None) -> None:
        """Certificates for the seeded crew, one per expiry tier."""
        today = today or date.today()
        default_certs = [
            ("C001", "BLS", today + timedelta(days=730)),
            ("C001", "BOSIET", today + timedelta(days=45)),
            ("C002", "ACLS", today - timedelta(days=10)),
            ("C003", "MEDICAL", today + timedelta(days=200)),
        ]
        for crew_id, cert_type, expiry in default_certs:
            self._matrix.insert(
                {
                    "crew_id": crew_id,
                    "cert_type": cert_type,
                    "cert_no": None,
                    "attended_date": None,
                    "expiry_date": expiry.isoformat(),
                    "plan_date": None,
                }
            )
        logger.info("Seeded %d default matrix records", len(default_certs))

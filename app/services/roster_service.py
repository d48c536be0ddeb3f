# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Roster management — CRUD over per-cycle rows and pivoting into
per-crew RosterEntry aggregates. Coordinates repository writes with
metrics, history and logging.
"""

from datetime import date, timedelta
from typing import Any, Optional

from app.core.logging import get_logger
from app.metrics.prometheus import ROSTER_CHANGES, ROSTER_ROWS
from app.models.domain import Cycle, RosterEntry
from app.repositories.history_repository import HistoryRepository
from app.repositories.roster_repository import RosterRepository

logger = get_logger(__name__)

CYCLE_FIELDS: tuple[str, ...] = (
    "sign_on", "sign_off", "is_offshore", "notes", "relief_all",
    "standby_all", "day_relief", "day_standby", "medevac_dates",
)


def pivot_rows(rows: list[dict[str, Any]]) -> list[RosterEntry]:
    """
    Group per-cycle rows into one RosterEntry per crew (keyed by crew_id,
    falling back to crew_name). Rows without a cycle number only supply
    the crew's identity.
    """
    grouped: dict[str, dict[str, Any]] = {}
    for row in rows:
        key = row.get("crew_id") or row["crew_name"]
        if key not in grouped:
            grouped[key] = {
                "crew_id": row.get("crew_id") or "",
                "crew_name": row["crew_name"],
                "post": row.get("post") or "",
                "client": row.get("client") or "",
                "location": row.get("location") or "",
                "roles_em": row.get("roles_em"),
                "cycles": {},
            }
        if row.get("cycle_number"):
            grouped[key]["cycles"][row["cycle_number"]] = Cycle(
                id=row["id"], **{f: row.get(f) for f in CYCLE_FIELDS}
            )
    return [RosterEntry(**data) for data in grouped.values()]


class RosterService:
    """Business logic for roster rows."""

    def __init__(
        self,
        roster_repo: RosterRepository,
        history_repo: HistoryRepository,
    ) -> None:
        self._rows = roster_repo
        self._history = history_repo

    # ── Commands ──

    def create_row(self, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a roster row. Raises ValueError on bad input."""
        if not (data.get("crew_name") or "").strip():
            raise ValueError("crew_name is required")
        row = dict(data)
        row["cycle_number"] = row.get("cycle_number") or 1
        row["sign_on"] = row.get("sign_on") or None
        row["sign_off"] = row.get("sign_off") or None
        record = self._rows.insert(row)

        ROSTER_CHANGES.labels(operation="create").inc()
        ROSTER_ROWS.set(self._rows.count())
        self._history.record_event(
            "roster_row_created",
            record.get("crew_id"),
            {"row_id": record["id"], "cycle_number": record["cycle_number"]},
        )
        logger.info(
            "Roster row created: id=%d, crew=%s, cycle=%d",
            record["id"], record["crew_name"], record["cycle_number"],
            extra={"row_id": record["id"], "crew_id": record.get("crew_id")},
        )
        return record

    def update_row(self, row_id: int, updates: dict[str, Any]) -> dict[str, Any]:
        """Partially update a row. Raises KeyError if it does not exist."""
        record = self._rows.update(row_id, updates)
        if record is None:
            raise KeyError(f"Roster row {row_id} not found")
        ROSTER_CHANGES.labels(operation="update").inc()
        self._history.record_event(
            "roster_row_updated",
            record.get("crew_id"),
            {"row_id": row_id, "fields": sorted(updates)},
        )
        logger.info("Roster row updated: id=%d, fields=%s", row_id, sorted(updates))
        return record

    def bulk_update(self, items: list[dict[str, Any]]) -> dict[str, Any]:
        """Apply updates in order, stopping at the first unknown row id."""
        for item in items:
            self.update_row(item["id"], item["updates"])
        return {"status": "updated", "count": len(items)}

    def delete_row(self, row_id: int) -> dict[str, Any]:
        record = self._rows.delete(row_id)
        if record is None:
            raise KeyError(f"Roster row {row_id} not found")
        ROSTER_CHANGES.labels(operation="delete").inc()
        ROSTER_ROWS.set(self._rows.count())
        self._history.record_event(
            "roster_row_deleted", record.get("crew_id"), {"row_id": row_id}
        )
        logger.info("Roster row deleted: id=%d", row_id)
        return {"status": "deleted", "id": row_id}

    def delete_crew(self, crew_id: str) -> dict[str, Any]:
        removed = self._rows.delete_by_crew(crew_id)
        if removed == 0:
            raise KeyError(f"No roster rows found for crew '{crew_id}'")
        ROSTER_CHANGES.labels(operation="delete").inc(removed)
        ROSTER_ROWS.set(self._rows.count())
        self._history.record_event("crew_roster_deleted", crew_id, {"rows": removed})
        logger.info(
            "Crew roster deleted: crew=%s, rows=%d", crew_id, removed,
            extra={"crew_id": crew_id},
        )
        return {"status": "deleted", "crew_id": crew_id, "rows": removed}

    # ── Queries ──

    def list_rows(self) -> list[dict[str, Any]]:
        return self._rows.get_all()

    def get_crew_roster(self, crew_id: str) -> list[dict[str, Any]]:
        return self._rows.get_by_crew(crew_id)

    def get_pivoted(self) -> list[RosterEntry]:
        return pivot_rows(self._rows.get_all())

    # ── Seed ──

    def seed_defaults(self, today: Optional[date] = None) -> None:
        """Load a small demo roster around ``today`` so views are populated."""
        today = today or date.today()

        def iso(offset: int) -> str:
            return (today + timedelta(days=offset)).isoformat()

        default_rows = [
            {"crew_id": "C001", "crew_name": "AHMAD FAIZAL", "post": "OFFSHORE MEDIC",
             "client": "SKA", "location": "BARAM", "cycle_number": 1,
             "sign_on": iso(-40), "sign_off": iso(-26)},
            {"crew_id": "C001", "crew_name": "AHMAD FAIZAL", "post": "OFFSHORE MEDIC",
             "client": "SKA", "location": "BARAM", "cycle_number": 2,
             "sign_on": iso(-12), "sign_off": iso(2)},
            {"crew_id": "C002", "crew_name": "BRENDA LAU", "post": "OFFSHORE MEDIC",
             "client": "SBA", "location": "SAMARANG (SM)", "cycle_number": 1,
             "sign_on": iso(-3), "sign_off": iso(11)},
            {"crew_id": "C003", "crew_name": "CHONG WEI MING", "post": "ESCORT MEDIC",
             "client": "SKA", "location": "MIRI", "cycle_number": 1,
             "sign_on": iso(4), "sign_off": iso(18)},
        ]
        for row in default_rows:
            self._rows.insert(row)
        ROSTER_ROWS.set(self._rows.count())
        logger.info("Seeded %d default roster rows", len(default_rows))

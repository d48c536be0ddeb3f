# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Dashboard views — personnel on board, per-crew status and the
monthly roster. Read-only; all presence rules come from rotation.py.
"""

from datetime import date
from typing import Any, Optional

from app.core.catalog import CLIENT_ORDER
from app.core.config import settings
from app.core.logging import get_logger
from app.metrics.prometheus import PERSONNEL_ON_BOARD, POB_LOOKUPS
from app.models.domain import RosterEntry
from app.services.roster_service import RosterService
from app.services.rotation import (
    has_activity_in_month,
    is_on_board,
    month_day_statuses,
    personnel_status,
)
from app.services.staff_service import StaffService
from app.services.trade import full_trade_name, matches_trade_filter, short_post, trade_rank

logger = get_logger(__name__)


def _entry_view(entry: RosterEntry, query_date: Optional[date] = None) -> dict[str, Any]:
    view: dict[str, Any] = {
        "crew_id": entry.crew_id,
        "crew_name": entry.crew_name,
        "post": entry.post,
        "short_post": short_post(entry.post),
        "trade": full_trade_name(entry.post),
        "client": entry.client,
        "location": entry.location,
    }
    if query_date is not None:
        view["status"] = personnel_status(
            entry,
            query_date,
            alert_days=settings.DEPARTURE_ALERT_DAYS,
            long_stay_days=settings.LONG_STAY_DAYS,
        ).model_dump(mode="json")
    return view


class DashboardService:
    """Business logic for the on-board dashboard and roster calendar."""

    def __init__(
        self,
        roster_service: RosterService,
        staff_service: StaffService,
    ) -> None:
        self._roster = roster_service
        self._staff = staff_service

    def _all_entries(self) -> list[RosterEntry]:
        """
        Roster entries plus office staff from the master table, no duplicates.
        Roster rows without a crew id are matched to staff by name.
        """
        entries = self._roster.get_pivoted()
        known_ids = {e.crew_id for e in entries if e.crew_id}
        known_names = {e.crew_name for e in entries if not e.crew_id}
        entries.extend(
            e for e in self._staff.office_staff()
            if e.crew_id not in known_ids and e.crew_name not in known_names
        )
        return entries

    # ── POB ──

    def pob(self, query_date: date, client: Optional[str] = None) -> dict[str, Any]:
        POB_LOOKUPS.inc()
        on_board = [
            e for e in self._all_entries()
            if is_on_board(e, query_date) and (not client or e.client == client)
        ]
        on_board.sort(
            key=lambda e: (e.client, trade_rank(e.trade), e.location, e.crew_name)
        )

        by_client: dict[str, int] = {}
        for e in on_board:
            by_client[e.client] = by_client.get(e.client, 0) + 1
        # Gauge reflects today's full roster only.
        if query_date == date.today() and not client:
            PERSONNEL_ON_BOARD.clear()
            for name, count in by_client.items():
                PERSONNEL_ON_BOARD.labels(client=name).set(count)

        logger.info("POB lookup: date=%s, total=%d", query_date.isoformat(), len(on_board))
        return {
            "date": query_date.isoformat(),
            "total": len(on_board),
            "by_client": by_client,
            "personnel": [_entry_view(e, query_date) for e in on_board],
        }

    def crew_status(self, crew_id: str, query_date: date) -> dict[str, Any]:
        """Presence figures for one crew. Raises KeyError if unknown."""
        for entry in self._all_entries():
            if entry.crew_id == crew_id:
                return _entry_view(entry, query_date)
        raise KeyError(f"No roster or office record for crew '{crew_id}'")

    # ── Monthly roster ──

    def monthly_roster(
        self,
        year: int,
        month: int,
        client: str = "ALL",
        trade: str = "ALL",
    ) -> dict[str, Any]:
        """
        Crew with any activity in the month, sorted client -> trade ->
        location -> name and grouped under client-trade-location headings.
        """
        if not 1 <= month <= 12:
            raise ValueError(f"Invalid month: {month}")

        rows = [
            e for e in self._roster.get_pivoted()
            if (client == "ALL" or e.client == client)
            and matches_trade_filter(e.trade, trade)
            and has_activity_in_month(e, year, month)
        ]
        rows.sort(
            key=lambda e: (
                CLIENT_ORDER.get(e.client, 3),
                trade_rank(e.trade),
                e.location or "",
                e.crew_name,
            )
        )

        groups: list[dict[str, Any]] = []
        for entry in rows:
            trade_name = full_trade_name(entry.post)
            key = f"{entry.client}-{trade_name}-{entry.location}"
            if not groups or groups[-1]["key"] != key:
                groups.append({
                    "key": key,
                    "client": entry.client,
                    "trade": trade_name,
                    "location": entry.location,
                    "crew": [],
                })
            view = _entry_view(entry)
            view["cycles"] = {
                n: c.model_dump(include={"id", "sign_on", "sign_off"})
                for n, c in sorted(entry.cycles.items())
            }
            view["days"] = [s.value for s in month_day_statuses(entry, year, month)]
            groups[-1]["crew"].append(view)

        return {"year": year, "month": month, "total": len(rows), "groups": groups}

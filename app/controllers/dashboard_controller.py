# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Personnel-on-board dashboard endpoints.
Thin HTTP layer — delegates ALL logic to DashboardService.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.dependencies import get_dashboard_service
from app.services.dashboard_service import DashboardService

router = APIRouter(prefix="/api/v1", tags=["Dashboard"])


@router.get("/dashboard/pob")
def get_personnel_on_board(
    on: Optional[date] = Query(default=None, alias="date", description="Defaults to today"),
    client: Optional[str] = None,
    service: DashboardService = Depends(get_dashboard_service),
):
    """Who is on board on a given day, with per-client totals."""
    return service.pob(on or date.today(), client=client)


@router.get("/dashboard/status/{crew_id}")
def get_crew_status(
    crew_id: str,
    on: Optional[date] = Query(default=None, alias="date", description="Defaults to today"),
    service: DashboardService = Depends(get_dashboard_service),
):
    """Presence, days on board and departure alert for one crew member."""
    try:
        return service.crew_status(crew_id, on or date.today())
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))

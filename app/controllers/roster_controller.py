# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Roster row CRUD, pivoted view, monthly roster and history.
Thin HTTP layer — delegates ALL logic to RosterService / DashboardService.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.dependencies import (
    get_dashboard_service,
    get_history_repo,
    get_roster_service,
)
from app.repositories.history_repository import HistoryRepository
from app.schemas.roster import (
    RosterBulkUpdateRequest,
    RosterRowCreateRequest,
    RosterRowResponse,
    RosterRowUpdateRequest,
)
from app.services.dashboard_service import DashboardService
from app.services.roster_service import RosterService

router = APIRouter(prefix="/api/v1", tags=["Roster"])


@router.get("/roster")
def list_roster_rows(
    service: RosterService = Depends(get_roster_service),
):
    """All roster rows ordered by crew name then cycle number."""
    return service.list_rows()


@router.post("/roster", status_code=201, response_model=RosterRowResponse)
def create_roster_row(
    payload: RosterRowCreateRequest,
    service: RosterService = Depends(get_roster_service),
):
    try:
        return service.create_row(payload.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/roster/pivoted")
def get_pivoted_roster(
    service: RosterService = Depends(get_roster_service),
):
    """One entry per crew with all cycles grouped by cycle number."""
    return [e.model_dump(mode="json") for e in service.get_pivoted()]


@router.get("/roster/monthly")
def get_monthly_roster(
    year: int = Query(..., ge=1900, le=9999),
    month: int = Query(..., ge=1, le=12),
    client: str = Query(default="ALL"),
    trade: str = Query(default="ALL", description="ALL, OM, EM or IMP/OHN"),
    service: DashboardService = Depends(get_dashboard_service),
):
    try:
        return service.monthly_roster(year=year, month=month, client=client, trade=trade)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/roster/history")
def get_roster_history(
    crew_id: Optional[str] = None,
    event_type: Optional[str] = None,
    limit: int = Query(default=None, ge=1, description="Max results"),
    history_repo: HistoryRepository = Depends(get_history_repo),
):
    """Audit log for roster, staff and training changes."""
    return history_repo.get_all(crew_id=crew_id, event_type=event_type, limit=limit)


@router.post("/roster/bulk")
def bulk_update_roster(
    payload: RosterBulkUpdateRequest,
    service: RosterService = Depends(get_roster_service),
):
    """Apply several row updates; stops at the first unknown id."""
    try:
        return service.bulk_update(
            [
                {"id": item.id, "updates": item.updates.model_dump(exclude_unset=True)}
                for item in payload.items
            ]
        )
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/roster/crew/{crew_id}")
def get_crew_roster(
    crew_id: str,
    service: RosterService = Depends(get_roster_service),
):
    return service.get_crew_roster(crew_id)


@router.delete("/roster/crew/{crew_id}")
def delete_crew_roster(
    crew_id: str,
    service: RosterService = Depends(get_roster_service),
):
    """Remove every roster row of one crew member."""
    try:
        return service.delete_crew(crew_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/roster/{row_id}")
def update_roster_row(
    row_id: int,
    payload: RosterRowUpdateRequest,
    service: RosterService = Depends(get_roster_service),
):
    try:
        return service.update_row(row_id, payload.model_dump(exclude_unset=True))
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/roster/{row_id}")
def delete_roster_row(
    row_id: int,
    service: RosterService = Depends(get_roster_service),
):
    try:
        return service.delete_row(row_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))

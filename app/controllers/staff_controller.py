# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Staff directory endpoints.
Thin HTTP layer — delegates ALL logic to StaffService.
"""

from fastapi import APIRouter, Depends, HTTPException

from app.core.dependencies import get_staff_service
from app.schemas.roster import StaffCreateRequest, StaffUpdateRequest
from app.services.staff_service import StaffService

router = APIRouter(prefix="/api/v1", tags=["Staff"])


@router.get("/staff")
def list_staff(
    service: StaffService = Depends(get_staff_service),
):
    return service.list_staff()


@router.post("/staff", status_code=201)
def create_staff(
    payload: StaffCreateRequest,
    service: StaffService = Depends(get_staff_service),
):
    try:
        return service.create_staff(payload.model_dump(exclude_none=True))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/staff/{staff_id}")
def get_staff(
    staff_id: str,
    service: StaffService = Depends(get_staff_service),
):
    try:
        return service.get_staff(staff_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/staff/{staff_id}")
def update_staff(
    staff_id: str,
    payload: StaffUpdateRequest,
    service: StaffService = Depends(get_staff_service),
):
    try:
        return service.update_staff(staff_id, payload.model_dump(exclude_unset=True))
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/staff/{staff_id}/matrix")
def get_staff_matrix(
    staff_id: str,
    service: StaffService = Depends(get_staff_service),
):
    """Certification records of one crew member, ordered by course."""
    try:
        return service.get_staff_matrix(staff_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))

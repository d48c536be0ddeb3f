# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Training matrix endpoints.
Thin HTTP layer — delegates ALL logic to TrainingService.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.dependencies import get_training_service
from app.schemas.roster import MatrixCellUpdateRequest, MatrixRecordCreateRequest
from app.services.training_service import TrainingService

router = APIRouter(prefix="/api/v1", tags=["Training"])


@router.get("/training/matrix")
def get_training_matrix(
    service: TrainingService = Depends(get_training_service),
):
    return service.get_matrix()


@router.get("/training/summary")
def get_training_summary(
    on: Optional[date] = Query(default=None, alias="date", description="Defaults to today"),
    service: TrainingService = Depends(get_training_service),
):
    """Valid / expiring / expired counts per course."""
    return service.summary(on)


@router.post("/training/matrix", status_code=201)
def create_matrix_record(
    payload: MatrixRecordCreateRequest,
    service: TrainingService = Depends(get_training_service),
):
    try:
        return service.create_record(
            crew_id=payload.crew_id,
            cert_type=payload.cert_type,
            field=payload.field,
            value=payload.value,
        )
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.patch("/training/matrix/{record_id}")
def update_matrix_cell(
    record_id: str,
    payload: MatrixCellUpdateRequest,
    service: TrainingService = Depends(get_training_service),
):
    try:
        return service.update_cell(record_id, payload.field, payload.value)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

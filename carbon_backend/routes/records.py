import datetime as dt
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from ..models.estimate_schema import ErrorResponse
from ..schemas import ActivityRecord
from ..services.estimator import Estimator, get_estimator
from ..services.normalizer import normalize
from ..services.records import make_record

router = APIRouter(
    prefix="/api/records",
    tags=["records"],
    responses={422: {"model": ErrorResponse}},
)


@router.post("/{category}", response_model=ActivityRecord)
async def create_record(
    category: str,
    payload: Dict[str, Any] = Body(...),
    on: Optional[dt.date] = None,
    estimator: Estimator = Depends(get_estimator),
) -> ActivityRecord:
    """Estimate one activity and return the record for the caller's store to persist."""
    request = normalize(category, payload)
    estimate = await estimator.estimate(request)
    return make_record(request, estimate, on=on)

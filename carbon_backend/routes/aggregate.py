from fastapi import APIRouter

from ..models.aggregate_schema import AggregateRequest
from ..schemas import AggregationResult
from ..services.aggregator import aggregate

router = APIRouter(prefix="/api", tags=["aggregate"])


@router.post("/aggregate", response_model=AggregationResult)
async def aggregate_records(payload: AggregateRequest) -> AggregationResult:
    return aggregate(payload.records)

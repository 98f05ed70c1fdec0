from fastapi import APIRouter, Depends

from ..models.estimate_schema import (
    CommuteBody,
    CommuteEstimateResponse,
    ElectricityBody,
    ElectricityEstimateResponse,
    ErrorResponse,
    FoodBody,
    FoodEstimateResponse,
)
from ..services.estimator import Estimator, get_estimator
from ..services.normalizer import normalize

router = APIRouter(
    prefix="/api/estimate",
    tags=["estimate"],
    responses={422: {"model": ErrorResponse}},
)


@router.post("/commute", response_model=CommuteEstimateResponse)
async def estimate_commute(
    payload: CommuteBody, estimator: Estimator = Depends(get_estimator)
) -> CommuteEstimateResponse:
    request = normalize("commute", payload.model_dump())
    estimate = await estimator.estimate(request)
    return CommuteEstimateResponse(
        co2e=estimate.co2e,
        co2e_unit=estimate.co2e_unit,
        source=estimate.source,
        vehicleType=request.vehicle_type,
        distance=request.distance,
    )


@router.post("/electricity", response_model=ElectricityEstimateResponse)
async def estimate_electricity(
    payload: ElectricityBody, estimator: Estimator = Depends(get_estimator)
) -> ElectricityEstimateResponse:
    request = normalize("electricity", payload.model_dump())
    estimate = await estimator.estimate(request)
    return ElectricityEstimateResponse(
        co2e=estimate.co2e,
        co2e_unit=estimate.co2e_unit,
        source=estimate.source,
        energy=request.energy,
    )


@router.post("/food", response_model=FoodEstimateResponse)
async def estimate_food(
    payload: FoodBody, estimator: Estimator = Depends(get_estimator)
) -> FoodEstimateResponse:
    request = normalize("food", payload.model_dump())
    estimate = await estimator.estimate(request)
    return FoodEstimateResponse(
        co2e=estimate.co2e,
        co2e_unit=estimate.co2e_unit,
        source=estimate.source,
        foodType=request.food_type,
        quantity=request.weight,
    )

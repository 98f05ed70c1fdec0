import datetime as dt
import uuid
from typing import Any

from ..schemas import (
    ActivityRecord,
    ActivityRequest,
    CommuteRequest,
    ElectricityRequest,
    EmissionEstimate,
    FoodRequest,
)


def wire_fields(request: ActivityRequest) -> dict[str, Any]:
    """Category fields under the names the dashboard sends and stores."""
    if isinstance(request, CommuteRequest):
        return {
            "vehicleType": request.vehicle_type,
            "distance": request.distance,
            "unit": request.distance_unit,
        }
    if isinstance(request, ElectricityRequest):
        return {"energy": request.energy, "unit": request.energy_unit}
    if isinstance(request, FoodRequest):
        return {
            "foodType": request.food_type,
            "quantity": request.weight,
            "unit": request.weight_unit,
        }
    raise TypeError(f"Unsupported activity request: {type(request).__name__}")


def make_record(
    request: ActivityRequest,
    estimate: EmissionEstimate,
    *,
    on: dt.date | None = None,
    record_id: str | None = None,
) -> ActivityRecord:
    """Stamp an estimate into a new record dated ``on`` (today by default)."""
    day = on or dt.date.today()
    return ActivityRecord(
        id=record_id or uuid.uuid4().hex,
        category=request.activity,
        date=day.isoformat(),
        co2e=estimate.co2e,
        co2e_unit=estimate.co2e_unit,
        category_fields=wire_fields(request),
    )

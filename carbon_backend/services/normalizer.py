import math
from typing import Any, Mapping

from ..errors import InvalidQuantity, UnknownCategory
from ..schemas import ActivityRequest, CommuteRequest, ElectricityRequest, FoodRequest
from .factors import FALLBACK_FACTORS

MAX_FACTOR = max(FALLBACK_FACTORS.values())


def _to_quantity(category: str, field: str, raw: Any) -> float:
    if raw is None or isinstance(raw, bool):
        raise InvalidQuantity(category, field, raw)

    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            raise InvalidQuantity(category, field, raw)

    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        raise InvalidQuantity(category, field, raw) from None

    if not math.isfinite(value) or value <= 0:
        raise InvalidQuantity(category, field, raw)
    # The fallback estimate must stay finite for every canonical key.
    if not math.isfinite(value * MAX_FACTOR):
        raise InvalidQuantity(category, field, raw)
    return value


def _text(raw: Any, default: str) -> str:
    if raw is None:
        return default
    text = str(raw).strip()
    return text or default


def normalize(category: str, raw_fields: Mapping[str, Any]) -> ActivityRequest:
    """Turn raw form input into a canonical activity request.

    Accepts both the wire names (``vehicleType``, ``foodType``, ``quantity``,
    ``unit``) and the request field names. Vehicle and food types are passed
    through untouched; the estimator resolves unknown values to a default.

    Raises:
        InvalidQuantity: the numeric field is missing, non-numeric or <= 0.
        UnknownCategory: ``category`` is not commute, electricity or food.
    """
    tag = (category or "").strip().lower() if isinstance(category, str) else category

    if tag == "commute":
        distance = _to_quantity("commute", "distance", raw_fields.get("distance"))
        return CommuteRequest(
            vehicle_type=_text(raw_fields.get("vehicleType", raw_fields.get("vehicle_type")), "car"),
            distance=distance,
            distance_unit=_text(raw_fields.get("unit", raw_fields.get("distance_unit")), "km"),
        )

    if tag == "electricity":
        energy = _to_quantity("electricity", "energy", raw_fields.get("energy"))
        return ElectricityRequest(
            energy=energy,
            energy_unit=_text(raw_fields.get("unit", raw_fields.get("energy_unit")), "kWh"),
        )

    if tag == "food":
        raw_weight = raw_fields.get("quantity", raw_fields.get("weight"))
        weight = _to_quantity("food", "quantity", raw_weight)
        return FoodRequest(
            food_type=_text(raw_fields.get("foodType", raw_fields.get("food_type")), "vegetables"),
            weight=weight,
            weight_unit=_text(raw_fields.get("unit", raw_fields.get("weight_unit")), "kg"),
        )

    raise UnknownCategory(category)

"""Fallback emission factors and the canonical activity keys they are indexed by.

Every normalized request maps to exactly one canonical key. The key selects the
offline factor (kg CO₂e per km, kWh or kg) and the remote emission-factor id.
"""

from ..schemas import ActivityRequest, CommuteRequest, ElectricityRequest, FoodRequest

DEFAULT_VEHICLE = "car"
DEFAULT_FOOD = "vegetables"
ELECTRICITY_KEY = "electricity"

FALLBACK_FACTORS: dict[str, float] = {
    # kg CO₂e per km
    "car": 0.21,
    "bus": 0.089,
    "train": 0.041,
    "plane": 0.255,
    "motorcycle": 0.113,
    # kg CO₂e per kWh
    ELECTRICITY_KEY: 0.5,
    # kg CO₂e per kg
    "beef": 27.0,
    "chicken": 6.9,
    "pork": 12.1,
    "fish": 3.0,
    "dairy": 3.2,
    "vegetables": 2.0,
    "fruits": 1.1,
}

VEHICLE_TYPES = frozenset({"car", "bus", "train", "plane", "motorcycle"})
FOOD_TYPES = frozenset({"beef", "chicken", "pork", "fish", "dairy", "vegetables", "fruits"})

CLIMATIQ_ACTIVITY_IDS: dict[str, str] = {
    "car": "passenger_vehicle-vehicle_type_car-fuel_source_na-distance_na-engine_size_na",
    "bus": "passenger_vehicle-vehicle_type_bus-fuel_source_na-distance_na",
    "train": "passenger_vehicle-vehicle_type_train-fuel_source_na",
    "plane": "passenger_vehicle-vehicle_type_aircraft-fuel_source_na",
    "motorcycle": "passenger_vehicle-vehicle_type_motorcycle-fuel_source_na",
    ELECTRICITY_KEY: "electricity-energy_source_grid_mix-supplier_na-facility_na",
    "beef": "food-beef",
    "chicken": "food-chicken",
    "pork": "food-pork",
    "fish": "food-fish",
    "dairy": "food-dairy",
    "vegetables": "food-vegetables",
    "fruits": "food-fruits",
}


def canonical_key(request: ActivityRequest) -> str:
    """Unrecognized vehicle and food types resolve to car and vegetables."""
    if isinstance(request, CommuteRequest):
        t = (request.vehicle_type or "").strip().lower()
        return t if t in VEHICLE_TYPES else DEFAULT_VEHICLE
    if isinstance(request, FoodRequest):
        t = (request.food_type or "").strip().lower()
        return t if t in FOOD_TYPES else DEFAULT_FOOD
    if isinstance(request, ElectricityRequest):
        return ELECTRICITY_KEY
    raise TypeError(f"Unsupported activity request: {type(request).__name__}")


def quantity_of(request: ActivityRequest) -> float:
    if isinstance(request, CommuteRequest):
        return request.distance
    if isinstance(request, ElectricityRequest):
        return request.energy
    if isinstance(request, FoodRequest):
        return request.weight
    raise TypeError(f"Unsupported activity request: {type(request).__name__}")


def fallback_co2e(key: str, quantity: float) -> float:
    return quantity * FALLBACK_FACTORS[key]

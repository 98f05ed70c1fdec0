import math
from types import MappingProxyType
from typing import Annotated, Any, Dict, Literal, Mapping, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    Field,
    PositiveFloat,
    field_serializer,
    field_validator,
)

Category = Literal["commute", "electricity", "food"]
EstimateSource = Literal["remote", "fallback"]


class CommuteRequest(BaseModel):
    activity: Literal["commute"] = "commute"
    vehicle_type: str = Field(default="car", description="car, bus, train, plane or motorcycle")
    distance: PositiveFloat = Field(..., description="Distance travelled")
    distance_unit: str = "km"


class ElectricityRequest(BaseModel):
    activity: Literal["electricity"] = "electricity"
    energy: PositiveFloat = Field(..., description="Energy consumed")
    energy_unit: str = "kWh"


class FoodRequest(BaseModel):
    activity: Literal["food"] = "food"
    food_type: str = Field(
        default="vegetables",
        description="beef, chicken, pork, fish, dairy, vegetables or fruits",
    )
    weight: PositiveFloat = Field(..., description="Weight consumed")
    weight_unit: str = "kg"


ActivityRequest = Annotated[
    Union[CommuteRequest, ElectricityRequest, FoodRequest],
    Field(discriminator="activity"),
]


class EmissionEstimate(BaseModel):
    co2e: float = Field(..., ge=0, allow_inf_nan=False, description="Estimated CO₂e")
    co2e_unit: str = "kg"
    source: EstimateSource


class ActivityRecord(BaseModel):
    id: str = Field(..., description="Unique activity identifier")
    category: Category = Field(..., validation_alias=AliasChoices("category", "type"))
    date: str = Field(..., description="ISO date string, e.g. 2025-01-28")
    co2e: float = Field(default=0.0, description="Estimated CO₂e in kilograms")
    co2e_unit: str = "kg"
    category_fields: Mapping[str, Any] = Field(
        default_factory=dict,
        validate_default=True,
        description="Category-specific fields echoed from the request",
    )

    model_config = {"frozen": True}

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("co2e", mode="before")
    @classmethod
    def _coerce_co2e(cls, value: Any) -> float:
        # Saved records may carry strings, nulls or garbage; those read as zero.
        try:
            co2e = float(value)
        except (TypeError, ValueError, OverflowError):
            return 0.0
        if not math.isfinite(co2e) or co2e < 0:
            return 0.0
        return co2e

    @field_validator("category_fields", mode="after")
    @classmethod
    def _freeze_fields(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("category_fields")
    def _dump_fields(self, value: Mapping[str, Any]) -> Dict[str, Any]:
        return dict(value)


class AggregationResult(BaseModel):
    daily: Dict[str, float] = Field(default_factory=dict, description="date -> co2e")
    weekly: Dict[str, float] = Field(
        default_factory=dict, description="week start (Sunday) -> co2e"
    )
    by_category: Dict[str, float] = Field(default_factory=dict, description="category -> co2e")
    total: float = 0.0

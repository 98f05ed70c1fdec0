from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from ..schemas import EstimateSource

# Quantities stay untyped here; normalize() validates them and raises InvalidQuantity.


class CommuteBody(BaseModel):
    distance: Any = Field(default=None, description="Distance travelled (> 0)")
    vehicleType: Optional[str] = Field(default="car")
    unit: Optional[str] = Field(default="km")


class ElectricityBody(BaseModel):
    energy: Any = Field(default=None, description="Energy consumed (> 0)")
    unit: Optional[str] = Field(default="kWh")


class FoodBody(BaseModel):
    quantity: Any = Field(default=None, description="Weight consumed (> 0)")
    foodType: Optional[str] = Field(default="vegetables")
    unit: Optional[str] = Field(default="kg")


class EstimateResponse(BaseModel):
    success: bool = True
    co2e: float
    co2e_unit: str = "kg"
    source: EstimateSource
    activity: Literal["commute", "electricity", "food"]


class CommuteEstimateResponse(EstimateResponse):
    activity: Literal["commute"] = "commute"
    vehicleType: str
    distance: float


class ElectricityEstimateResponse(EstimateResponse):
    activity: Literal["electricity"] = "electricity"
    energy: float


class FoodEstimateResponse(EstimateResponse):
    activity: Literal["food"] = "food"
    foodType: str
    quantity: float


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    detail: str

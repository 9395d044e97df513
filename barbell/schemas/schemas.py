"""Pydantic schemas for request/response validation."""

from typing import Optional
from pydantic import BaseModel, Field
from enum import Enum

from barbell.core.units import WeightUnit


class SortBy(str, Enum):
    LBS = "lbs"
    KG = "kg"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class TrainingType(str, Enum):
    STRENGTH = "strength"
    POWER = "power"
    ENDURANCE = "endurance"


# Plate schemas
class PlateConfigurationSchema(BaseModel):
    plate_weight: float
    quantity: int  # Per side; not constrained here so /plates/validate can report bad input

    class Config:
        from_attributes = True


class PlateCalculationResponse(BaseModel):
    is_valid: bool
    total_weight: float  # lbs
    total_weight_kg: float
    plates: list[PlateConfigurationSchema] = []
    difference: float  # requested - achieved, lbs
    formatted: str


class PlateValidationRequest(BaseModel):
    plates: list[PlateConfigurationSchema] = []


class PlateValidationResponse(BaseModel):
    is_valid: bool
    total_weight: float
    formatted: str


class PlateSetResponse(BaseModel):
    bar_weight: float
    denominations: list[float]
    is_canonical: bool


# Conversion table schemas
class WeightConversionResponse(BaseModel):
    weight_per_side: float
    total_weight_lbs: float
    total_weight_kg: float
    plates: list[PlateConfigurationSchema] = []
    formatted: str


class ConversionTableResponse(BaseModel):
    total: int  # Rows in the full table
    filtered: int  # Rows matching the search, before paging
    conversions: list[WeightConversionResponse]


class UnitConversionResponse(BaseModel):
    value: float
    from_unit: WeightUnit
    to_unit: WeightUnit
    result: float
    formatted: str


# Percentage schemas
class OneRMRequest(BaseModel):
    weight: float = Field(..., gt=0, le=2000)
    repetitions: int = Field(..., ge=1, le=30)
    unit: WeightUnit = WeightUnit.LBS


class OneRMResponse(BaseModel):
    one_rm: float
    unit: WeightUnit
    is_calculated: bool  # False when reps == 1


class PercentageTableRequest(BaseModel):
    exercise: Optional[str] = Field(None, max_length=100)
    one_rm: float = Field(..., gt=0, le=1000, description="1RM in lbs")
    percentages: Optional[list[float]] = None
    training_type: Optional[TrainingType] = None


class CustomPercentageRequest(BaseModel):
    one_rm: float = Field(..., gt=0, le=1000, description="1RM in lbs")
    percentage: float = Field(..., ge=0, le=150)


class PercentageCalculationResponse(BaseModel):
    percentage: float
    weight_lbs: float
    weight_kg: float
    recommended_reps: str
    plate_calculation: PlateCalculationResponse


class ExercisePercentageTableResponse(BaseModel):
    exercise: Optional[str]
    one_rm: float
    percentages: list[PercentageCalculationResponse]


class TrainingPercentagesResponse(BaseModel):
    training_type: TrainingType
    percentages: list[float]

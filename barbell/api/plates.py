"""Plate calculator API endpoints."""

from fastapi import APIRouter, Query

from barbell.core.formatting import (
    calculate_total_weight_from_plates,
    format_plate_configuration,
    validate_plate_configuration,
)
from barbell.core.plates import (
    OLYMPIC_PLATE_SET,
    PlateCalculation,
    PlateConfiguration,
    calculate_target_weight,
    is_canonical,
)
from barbell.core.units import WeightUnit, lbs_to_kg, round_to
from barbell.schemas.schemas import (
    PlateCalculationResponse,
    PlateConfigurationSchema,
    PlateSetResponse,
    PlateValidationRequest,
    PlateValidationResponse,
)

router = APIRouter(prefix="/plates", tags=["plates"])


def build_plate_calculation_response(calculation: PlateCalculation) -> PlateCalculationResponse:
    """Attach display fields to a core PlateCalculation."""
    return PlateCalculationResponse(
        is_valid=calculation.is_valid,
        total_weight=calculation.total_weight,
        total_weight_kg=round_to(lbs_to_kg(calculation.total_weight), 1),
        plates=[PlateConfigurationSchema.model_validate(p) for p in calculation.plates],
        difference=calculation.difference,
        formatted=format_plate_configuration(calculation.plates),
    )


@router.get("/calculate", response_model=PlateCalculationResponse)
def calculate_plates(
    weight: float = Query(..., ge=0, le=2000, description="Target total weight, bar included"),
    unit: WeightUnit = Query(WeightUnit.LBS),
):
    """
    Calculate the plates to load for a target weight.

    `is_valid` is false when the target is below the bar or cannot be
    matched exactly; `difference` is requested minus achieved, in lbs.
    """
    calculation = calculate_target_weight(weight, unit)
    return build_plate_calculation_response(calculation)


@router.post("/validate", response_model=PlateValidationResponse)
def validate_plates(request: PlateValidationRequest):
    """Check a hand-built plate configuration and report its total."""
    plates = [
        PlateConfiguration(plate_weight=p.plate_weight, quantity=p.quantity)
        for p in request.plates
    ]
    return PlateValidationResponse(
        is_valid=validate_plate_configuration(plates),
        total_weight=calculate_total_weight_from_plates(plates),
        formatted=format_plate_configuration(plates),
    )


@router.get("/denominations", response_model=PlateSetResponse)
def get_denominations():
    """Bar weight and available plates (lbs)."""
    return PlateSetResponse(
        bar_weight=OLYMPIC_PLATE_SET.bar_weight,
        denominations=list(OLYMPIC_PLATE_SET.denominations),
        is_canonical=is_canonical(OLYMPIC_PLATE_SET),
    )

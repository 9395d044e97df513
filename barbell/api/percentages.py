"""1RM and percentage table API endpoints."""

from fastapi import APIRouter, HTTPException

from barbell.api.plates import build_plate_calculation_response
from barbell.core.calculations import (
    COMMON_PERCENTAGES,
    PercentageCalculation,
    calculate_all_percentages,
    calculate_custom_percentage,
    calculate_one_rm,
    get_recommended_reps,
    get_training_percentages,
    is_calculated_rm,
)
from barbell.core.units import round_to
from barbell.schemas.schemas import (
    CustomPercentageRequest,
    ExercisePercentageTableResponse,
    OneRMRequest,
    OneRMResponse,
    PercentageCalculationResponse,
    PercentageTableRequest,
    TrainingPercentagesResponse,
    TrainingType,
)

router = APIRouter(prefix="/percentages", tags=["percentages"])


def build_percentage_response(calculation: PercentageCalculation) -> PercentageCalculationResponse:
    return PercentageCalculationResponse(
        percentage=calculation.percentage,
        weight_lbs=calculation.weight_lbs,
        weight_kg=calculation.weight_kg,
        recommended_reps=get_recommended_reps(calculation.percentage),
        plate_calculation=build_plate_calculation_response(calculation.plate_calculation),
    )


@router.post("/one-rm", response_model=OneRMResponse)
def estimate_one_rm(request: OneRMRequest):
    """Estimate a 1RM from a set using the Epley formula."""
    try:
        one_rm = calculate_one_rm(request.weight, request.repetitions)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return OneRMResponse(
        one_rm=round_to(one_rm, 1),
        unit=request.unit,
        is_calculated=is_calculated_rm(request.repetitions),
    )


@router.post("/table", response_model=ExercisePercentageTableResponse)
def compute_percentage_table(request: PercentageTableRequest):
    """
    Percentage table for a 1RM, with plates for every row.

    Percentages come from the request, else from the training type,
    else the common set (50-100%).
    """
    if request.percentages:
        percentages = request.percentages
    elif request.training_type:
        percentages = get_training_percentages(request.training_type.value)
    else:
        percentages = COMMON_PERCENTAGES

    try:
        table = calculate_all_percentages(request.exercise, request.one_rm, percentages)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ExercisePercentageTableResponse(
        exercise=table.exercise,
        one_rm=table.one_rm,
        percentages=[build_percentage_response(p) for p in table.percentages],
    )


@router.post("/custom", response_model=PercentageCalculationResponse)
def compute_custom_percentage(request: CustomPercentageRequest):
    """Load and plates for a single percentage of a 1RM."""
    try:
        calculation = calculate_custom_percentage(request.one_rm, request.percentage)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return build_percentage_response(calculation)


@router.get("/training/{training_type}", response_model=TrainingPercentagesResponse)
def training_percentages(training_type: TrainingType):
    """Typical percentages for a training goal."""
    return TrainingPercentagesResponse(
        training_type=training_type,
        percentages=list(get_training_percentages(training_type.value)),
    )

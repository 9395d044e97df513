"""
Training load math built on top of the plate calculator.

1RM (Epley): 1RM = weight × 0.0333 × reps + weight
Percentage loads are resolved to plates with calculate_target_weight().
"""

from dataclasses import dataclass, field
from typing import Literal, Optional, Sequence

from barbell.core.plates import PlateCalculation, calculate_target_weight
from barbell.core.units import WeightUnit, lbs_to_kg, round_to


EPLEY_FACTOR = 0.0333

# Common percentages of 1RM used in programming
COMMON_PERCENTAGES = (50, 60, 65, 70, 75, 80, 85, 90, 95, 100)

TRAINING_PERCENTAGES = {
    "strength": (85, 90, 95, 100),
    "power": (70, 75, 80, 85),
    "endurance": (50, 60, 65, 70),
}

# (minimum percentage, rep range), checked top-down
REP_RANGES = (
    (95, "1-2 reps"),
    (90, "2-3 reps"),
    (85, "3-4 reps"),
    (80, "4-5 reps"),
    (75, "5-6 reps"),
    (70, "6-8 reps"),
    (65, "8-10 reps"),
    (60, "10-12 reps"),
)

MAX_ONE_RM_LBS = 1000
MAX_PERCENTAGE = 150


@dataclass(frozen=True)
class PercentageCalculation:
    """Load for one percentage of a 1RM."""
    percentage: float
    weight_lbs: float
    weight_kg: float
    plate_calculation: PlateCalculation


@dataclass(frozen=True)
class ExercisePercentageTable:
    """All percentage loads for one exercise."""
    exercise: Optional[str]
    one_rm: float
    percentages: tuple[PercentageCalculation, ...] = field(default_factory=tuple)


def calculate_one_rm(weight: float, repetitions: int) -> float:
    """
    Estimate a one-rep max using the Epley formula.

    Formula: 1RM = weight × 0.0333 × reps + weight

    Args:
        weight: Weight lifted
        repetitions: Reps performed

    Returns:
        Estimated 1RM (the weight itself for a single rep)
    """
    if repetitions <= 0:
        raise ValueError("Repetitions must be greater than 0")
    if weight <= 0:
        raise ValueError("Weight must be greater than 0")

    if repetitions == 1:
        return weight
    return weight * EPLEY_FACTOR * repetitions + weight


def calculate_percentage_rm(one_rm: float, percentage: float) -> float:
    """Weight at a percentage (0-100] of a 1RM, unrounded."""
    if one_rm <= 0:
        raise ValueError("1RM must be greater than 0")
    if percentage <= 0 or percentage > 100:
        raise ValueError("Percentage must be between 0 and 100")
    return one_rm * percentage / 100


def is_calculated_rm(repetitions: int) -> bool:
    """True when the 1RM was estimated from more than one rep."""
    return repetitions > 1


def calculate_percentage(one_rm: float, percentage: float) -> float:
    """Weight at a percentage (0-150) of a 1RM, rounded to 1 decimal."""
    if percentage < 0 or percentage > MAX_PERCENTAGE:
        raise ValueError(f"Percentage must be between 0 and {MAX_PERCENTAGE}")
    return round_to(one_rm * percentage / 100, 1)


def calculate_custom_percentage(one_rm: float, percentage: float) -> PercentageCalculation:
    """Load and plates for a single percentage of a 1RM (in pounds)."""
    weight_lbs = calculate_percentage(one_rm, percentage)
    return PercentageCalculation(
        percentage=percentage,
        weight_lbs=weight_lbs,
        weight_kg=round_to(lbs_to_kg(weight_lbs), 1),
        plate_calculation=calculate_target_weight(weight_lbs, WeightUnit.LBS),
    )


def calculate_all_percentages(
    exercise: Optional[str],
    one_rm: float,
    percentages: Sequence[float] = COMMON_PERCENTAGES
) -> ExercisePercentageTable:
    """Percentage table for an exercise, in the order percentages are given."""
    return ExercisePercentageTable(
        exercise=exercise,
        one_rm=one_rm,
        percentages=tuple(calculate_custom_percentage(one_rm, p) for p in percentages),
    )


def get_training_percentages(
    training_type: Literal["strength", "power", "endurance"] | str
) -> tuple[float, ...]:
    """Percentages typical for a training goal; unknown goals get the common set."""
    return TRAINING_PERCENTAGES.get(training_type, COMMON_PERCENTAGES)


def get_recommended_reps(percentage: float) -> str:
    """Recommended rep range for a percentage of 1RM."""
    for minimum, reps in REP_RANGES:
        if percentage >= minimum:
            return reps
    return "12+ reps"


def validate_one_rm(one_rm: float) -> bool:
    """A 1RM is usable if it is positive and at most 1000 lbs."""
    return 0 < one_rm <= MAX_ONE_RM_LBS


def format_percentage(percentage: float) -> str:
    return f"{percentage:g}%"


def format_weight_with_unit(weight: float, unit: WeightUnit | str) -> str:
    return f"{weight:.1f} {WeightUnit(unit).value}"

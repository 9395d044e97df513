"""Display helpers and sanity checks for plate configurations."""

from typing import Sequence

from barbell.core.plates import (
    OLYMPIC_PLATE_SET,
    PlateConfiguration,
    PlateSet,
    sum_plates,
)

BAR_ONLY = "No plates (bar only)"


def format_number(value: float) -> str:
    """Render a weight without a trailing ".0" (45.0 -> "45", 2.5 -> "2.5")."""
    return f"{value:g}"


def format_plate_configuration(plates: Sequence[PlateConfiguration]) -> str:
    """
    Format plates for display, e.g. "2×45 lbs + 1×25 lbs".

    Order is kept as given, which for calculated plates is heaviest first.
    """
    if not plates:
        return BAR_ONLY

    return " + ".join(
        f"{plate.quantity}×{format_number(plate.plate_weight)} lbs"
        for plate in plates
    )


def calculate_total_weight_from_plates(
    plates: Sequence[PlateConfiguration],
    plate_set: PlateSet = OLYMPIC_PLATE_SET
) -> float:
    """Total loaded weight: bar + plates on both sides."""
    return plate_set.bar_weight + sum_plates(plates) * 2


def _is_positive_integer(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    return isinstance(value, float) and value.is_integer() and value > 0


def validate_plate_configuration(
    plates: Sequence[PlateConfiguration],
    plate_set: PlateSet = OLYMPIC_PLATE_SET
) -> bool:
    """
    Check that every plate is an available denomination with a positive
    whole quantity. An empty configuration (bar only) is valid.
    """
    return all(
        plate.plate_weight in plate_set.denominations and _is_positive_integer(plate.quantity)
        for plate in plates
    )

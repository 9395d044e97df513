"""Weight unit conversion utilities.

All weights are handled internally in pounds. These helpers never reject
negative input; range checks belong to the caller.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from enum import Enum

from barbell.core.config import settings


class WeightUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"


# 1 kg = 2.20462 lbs
KG_TO_LBS = settings.KG_TO_LBS_FACTOR


def kg_to_lbs(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg * KG_TO_LBS


def lbs_to_kg(lbs: float) -> float:
    """Convert pounds to kilograms."""
    return lbs / KG_TO_LBS


def round_to(value: float, decimals: int = 1) -> float:
    """Round half-up to a fixed number of decimals (2.25 -> 2.3, -0.25 -> -0.3).

    Infinite and NaN values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    number = Decimal(repr(value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + decimals + 2)
        return float(number.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP))


def convert_to_lbs(weight: float, unit: WeightUnit | str) -> float:
    """
    Convert a weight to pounds for internal use.

    Args:
        weight: The weight value
        unit: Unit of the weight ("lbs" or "kg")

    Returns:
        Weight in pounds

    Raises:
        ValueError: If the unit is not "lbs" or "kg"
    """
    unit = WeightUnit(unit)
    if unit == WeightUnit.KG:
        return kg_to_lbs(weight)
    return weight


def convert_weight(value: float, from_unit: WeightUnit | str, to_unit: WeightUnit | str) -> float:
    """Convert weight between units."""
    from_unit = WeightUnit(from_unit)
    to_unit = WeightUnit(to_unit)
    if from_unit == to_unit:
        return value
    if from_unit == WeightUnit.KG:
        return kg_to_lbs(value)
    return lbs_to_kg(value)


def format_weight(weight_lbs: float, display_unit: WeightUnit | str, decimals: int = 1) -> str:
    """Format a weight stored in pounds in the requested unit, e.g. "61.2 kg"."""
    display_unit = WeightUnit(display_unit)
    value = lbs_to_kg(weight_lbs) if display_unit == WeightUnit.KG else weight_lbs
    return f"{value:.{decimals}f} {display_unit.value}"


def get_both_units(weight_lbs: float, decimals: int = 1) -> dict[str, str]:
    """Get both pound and kilogram display strings for a weight."""
    return {
        "lbs": format_weight(weight_lbs, WeightUnit.LBS, decimals),
        "kg": format_weight(weight_lbs, WeightUnit.KG, decimals),
    }

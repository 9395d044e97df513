"""
Precomputed conversion table of achievable bar weights.

One row per per-side weight from 0 up to TABLE_MAX_PER_SIDE in TABLE_STEP
increments (0, 5, ..., 145 by default: 30 rows). The table is what the
UI searches, sorts and pages through.
"""

from decimal import Decimal
from typing import Literal, Sequence

from barbell.core.config import settings
from barbell.core.formatting import format_number, format_plate_configuration
from barbell.core.plates import (
    OLYMPIC_PLATE_SET,
    PlateSet,
    WeightConversion,
    calculate_plates_needed,
)
from barbell.core.units import lbs_to_kg, round_to


def generate_weight_conversions(
    plate_set: PlateSet = OLYMPIC_PLATE_SET,
    max_per_side: float = settings.TABLE_MAX_PER_SIDE,
    step: float = settings.TABLE_STEP
) -> list[WeightConversion]:
    """
    Build the conversion table.

    Args:
        plate_set: Bar and plates to use (default: Olympic set)
        max_per_side: Last per-side weight, inclusive
        step: Per-side increment

    Returns:
        Rows in ascending per-side weight
    """
    if step <= 0:
        raise ValueError("step must be positive")

    conversions = []
    # Decimal counter so 0.1-style steps don't drift past max_per_side
    per_side = Decimal(0)
    increment = Decimal(str(step))
    limit = Decimal(str(max_per_side))
    while per_side <= limit:
        weight_per_side = float(per_side)
        total_weight_lbs = plate_set.bar_weight + weight_per_side * 2
        conversions.append(WeightConversion(
            weight_per_side=weight_per_side,
            total_weight_lbs=total_weight_lbs,
            total_weight_kg=round_to(lbs_to_kg(total_weight_lbs), 1),
            plates=calculate_plates_needed(weight_per_side, plate_set),
        ))
        per_side += increment

    return conversions


def conversion_matches(conversion: WeightConversion, term: str) -> bool:
    """Case-insensitive substring match against the displayed row values."""
    term = term.lower()
    return (
        term in format_number(conversion.weight_per_side)
        or term in format_number(conversion.total_weight_lbs)
        or term in format_number(conversion.total_weight_kg)
        or term in format_plate_configuration(conversion.plates).lower()
    )


def search_conversions(conversions: Sequence[WeightConversion], term: str | None) -> list[WeightConversion]:
    """Rows matching the search term. An empty term matches everything."""
    if not term:
        return list(conversions)
    return [c for c in conversions if conversion_matches(c, term)]


def sort_conversions(
    conversions: Sequence[WeightConversion],
    sort_by: Literal["lbs", "kg"] = "lbs",
    order: Literal["asc", "desc"] = "asc"
) -> list[WeightConversion]:
    """Sort rows by total weight in pounds or kilograms."""
    if sort_by not in ("lbs", "kg"):
        raise ValueError("sort_by must be 'lbs' or 'kg'")
    if order not in ("asc", "desc"):
        raise ValueError("order must be 'asc' or 'desc'")

    if sort_by == "lbs":
        key = lambda c: c.total_weight_lbs
    else:
        key = lambda c: c.total_weight_kg
    return sorted(conversions, key=key, reverse=(order == "desc"))


def paginate(conversions: Sequence[WeightConversion], skip: int = 0, limit: int | None = None) -> list[WeightConversion]:
    """Slice out one page of rows."""
    skip = max(skip, 0)
    if limit is None:
        return list(conversions[skip:])
    return list(conversions[skip:skip + max(limit, 0)])

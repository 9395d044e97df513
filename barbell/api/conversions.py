"""Weight conversion API endpoints."""

from fastapi import APIRouter, Query

from barbell.core.conversions import (
    generate_weight_conversions,
    paginate,
    search_conversions,
    sort_conversions,
)
from barbell.core.formatting import format_plate_configuration
from barbell.core.calculations import format_weight_with_unit
from barbell.core.units import WeightUnit, convert_weight
from barbell.schemas.schemas import (
    ConversionTableResponse,
    PlateConfigurationSchema,
    SortBy,
    SortOrder,
    UnitConversionResponse,
    WeightConversionResponse,
)

router = APIRouter(prefix="/conversions", tags=["conversions"])


@router.get("/table", response_model=ConversionTableResponse)
def get_conversion_table(
    search: str | None = Query(None, max_length=50, description="Match weights or plate text"),
    sort_by: SortBy = Query(SortBy.LBS),
    order: SortOrder = Query(SortOrder.ASC),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
):
    """
    Conversion table of achievable bar weights.

    Rows run from an empty bar to 145 lbs per side in 5 lb steps.
    """
    conversions = generate_weight_conversions()
    filtered = search_conversions(conversions, search)
    ordered = sort_conversions(filtered, sort_by.value, order.value)

    return ConversionTableResponse(
        total=len(conversions),
        filtered=len(filtered),
        conversions=[
            WeightConversionResponse(
                weight_per_side=c.weight_per_side,
                total_weight_lbs=c.total_weight_lbs,
                total_weight_kg=c.total_weight_kg,
                plates=[PlateConfigurationSchema.model_validate(p) for p in c.plates],
                formatted=format_plate_configuration(c.plates),
            )
            for c in paginate(ordered, skip, limit)
        ],
    )


@router.get("/convert", response_model=UnitConversionResponse)
def convert(
    value: float = Query(..., ge=0, le=10000),
    from_unit: WeightUnit = Query(...),
    to_unit: WeightUnit = Query(...),
):
    """Convert a weight between kg and lbs."""
    result = convert_weight(value, from_unit, to_unit)
    return UnitConversionResponse(
        value=value,
        from_unit=from_unit,
        to_unit=to_unit,
        result=result,
        formatted=format_weight_with_unit(result, to_unit),
    )

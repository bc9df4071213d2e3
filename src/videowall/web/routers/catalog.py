"""Cabinet catalog and unit endpoints."""

from fastapi import APIRouter, Query

from videowall.domain import (
    ASPECT_RATIO_PRESETS,
    CABINETS,
    Unit,
    convert,
    format_dimension,
)
from videowall.web.exceptions import UnknownUnitError
from videowall.web.schemas import (
    AspectRatioPresetSchema,
    CabinetListSchema,
    CabinetSchema,
    ConversionSchema,
    ErrorResponseSchema,
    PresetListSchema,
)

router = APIRouter(tags=["catalog"])


@router.get("/catalog/cabinets", response_model=CabinetListSchema)
async def list_cabinets() -> CabinetListSchema:
    """List the cabinet modules in the catalog."""
    return CabinetListSchema(
        cabinets=[
            CabinetSchema(
                cabinet_type=cabinet_type.value,
                width_mm=spec.width_mm,
                height_mm=spec.height_mm,
                aspect_ratio=spec.aspect_ratio,
            )
            for cabinet_type, spec in CABINETS.items()
        ]
    )


@router.get("/catalog/presets", response_model=PresetListSchema)
async def list_presets() -> PresetListSchema:
    """List the aspect ratio presets."""
    return PresetListSchema(
        presets=[
            AspectRatioPresetSchema(label=p.label, value=p.value)
            for p in ASPECT_RATIO_PRESETS
        ]
    )


@router.get(
    "/units/convert",
    response_model=ConversionSchema,
    responses={400: {"model": ErrorResponseSchema}},
)
async def convert_units(
    value: float,
    from_unit: str = Query(..., description="Source unit: mm, m, ft, in"),
    to_unit: str = Query(..., description="Target unit: mm, m, ft, in"),
) -> ConversionSchema:
    """Convert a length between units.

    Raises:
        UnknownUnitError: If either unit is not supported (handled by
            exception handler).
    """
    available = [u.value for u in Unit]
    for unit in (from_unit, to_unit):
        if unit not in available:
            raise UnknownUnitError(unit, available)

    converted = convert(value, from_unit, to_unit)
    return ConversionSchema(
        value=value,
        from_unit=from_unit,
        to_unit=to_unit,
        converted=converted,
        formatted=format_dimension(converted, to_unit),
    )

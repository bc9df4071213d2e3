"""Domain layer - grid search and selection."""

from .constants import (
    ASPECT_RATIO_PRESETS,
    CABINETS,
    DEFAULT_ASPECT_RATIO,
    MAX_GRID_DISPLAY,
    MM_PER_UNIT,
    TOLERANCE_MM,
)
from .services import calculate
from .units import convert, format_dimension, from_mm, to_mm, unit_to_mm
from .value_objects import (
    AspectRatioPreset,
    CabinetSpec,
    CabinetType,
    CalculatorOutput,
    GridConfig,
    ParamKey,
    ParameterValues,
    TargetDimensions,
    Unit,
)

__all__ = [
    "ASPECT_RATIO_PRESETS",
    "AspectRatioPreset",
    "CABINETS",
    "CabinetSpec",
    "CabinetType",
    "CalculatorOutput",
    "DEFAULT_ASPECT_RATIO",
    "GridConfig",
    "MAX_GRID_DISPLAY",
    "MM_PER_UNIT",
    "ParamKey",
    "ParameterValues",
    "TOLERANCE_MM",
    "TargetDimensions",
    "Unit",
    "calculate",
    "convert",
    "format_dimension",
    "from_mm",
    "to_mm",
    "unit_to_mm",
]

"""Catalog data and numeric constants for the video wall calculator."""

from __future__ import annotations

from .value_objects import AspectRatioPreset, CabinetSpec, CabinetType, Unit

CABINETS: dict[CabinetType, CabinetSpec] = {
    CabinetType.WIDE: CabinetSpec(width_mm=600.0, height_mm=337.5, aspect_ratio=16 / 9),
    CabinetType.SQUARE: CabinetSpec(width_mm=500.0, height_mm=500.0, aspect_ratio=1.0),
}

ASPECT_RATIO_PRESETS: tuple[AspectRatioPreset, ...] = (
    AspectRatioPreset(label="16:9", value=16 / 9),
    AspectRatioPreset(label="16:10", value=16 / 10),
    AspectRatioPreset(label="4:3", value=4 / 3),
    AspectRatioPreset(label="1:1", value=1.0),
    AspectRatioPreset(label="21:9", value=21 / 9),
)

# Millimeters in one unit
MM_PER_UNIT: dict[Unit, float] = {
    Unit.MM: 1.0,
    Unit.M: 1000.0,
    Unit.FT: 304.8,
    Unit.IN: 25.4,
}

MIN_COLS = 1
MIN_ROWS = 1

# Classification epsilon, in millimeters
TOLERANCE_MM = 0.01

# Fixed-point scale for the continued-fraction expansion
FIXED_POINT_SCALE = 10**9

# Denominator bound: at least MIN_MAX_DENOMINATOR, and DENOMINATOR_MARGIN past
# the grid size needed to reach the target extents
MIN_MAX_DENOMINATOR = 50
DENOMINATOR_MARGIN = 5

NEIGHBORHOOD_OFFSETS: tuple[int, ...] = (-1, 0, 1)

MAX_GRID_DISPLAY = 24

DEFAULT_ASPECT_RATIO = 16 / 9

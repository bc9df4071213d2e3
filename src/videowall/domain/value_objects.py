"""Value objects for the video wall domain.

All types here are immutable. Lengths are in millimeters unless a field
name says otherwise; aspect ratios are width divided by height.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class CabinetType(str, Enum):
    """Cabinet module variants available in the catalog."""

    WIDE = "16:9"
    SQUARE = "1:1"


class ParamKey(str, Enum):
    """Parameters a caller can supply to describe the target wall."""

    AR = "ar"
    HEIGHT = "height"
    WIDTH = "width"
    DIAGONAL = "diagonal"


class Unit(str, Enum):
    """Linear units accepted for dimension input and display."""

    MM = "mm"
    M = "m"
    FT = "ft"
    IN = "in"


@dataclass(frozen=True)
class CabinetSpec:
    """Physical size of a single cabinet module."""

    width_mm: float
    height_mm: float
    aspect_ratio: float

    def __post_init__(self) -> None:
        if self.width_mm <= 0 or self.height_mm <= 0:
            raise ValueError("Cabinet dimensions must be positive")


@dataclass(frozen=True)
class AspectRatioPreset:
    """Named aspect ratio offered as a shortcut for the ``ar`` parameter."""

    label: str
    value: float


@dataclass(frozen=True)
class ParameterValues:
    """Raw parameter values as supplied by the caller.

    Each field is independently optional. Lengths are expressed in the
    caller's unit and converted to millimeters during derivation; ``ar``
    is unitless.
    """

    ar: float | None = None
    height: float | None = None
    width: float | None = None
    diagonal: float | None = None

    def get(self, key: ParamKey | str) -> float | None:
        """Return the value for a parameter key, or None if absent."""
        return getattr(self, ParamKey(key).value)

    @classmethod
    def from_mapping(cls, values: Mapping[str, float | None]) -> "ParameterValues":
        """Build from a mapping keyed by parameter name (unknown keys ignored)."""
        return cls(**{key.value: values.get(key.value) for key in ParamKey})

    @classmethod
    def from_pairs(
        cls, *pairs: tuple[ParamKey | str, float | None]
    ) -> "ParameterValues":
        """Build from ``(key, value)`` pairs; later pairs win on repeated keys."""
        fields: dict[str, float | None] = {}
        for key, value in pairs:
            fields[ParamKey(key).value] = value
        return cls(**fields)


@dataclass(frozen=True)
class TargetDimensions:
    """Target wall size derived from the supplied parameters."""

    width_mm: float
    height_mm: float

    @property
    def diagonal_mm(self) -> float:
        return math.hypot(self.width_mm, self.height_mm)

    @property
    def aspect_ratio(self) -> float:
        return self.width_mm / self.height_mm


@dataclass(frozen=True)
class GridConfig:
    """A realizable wall layout of ``columns`` x ``rows`` cabinets.

    Everything except the grid counts is derived from the cabinet module,
    so two configs with the same ``grid_key`` for the same cabinet are
    interchangeable.
    """

    columns: int
    rows: int
    total_cabinets: int
    width_mm: float
    height_mm: float
    diagonal_mm: float
    aspect_ratio: float

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError("Grid must have at least one column and one row")

    @classmethod
    def from_grid(cls, columns: int, rows: int, cabinet: CabinetSpec) -> "GridConfig":
        """Compute the physical layout of a grid of ``cabinet`` modules."""
        width_mm = columns * cabinet.width_mm
        height_mm = rows * cabinet.height_mm
        return cls(
            columns=columns,
            rows=rows,
            total_cabinets=columns * rows,
            width_mm=width_mm,
            height_mm=height_mm,
            diagonal_mm=math.hypot(width_mm, height_mm),
            aspect_ratio=width_mm / height_mm,
        )

    @property
    def grid_key(self) -> tuple[int, int]:
        """Identity of the layout for deduplication."""
        return (self.columns, self.rows)

    def to_dict(self) -> dict[str, Any]:
        return {
            "columns": self.columns,
            "rows": self.rows,
            "totalCabinets": self.total_cabinets,
            "widthMm": self.width_mm,
            "heightMm": self.height_mm,
            "diagonalMm": self.diagonal_mm,
            "aspectRatio": self.aspect_ratio,
        }


@dataclass(frozen=True)
class CalculatorOutput:
    """Best lower and upper layouts for a target, plus the target itself.

    Either side may be None when no candidate qualifies for it.
    """

    lower: GridConfig | None
    upper: GridConfig | None
    target_width_mm: float
    target_height_mm: float
    target_diagonal_mm: float
    target_aspect_ratio: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "lower": self.lower.to_dict() if self.lower else None,
            "upper": self.upper.to_dict() if self.upper else None,
            "targetWidthMm": self.target_width_mm,
            "targetHeightMm": self.target_height_mm,
            "targetDiagonalMm": self.target_diagonal_mm,
            "targetAspectRatio": self.target_aspect_ratio,
        }

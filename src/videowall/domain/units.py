"""Linear unit conversion and display formatting.

Conversions are plain scalar arithmetic through millimeters; rounding only
happens in :func:`format_dimension`.
"""

from __future__ import annotations

import math
from typing import Callable

from .constants import MM_PER_UNIT
from .value_objects import Unit


def to_mm(value: float, unit: Unit | str) -> float:
    """Convert a value in ``unit`` to millimeters."""
    return value * MM_PER_UNIT[Unit(unit)]


def from_mm(mm: float, unit: Unit | str) -> float:
    """Convert millimeters to ``unit``."""
    return mm / MM_PER_UNIT[Unit(unit)]


def convert(value: float, from_unit: Unit | str, to_unit: Unit | str) -> float:
    """Convert a value between any two supported units."""
    return from_mm(to_mm(value, from_unit), to_unit)


def unit_to_mm(unit: Unit | str) -> Callable[[float], float]:
    """Return a single-argument converter from ``unit`` to millimeters."""
    resolved = Unit(unit)

    def _convert(value: float) -> float:
        return to_mm(value, resolved)

    return _convert


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going toward positive infinity."""
    return math.floor(value + 0.5)


def format_dimension(value: float, unit: Unit | str) -> str:
    """Render a length with at most two decimals and a unit suffix.

    Examples:
        >>> format_dimension(2000.0, "mm")
        '2000 mm'
        >>> format_dimension(78.74015748, "in")
        '78.74 in'
    """
    scaled = value * 100
    if not math.isfinite(scaled):
        return f"{value:g} {Unit(unit).value}"
    rounded = round_half_up(scaled) / 100
    text = f"{rounded:.2f}".rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return f"{text} {Unit(unit).value}"

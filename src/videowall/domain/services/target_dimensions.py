"""Derive target wall dimensions from two supplied parameters.

Each supported parameter pair has its own derivation. The pair is looked up
by its canonical (unordered) key set, so any combination not in the table
falls through to "no result".
"""

from __future__ import annotations

import math
from typing import Callable, Iterable

from ..value_objects import ParamKey, ParameterValues, TargetDimensions

UnitToMm = Callable[[float], float]
_Derivation = Callable[[ParameterValues, UnitToMm], "TargetDimensions | None"]


def _from_ar_height(values: ParameterValues, unit_to_mm: UnitToMm) -> TargetDimensions:
    height_mm = unit_to_mm(values.height)
    return TargetDimensions(width_mm=height_mm * values.ar, height_mm=height_mm)


def _from_ar_width(values: ParameterValues, unit_to_mm: UnitToMm) -> TargetDimensions:
    width_mm = unit_to_mm(values.width)
    return TargetDimensions(width_mm=width_mm, height_mm=width_mm / values.ar)


def _from_ar_diagonal(values: ParameterValues, unit_to_mm: UnitToMm) -> TargetDimensions:
    diagonal_mm = unit_to_mm(values.diagonal)
    height_mm = diagonal_mm / math.sqrt(values.ar * values.ar + 1)
    return TargetDimensions(width_mm=height_mm * values.ar, height_mm=height_mm)


def _from_height_width(values: ParameterValues, unit_to_mm: UnitToMm) -> TargetDimensions:
    return TargetDimensions(
        width_mm=unit_to_mm(values.width),
        height_mm=unit_to_mm(values.height),
    )


def _from_height_diagonal(
    values: ParameterValues, unit_to_mm: UnitToMm
) -> TargetDimensions | None:
    height_mm = unit_to_mm(values.height)
    diagonal_mm = unit_to_mm(values.diagonal)
    width_sq = diagonal_mm * diagonal_mm - height_mm * height_mm
    if width_sq < 0:
        return None
    return TargetDimensions(width_mm=math.sqrt(width_sq), height_mm=height_mm)


def _from_width_diagonal(
    values: ParameterValues, unit_to_mm: UnitToMm
) -> TargetDimensions | None:
    width_mm = unit_to_mm(values.width)
    diagonal_mm = unit_to_mm(values.diagonal)
    height_sq = diagonal_mm * diagonal_mm - width_mm * width_mm
    if height_sq < 0:
        return None
    return TargetDimensions(width_mm=width_mm, height_mm=math.sqrt(height_sq))


# Checked in this order; with two distinct keys at most one entry can match.
DERIVATIONS: dict[frozenset[ParamKey], _Derivation] = {
    frozenset({ParamKey.AR, ParamKey.HEIGHT}): _from_ar_height,
    frozenset({ParamKey.AR, ParamKey.WIDTH}): _from_ar_width,
    frozenset({ParamKey.AR, ParamKey.DIAGONAL}): _from_ar_diagonal,
    frozenset({ParamKey.HEIGHT, ParamKey.WIDTH}): _from_height_width,
    frozenset({ParamKey.HEIGHT, ParamKey.DIAGONAL}): _from_height_diagonal,
    frozenset({ParamKey.WIDTH, ParamKey.DIAGONAL}): _from_width_diagonal,
}


def canonical_selection(selected: Iterable[ParamKey | str]) -> frozenset[ParamKey] | None:
    """Normalize a parameter selection to a set of keys.

    Returns None if any entry is not a known parameter name.
    """
    try:
        return frozenset(ParamKey(key) for key in selected)
    except ValueError:
        return None


def derive_target_dimensions(
    selected: Iterable[ParamKey | str],
    values: ParameterValues,
    unit_to_mm: UnitToMm,
) -> TargetDimensions | None:
    """Compute target width and height in millimeters.

    Args:
        selected: The two selected parameter keys.
        values: Raw parameter values; only the selected ones are read.
        unit_to_mm: Converts a raw length value to millimeters.

    Returns:
        The target dimensions, or None when the pair is not supported, a
        selected value is missing, the geometry is infeasible (diagonal
        shorter than the co-selected side), or the result is not finite or
        has zero height. Zero widths and negative sizes pass through.
    """
    key_set = canonical_selection(selected)
    if key_set is None:
        return None

    derive = DERIVATIONS.get(key_set)
    if derive is None:
        return None

    if any(values.get(key) is None for key in key_set):
        return None

    try:
        target = derive(values, unit_to_mm)
    except ZeroDivisionError:
        return None
    if target is None:
        return None

    if not math.isfinite(target.width_mm) or not math.isfinite(target.height_mm):
        return None
    # Zero height leaves the aspect ratio undefined
    if target.height_mm == 0:
        return None
    return target

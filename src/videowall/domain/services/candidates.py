"""Candidate grid generation.

Candidates are the integer layouts worth scoring for a target. With a fixed
aspect ratio they come from the rational approximations of the grid ratio
plus a small neighborhood around the literal target extents; otherwise they
are the floor/ceil roundings of the target size in cabinet units.
"""

from __future__ import annotations

import math
from typing import Iterable

from ..constants import MIN_COLS, MIN_ROWS, NEIGHBORHOOD_OFFSETS
from ..units import round_half_up
from ..value_objects import CabinetSpec, GridConfig, ParamKey, TargetDimensions
from .rational import convergents, grid_ratio, max_denominator_for


def _rounded_counts(extent_mm: float, module_mm: float, minimum: int) -> tuple[int, int]:
    """Floor and ceiling of ``extent_mm / module_mm``, each at least ``minimum``."""
    count = extent_mm / module_mm
    return max(minimum, math.floor(count)), max(minimum, math.ceil(count))


def _implied_count(numerator: float, denominator: float, minimum: int) -> int | None:
    """Rounded ``numerator / denominator``, at least ``minimum``.

    None when the quotient is unbounded (zero denominator or overflow).
    """
    if denominator == 0:
        return None
    count = numerator / denominator
    if not math.isfinite(count):
        return None
    return max(minimum, round_half_up(count))


def aspect_ratio_candidates(
    target: TargetDimensions, cabinet: CabinetSpec
) -> list[GridConfig]:
    """Candidates for a wall whose aspect ratio is fixed.

    Includes every convergent of the grid ratio, then for the floor/ceil row
    counts the implied column count and its neighbors, then symmetrically
    for the floor/ceil column counts.
    """
    target_ar = target.aspect_ratio
    candidates = [
        GridConfig.from_grid(n, m, cabinet)
        for n, m in convergents(
            grid_ratio(target_ar, cabinet), max_denominator_for(target, cabinet)
        )
    ]

    for rows in _rounded_counts(target.height_mm, cabinet.height_mm, MIN_ROWS):
        columns = _implied_count(
            target_ar * rows * cabinet.height_mm, cabinet.width_mm, MIN_COLS
        )
        if columns is None:
            continue
        for offset in NEIGHBORHOOD_OFFSETS:
            if columns + offset >= MIN_COLS:
                candidates.append(GridConfig.from_grid(columns + offset, rows, cabinet))

    for columns in _rounded_counts(target.width_mm, cabinet.width_mm, MIN_COLS):
        rows = _implied_count(
            columns * cabinet.width_mm, target_ar * cabinet.height_mm, MIN_ROWS
        )
        if rows is None:
            continue
        for offset in NEIGHBORHOOD_OFFSETS:
            if rows + offset >= MIN_ROWS:
                candidates.append(GridConfig.from_grid(columns, rows + offset, cabinet))

    return candidates


def dimension_candidates(
    target: TargetDimensions, cabinet: CabinetSpec
) -> list[GridConfig]:
    """The four floor/ceil roundings of the target size, rows outermost."""
    row_counts = _rounded_counts(target.height_mm, cabinet.height_mm, MIN_ROWS)
    column_counts = _rounded_counts(target.width_mm, cabinet.width_mm, MIN_COLS)
    return [
        GridConfig.from_grid(columns, rows, cabinet)
        for rows in row_counts
        for columns in column_counts
    ]


def deduplicate(candidates: Iterable[GridConfig]) -> list[GridConfig]:
    """Drop repeated grids, keeping the first occurrence of each."""
    unique: dict[tuple[int, int], GridConfig] = {}
    for candidate in candidates:
        unique.setdefault(candidate.grid_key, candidate)
    return list(unique.values())


def generate_candidates(
    selected: Iterable[ParamKey | str],
    target: TargetDimensions,
    cabinet: CabinetSpec,
) -> list[GridConfig]:
    """Unique candidate grids for ``target``, in generation order."""
    if ParamKey.AR in {ParamKey(key) for key in selected}:
        return deduplicate(aspect_ratio_candidates(target, cabinet))
    return deduplicate(dimension_candidates(target, cabinet))

"""Best rational approximations of a grid ratio.

When the aspect ratio is fixed, achievable walls have ratio
``columns * cabinet_width / (rows * cabinet_height)``, so the grid itself
must approximate ``target_ar * cabinet_height / cabinet_width`` with a
fraction ``columns / rows``. Continued-fraction convergents give the best
such fractions for every denominator size.
"""

from __future__ import annotations

import math

from ..constants import (
    DENOMINATOR_MARGIN,
    FIXED_POINT_SCALE,
    MIN_COLS,
    MIN_MAX_DENOMINATOR,
    MIN_ROWS,
)
from ..units import round_half_up
from ..value_objects import CabinetSpec, TargetDimensions


def grid_ratio(target_aspect_ratio: float, cabinet: CabinetSpec) -> float:
    """Columns-per-row ratio that reproduces ``target_aspect_ratio``."""
    return target_aspect_ratio * cabinet.height_mm / cabinet.width_mm


def max_denominator_for(target: TargetDimensions, cabinet: CabinetSpec) -> int:
    """Denominator bound large enough to reach the literal target size."""
    return max(
        MIN_MAX_DENOMINATOR,
        math.ceil(target.height_mm / cabinet.height_mm) + DENOMINATOR_MARGIN,
        math.ceil(target.width_mm / cabinet.width_mm) + DENOMINATOR_MARGIN,
    )


def convergents(target_ratio: float, max_denominator: int) -> list[tuple[int, int]]:
    """Continued-fraction approximations ``(n, m)`` of ``target_ratio``.

    The ratio is first fixed to ``FIXED_POINT_SCALE`` so the Euclidean
    expansion runs on exact integers. Every convergent whose denominator
    fits within ``max_denominator`` is returned in order. When the next
    convergent would exceed the bound, the best semiconvergent that still
    fits is appended and the expansion stops.

    Pairs with ``n < 1`` or ``m < 1`` are skipped. A ratio too large to
    scale to fixed point yields no pairs.

    Example:
        >>> convergents(3.14159265, 50)
        [(3, 1), (22, 7), (157, 50)]
    """
    if max_denominator < MIN_ROWS or not math.isfinite(target_ratio) or target_ratio < 0:
        return []

    scaled = target_ratio * FIXED_POINT_SCALE
    if not math.isfinite(scaled):
        return []

    rest_p = round_half_up(scaled)
    rest_q = FIXED_POINT_SCALE
    prev_p, cur_p = 0, 1
    prev_q, cur_q = 1, 0
    results: list[tuple[int, int]] = []

    while rest_q != 0:
        int_part, remainder = divmod(rest_p, rest_q)
        next_p = cur_p * int_part + prev_p
        next_q = cur_q * int_part + prev_q

        if next_q > max_denominator:
            max_t = max(0, (max_denominator - prev_q) // cur_q)
            if max_t > 0:
                n = cur_p * max_t + prev_p
                m = cur_q * max_t + prev_q
                if n >= MIN_COLS and m >= MIN_ROWS:
                    results.append((n, m))
            break

        if next_p >= MIN_COLS and next_q >= MIN_ROWS:
            results.append((next_p, next_q))
        prev_p, cur_p = cur_p, next_p
        prev_q, cur_q = cur_q, next_q
        rest_p, rest_q = rest_q, remainder

    return results

"""Classification and scoring of candidate grids.

A candidate is "lower" when it fits inside the target and "upper" when it
covers the target, both within ``TOLERANCE_MM``. If some lower candidate
matches the target exactly, upper candidates must exceed the target in at
least one dimension so the same grid is never reported on both sides.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..constants import TOLERANCE_MM
from ..value_objects import GridConfig, TargetDimensions

# Relative weights of the two score terms
DIMENSION_WEIGHT = 1.0
ASPECT_RATIO_WEIGHT = 1.0


def is_lower(cfg: GridConfig, target: TargetDimensions) -> bool:
    return (
        cfg.width_mm <= target.width_mm + TOLERANCE_MM
        and cfg.height_mm <= target.height_mm + TOLERANCE_MM
    )


def is_at_or_above(cfg: GridConfig, target: TargetDimensions) -> bool:
    return (
        cfg.width_mm >= target.width_mm - TOLERANCE_MM
        and cfg.height_mm >= target.height_mm - TOLERANCE_MM
    )


def is_exact_match(cfg: GridConfig, target: TargetDimensions) -> bool:
    return (
        abs(cfg.width_mm - target.width_mm) <= TOLERANCE_MM
        and abs(cfg.height_mm - target.height_mm) <= TOLERANCE_MM
    )


def is_upper(cfg: GridConfig, target: TargetDimensions, has_exact_match: bool) -> bool:
    """Whether ``cfg`` qualifies as an upper candidate.

    With an exact lower match present, ``cfg`` must be strictly larger than
    the target (beyond tolerance) in width or height.
    """
    if not is_at_or_above(cfg, target):
        return False
    if has_exact_match:
        return (
            cfg.width_mm > target.width_mm + TOLERANCE_MM
            or cfg.height_mm > target.height_mm + TOLERANCE_MM
        )
    return True


def score(cfg: GridConfig, target: TargetDimensions) -> float:
    """Distance of ``cfg`` from the target; lower is better.

    Mean relative deviation of width and height plus relative deviation of
    aspect ratio. A zero target term is replaced by 1 as the divisor.
    """
    target_w = target.width_mm or 1
    target_h = target.height_mm or 1
    target_ar = target.aspect_ratio or 1
    dim_score = (
        abs(cfg.width_mm - target.width_mm) / target_w
        + abs(cfg.height_mm - target.height_mm) / target_h
    ) / 2
    ar_score = abs(cfg.aspect_ratio - target.aspect_ratio) / target_ar
    return DIMENSION_WEIGHT * dim_score + ASPECT_RATIO_WEIGHT * ar_score


def select_best(
    candidates: Sequence[GridConfig], target: TargetDimensions
) -> GridConfig | None:
    """Lowest-scoring candidate; ties keep the earliest one."""
    best: GridConfig | None = None
    best_score = 0.0
    for candidate in candidates:
        candidate_score = score(candidate, target)
        if best is None or candidate_score < best_score:
            best = candidate
            best_score = candidate_score
    return best


@dataclass(frozen=True)
class Selection:
    """Classified candidates and the winner on each side."""

    lowers: tuple[GridConfig, ...]
    uppers: tuple[GridConfig, ...]
    has_exact_match: bool
    best_lower: GridConfig | None
    best_upper: GridConfig | None


class CandidateSelector:
    """Partitions candidates around a target and picks the best of each side."""

    def __init__(self, target: TargetDimensions) -> None:
        self.target = target

    def select(self, candidates: Sequence[GridConfig]) -> Selection:
        lowers = tuple(c for c in candidates if is_lower(c, self.target))
        has_exact_match = any(is_exact_match(c, self.target) for c in lowers)
        uppers = tuple(
            c for c in candidates if is_upper(c, self.target, has_exact_match)
        )
        return Selection(
            lowers=lowers,
            uppers=uppers,
            has_exact_match=has_exact_match,
            best_lower=select_best(lowers, self.target),
            best_upper=select_best(uppers, self.target),
        )

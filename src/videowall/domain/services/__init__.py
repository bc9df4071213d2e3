"""Domain services for the video wall calculator."""

from .calculator import calculate
from .candidates import (
    aspect_ratio_candidates,
    deduplicate,
    dimension_candidates,
    generate_candidates,
)
from .rational import convergents, grid_ratio, max_denominator_for
from .selection import (
    CandidateSelector,
    Selection,
    is_at_or_above,
    is_exact_match,
    is_lower,
    is_upper,
    score,
    select_best,
)
from .target_dimensions import derive_target_dimensions

__all__ = [
    "CandidateSelector",
    "Selection",
    "aspect_ratio_candidates",
    "calculate",
    "convergents",
    "deduplicate",
    "derive_target_dimensions",
    "dimension_candidates",
    "generate_candidates",
    "grid_ratio",
    "is_at_or_above",
    "is_exact_match",
    "is_lower",
    "is_upper",
    "max_denominator_for",
    "score",
    "select_best",
]

"""Entry point of the video wall calculator."""

from __future__ import annotations

from typing import Callable, Mapping, Sequence

from ..constants import CABINETS
from ..value_objects import (
    CabinetSpec,
    CabinetType,
    CalculatorOutput,
    ParamKey,
    ParameterValues,
)
from .candidates import generate_candidates
from .selection import CandidateSelector
from .target_dimensions import derive_target_dimensions


def _resolve_cabinet(cabinet_type: CabinetType | str) -> CabinetSpec | None:
    try:
        return CABINETS.get(CabinetType(cabinet_type))
    except ValueError:
        return None


def calculate(
    cabinet_type: CabinetType | str,
    selected_params: Sequence[ParamKey | str],
    values: ParameterValues | Mapping[str, float | None],
    unit_to_mm: Callable[[float], float],
) -> CalculatorOutput | None:
    """Find the closest lower and upper cabinet grids for a target wall.

    Args:
        cabinet_type: Catalog key of the cabinet module ("16:9" or "1:1").
        selected_params: Exactly two parameter keys describing the target.
        values: Parameter values; entries for unselected keys are ignored.
        unit_to_mm: Converts a raw length value to millimeters.

    Returns:
        The best lower and upper layouts with the derived target, or None if
        the selection is not exactly two keys, the pair is unsupported, the
        geometry is infeasible, or the cabinet type is unknown. Either side
        of a returned output may still be None.

    Example:
        >>> from videowall.domain.units import unit_to_mm
        >>> out = calculate("1:1", ["width", "height"],
        ...                 {"width": 2300, "height": 1800}, unit_to_mm("mm"))
        >>> (out.lower.columns, out.lower.rows), (out.upper.columns, out.upper.rows)
        ((4, 3), (5, 4))
    """
    if len(selected_params) != 2:
        return None

    cabinet = _resolve_cabinet(cabinet_type)
    if cabinet is None:
        return None

    if not isinstance(values, ParameterValues):
        values = ParameterValues.from_mapping(values)

    target = derive_target_dimensions(selected_params, values, unit_to_mm)
    if target is None:
        return None

    candidates = generate_candidates(selected_params, target, cabinet)
    selection = CandidateSelector(target).select(candidates)

    return CalculatorOutput(
        lower=selection.best_lower,
        upper=selection.best_upper,
        target_width_mm=target.width_mm,
        target_height_mm=target.height_mm,
        target_diagonal_mm=target.diagonal_mm,
        target_aspect_ratio=target.aspect_ratio,
    )

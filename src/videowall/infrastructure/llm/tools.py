"""The ``video_wall_calculate`` tool exposed to agents.

The tool takes a cabinet type, a unit and two named parameters, runs the
calculator, and answers with either ``{"result": <summary>}`` or
``{"error": <message>}``. It never raises for bad input so an agent can
read the error and retry.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import BaseModel, Field

from videowall.domain import ParameterValues, calculate, unit_to_mm
from videowall.infrastructure.formatters import ResultSummaryFormatter

logger = logging.getLogger(__name__)

TOOL_NAME = "video_wall_calculate"

TOOL_DESCRIPTION = (
    "Calculate the closest lower and upper video wall cabinet configurations. "
    "Provide cabinet type (16:9 or 1:1), unit (mm, m, ft, in), exactly two "
    "parameters (ar, height, width, diagonal) and their numeric values. "
    "For aspect ratio (ar) use decimal e.g. 1.778 for 16:9."
)

DUPLICATE_PARAMS_ERROR = "param1 and param2 must be different. Select exactly two parameters."
COMPUTE_ERROR = (
    "Could not compute. Check inputs (e.g. diagonal must be greater than "
    "height and width)."
)

CabinetTypeName = Literal["16:9", "1:1"]
UnitName = Literal["mm", "m", "ft", "in"]
ParamName = Literal["ar", "height", "width", "diagonal"]


class VideoWallToolRequest(BaseModel):
    """Arguments of the ``video_wall_calculate`` tool."""

    cabinet_type: CabinetTypeName = Field(..., description="Cabinet type: 16:9 or 1:1")
    unit: UnitName = Field(..., description="Unit for dimension values")
    param1: ParamName = Field(..., description="First parameter")
    value1: float = Field(..., description="Numeric value for first parameter")
    param2: ParamName = Field(
        ..., description="Second parameter (must differ from param1)"
    )
    value2: float = Field(..., description="Numeric value for second parameter")


def handle_tool_request(request: VideoWallToolRequest) -> dict[str, Any]:
    """Run the calculator for a tool request.

    Returns:
        ``{"result": summary}`` on success, ``{"error": message}`` otherwise.
    """
    if request.param1 == request.param2:
        return {"error": DUPLICATE_PARAMS_ERROR}

    values = ParameterValues.from_pairs(
        (request.param1, request.value1), (request.param2, request.value2)
    )
    output = calculate(
        request.cabinet_type,
        [request.param1, request.param2],
        values,
        unit_to_mm(request.unit),
    )
    if output is None:
        logger.debug(
            f"Tool request produced no target: {request.param1}={request.value1}, "
            f"{request.param2}={request.value2}"
        )
        return {"error": COMPUTE_ERROR}

    return {"result": ResultSummaryFormatter().format(output, request.unit)}


def video_wall_calculate(
    cabinet_type: CabinetTypeName,
    unit: UnitName,
    param1: ParamName,
    value1: float,
    param2: ParamName,
    value2: float,
) -> dict[str, Any]:
    """Calculate the closest lower and upper video wall cabinet configurations.

    Args:
        cabinet_type: Cabinet type: 16:9 or 1:1.
        unit: Unit for dimension values (mm, m, ft, in).
        param1: First parameter (ar, height, width, diagonal).
        value1: Numeric value for the first parameter. Aspect ratio is a
            decimal, e.g. 1.778 for 16:9.
        param2: Second parameter, different from param1.
        value2: Numeric value for the second parameter.
    """
    return handle_tool_request(
        VideoWallToolRequest(
            cabinet_type=cabinet_type,
            unit=unit,
            param1=param1,
            value1=value1,
            param2=param2,
            value2=value2,
        )
    )

"""Wall calculation endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Body

from videowall.application import CalculationInput, CalculationResult
from videowall.application.config import config_to_input, load_config_from_dict
from videowall.domain import GridConfig
from videowall.infrastructure import ResultSummaryFormatter
from videowall.infrastructure.llm import (
    TOOL_NAME,
    VideoWallToolRequest,
    handle_tool_request,
)
from videowall.web.dependencies import CalculateCommandDep
from videowall.web.exceptions import CalculationError
from videowall.web.schemas import (
    CalculateRequest,
    CalculateResponse,
    ErrorResponseSchema,
    GridConfigSchema,
    ToolResponseSchema,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calculate"])


def _grid_schema(config: GridConfig | None) -> GridConfigSchema | None:
    if config is None:
        return None
    return GridConfigSchema(
        columns=config.columns,
        rows=config.rows,
        total_cabinets=config.total_cabinets,
        width_mm=config.width_mm,
        height_mm=config.height_mm,
        diagonal_mm=config.diagonal_mm,
        aspect_ratio=config.aspect_ratio,
    )


def _to_response(result: CalculationResult) -> CalculateResponse:
    if not result.is_valid:
        raise CalculationError(result.errors)

    output = result.output
    return CalculateResponse(
        lower=_grid_schema(output.lower),
        upper=_grid_schema(output.upper),
        target_width_mm=output.target_width_mm,
        target_height_mm=output.target_height_mm,
        target_diagonal_mm=output.target_diagonal_mm,
        target_aspect_ratio=output.target_aspect_ratio,
        unit=result.unit,
        summary=ResultSummaryFormatter().format(output, result.unit),
        message=result.empty_state_message,
    )


@router.post(
    "/calculate",
    response_model=CalculateResponse,
    responses={422: {"model": ErrorResponseSchema}},
)
async def calculate_configuration(
    request: CalculateRequest,
    command: CalculateCommandDep,
) -> CalculateResponse:
    """Find the closest lower and upper cabinet grids for a target.

    A null ``ar`` value is replaced with 16:9.

    Raises:
        CalculationError: If the input is invalid or no target can be
            derived (handled by exception handler).
    """
    calculation_input = CalculationInput(
        cabinet_type=request.cabinet_type.value,
        unit=request.unit.value,
        selected_params=[key.value for key in request.parameters],
        values={key.value: value for key, value in request.parameters.items()},
    ).with_defaults()

    return _to_response(command.execute(calculation_input))


@router.post(
    "/calculate/request",
    response_model=CalculateResponse,
    responses={422: {"model": ErrorResponseSchema}},
)
async def calculate_from_request_document(
    command: CalculateCommandDep,
    document: dict[str, Any] = Body(..., description="Wall request file contents"),
) -> CalculateResponse:
    """Run a calculation from a wall request document.

    Accepts the same JSON as ``videowall calculate --config``.

    Raises:
        ConfigError: If the document fails schema validation (handled by
            exception handler).
        CalculationError: If no target can be derived.
    """
    config = load_config_from_dict(document)
    return _to_response(command.execute(config_to_input(config)))


@router.post(f"/tools/{TOOL_NAME}", response_model=ToolResponseSchema)
async def call_tool(request: VideoWallToolRequest) -> ToolResponseSchema:
    """Invoke the agent tool directly with a tool-shaped request."""
    logger.debug(f"Tool call: {request.model_dump()}")
    return ToolResponseSchema(**handle_tool_request(request))

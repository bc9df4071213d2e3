"""Pydantic schemas for the REST API."""

from videowall.web.schemas.common import (
    AspectRatioPresetSchema,
    CabinetSchema,
    GridConfigSchema,
)
from videowall.web.schemas.requests import CalculateRequest
from videowall.web.schemas.responses import (
    CabinetListSchema,
    CalculateResponse,
    ConversionSchema,
    ErrorResponseSchema,
    PresetListSchema,
    ToolResponseSchema,
)

__all__ = [
    # Common
    "AspectRatioPresetSchema",
    "CabinetSchema",
    "GridConfigSchema",
    # Requests
    "CalculateRequest",
    # Responses
    "CabinetListSchema",
    "CalculateResponse",
    "ConversionSchema",
    "ErrorResponseSchema",
    "PresetListSchema",
    "ToolResponseSchema",
]

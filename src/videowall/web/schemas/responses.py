"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from videowall.web.schemas.common import (
    AspectRatioPresetSchema,
    CabinetSchema,
    GridConfigSchema,
)


class CalculateResponse(BaseModel):
    """Best lower and upper layouts for a target wall."""

    lower: GridConfigSchema | None = Field(None, description="Best layout at or below target")
    upper: GridConfigSchema | None = Field(None, description="Best layout at or above target")
    target_width_mm: float
    target_height_mm: float
    target_diagonal_mm: float
    target_aspect_ratio: float
    unit: str = Field(..., description="Unit of the request")
    summary: str = Field(..., description="Human-readable summary in the request unit")
    message: str | None = Field(None, description="Explanation when an option is missing")


class CabinetListSchema(BaseModel):
    cabinets: list[CabinetSchema]


class PresetListSchema(BaseModel):
    presets: list[AspectRatioPresetSchema]


class ConversionSchema(BaseModel):
    """Result of a unit conversion."""

    value: float
    from_unit: str
    to_unit: str
    converted: float
    formatted: str


class ToolResponseSchema(BaseModel):
    """Agent tool answer: exactly one of result or error is set."""

    result: str | None = None
    error: str | None = None


class ErrorResponseSchema(BaseModel):
    error: str
    error_type: str
    details: list[dict[str, Any]] | dict[str, Any] | None = None

"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, Field

from videowall.domain import CabinetType, ParamKey, Unit


class CalculateRequest(BaseModel):
    """Request for the closest lower and upper wall configurations."""

    cabinet_type: CabinetType = Field(..., description="Cabinet type: 16:9 or 1:1")
    unit: Unit = Field(default=Unit.MM, description="Unit of the length parameters")
    parameters: dict[ParamKey, float | None] = Field(
        ...,
        description=(
            "Exactly two of ar, height, width, diagonal. A null ar "
            "defaults to 16:9."
        ),
    )

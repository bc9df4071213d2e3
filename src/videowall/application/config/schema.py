"""Pydantic schema for wall calculation request files.

A request file describes one calculation: the cabinet module, the unit of
the length values, and exactly two target parameters. An optional ``llm``
section configures the agent backend used by ``videowall ask``.

Example:
    {
        "schema_version": "1.0",
        "cabinet_type": "16:9",
        "unit": "mm",
        "parameters": {"width": 3600, "height": 2025}
    }
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from videowall.domain import CabinetType, ParamKey, Unit

# Version 1.0: Initial schema with cabinet type, unit, parameters and llm settings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

DEFAULT_OLLAMA_URL = "http://localhost:11434"
DEFAULT_LLM_MODEL = "llama3.2"


class LlmConfig(BaseModel):
    """Agent backend settings."""

    model_config = ConfigDict(extra="forbid")

    ollama_url: str = Field(default=DEFAULT_OLLAMA_URL, description="Ollama server URL")
    model: str = Field(default=DEFAULT_LLM_MODEL, description="Ollama model name")
    timeout_seconds: float = Field(
        default=30.0, gt=0, description="Agent run timeout in seconds"
    )

    @classmethod
    def from_env(cls) -> "LlmConfig":
        """Settings with ``VIDEOWALL_OLLAMA_URL`` / ``VIDEOWALL_LLM_MODEL`` overrides."""
        return cls(
            ollama_url=os.environ.get("VIDEOWALL_OLLAMA_URL", DEFAULT_OLLAMA_URL),
            model=os.environ.get("VIDEOWALL_LLM_MODEL", DEFAULT_LLM_MODEL),
        )


class WallRequestConfiguration(BaseModel):
    """Root model of a wall calculation request file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", description="Request file schema version")
    cabinet_type: CabinetType = Field(..., description="Cabinet module: 16:9 or 1:1")
    unit: Unit = Field(default=Unit.MM, description="Unit of the length parameters")
    parameters: dict[ParamKey, float] = Field(
        ..., description="Exactly two of ar, height, width, diagonal"
    )
    llm: LlmConfig | None = Field(default=None, description="Agent backend settings")

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(f"Unsupported schema version '{v}'. Supported: {supported}")
        return v

    @model_validator(mode="after")
    def validate_parameter_count(self) -> "WallRequestConfiguration":
        if len(self.parameters) != 2:
            raise ValueError(
                f"Exactly two parameters are required, got {len(self.parameters)}"
            )
        return self

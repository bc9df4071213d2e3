"""Conversion from request files to application DTOs."""

from __future__ import annotations

from videowall.application.config.schema import WallRequestConfiguration
from videowall.application.dtos import CalculationInput


def config_to_input(config: WallRequestConfiguration) -> CalculationInput:
    """Build a CalculationInput from a validated request file."""
    return CalculationInput(
        cabinet_type=config.cabinet_type.value,
        unit=config.unit.value,
        selected_params=[key.value for key in config.parameters],
        values={key.value: value for key, value in config.parameters.items()},
    )

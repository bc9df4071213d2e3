"""Application layer - use cases and DTOs."""

from .commands import CalculateConfigurationCommand
from .dtos import CalculationInput, CalculationResult

__all__ = [
    "CalculateConfigurationCommand",
    "CalculationInput",
    "CalculationResult",
]

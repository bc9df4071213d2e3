"""FastAPI dependency injection for calculator services."""

from typing import Annotated

from fastapi import Depends

from videowall.application import CalculateConfigurationCommand


def get_calculate_command() -> CalculateConfigurationCommand:
    """Dependency for CalculateConfigurationCommand."""
    return CalculateConfigurationCommand()


CalculateCommandDep = Annotated[
    CalculateConfigurationCommand, Depends(get_calculate_command)
]

"""Pytest configuration and shared fixtures for video wall tests."""

from __future__ import annotations

import pytest

from videowall.application import CalculateConfigurationCommand
from videowall.domain import CABINETS, CabinetSpec, CabinetType


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests requiring external services (Ollama, etc.)"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def wide_cabinet() -> CabinetSpec:
    """The 600 x 337.5 mm (16:9) cabinet module."""
    return CABINETS[CabinetType.WIDE]


@pytest.fixture
def square_cabinet() -> CabinetSpec:
    """The 500 x 500 mm (1:1) cabinet module."""
    return CABINETS[CabinetType.SQUARE]


@pytest.fixture
def calculate_command() -> CalculateConfigurationCommand:
    """A fresh CalculateConfigurationCommand."""
    return CalculateConfigurationCommand()

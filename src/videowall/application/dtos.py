"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from videowall.domain import (
    CABINETS,
    DEFAULT_ASPECT_RATIO,
    CalculatorOutput,
    ParamKey,
    ParameterValues,
    Unit,
)


@dataclass
class CalculationInput:
    """Input DTO for a wall calculation request.

    Attributes:
        cabinet_type: Catalog key of the cabinet module.
        unit: Unit of the length values.
        selected_params: The parameter keys the caller chose.
        values: Raw values keyed by parameter name.
    """

    cabinet_type: str
    unit: str = Unit.MM.value
    selected_params: list[str] = field(default_factory=list)
    values: dict[str, float | None] = field(default_factory=dict)

    @classmethod
    def from_pairs(
        cls,
        cabinet_type: str,
        unit: str,
        param1: str,
        value1: float | None,
        param2: str,
        value2: float | None,
    ) -> "CalculationInput":
        """Build from a two-parameter request such as the agent tool's."""
        return cls(
            cabinet_type=cabinet_type,
            unit=unit,
            selected_params=[param1, param2],
            values={param1: value1, param2: value2},
        )

    def with_defaults(self) -> "CalculationInput":
        """Fill in the default aspect ratio when ``ar`` is selected without a value."""
        values = dict(self.values)
        if ParamKey.AR.value in self.selected_params and values.get(ParamKey.AR.value) is None:
            values[ParamKey.AR.value] = DEFAULT_ASPECT_RATIO
        return CalculationInput(
            cabinet_type=self.cabinet_type,
            unit=self.unit,
            selected_params=list(self.selected_params),
            values=values,
        )

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []

        valid_cabinets = [c.value for c in CABINETS]
        if self.cabinet_type not in valid_cabinets:
            errors.append(f"Cabinet type must be one of: {', '.join(valid_cabinets)}")

        valid_units = [u.value for u in Unit]
        if self.unit not in valid_units:
            errors.append(f"Unit must be one of: {', '.join(valid_units)}")

        valid_params = [p.value for p in ParamKey]
        unknown = [p for p in self.selected_params if p not in valid_params]
        if unknown:
            errors.append(
                f"Unknown parameters: {', '.join(unknown)}. "
                f"Choose from: {', '.join(valid_params)}"
            )
        if len(set(self.selected_params)) != len(self.selected_params):
            errors.append("Parameters must be different")
        if len(self.selected_params) != 2:
            errors.append("Select exactly two parameters")

        for param in self.selected_params:
            if param not in valid_params:
                continue
            value = self.values.get(param)
            if value is None:
                errors.append(f"Missing value for {param}")
            elif not math.isfinite(value) or value <= 0:
                if param == ParamKey.AR.value:
                    errors.append("Aspect ratio must be a positive number")
                else:
                    errors.append(f"{param.capitalize()} must be positive")

        return errors

    def to_parameter_values(self) -> ParameterValues:
        """Values of the selected parameters as a domain value object."""
        return ParameterValues.from_mapping(
            {key: self.values.get(key) for key in self.selected_params}
        )


@dataclass
class CalculationResult:
    """Output DTO for a wall calculation.

    Attributes:
        output: Calculator output, or None if validation or calculation failed.
        unit: Unit the request was expressed in, used for display.
        errors: Validation or calculation error messages.
    """

    output: CalculatorOutput | None
    unit: str = Unit.MM.value
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the calculation produced a result."""
        return not self.errors and self.output is not None

    @property
    def has_lower(self) -> bool:
        return self.output is not None and self.output.lower is not None

    @property
    def has_upper(self) -> bool:
        return self.output is not None and self.output.upper is not None

    @property
    def empty_state_message(self) -> str | None:
        """Explanation for a missing lower and/or upper option."""
        if self.output is None:
            return None
        if not self.has_lower and not self.has_upper:
            return "No configurations found. Try different inputs."
        if not self.has_lower:
            return "No lower configuration (target may be very small)."
        if not self.has_upper:
            return "No upper configuration (target may be very large)."
        return None

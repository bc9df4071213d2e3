"""Application commands (use cases) for wall calculation."""

from __future__ import annotations

import logging

from videowall.domain import ParamKey, calculate, unit_to_mm

from .dtos import CalculationInput, CalculationResult

logger = logging.getLogger(__name__)

INFEASIBLE_DIAGONAL_MESSAGE = "Invalid: diagonal must be greater than height and width."
GENERIC_FAILURE_MESSAGE = "Could not compute. Check your inputs."


class CalculateConfigurationCommand:
    """Command to compute the closest lower and upper wall configurations."""

    def execute(self, calculation_input: CalculationInput) -> CalculationResult:
        """Validate the request and run the calculator.

        Args:
            calculation_input: Cabinet type, unit, selection and values.

        Returns:
            CalculationResult with the calculator output, or with errors if
            the input is invalid or no target could be derived.
        """
        errors = calculation_input.validate()
        if errors:
            logger.debug(f"Rejected calculation input: {errors}")
            return CalculationResult(output=None, unit=calculation_input.unit, errors=errors)

        output = calculate(
            calculation_input.cabinet_type,
            calculation_input.selected_params,
            calculation_input.to_parameter_values(),
            unit_to_mm(calculation_input.unit),
        )

        if output is None:
            message = self._failure_message(calculation_input.selected_params)
            logger.info(
                f"No target for {calculation_input.selected_params} "
                f"on {calculation_input.cabinet_type} cabinets: {message}"
            )
            return CalculationResult(
                output=None, unit=calculation_input.unit, errors=[message]
            )

        logger.debug(
            f"Calculated lower={output.lower and output.lower.grid_key} "
            f"upper={output.upper and output.upper.grid_key} "
            f"for target {output.target_width_mm:.2f}x{output.target_height_mm:.2f} mm"
        )
        return CalculationResult(output=output, unit=calculation_input.unit)

    @staticmethod
    def _failure_message(selected_params: list[str]) -> str:
        has_diagonal = ParamKey.DIAGONAL.value in selected_params and (
            ParamKey.HEIGHT.value in selected_params
            or ParamKey.WIDTH.value in selected_params
        )
        return INFEASIBLE_DIAGONAL_MESSAGE if has_diagonal else GENERIC_FAILURE_MESSAGE

"""Text and JSON renderings of calculation results."""

from __future__ import annotations

import json
from typing import Literal

from videowall.application.dtos import CalculationResult
from videowall.domain import (
    MAX_GRID_DISPLAY,
    CalculatorOutput,
    GridConfig,
    Unit,
    format_dimension,
    from_mm,
)

ResultKind = Literal["lower", "upper"]

_OPTION_LABELS: dict[str, str] = {
    "lower": "Option 1 (Lower)",
    "upper": "Option 2 (Upper)",
}


class GridDiagramFormatter:
    """ASCII picture of a cabinet grid.

    Large grids are clipped to ``max_display`` cells per axis.
    """

    def __init__(self, max_display: int = MAX_GRID_DISPLAY) -> None:
        self._max_display = max_display

    def format(self, columns: int, rows: int) -> str:
        shown_cols = min(columns, self._max_display)
        shown_rows = min(rows, self._max_display)

        heading = f"{columns} columns × {rows} rows"
        if columns > self._max_display or rows > self._max_display:
            heading += f" (showing first {shown_cols}×{shown_rows})"

        border = "+" + "---+" * shown_cols
        cells = "|" + "   |" * shown_cols
        lines = [heading, border]
        for _ in range(shown_rows):
            lines.append(cells)
            lines.append(border)
        return "\n".join(lines)


class ResultSummaryFormatter:
    """One-paragraph summary of a result, as returned by the agent tool."""

    def format(self, output: CalculatorOutput, unit: Unit | str) -> str:
        target_w = from_mm(output.target_width_mm, unit)
        target_h = from_mm(output.target_height_mm, unit)
        lines = [
            f"Target: width {format_dimension(target_w, unit)}, "
            f"height {format_dimension(target_h, unit)}, "
            f"aspect ratio {output.target_aspect_ratio:.2f}."
        ]
        lines.append(self._format_option(output.lower, "lower", unit))
        lines.append(self._format_option(output.upper, "upper", unit))
        return " ".join(lines)

    def _format_option(self, config: GridConfig | None, kind: ResultKind, unit: Unit | str) -> str:
        label = _OPTION_LABELS[kind]
        if config is None:
            direction = "below" if kind == "lower" else "above"
            return f"{label}: No configuration {direction} target."
        return (
            f"{label}: {config.columns} columns × {config.rows} rows = "
            f"{config.total_cabinets} cabinets. "
            f"Width {format_dimension(from_mm(config.width_mm, unit), unit)}, "
            f"height {format_dimension(from_mm(config.height_mm, unit), unit)}, "
            f"diagonal {format_dimension(from_mm(config.diagonal_mm, unit), unit)}, "
            f"aspect ratio {config.aspect_ratio:.2f}."
        )


class ResultReportFormatter:
    """Multi-line report of a calculation for terminal output."""

    def __init__(self, show_diagrams: bool = True) -> None:
        self._show_diagrams = show_diagrams
        self._diagram = GridDiagramFormatter()

    def format(self, result: CalculationResult) -> str:
        if result.output is None:
            return "\n".join(f"Error: {error}" for error in result.errors)

        output = result.output
        unit = result.unit
        lines = [
            "VIDEO WALL CONFIGURATIONS",
            "=" * 60,
            f"Target: W {format_dimension(from_mm(output.target_width_mm, unit), unit)}, "
            f"H {format_dimension(from_mm(output.target_height_mm, unit), unit)}, "
            f"D {format_dimension(from_mm(output.target_diagonal_mm, unit), unit)}, "
            f"AR {output.target_aspect_ratio:.2f}",
        ]

        for kind, config in (("lower", output.lower), ("upper", output.upper)):
            if config is None:
                continue
            lines.append("")
            lines.append(_OPTION_LABELS[kind])
            lines.append("-" * 60)
            lines.append(
                f"  {config.columns} columns × {config.rows} rows · "
                f"{config.total_cabinets} cabinets"
            )
            lines.append(f"  Width:        {format_dimension(from_mm(config.width_mm, unit), unit)}")
            lines.append(f"  Height:       {format_dimension(from_mm(config.height_mm, unit), unit)}")
            lines.append(f"  Diagonal:     {format_dimension(from_mm(config.diagonal_mm, unit), unit)}")
            lines.append(f"  Aspect ratio: {config.aspect_ratio:.2f}")
            if self._show_diagrams:
                lines.append("")
                lines.append(self._diagram.format(config.columns, config.rows))

        message = result.empty_state_message
        if message:
            lines.append("")
            lines.append(message)

        return "\n".join(lines)


class JsonExporter:
    """Serializes a calculation result to JSON."""

    def export(self, result: CalculationResult) -> str:
        data = result.output.to_dict() if result.output else {}
        data["unit"] = result.unit
        data["errors"] = list(result.errors)
        return json.dumps(data, indent=2)

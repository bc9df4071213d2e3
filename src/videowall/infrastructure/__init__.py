"""Infrastructure layer - output formatting and agent integration."""

from .formatters import (
    GridDiagramFormatter,
    JsonExporter,
    ResultReportFormatter,
    ResultSummaryFormatter,
)

__all__ = [
    "GridDiagramFormatter",
    "JsonExporter",
    "ResultReportFormatter",
    "ResultSummaryFormatter",
]

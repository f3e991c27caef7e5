"""
Custom exceptions for chart rendering and report generation.

Clean error hierarchy for distinct failure modes.
"""


class ChartError(Exception):
    """Base exception for all chart-related errors."""


class ChartDataError(ChartError, ValueError):
    """Series cannot be drawn: non-finite values, negative bar/pie values, zero pie total."""


class SeriesLoadError(ChartError):
    """Input file for a series or report could not be read or parsed."""

    def __init__(self, path: str, message: str = ""):
        self.path = path
        super().__init__(message or f"Failed to load series from: {path}")


class ReportError(ChartError):
    """Financial report could not be assembled."""

    def __init__(self, message: str, company: str | None = None):
        super().__init__(message)
        self.company = company

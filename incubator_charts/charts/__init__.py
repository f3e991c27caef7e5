"""
Charts module for generating SVG visualizations.

This module renders line, bar and pie charts from small {period, value}
series as standalone SVG documents, for dashboard views and PDF reports.
"""

from incubator_charts.charts.base import (
    ChartOptions,
    ChartType,
    CurrencyFormat,
    DataPoint,
)
from incubator_charts.charts.formatting import format_value
from incubator_charts.charts.generators import (
    render_bar_chart,
    render_empty_chart,
    render_line_chart,
    render_pie_chart,
)
from incubator_charts.charts.renderer import render_chart

__all__ = [
    "ChartOptions",
    "ChartType",
    "CurrencyFormat",
    "DataPoint",
    "format_value",
    "render_bar_chart",
    "render_chart",
    "render_empty_chart",
    "render_line_chart",
    "render_pie_chart",
]

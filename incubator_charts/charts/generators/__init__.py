"""
Chart generators for dashboard views and PDF reports.
"""

from incubator_charts.charts.generators.bar_chart import (
    build_bar_chart_document,
    render_bar_chart,
)
from incubator_charts.charts.generators.empty_chart import (
    build_empty_chart_document,
    render_empty_chart,
)
from incubator_charts.charts.generators.line_chart import (
    build_line_chart_document,
    render_line_chart,
)
from incubator_charts.charts.generators.pie_chart import (
    build_pie_chart_document,
    compute_pie_slices,
    render_pie_chart,
)

__all__ = [
    "build_bar_chart_document",
    "build_empty_chart_document",
    "build_line_chart_document",
    "build_pie_chart_document",
    "compute_pie_slices",
    "render_bar_chart",
    "render_empty_chart",
    "render_line_chart",
    "render_pie_chart",
]

"""
Chart type dispatch.
"""

from collections.abc import Callable

from incubator_charts.charts.base import ChartOptions, ChartType, DataPoint
from incubator_charts.charts.generators import (
    render_bar_chart,
    render_line_chart,
    render_pie_chart,
)

RENDERERS: dict[ChartType, Callable[[list[DataPoint], ChartOptions | None], str]] = {
    ChartType.LINE: render_line_chart,
    ChartType.BAR: render_bar_chart,
    ChartType.PIE: render_pie_chart,
}


def render_chart(
    chart_type: ChartType | str,
    data: list[DataPoint],
    options: ChartOptions | None = None,
) -> str:
    """Render ``data`` with the renderer registered for ``chart_type``.

    Accepts the enum or its string value ("line", "bar", "pie").
    """
    return RENDERERS[ChartType(chart_type)](data, options)

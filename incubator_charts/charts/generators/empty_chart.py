"""
Placeholder chart for series without data points.
"""

import structlog

from incubator_charts.charts.base import ChartOptions, ChartType
from incubator_charts.charts.svg import SvgDocument

logger = structlog.get_logger(__name__)

EMPTY_CAPTION = "No data available"


def build_empty_chart_document(
    options: ChartOptions | None = None,
    chart_type: ChartType = ChartType.LINE,
) -> SvgDocument:
    """Background, title and a "No data available" caption.

    Width, height and title fall back to the defaults of ``chart_type``,
    so an empty pie placeholder is 400x400 titled "Pie Chart" while line
    and bar placeholders are 600x300.
    """
    resolved = (options or ChartOptions()).resolve(chart_type)
    width, height = resolved.width, resolved.height

    document = SvgDocument(width, height)
    document.add_style(
        ".empty-title", "font: bold 16px sans-serif; fill: #6b7280; text-anchor: middle;"
    )
    document.add_style(
        ".empty-text", "font: 14px sans-serif; fill: #9ca3af; text-anchor: middle;"
    )
    document.add(
        "rect",
        width=width,
        height=height,
        fill="#f9fafb",
        stroke="#e5e7eb",
        class_="background",
    )
    document.add("text", resolved.title, x=width / 2, y=30, class_="empty-title")
    document.add("text", EMPTY_CAPTION, x=width / 2, y=height / 2, class_="empty-text")
    return document


def render_empty_chart(
    options: ChartOptions | None = None,
    chart_type: ChartType = ChartType.LINE,
) -> str:
    """Render the empty-series placeholder as SVG markup."""
    logger.info(
        "No data for chart, rendering placeholder",
        chart_type=chart_type.value,
        title=(options or ChartOptions()).title,
    )
    return build_empty_chart_document(options, chart_type).to_svg()

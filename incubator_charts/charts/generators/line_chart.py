"""
Line chart generator.

Draws an auto-scaled trend line with:
- Shaded area under the line (series of two or more points)
- Circle marker on every data point
- Optional horizontal grid
- Optional period labels (thinned on long series) and y-axis values
"""

from dataclasses import dataclass

import structlog

from incubator_charts.charts.axes import draw_axes, draw_grid, draw_y_axis_labels
from incubator_charts.charts.base import (
    ChartOptions,
    ChartType,
    DataPoint,
    validate_series,
)
from incubator_charts.charts.formatting import format_number
from incubator_charts.charts.generators.empty_chart import (
    build_empty_chart_document,
    render_empty_chart,
)
from incubator_charts.charts.geometry import PlotArea, ValueRange, label_stride
from incubator_charts.charts.svg import (
    AXIS_LABEL_STYLE,
    AXIS_LINE_STYLE,
    SvgDocument,
    new_chart_document,
)

logger = structlog.get_logger(__name__)

POINT_RADIUS = 4


@dataclass(frozen=True)
class LinePoint:
    """Pixel position of one data point."""

    x: float
    y: float
    period: str
    value: float


def compute_line_points(
    data: list[DataPoint], area: PlotArea, value_range: ValueRange
) -> list[LinePoint]:
    """Place every point left to right, scaled into ``value_range``."""
    return [
        LinePoint(
            x=area.x_for_index(i, len(data)),
            y=area.y_for_value(point.value, value_range),
            period=point.period,
            value=point.value,
        )
        for i, point in enumerate(data)
    ]


def _points_attr(points: list[LinePoint]) -> str:
    return " ".join(f"{format_number(p.x)},{format_number(p.y)}" for p in points)


def build_line_chart_document(
    data: list[DataPoint], options: ChartOptions | None = None
) -> SvgDocument:
    """Build the line chart as a structured document.

    Args:
        data: Series in x-axis order
        options: Rendering options (defaults: 600x300, blue line)

    Returns:
        SvgDocument, or the empty-chart placeholder when ``data`` is empty

    Raises:
        ChartDataError: if a value is NaN or infinite
    """
    options = options or ChartOptions()
    if not data:
        return build_empty_chart_document(options, ChartType.LINE)

    config = options.resolve(ChartType.LINE)
    values = validate_series(data, ChartType.LINE)
    area = PlotArea(config.width, config.height)
    value_range = ValueRange.from_values(values)
    points = compute_line_points(data, area, value_range)

    document = new_chart_document(config.width, config.height, config.title)
    document.add_style(".axis-label", AXIS_LABEL_STYLE)
    document.add_style(".grid-line", "stroke: #f3f4f6; stroke-width: 1;")
    document.add_style(".axis-line", AXIS_LINE_STYLE)
    document.add_style(
        ".data-line", f"stroke: {config.color}; stroke-width: 3; fill: none;"
    )
    document.add_style(
        ".data-point", f"fill: {config.color}; stroke: white; stroke-width: 2;"
    )
    document.add_style(".data-area", f"fill: {config.color}; fill-opacity: 0.1;")

    # Grid sits beneath everything else
    if config.show_grid:
        draw_grid(document, area)

    draw_axes(document, area)

    # A single point has no line or area, only its marker
    if len(points) > 1:
        path = (
            f"M{format_number(area.left)},{format_number(area.bottom)} "
            f"{_points_attr(points)} "
            f"{format_number(area.right)},{format_number(area.bottom)} Z"
        )
        document.add("path", d=path, class_="data-area")
        document.add("polyline", points=_points_attr(points), class_="data-line")

    markers = document.add("g", class_="data-points")
    for point in points:
        markers.add("circle", cx=point.x, cy=point.y, r=POINT_RADIUS, class_="data-point")

    if config.show_labels:
        x_labels = document.add("g", class_="x-axis-labels")
        step = label_stride(len(points))
        for i, point in enumerate(points):
            if i % step == 0:
                x_labels.add(
                    "text",
                    point.period,
                    x=point.x,
                    y=area.bottom + 20,
                    class_="axis-label",
                    text_anchor="middle",
                )
        draw_y_axis_labels(document, area, value_range, config.currency)

    return document


def render_line_chart(
    data: list[DataPoint], options: ChartOptions | None = None
) -> str:
    """Render a line chart as standalone SVG markup."""
    if not data:
        return render_empty_chart(options, ChartType.LINE)

    document = build_line_chart_document(data, options)
    logger.debug(
        "Rendered line chart",
        points=len(data),
        title=(options or ChartOptions()).title,
    )
    return document.to_svg()

"""
Bar chart generator.

Bars always rise from a zero baseline; the y domain is [0, max(values)].
Each item gets an equal slot, 70% bar and 30% spacing split either side.
"""

from dataclasses import dataclass

import structlog

from incubator_charts.charts.axes import draw_axes, draw_y_axis_labels
from incubator_charts.charts.base import (
    ChartOptions,
    ChartType,
    DataPoint,
    validate_series,
)
from incubator_charts.charts.formatting import format_value
from incubator_charts.charts.generators.empty_chart import (
    build_empty_chart_document,
    render_empty_chart,
)
from incubator_charts.charts.geometry import PlotArea, ValueRange
from incubator_charts.charts.svg import (
    AXIS_LABEL_STYLE,
    AXIS_LINE_STYLE,
    SvgDocument,
    new_chart_document,
)

logger = structlog.get_logger(__name__)

BAR_FRACTION = 0.7
SPACING_FRACTION = 0.3


@dataclass(frozen=True)
class Bar:
    """Pixel rectangle of one bar."""

    x: float
    y: float
    width: float
    height: float
    period: str
    value: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


def compute_bars(data: list[DataPoint], area: PlotArea, max_value: float) -> list[Bar]:
    """Lay out one bar per point; all bars are flat when ``max_value`` is 0."""
    slot = area.chart_width / len(data)
    bar_width = slot * BAR_FRACTION
    bar_spacing = slot * SPACING_FRACTION

    bars = []
    for i, point in enumerate(data):
        x = area.left + i * (bar_width + bar_spacing) + bar_spacing / 2
        height = (point.value / max_value) * area.chart_height if max_value > 0 else 0
        bars.append(
            Bar(
                x=x,
                y=area.bottom - height,
                width=bar_width,
                height=height,
                period=point.period,
                value=point.value,
            )
        )
    return bars


def build_bar_chart_document(
    data: list[DataPoint], options: ChartOptions | None = None
) -> SvgDocument:
    """Build the bar chart as a structured document.

    Raises:
        ChartDataError: if a value is negative, NaN or infinite
    """
    options = options or ChartOptions()
    if not data:
        return build_empty_chart_document(options, ChartType.BAR)

    config = options.resolve(ChartType.BAR)
    values = validate_series(data, ChartType.BAR, allow_negative=False)
    area = PlotArea(config.width, config.height)
    max_value = max(values)
    bars = compute_bars(data, area, max_value)

    document = new_chart_document(config.width, config.height, config.title)
    document.add_style(".axis-label", AXIS_LABEL_STYLE)
    document.add_style(".axis-line", AXIS_LINE_STYLE)
    document.add_style(".bar", f"fill: {config.color};")
    document.add_style(
        ".value-label", "font: 11px sans-serif; fill: #374151; text-anchor: middle;"
    )

    draw_axes(document, area)

    bar_group = document.add("g", class_="bars")
    for bar in bars:
        bar_group.add(
            "rect", x=bar.x, y=bar.y, width=bar.width, height=bar.height, class_="bar"
        )
        if config.show_labels:
            bar_group.add(
                "text",
                format_value(bar.value, config.currency),
                x=bar.center_x,
                y=bar.y - 5,
                class_="value-label",
            )

    if config.show_labels:
        x_labels = document.add("g", class_="x-axis-labels")
        for bar in bars:
            x_labels.add(
                "text",
                bar.period,
                x=bar.center_x,
                y=config.height - 10,
                class_="axis-label",
                text_anchor="middle",
            )
        draw_y_axis_labels(document, area, ValueRange(0, max_value), config.currency)

    return document


def render_bar_chart(
    data: list[DataPoint], options: ChartOptions | None = None
) -> str:
    """Render a bar chart as standalone SVG markup."""
    if not data:
        return render_empty_chart(options, ChartType.BAR)

    document = build_bar_chart_document(data, options)
    logger.debug(
        "Rendered bar chart",
        bars=len(data),
        title=(options or ChartOptions()).title,
    )
    return document.to_svg()

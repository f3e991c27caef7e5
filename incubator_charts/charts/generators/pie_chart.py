"""
Pie chart generator.

Slices start at 12 o'clock and run clockwise, each sweeping its share of
2*pi. Colors cycle through the fixed palette; a legend lists every slice
with its percentage of the total.
"""

import math
from dataclasses import dataclass

import structlog

from incubator_charts.charts.base import (
    PALETTE,
    ChartOptions,
    ChartType,
    DataPoint,
    validate_series,
)
from incubator_charts.charts.formatting import format_number, format_percentage
from incubator_charts.charts.generators.empty_chart import (
    build_empty_chart_document,
    render_empty_chart,
)
from incubator_charts.charts.svg import SvgDocument, new_chart_document
from incubator_charts.exceptions import ChartDataError

logger = structlog.get_logger(__name__)

START_ANGLE = -math.pi / 2
PIE_MARGIN = 20
# Extra inset leaving room for the title
TITLE_INSET = 40
LEGEND_OFFSET_X = 150
LEGEND_TOP = 60
LEGEND_ROW_HEIGHT = 20
SWATCH_SIZE = 12


@dataclass(frozen=True)
class PieSlice:
    """Angular extent and share of one slice (angles in radians)."""

    period: str
    value: float
    start_angle: float
    end_angle: float
    percentage: float
    color: str

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def sweep_degrees(self) -> float:
        return math.degrees(self.sweep)

    @property
    def legend_text(self) -> str:
        return f"{self.period}: {format_percentage(self.percentage)}%"


def compute_pie_slices(data: list[DataPoint]) -> list[PieSlice]:
    """Split the circle into consecutive slices proportional to each value.

    Raises:
        ChartDataError: if a value is negative or non-finite, or the
            values sum to zero
    """
    values = validate_series(data, ChartType.PIE, allow_negative=False)
    total = sum(values)
    if total <= 0:
        raise ChartDataError("pie chart values sum to zero, slice shares are undefined")

    slices = []
    current_angle = START_ANGLE
    for i, point in enumerate(data):
        sweep = (point.value / total) * 2 * math.pi
        slices.append(
            PieSlice(
                period=point.period,
                value=point.value,
                start_angle=current_angle,
                end_angle=current_angle + sweep,
                percentage=point.value / total * 100,
                color=PALETTE[i % len(PALETTE)],
            )
        )
        current_angle += sweep
    return slices


def slice_path(
    pie_slice: PieSlice, center_x: float, center_y: float, radius: float
) -> str:
    """SVG sector path: centre, out to the start angle, arc clockwise, close."""
    x1 = center_x + radius * math.cos(pie_slice.start_angle)
    y1 = center_y + radius * math.sin(pie_slice.start_angle)
    x2 = center_x + radius * math.cos(pie_slice.end_angle)
    y2 = center_y + radius * math.sin(pie_slice.end_angle)
    large_arc_flag = 1 if pie_slice.sweep > math.pi else 0
    r = format_number(radius)
    return " ".join(
        [
            f"M {format_number(center_x)} {format_number(center_y)}",
            f"L {format_number(x1)} {format_number(y1)}",
            f"A {r} {r} 0 {large_arc_flag} 1 {format_number(x2)} {format_number(y2)}",
            "Z",
        ]
    )


def build_pie_chart_document(
    data: list[DataPoint], options: ChartOptions | None = None
) -> SvgDocument:
    """Build the pie chart as a structured document.

    ``options.color`` and ``options.show_grid`` are ignored; slices take
    their colors from the palette.
    """
    options = options or ChartOptions()
    if not data:
        return build_empty_chart_document(options, ChartType.PIE)

    config = options.resolve(ChartType.PIE)
    slices = compute_pie_slices(data)

    radius = min(config.width, config.height) / 2 - PIE_MARGIN - TITLE_INSET
    center_x = config.width / 2
    center_y = config.height / 2

    document = new_chart_document(config.width, config.height, config.title)
    document.add_style(".slice", "stroke: white; stroke-width: 2;")
    document.add_style(".legend-text", "font: 12px sans-serif; fill: #374151;")

    slice_group = document.add("g", class_="slices")
    for pie_slice in slices:
        # An arc from a point back to itself draws nothing
        if math.isclose(pie_slice.sweep, 2 * math.pi):
            slice_group.add(
                "circle",
                cx=center_x,
                cy=center_y,
                r=radius,
                fill=pie_slice.color,
                class_="slice",
            )
        else:
            slice_group.add(
                "path",
                d=slice_path(pie_slice, center_x, center_y, radius),
                fill=pie_slice.color,
                class_="slice",
            )

    legend = document.add(
        "g",
        class_="legend",
        transform=f"translate({format_number(config.width - LEGEND_OFFSET_X)}, {LEGEND_TOP})",
    )
    for i, pie_slice in enumerate(slices):
        row = legend.add(
            "g", class_="legend-row", transform=f"translate(0, {i * LEGEND_ROW_HEIGHT})"
        )
        row.add(
            "rect",
            x=0,
            y=0,
            width=SWATCH_SIZE,
            height=SWATCH_SIZE,
            fill=pie_slice.color,
            class_="legend-swatch",
        )
        row.add("text", pie_slice.legend_text, x=18, y=10, class_="legend-text")

    return document


def render_pie_chart(
    data: list[DataPoint], options: ChartOptions | None = None
) -> str:
    """Render a pie chart as standalone SVG markup."""
    if not data:
        return render_empty_chart(options, ChartType.PIE)

    document = build_pie_chart_document(data, options)
    logger.debug(
        "Rendered pie chart",
        slices=len(data),
        title=(options or ChartOptions()).title,
    )
    return document.to_svg()

"""
Axis, grid and y-axis label drawing shared by the line and bar charts.
"""

from incubator_charts.charts.base import CurrencyFormat
from incubator_charts.charts.formatting import format_value
from incubator_charts.charts.geometry import PlotArea, ValueRange
from incubator_charts.charts.svg import SvgDocument

# Number of even divisions used for grid lines and y-axis labels
GRID_DIVISIONS = 5


def draw_axes(document: SvgDocument, area: PlotArea) -> None:
    """Y-axis on the left edge and x-axis on the baseline."""
    document.add(
        "line",
        x1=area.left,
        y1=area.top,
        x2=area.left,
        y2=area.bottom,
        class_="axis-line",
    )
    document.add(
        "line",
        x1=area.left,
        y1=area.bottom,
        x2=area.right,
        y2=area.bottom,
        class_="axis-line",
    )


def draw_grid(
    document: SvgDocument, area: PlotArea, divisions: int = GRID_DIVISIONS
) -> None:
    """Horizontal reference lines from the top edge down to the baseline."""
    grid = document.add("g", class_="grid")
    for i in range(divisions + 1):
        y = area.top + (i * area.chart_height) / divisions
        grid.add(
            "line", x1=area.left, y1=y, x2=area.right, y2=y, class_="grid-line"
        )


def draw_y_axis_labels(
    document: SvgDocument,
    area: PlotArea,
    value_range: ValueRange,
    currency: CurrencyFormat,
    divisions: int = GRID_DIVISIONS,
) -> None:
    """Formatted values from the range minimum (bottom) to maximum (top)."""
    labels = document.add("g", class_="y-axis-labels")
    for i, value in enumerate(value_range.ticks(divisions)):
        y = area.y_for_fraction(i / divisions)
        labels.add(
            "text",
            format_value(value, currency),
            x=area.left - 10,
            y=y + 4,
            class_="axis-label",
            text_anchor="end",
        )

"""
Coordinate helpers mapping series values into the plot area.

The plot area is the canvas minus a fixed margin box. Widths or heights
smaller than the margins give a negative plot size; this is not clamped.
"""

from dataclasses import dataclass

from incubator_charts.charts.base import DEFAULT_MARGIN, Margin


@dataclass(frozen=True)
class PlotArea:
    """Pixel geometry of a chart canvas and its inner plot rectangle."""

    width: float
    height: float
    margin: Margin = DEFAULT_MARGIN

    @property
    def chart_width(self) -> float:
        return self.width - self.margin.left - self.margin.right

    @property
    def chart_height(self) -> float:
        return self.height - self.margin.top - self.margin.bottom

    @property
    def left(self) -> float:
        return self.margin.left

    @property
    def right(self) -> float:
        return self.margin.left + self.chart_width

    @property
    def top(self) -> float:
        return self.margin.top

    @property
    def bottom(self) -> float:
        """Y coordinate of the x-axis (the baseline)."""
        return self.margin.top + self.chart_height

    def x_for_index(self, index: int, count: int) -> float:
        """X position of the index-th of ``count`` evenly spread points.

        A single point sits on the y-axis rather than dividing by zero.
        """
        return self.left + (index * self.chart_width) / max(count - 1, 1)

    def y_for_value(self, value: float, value_range: "ValueRange") -> float:
        """Y position of ``value`` with ``value_range.minimum`` on the baseline."""
        share = (value - value_range.minimum) / value_range.span
        return self.top + self.chart_height - share * self.chart_height

    def y_for_fraction(self, fraction: float) -> float:
        """Y position at ``fraction`` of the plot height above the baseline."""
        return self.bottom - fraction * self.chart_height


@dataclass(frozen=True)
class ValueRange:
    """Vertical value domain of a chart."""

    minimum: float
    maximum: float

    @classmethod
    def from_values(cls, values: list[float]) -> "ValueRange":
        return cls(min(values), max(values))

    @property
    def span(self) -> float:
        """Divisor for value scaling.

        Falls back to the maximum (or 1 when that is zero too) for a flat
        series so scaling never divides by zero.
        """
        return (self.maximum - self.minimum) or self.maximum or 1

    def ticks(self, divisions: int) -> list[float]:
        """Evenly spaced values from minimum to maximum, both included."""
        step = (self.maximum - self.minimum) / divisions
        return [self.minimum + i * step for i in range(divisions + 1)]


def label_stride(count: int, max_labels: int = 6) -> int:
    """Step between x-axis labels so that long series are thinned out."""
    return max(1, count // max_labels)

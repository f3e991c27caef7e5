"""
Base classes and data structures for chart rendering.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from incubator_charts.exceptions import ChartDataError


class ChartType(Enum):
    """Supported chart types."""

    LINE = "line"
    BAR = "bar"
    PIE = "pie"


@dataclass(frozen=True)
class CurrencyFormat:
    """Currency display format for chart labels.

    Handles both prefix currencies (e.g., R100, $100) and
    suffix currencies (e.g., 100 zł, 100 kr).
    """

    symbol: str
    position: str = "prefix"  # "prefix" or "suffix"
    space: bool = False  # Whether to add space between symbol and number

    def apply(self, amount: str) -> str:
        """Place the currency symbol around an already formatted amount.

        Examples:
            >>> CurrencyFormat("R").apply("1.5K")
            'R1.5K'
            >>> CurrencyFormat("kr", "suffix", space=True).apply("200")
            '200 kr'
        """
        sep = " " if self.space else ""
        if self.position == "prefix":
            return f"{self.symbol}{sep}{amount}"
        else:  # suffix
            return f"{amount}{sep}{self.symbol}"


# Dashboard figures are reported in South African Rand
DEFAULT_CURRENCY = CurrencyFormat("R", "prefix")


@dataclass(frozen=True)
class Margin:
    """Space reserved around the plot area for title and axis labels."""

    top: float = 40
    right: float = 30
    bottom: float = 60
    left: float = 80


DEFAULT_MARGIN = Margin()

# Slice colors, cycled by index
PALETTE: tuple[str, ...] = (
    "#3b82f6",  # Blue
    "#10b981",  # Green
    "#f59e0b",  # Amber
    "#ef4444",  # Red
    "#8b5cf6",  # Purple
    "#06b6d4",  # Cyan
    "#84cc16",  # Lime
    "#f97316",  # Orange
    "#ec4899",  # Pink
    "#6366f1",  # Indigo
)


@dataclass(frozen=True)
class ChartDefaults:
    """Per chart type fallbacks for unset options."""

    title: str
    width: float
    height: float
    color: str | None = None


CHART_DEFAULTS: dict[ChartType, ChartDefaults] = {
    ChartType.LINE: ChartDefaults("Chart", 600, 300, "#3b82f6"),
    ChartType.BAR: ChartDefaults("Bar Chart", 600, 300, "#10b981"),
    ChartType.PIE: ChartDefaults("Pie Chart", 400, 400),
}


@dataclass(frozen=True)
class DataPoint:
    """A single labelled value in a series.

    ``period`` is a display label only, it is never parsed as a date.
    """

    period: str
    value: float

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "DataPoint":
        """Build a point from a ``{"period": ..., "value": ...}`` mapping."""
        if not isinstance(raw, Mapping):
            raise ChartDataError(f"Data point must be a mapping, got {raw!r}")
        try:
            return cls(period=str(raw["period"]), value=float(raw["value"]))
        except KeyError as e:
            raise ChartDataError(f"Data point is missing field {e}") from e
        except (TypeError, ValueError) as e:
            raise ChartDataError(
                f"Data point value is not numeric: {raw.get('value')!r}"
            ) from e


@dataclass(frozen=True)
class ChartOptions:
    """Rendering options shared by all chart types.

    ``None`` for title/color/width/height means "use the chart type's default".
    ``show_grid`` only affects line charts.
    """

    title: str | None = None
    color: str | None = None
    width: float | None = None
    height: float | None = None
    show_grid: bool = True
    show_labels: bool = True
    currency: CurrencyFormat = field(default_factory=lambda: DEFAULT_CURRENCY)

    def resolve(self, chart_type: ChartType) -> "ResolvedOptions":
        """Fill unset options from the chart type's defaults."""
        defaults = CHART_DEFAULTS[chart_type]
        return ResolvedOptions(
            chart_type=chart_type,
            title=self.title or defaults.title,
            color=self.color or defaults.color,
            width=self.width or defaults.width,
            height=self.height or defaults.height,
            show_grid=self.show_grid,
            show_labels=self.show_labels,
            currency=self.currency,
        )


@dataclass(frozen=True)
class ResolvedOptions:
    """ChartOptions with every default applied for a given chart type."""

    chart_type: ChartType
    title: str
    color: str | None
    width: float
    height: float
    show_grid: bool
    show_labels: bool
    currency: CurrencyFormat


def validate_series(
    data: list[DataPoint], chart_type: ChartType, allow_negative: bool = True
) -> list[float]:
    """Check a series before rendering and return its values.

    Raises:
        ChartDataError: if any value is NaN or infinite, or negative
            when ``allow_negative`` is False.
    """
    values = [point.value for point in data]
    for point in data:
        if not math.isfinite(point.value):
            raise ChartDataError(
                f"{chart_type.value} chart value for {point.period!r} is not finite: "
                f"{point.value}"
            )
        if not allow_negative and point.value < 0:
            raise ChartDataError(
                f"{chart_type.value} chart does not support negative values "
                f"({point.period!r}: {point.value})"
            )
    return values

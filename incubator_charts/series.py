"""
Series shaping for financial check-ins.

Turns monthly check-in records of a company into the {period, value}
series the chart renderers consume:
- Monthly turnover and net profit trends (most recent months)
- Quarterly turnover averages
- Date range filtering relative to a reference day
- Top-N category distributions with an "Other" bucket
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

import pandas as pd
import structlog

from incubator_charts.charts.base import DataPoint

logger = structlog.get_logger(__name__)

TURNOVER_MONTHS = 12
NET_PROFIT_MONTHS = 6

DATE_RANGE_MONTHS = {
    "last-6-months": 6,
    "last-12-months": 12,
    "last-24-months": 24,
}


def _safe_float(value: Any) -> float | None:
    """Convert API values (numbers, numeric strings, None) to float."""
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric check-in value", value=value)
        return None
    if not math.isfinite(number):
        logger.warning("Ignoring non-finite check-in value", value=value)
        return None
    return number


def _safe_int(value: Any) -> int | None:
    number = _safe_float(value)
    return int(number) if number is not None else None


@dataclass(frozen=True)
class FinancialCheckIn:
    """One monthly financial check-in of a company."""

    year: int
    month: int | None = None
    quarter: int | None = None
    quarter_label: str | None = None
    turnover: float | None = None
    net_profit: float | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "FinancialCheckIn":
        """Build a check-in from an API record, tolerating missing fields."""
        return cls(
            year=int(raw["year"]),
            month=_safe_int(raw.get("month")),
            quarter=_safe_int(raw.get("quarter")),
            quarter_label=raw.get("quarter_label") or None,
            turnover=_safe_float(raw.get("turnover")),
            net_profit=_safe_float(raw.get("net_profit")),
        )

    @property
    def period(self) -> str:
        """Month label such as ``2024-03`` (month defaults to January)."""
        return f"{self.year}-{self.month or 1:02d}"

    @property
    def quarter_key(self) -> str:
        """Quarter label such as ``2024-Q1``.

        Uses the record's own label when present, otherwise its quarter
        number, otherwise the quarter its month falls in.
        """
        if self.quarter_label:
            label = self.quarter_label
        elif self.quarter is not None:
            label = f"Q{self.quarter}"
        else:
            label = f"Q{((self.month or 1) - 1) // 3 + 1}"
        return f"{self.year}-{label}"


def monthly_series(
    check_ins: list[FinancialCheckIn], field: str, limit: int
) -> list[DataPoint]:
    """Chronological series of ``field`` over the ``limit`` most recent check-ins.

    Args:
        check_ins: Records ordered newest first, as the API returns them
        field: Numeric attribute to plot ("turnover" or "net_profit")
        limit: Number of records to keep

    Returns:
        DataPoints oldest first; missing values plot as 0
    """
    recent = list(reversed(check_ins[:limit]))
    return [
        DataPoint(period=check_in.period, value=getattr(check_in, field) or 0.0)
        for check_in in recent
    ]


def turnover_series(check_ins: list[FinancialCheckIn]) -> list[DataPoint]:
    return monthly_series(check_ins, "turnover", TURNOVER_MONTHS)


def net_profit_series(check_ins: list[FinancialCheckIn]) -> list[DataPoint]:
    return monthly_series(check_ins, "net_profit", NET_PROFIT_MONTHS)


def quarterly_average_series(check_ins: list[FinancialCheckIn]) -> list[DataPoint]:
    """Average turnover per quarter, sorted by quarter label."""
    if not check_ins:
        return []

    frame = pd.DataFrame(
        {
            "period": [check_in.quarter_key for check_in in check_ins],
            "turnover": [check_in.turnover or 0.0 for check_in in check_ins],
        }
    )
    averages = frame.groupby("period", sort=True)["turnover"].mean()
    return [
        DataPoint(period=str(period), value=float(value))
        for period, value in averages.items()
    ]


def filter_by_date_range(
    check_ins: list[FinancialCheckIn],
    date_range: str,
    today: date | None = None,
) -> list[FinancialCheckIn]:
    """Keep check-ins inside a named range relative to ``today``.

    Recognised ranges: ``last-6-months``, ``last-12-months``,
    ``last-24-months`` and ``current-year``. Anything else (e.g. ``all``)
    keeps every record.
    """
    today = today or date.today()

    if date_range == "current-year":
        return [c for c in check_ins if c.year == today.year]

    months = DATE_RANGE_MONTHS.get(date_range)
    if months is None:
        return list(check_ins)

    def months_ago(check_in: FinancialCheckIn) -> int:
        return (today.year - check_in.year) * 12 + (today.month - (check_in.month or 1))

    return [c for c in check_ins if months_ago(c) <= months]


def top_categories(
    totals: Iterable[tuple[str, float]],
    limit: int = 10,
    other_label: str = "Other",
) -> list[DataPoint]:
    """Largest ``limit`` positive categories, the remainder folded into one bucket.

    Suited to pie charts where more than ten slices stop being readable.
    """
    ranked = sorted(
        ((label, value) for label, value in totals if value > 0),
        key=lambda item: item[1],
        reverse=True,
    )
    series = [DataPoint(period=label, value=value) for label, value in ranked[:limit]]
    other_total = sum(value for _label, value in ranked[limit:])
    if other_total > 0:
        series.append(DataPoint(period=other_label, value=other_total))
    return series

"""
Display formatting for axis and value labels.

Formatting is display-only; nothing here feeds back into layout math.
"""

import math

from incubator_charts.charts.base import DEFAULT_CURRENCY, CurrencyFormat


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going towards positive infinity."""
    return math.floor(value + 0.5)


def format_value(value: float, currency: CurrencyFormat = DEFAULT_CURRENCY) -> str:
    """Abbreviate a monetary value for chart labels.

    Examples:
        >>> format_value(2_500_000)
        'R2.5M'
        >>> format_value(1234)
        'R1.2K'
        >>> format_value(99.5)
        'R100'
    """
    if value >= 1_000_000:
        amount = f"{value / 1_000_000:.1f}M"
    elif value >= 1_000:
        amount = f"{value / 1_000:.1f}K"
    else:
        amount = str(round_half_up(value))
    return currency.apply(amount)


def format_percentage(share: float) -> str:
    """One-decimal percentage text, e.g. ``25.0``."""
    return f"{share:.1f}"


def format_number(value: float) -> str:
    """Compact coordinate text for SVG attributes (at most 2 decimals)."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text

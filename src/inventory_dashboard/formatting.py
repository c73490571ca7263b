"""Display formatting for the sales summary card.

Everything here is presentation: it turns engine output into strings and
never feeds back into the numbers. The aggregation engine does not import
this module.
"""
from __future__ import annotations

from datetime import date

from inventory_dashboard.aggregate.keys import Granularity
from inventory_dashboard.models import BucketedRecord, SeriesPoint

PLACEHOLDER = "N/A"

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_SPAN_UNITS = {
    Granularity.DAILY: "day",
    Granularity.WEEKLY: "week",
    Granularity.MONTHLY: "month",
}


def format_millions(value: float) -> str:
    """Return ``$X.XXm`` with at most two decimals, e.g. ``$3.5m``."""
    text = f"{value / 1_000_000:,.2f}".rstrip("0").rstrip(".")
    return f"${text}m"


def format_currency(value: float) -> str:
    return f"${value:,.0f}"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def format_day_tick(d: date) -> str:
    return f"{d.month}/{d.day}"


def format_short_date(d: date) -> str:
    return f"{d.month}/{d.day}/{d.year % 100:02d}"


def format_long_date(d: date) -> str:
    return f"{MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"


def point_label(point: SeriesPoint) -> str:
    """X axis label: the bucket key, or ``M/D`` for a daily record."""
    if isinstance(point, BucketedRecord):
        return point.key
    return format_day_tick(point.date)


def format_peak(point: SeriesPoint | None) -> str:
    """Label for the highest-sales element, or ``N/A`` when there is none."""
    if point is None:
        return PLACEHOLDER
    if isinstance(point, BucketedRecord):
        return point.key
    return format_short_date(point.date)


def format_span(count: int, granularity: Granularity | str) -> str:
    """Footer text such as ``12 days`` or ``1 month``."""
    unit = _SPAN_UNITS[Granularity(granularity)]
    return f"{count} {unit}{'' if count == 1 else 's'}"

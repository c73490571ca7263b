"""Granularity, policy enums and bucket-key derivation.

Weekly buckets are *day-of-month* buckets, not ISO weeks: days 1-7 of every
month are "Week 1" of that month whatever weekday the month starts on, and
the counter resets each month.
"""
from __future__ import annotations

import math
from datetime import date
from enum import Enum
from typing import TypeVar


class Granularity(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class MissingChangePolicy(str, Enum):
    """How an absent ``change_percentage`` enters a mean.

    ``ZERO`` counts it as 0 (pulls sparse means toward zero). ``EXCLUDE``
    divides by the number of present values only.
    """
    ZERO = "zero"
    EXCLUDE = "exclude"


class BucketOrder(str, Enum):
    """Order of emitted buckets: first-seen key order, or by earliest date."""
    FIRST_SEEN = "first_seen"
    CHRONOLOGICAL = "chronological"


# Fixed English labels; the process locale must not change bucket keys.
SHORT_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def short_month(d: date) -> str:
    return SHORT_MONTHS[d.month - 1]


def week_of_month(d: date) -> int:
    """Return 1..5: ceil(day_of_month / 7)."""
    return math.ceil(d.day / 7)


def weekly_key(d: date) -> str:
    return f"Week {week_of_month(d)} - {short_month(d)}"


def monthly_key(d: date) -> str:
    return f"{short_month(d)}-{d.year % 100:02d}"


def bucket_key(d: date, granularity: Granularity) -> str:
    """Return the bucket label for `d` at a coarse granularity.

    Raises:
        ValueError: for ``Granularity.DAILY``, which is never bucketed.
    """
    if granularity is Granularity.WEEKLY:
        return weekly_key(d)
    if granularity is Granularity.MONTHLY:
        return monthly_key(d)
    raise ValueError(f"No bucket key for granularity {granularity.value!r}")


E = TypeVar("E", bound=Enum)


def _parse_enum(enum_cls: type[E], value: str | E) -> E:
    if isinstance(value, enum_cls):
        return value
    text = str(value).strip().lower()
    try:
        return enum_cls(text)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValueError(
            f"Unknown {enum_cls.__name__} {value!r}; expected one of: {allowed}"
        ) from None


def parse_granularity(value: str | Granularity) -> Granularity:
    return _parse_enum(Granularity, value)


def parse_missing_policy(value: str | MissingChangePolicy) -> MissingChangePolicy:
    return _parse_enum(MissingChangePolicy, value)


def parse_bucket_order(value: str | BucketOrder) -> BucketOrder:
    return _parse_enum(BucketOrder, value)

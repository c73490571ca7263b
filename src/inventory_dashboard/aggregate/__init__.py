"""Sales-summary aggregation engine.

This package re-buckets a daily sales series into weekly (week-of-month) or
monthly periods and derives headline statistics from whichever granularity is
selected. It performs no I/O and imports nothing from the presentation layer.
"""

from inventory_dashboard.aggregate.buckets import bucket
from inventory_dashboard.aggregate.keys import (
    BucketOrder,
    Granularity,
    MissingChangePolicy,
    bucket_key,
    monthly_key,
    parse_bucket_order,
    parse_granularity,
    parse_missing_policy,
    week_of_month,
    weekly_key,
)
from inventory_dashboard.aggregate.summary import summarize

__all__ = [
    "BucketOrder",
    "Granularity",
    "MissingChangePolicy",
    "bucket",
    "bucket_key",
    "monthly_key",
    "parse_bucket_order",
    "parse_granularity",
    "parse_missing_policy",
    "summarize",
    "week_of_month",
    "weekly_key",
]

"""Headline statistics over the currently selected series.

The statistics are granularity-relative: they are computed over whatever the
caller passes in (daily records or weekly/monthly buckets), never silently
re-derived from daily data.
"""
from __future__ import annotations

from typing import Sequence

from inventory_dashboard.aggregate.keys import MissingChangePolicy
from inventory_dashboard.models import SeriesPoint, SummaryStats


def _average_change(points: Sequence[SeriesPoint], missing: MissingChangePolicy) -> float:
    if missing is MissingChangePolicy.EXCLUDE:
        values = [p.change_percentage for p in points if p.change_percentage is not None]
    else:
        values = [p.change_percentage or 0.0 for p in points]

    n = len(values)
    if n == 0:
        return 0.0
    return sum(v / n for v in values)


def _peak(points: Sequence[SeriesPoint]) -> SeriesPoint | None:
    """Return the element with the largest total value; first one wins ties."""
    leader: SeriesPoint | None = None
    for p in points:
        if leader is None or p.total_value > leader.total_value:
            leader = p
    return leader


def summarize(
    points: Sequence[SeriesPoint],
    *,
    missing: MissingChangePolicy = MissingChangePolicy.ZERO,
) -> SummaryStats:
    """Compute total value, average change and peak for `points`.

    Args:
        points: Daily records or bucketed records, in display order.
        missing: ``ZERO`` averages absent change percentages in as 0 over
            all points; ``EXCLUDE`` averages present values only.

    Returns:
        SummaryStats. Empty input yields zeros and ``peak=None``.
    """
    missing = MissingChangePolicy(missing)
    return SummaryStats(
        total_value_sum=float(sum(p.total_value for p in points)),
        average_change_percentage=_average_change(points, missing),
        peak=_peak(points),
        bucket_count=len(points),
    )

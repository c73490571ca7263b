"""Re-bucket a daily sales series into weekly or monthly periods.

Expectations:
- Input: DailyRecord objects in whatever order the data source delivered them.
- Output: BucketedRecord objects, one per distinct bucket key, in the order
  selected by `BucketOrder`.

Each call is a pure function of its arguments; nothing is cached between calls.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from inventory_dashboard.aggregate.keys import (
    BucketOrder,
    Granularity,
    MissingChangePolicy,
    bucket_key,
)
from inventory_dashboard.models import BucketedRecord, DailyRecord

log = logging.getLogger(__name__)


@dataclass
class _Accumulator:
    """Running totals for one bucket while scanning the input."""
    key: str
    representative_date: date
    earliest_date: date
    total_value: float = 0.0
    change_percentage_sum: float = 0.0
    count: int = 0
    present_count: int = 0

    def add(self, record: DailyRecord) -> None:
        self.total_value += record.total_value
        if record.change_percentage is not None:
            self.change_percentage_sum += record.change_percentage
            self.present_count += 1
        self.count += 1
        if record.date < self.earliest_date:
            self.earliest_date = record.date

    def mean_change(self, missing: MissingChangePolicy) -> float | None:
        if missing is MissingChangePolicy.EXCLUDE:
            if self.present_count == 0:
                return None
            return self.change_percentage_sum / self.present_count
        # Absent values were added as 0 and still count toward the divisor.
        return self.change_percentage_sum / self.count

    def to_record(self, missing: MissingChangePolicy) -> BucketedRecord:
        return BucketedRecord(
            key=self.key,
            date=self.representative_date,
            total_value=self.total_value,
            change_percentage=self.mean_change(missing),
            count=self.count,
        )


def bucket(
    records: Iterable[DailyRecord],
    granularity: Granularity,
    *,
    missing: MissingChangePolicy = MissingChangePolicy.ZERO,
    order: BucketOrder = BucketOrder.FIRST_SEEN,
) -> Sequence[DailyRecord] | list[BucketedRecord]:
    """Return `records` aggregated to `granularity`.

    Args:
        records: Daily records; they need not be date-sorted.
        granularity: ``DAILY`` passes the input through, ``WEEKLY`` groups by
            week-of-month label, ``MONTHLY`` by month-year label.
        missing: Policy for absent change percentages in bucket means.
        order: ``FIRST_SEEN`` keeps the order in which keys first appeared;
            ``CHRONOLOGICAL`` sorts by each bucket's earliest date.

    Returns:
        For ``DAILY`` the input itself (or a date-sorted copy when ``order``
        is chronological). Otherwise a new list of BucketedRecord.
    """
    granularity = Granularity(granularity)
    missing = MissingChangePolicy(missing)
    order = BucketOrder(order)

    if granularity is Granularity.DAILY:
        if order is BucketOrder.CHRONOLOGICAL:
            return sorted(records, key=lambda r: r.date)
        if isinstance(records, Sequence):
            return records
        return list(records)

    # dicts keep insertion order, which is the first-seen order of keys
    grouped: dict[str, _Accumulator] = {}
    scanned = 0
    for record in records:
        scanned += 1
        key = bucket_key(record.date, granularity)
        acc = grouped.get(key)
        if acc is None:
            acc = _Accumulator(
                key=key,
                representative_date=record.date,
                earliest_date=record.date,
            )
            grouped[key] = acc
        acc.add(record)

    accumulators = list(grouped.values())
    if order is BucketOrder.CHRONOLOGICAL:
        accumulators.sort(key=lambda a: a.earliest_date)

    log.debug(
        "Bucketed %d daily records into %d %s buckets",
        scanned,
        len(accumulators),
        granularity.value,
    )
    return [acc.to_record(missing) for acc in accumulators]

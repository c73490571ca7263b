"""Pydantic models for the sales-summary series.

These models define the daily input records delivered by the data source, the
bucketed records produced by the aggregator, and the headline statistics
derived from either of them.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DailyRecord(BaseModel):
    """One day of sales, as supplied by the data source.

    Attributes:
        date: Calendar date of the sales (no time-of-day semantics).
        total_value: Non-negative sales value for the day.
        change_percentage: Signed change versus the prior day, or ``None``
            when there is no prior-day baseline.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)
    date: dt.date
    total_value: float = Field(..., ge=0, alias="totalValue")
    change_percentage: float | None = Field(default=None, alias="changePercentage")

    @field_validator("date", mode="before")
    @classmethod
    def _truncate_to_day(cls, v: Any) -> Any:
        # Timestamps ("2024-03-03T00:00:00.000Z", "2024-03-03 10:00:00") keep the calendar day only.
        if isinstance(v, dt.datetime):
            return v.date()
        if isinstance(v, str) and len(v) > 10:
            return dt.datetime.fromisoformat(v.strip().replace("Z", "+00:00")).date()
        return v


class BucketedRecord(BaseModel):
    """One aggregated period (a week-of-month or a month).

    Attributes:
        key: Bucket label, e.g. ``"Week 1 - Mar"`` or ``"Mar-24"``.
        date: Date of the first daily record that landed in the bucket.
        total_value: Sum of the constituent daily values.
        change_percentage: Mean change across the bucket, or ``None`` when
            missing values are excluded and none were present.
        count: Number of daily records folded into the bucket.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")
    key: str
    date: dt.date
    total_value: float = Field(..., ge=0)
    change_percentage: float | None
    count: int = Field(..., ge=1)


SeriesPoint = Union[DailyRecord, BucketedRecord]


class SummaryStats(BaseModel):
    """Headline figures for the currently selected series."""
    model_config = ConfigDict(frozen=True, extra="forbid")
    total_value_sum: float
    average_change_percentage: float
    peak: DailyRecord | BucketedRecord | None
    bucket_count: int = Field(..., ge=0)

    @property
    def peak_bucket_count(self) -> int:
        """Number of daily records behind the peak element (0 when empty)."""
        if self.peak is None:
            return 0
        if isinstance(self.peak, BucketedRecord):
            return self.peak.count
        return 1

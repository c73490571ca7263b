from __future__ import annotations

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from inventory_dashboard.models import BucketedRecord, DailyRecord, SummaryStats


def test_daily_record_accepts_backend_payload() -> None:
    rec = DailyRecord.model_validate({
        "salesSummaryId": "a1b2",
        "date": "2024-03-03T00:00:00.000Z",
        "totalValue": 1234.5,
        "changePercentage": -2.25,
    })
    assert rec.date == date(2024, 3, 3)
    assert rec.total_value == 1234.5
    assert rec.change_percentage == -2.25


def test_daily_record_change_percentage_optional() -> None:
    rec = DailyRecord.model_validate({"date": "2024-03-03", "totalValue": 10})
    assert rec.change_percentage is None


def test_daily_record_truncates_datetime() -> None:
    rec = DailyRecord(date=datetime(2024, 3, 3, 18, 30), total_value=1)
    assert rec.date == date(2024, 3, 3)


def test_daily_record_rejects_negative_value() -> None:
    with pytest.raises(ValidationError):
        DailyRecord.model_validate({"date": "2024-03-03", "totalValue": -1})


def test_daily_record_is_immutable() -> None:
    rec = DailyRecord(date=date(2024, 3, 3), total_value=1)
    with pytest.raises(ValidationError):
        rec.total_value = 2  # type: ignore[misc]


def test_bucketed_record_requires_positive_count() -> None:
    with pytest.raises(ValidationError):
        BucketedRecord(key="Mar-24", date=date(2024, 3, 1), total_value=1, change_percentage=None, count=0)


def test_summary_peak_bucket_count_for_daily_peak() -> None:
    rec = DailyRecord(date=date(2024, 3, 3), total_value=1)
    stats = SummaryStats(total_value_sum=1, average_change_percentage=0, peak=rec, bucket_count=1)
    assert stats.peak is rec
    assert stats.peak_bucket_count == 1


@pytest.mark.parametrize(
    "raw",
    ["2024-03-03 10:00:00", "2024-03-03 23:59:59.123456", "2024-03-03T10:00:00+00:00", "2024-03-03T00:00:00Z"],
)
def test_daily_record_truncates_timestamp_strings(raw: str) -> None:
    rec = DailyRecord.model_validate({"date": raw, "totalValue": 1})
    assert rec.date == date(2024, 3, 3)


def test_daily_record_rejects_unparseable_timestamp() -> None:
    with pytest.raises(ValidationError):
        DailyRecord.model_validate({"date": "2024-03-03 late", "totalValue": 1})

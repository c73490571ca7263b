from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any

import pytest

from inventory_dashboard import db
from inventory_dashboard.sources import DataFetchError, load_daily_records, validate_rows


class _FakeCursor:
    def __init__(self, docs: list[dict[str, Any]]) -> None:
        self.docs = docs

    def sort(self, field: str, direction: int) -> "_FakeCursor":
        return _FakeCursor(sorted(self.docs, key=lambda d: d[field], reverse=direction < 0))

    def __iter__(self):
        return iter(self.docs)


class _FakeCollection:
    def __init__(self, docs: list[dict[str, Any]]) -> None:
        self.docs = docs
        self.projection: dict[str, Any] | None = None

    def find(self, query: dict[str, Any], projection: dict[str, Any]) -> _FakeCursor:
        self.projection = projection
        return _FakeCursor([{k: v for k, v in d.items() if k != "_id"} for d in self.docs])


def test_validate_rows_counts_bad_rows() -> None:
    rows = [
        {"date": "2024-01-01", "totalValue": 10, "changePercentage": 1.5},
        {"date": "not-a-date", "totalValue": 10},
        {"date": "2024-01-02", "totalValue": -5},
        {"date": "2024-01-03", "total_value": 3, "change_percentage": float("nan")},
    ]
    good, bad = validate_rows(rows)
    assert bad == 2
    assert [r.date for r in good] == [date(2024, 1, 1), date(2024, 1, 3)]
    assert good[1].change_percentage is None


def test_load_json_list(tmp_path: Path) -> None:
    path = tmp_path / "sales.json"
    path.write_text(json.dumps([
        {"date": "2024-03-03T00:00:00.000Z", "totalValue": 500, "changePercentage": 10},
        {"date": "2024-03-10T00:00:00.000Z", "totalValue": 700},
    ]))
    records = load_daily_records(path)
    assert [r.total_value for r in records] == [500, 700]
    assert records[1].change_percentage is None


def test_load_json_dashboard_payload(tmp_path: Path) -> None:
    path = tmp_path / "metrics.json"
    path.write_text(json.dumps({
        "popularProducts": [],
        "salesSummary": [{"date": "2024-03-03", "totalValue": 1}],
    }))
    assert len(load_daily_records(str(path))) == 1


def test_load_csv_with_blank_change(tmp_path: Path) -> None:
    path = tmp_path / "sales.csv"
    path.write_text("date,totalValue,changePercentage\n2024-03-03,500,10\n2024-03-04,250,\n")
    records = load_daily_records(path)
    assert [r.date for r in records] == [date(2024, 3, 3), date(2024, 3, 4)]
    assert records[0].change_percentage == 10
    assert records[1].change_percentage is None


def test_missing_file_raises_fetch_error(tmp_path: Path) -> None:
    with pytest.raises(DataFetchError):
        load_daily_records(tmp_path / "absent.json")


def test_unsupported_suffix_raises_fetch_error(tmp_path: Path) -> None:
    path = tmp_path / "sales.txt"
    path.write_text("nothing")
    with pytest.raises(DataFetchError, match="Unsupported source"):
        load_daily_records(path)


def test_malformed_json_raises_fetch_error(tmp_path: Path) -> None:
    path = tmp_path / "sales.json"
    path.write_text('{"salesSummary": 3}')
    with pytest.raises(DataFetchError):
        load_daily_records(path)


def test_fetch_sales_summary_sorts_and_drops_id() -> None:
    coll = _FakeCollection([
        {"_id": 2, "date": "2024-01-02", "totalValue": 2},
        {"_id": 1, "date": "2024-01-01", "totalValue": 1},
    ])
    docs = db.fetch_sales_summary(coll)  # type: ignore[arg-type]
    assert coll.projection == {"_id": 0}
    assert [d["date"] for d in docs] == ["2024-01-01", "2024-01-02"]
    assert all("_id" not in d for d in docs)


def test_get_client_enables_tls_only_when_asked(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[dict[str, Any]] = []
    monkeypatch.setattr(db, "MongoClient", lambda uri, **kw: seen.append(kw) or kw)

    db.get_client("mongodb://localhost:27017")
    db.get_client("mongodb+srv://cluster.example.net/")
    assert "tls" not in seen[0]
    assert seen[1]["tls"] is True
    assert seen[1]["tlsCAFile"]


def test_validate_rows_counts_non_objects_as_bad() -> None:
    good, bad = validate_rows([{"date": "2024-01-01", "totalValue": 1}, 5, ["2024-01-02", 2], None])
    assert bad == 3
    assert [r.total_value for r in good] == [1]


def test_json_rows_that_are_not_objects_raise_fetch_error(tmp_path: Path) -> None:
    path = tmp_path / "sales.json"
    path.write_text(json.dumps([{"date": "2024-03-03", "totalValue": 1}, 5]))
    with pytest.raises(DataFetchError, match="not objects"):
        load_daily_records(path)


def test_csv_space_separated_timestamps_keep_every_day(tmp_path: Path) -> None:
    path = tmp_path / "sales.csv"
    path.write_text("date,totalValue\n2024-03-03 10:00:00,500\n2024-03-04 00:00:00,250\n")
    records = load_daily_records(path)
    assert [r.date for r in records] == [date(2024, 3, 3), date(2024, 3, 4)]
    assert sum(r.total_value for r in records) == 750

"""Load the daily sales series from a file or from MongoDB.

This is the upstream collaborator of the aggregation engine: it fetches raw
rows, validates them against `DailyRecord`, and hands the engine an already
validated list. Every fetch failure surfaces as a single `DataFetchError`.
"""
from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Iterable

import pandas as pd
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from inventory_dashboard.config import Settings, get_settings
from inventory_dashboard.db import fetch_sales_summary, get_client, get_db
from inventory_dashboard.models import DailyRecord

log = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".csv")


class DataFetchError(RuntimeError):
    """Raised when the sales summary cannot be read from its source."""


def _clean_row(row: dict[str, Any]) -> dict[str, Any]:
    """Turn pandas NaN placeholders back into missing values."""
    return {
        k: None if isinstance(v, float) and math.isnan(v) else v
        for k, v in row.items()
    }


def validate_rows(rows: Iterable[Any]) -> tuple[list[DailyRecord], int]:
    """Validate raw rows with Pydantic.

    Args:
        rows: Raw documents using either camelCase or snake_case field names.
            Anything that is not a mapping is counted as bad.

    Returns:
        A tuple of (validated_records, bad_count).
    """
    good: list[DailyRecord] = []
    bad = 0

    for row in rows:
        if not isinstance(row, dict):
            bad += 1
            log.debug("Rejected non-object sales row %r", row)
            continue
        try:
            good.append(DailyRecord.model_validate(_clean_row(row)))
        except ValidationError as e:
            bad += 1
            log.debug("Rejected sales row %r: %s", row, e)

    if bad:
        log.warning("Dropped %d invalid sales rows (kept %d)", bad, len(good))
    return good, bad


def read_file(path: Path) -> list[dict[str, Any]]:
    """Read raw daily rows from a JSON or CSV file.

    JSON may be a plain list of rows or a dashboard-metrics payload carrying
    the rows under ``salesSummary``.

    Raises:
        ValueError: for unsupported suffixes or an unexpected JSON shape.
        OSError: if the file cannot be read.
    """
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path).to_dict(orient="records")
    if suffix == ".json":
        payload = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(payload, dict):
            payload = payload.get("salesSummary")
        if not isinstance(payload, list):
            raise ValueError(f"{path} does not contain a list of sales rows")
        if not all(isinstance(row, dict) for row in payload):
            raise ValueError(f"{path} contains sales rows that are not objects")
        return payload
    raise ValueError(
        f"Unsupported source {path.name!r}; expected one of {', '.join(SUPPORTED_SUFFIXES)}"
    )


def _read_mongo(settings: Settings) -> list[dict[str, Any]]:
    client = get_client(settings.mongo_uri)
    try:
        db = get_db(client, settings.mongo_db)
        return fetch_sales_summary(db[settings.sales_collection])
    finally:
        client.close()


def load_daily_records(
    source: str | Path | None = None,
    settings: Settings | None = None,
) -> list[DailyRecord]:
    """Return validated daily records from `source` or the configured collection.

    Args:
        source: Path to a ``.json``/``.csv`` file. When omitted, the
            ``SALES_COLLECTION`` collection in MongoDB is read.
        settings: Optional settings; read from the environment when omitted.

    Raises:
        DataFetchError: if the source cannot be read.
    """
    try:
        if source is not None:
            path = Path(source)
            log.info("Loading sales summary from %s", path)
            rows = read_file(path)
        else:
            s = settings or get_settings()
            log.info("Loading sales summary from %s.%s", s.mongo_db, s.sales_collection)
            rows = _read_mongo(s)
    except (OSError, ValueError, PyMongoError) as e:
        raise DataFetchError(f"Failed to fetch sales summary: {e}") from e

    records, _ = validate_rows(rows)
    log.info("Loaded %d daily sales records", len(records))
    return records

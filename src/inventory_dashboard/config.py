"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads environment variables (optionally from a project-root `.env`) and
checks that the policy and granularity values are ones the engine knows.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, TypeVar

from dotenv import load_dotenv

from inventory_dashboard.aggregate.keys import (
    BucketOrder,
    Granularity,
    MissingChangePolicy,
    parse_bucket_order,
    parse_granularity,
    parse_missing_policy,
)

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")


@dataclass(frozen=True)
class Settings:
    """Container for dashboard configuration read from the environment.

    Attributes:
        mongo_uri: MongoDB connection URI for the sales summary source.
        mongo_db: MongoDB database name.
        sales_collection: Collection holding one document per day.
        default_granularity: Granularity the selector starts on.
        missing_change_policy: How absent change percentages enter means.
        bucket_order: Order in which buckets are emitted.
        log_level: Numeric logging level.
        log_file: Optional log file path.
        sales_source: Optional JSON/CSV file read instead of MongoDB.
    """
    mongo_uri: str
    mongo_db: str
    sales_collection: str
    default_granularity: Granularity
    missing_change_policy: MissingChangePolicy
    bucket_order: BucketOrder
    log_level: int
    log_file: Path | None
    sales_source: Path | None = None


T = TypeVar("T")


def _env_choice(name: str, default: str, parse: Callable[[str], T]) -> T:
    raw = os.getenv(name, default)
    try:
        return parse(raw)
    except ValueError as e:
        raise RuntimeError(f"Invalid {name}: {e}") from e


def _log_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise RuntimeError(f"Invalid LOG_LEVEL: {raw!r}")
    return level


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if a granularity, policy, order or log level value is
            not recognised.
    """
    log_file = os.getenv("LOG_FILE", "").strip()
    sales_source = os.getenv("SALES_SOURCE", "").strip()

    return Settings(
        mongo_uri=os.getenv("MONGO_URI", "mongodb://localhost:27017"),
        mongo_db=os.getenv("MONGO_DB", "inventory"),
        sales_collection=os.getenv("SALES_COLLECTION", "salesSummary"),
        default_granularity=_env_choice("DEFAULT_GRANULARITY", "weekly", parse_granularity),
        missing_change_policy=_env_choice("MISSING_CHANGE_POLICY", "zero", parse_missing_policy),
        bucket_order=_env_choice("BUCKET_ORDER", "first_seen", parse_bucket_order),
        log_level=_log_level(os.getenv("LOG_LEVEL", "INFO")),
        log_file=Path(log_file) if log_file else None,
        sales_source=Path(sales_source) if sales_source else None,
    )

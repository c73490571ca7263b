"""Command-line interface for the sales summary engine.

Provides subcommands: `summary` and `buckets`. Each command is implemented
as a `cmd_*` function that accepts an argparse namespace and returns an exit
status.
"""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from dotenv import load_dotenv

from inventory_dashboard.aggregate import (
    bucket,
    parse_bucket_order,
    parse_granularity,
    parse_missing_policy,
    summarize,
)
from inventory_dashboard.config import Settings, get_settings
from inventory_dashboard.formatting import (
    format_currency,
    format_millions,
    format_peak,
    format_percent,
    format_span,
    point_label,
)
from inventory_dashboard.logging_config import configure_logging
from inventory_dashboard.models import SeriesPoint
from inventory_dashboard.sources import DataFetchError, load_daily_records

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _selected_series(args: argparse.Namespace, s: Settings) -> Sequence[SeriesPoint]:
    """Load the daily series and bucket it at the requested granularity."""
    records = load_daily_records(args.source, s)
    return bucket(records, args.granularity, missing=args.missing, order=args.order)


def _apply_defaults(args: argparse.Namespace, s: Settings) -> None:
    """Fill options left unset on the command line from settings."""
    if args.granularity is None:
        args.granularity = s.default_granularity
    if args.missing is None:
        args.missing = s.missing_change_policy
    if args.order is None:
        args.order = s.bucket_order
    if args.source is None:
        args.source = s.sales_source


# --------------------------------------------------
# SUMMARY
# --------------------------------------------------
def cmd_summary(args: argparse.Namespace, s: Settings) -> int:
    """Print headline figures for the selected granularity."""
    series = _selected_series(args, s)
    stats = summarize(series, missing=args.missing)

    print(f"Value: {format_millions(stats.total_value_sum)} ({format_percent(stats.average_change_percentage)})")
    print(f"Highest Sales: {format_peak(stats.peak)}")
    print(f"Span: {format_span(stats.bucket_count, args.granularity)}")
    return 0


# --------------------------------------------------
# BUCKETS
# --------------------------------------------------
def cmd_buckets(args: argparse.Namespace, s: Settings) -> int:
    """Print one line per element of the selected series."""
    series = _selected_series(args, s)
    for p in series:
        change = "-" if p.change_percentage is None else format_percent(p.change_percentage)
        print(f"{point_label(p):<16} {format_currency(p.total_value):>16} {change:>10}")
    log.info("Printed %d %s rows", len(series), args.granularity.value)
    return 0


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Both subcommands accept `--source`, `--granularity`, `--missing` and
    `--order`; unset options fall back to the environment settings.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--source", default=None, help="JSON or CSV file; SALES_SOURCE or MongoDB when omitted")
    common.add_argument("--granularity", type=parse_granularity, default=None)
    common.add_argument("--missing", type=parse_missing_policy, default=None)
    common.add_argument("--order", type=parse_bucket_order, default=None)

    p = argparse.ArgumentParser(prog="inventory-dashboard")
    sub = p.add_subparsers(dest="cmd", required=True)
    sub.add_parser("summary", parents=[common])
    sub.add_parser("buckets", parents=[common])
    return p


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    load_dotenv()
    s = get_settings()
    configure_logging(s.log_file, s.log_level)

    args = build_parser().parse_args(argv)
    _apply_defaults(args, s)

    try:
        if args.cmd == "summary":
            return cmd_summary(args, s)
        if args.cmd == "buckets":
            return cmd_buckets(args, s)
    except DataFetchError as e:
        log.error("Failed to fetch data: %s", e)
        return 1
    raise SystemExit(2)


if __name__ == "__main__":
    raise SystemExit(main())

"""Utilities to configure consistent logging for the CLI and dashboard."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(log_path: Path | None = None, level: int | str = logging.INFO) -> None:
    """Configure root logging handlers and formatting.

    Replaces any handlers already on the root logger, so calling it twice
    (e.g. on a Streamlit rerun) does not duplicate output.

    Args:
        log_path: Optional path to a file where logs will be written.
        level: Logging level as an int or a name such as ``"DEBUG"``.
    """
    if isinstance(level, str):
        level = level.upper()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

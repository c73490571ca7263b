"""Convert engine output into a pandas DataFrame for charting."""
from __future__ import annotations

from typing import Sequence

import pandas as pd

from inventory_dashboard.formatting import point_label
from inventory_dashboard.models import BucketedRecord, SeriesPoint

CHART_COLUMNS = ["label", "date", "total_value", "change_percentage", "count"]


def to_chart_frame(points: Sequence[SeriesPoint]) -> pd.DataFrame:
    """Return one row per point, keeping the engine's output order.

    Args:
        points: Daily or bucketed records.

    Returns:
        DataFrame with columns `label`, `date`, `total_value`,
        `change_percentage` and `count` (1 for daily records).
    """
    rows = [
        {
            "label": point_label(p),
            "date": p.date,
            "total_value": p.total_value,
            "change_percentage": p.change_percentage,
            "count": p.count if isinstance(p, BucketedRecord) else 1,
        }
        for p in points
    ]
    return pd.DataFrame(rows, columns=CHART_COLUMNS)

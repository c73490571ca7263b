"""inventory_dashboard package.

Contains the sales-summary engine behind the inventory dashboard: daily sales
records are re-bucketed into weekly or monthly periods and reduced to headline
statistics. Around the engine sit thin collaborators for loading records,
formatting figures, holding dashboard UI state, and serving a CLI and a
Streamlit page.

Architecture:
- Source (JSON/CSV file or MongoDB) → validated DailyRecord list
- aggregate.bucket → BucketedRecord list at the selected granularity
- aggregate.summarize → SummaryStats for whatever granularity is selected
- Pydantic models describe every shape crossing those seams
"""

__all__ = ["__version__"]
__version__ = "0.1.0"

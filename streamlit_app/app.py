from __future__ import annotations

from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st

from inventory_dashboard.aggregate import Granularity, bucket, summarize
from inventory_dashboard.config import get_settings
from inventory_dashboard.formatting import (
    format_millions,
    format_peak,
    format_percent,
    format_span,
)
from inventory_dashboard.frames import to_chart_frame
from inventory_dashboard.logging_config import configure_logging
from inventory_dashboard.sources import DataFetchError, load_daily_records
from inventory_dashboard.state import NAV_LINKS, DashboardState, is_active

# =====================================================
# Settings & state
# =====================================================
settings = get_settings()
configure_logging(settings.log_file, settings.log_level)

if "dashboard_state" not in st.session_state:
    st.session_state.dashboard_state = DashboardState(granularity=settings.default_granularity)
state: DashboardState = st.session_state.dashboard_state

st.set_page_config(
    page_title="StockPilot Dashboard",
    layout="wide",
    initial_sidebar_state="expanded",
)

# =====================================================
# Helpers
# =====================================================
@st.cache_data(ttl=300)
def load_records(source: Path | None):
    """Fetch the daily series once per source; reruns reuse the result."""
    return load_daily_records(source, settings)


def bar_chart(df: pd.DataFrame) -> alt.Chart:
    """Build the sales bar chart from a chart frame.

    Args:
        df: Frame from `to_chart_frame`; row order is preserved on the x axis.
    """
    return (
        alt.Chart(df)
        .mark_bar(size=10, cornerRadiusTopLeft=10, cornerRadiusTopRight=10, color="#3182ce")
        .encode(
            x=alt.X("label:N", sort=None, title=None),
            y=alt.Y(
                "total_value:Q",
                title=None,
                axis=alt.Axis(labelExpr="'$' + format(datum.value / 1000000, '.0f') + 'm'"),
            ),
            tooltip=[
                alt.Tooltip("label:N", title="Period"),
                alt.Tooltip("total_value:Q", title="Value", format="$,.0f"),
                alt.Tooltip("change_percentage:Q", title="Change %", format=".2f"),
            ],
        )
        .properties(height=350)
    )


# =====================================================
# Sidebar
# =====================================================
with st.sidebar:
    st.title("STOCKPILOT")
    # initial_sidebar_state only applies on first load, so the toggle hides the links instead
    if st.button("Show links" if state.sidebar_collapsed else "Hide links"):
        state.toggle_sidebar()
        st.rerun()
    if not state.sidebar_collapsed:
        current = st.query_params.get("page", "/")
        for link in NAV_LINKS:
            label = f"**{link.label}**" if is_active(link, current) else link.label
            st.markdown(f"[{label}](?page={link.href})")
        st.caption("© 2024 StockPilot")

# =====================================================
# Sales summary card
# =====================================================
st.header("Sales Summary")

try:
    records = load_records(settings.sales_source)
except DataFetchError:
    st.error("Failed to fetch data")
    st.stop()

options = [g.value for g in Granularity]
choice = st.selectbox(
    "Granularity",
    options,
    index=options.index(state.granularity.value),
    format_func=str.capitalize,
)
state.set_granularity(choice)

series = bucket(
    records,
    state.granularity,
    missing=settings.missing_change_policy,
    order=settings.bucket_order,
)
stats = summarize(series, missing=settings.missing_change_policy)

c1, c2 = st.columns(2)
with c1:
    st.metric(
        "Value",
        format_millions(stats.total_value_sum),
        delta=format_percent(stats.average_change_percentage),
    )
with c2:
    st.metric("Highest Sales", format_peak(stats.peak))

df = to_chart_frame(series)
if df.empty:
    st.warning("No sales data available.")
else:
    st.altair_chart(bar_chart(df), use_container_width=True)

st.divider()
f1, f2 = st.columns(2)
f1.write(format_span(stats.bucket_count, state.granularity))
f2.write(f"Highest Sales Date: **{format_peak(stats.peak)}**")

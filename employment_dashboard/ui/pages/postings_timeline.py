from __future__ import annotations

import pandas as pd
import streamlit as st

from employment_dashboard.data.aggregations import TIME_INTERVALS, rebucket_timeline, timeline_data
from employment_dashboard.ui.components.charts import render_plotly, timeline_chart
from employment_dashboard.ui.pages.context import PageContext


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Job Postings Over Time")
    if df.empty:
        st.info("No jobs match the current filters.")
        return

    monthly = timeline_data(df)
    col_interval, col_levels = st.columns([1, 3])
    with col_interval:
        interval = st.radio("Interval", TIME_INTERVALS, horizontal=True, key="ed_timeline_interval")
    with col_levels:
        visible = st.multiselect(
            "Experience levels",
            options=monthly.experience_levels,
            default=monthly.experience_levels,
            key="ed_timeline_levels",
        )

    data = rebucket_timeline(monthly, interval)
    render_plotly(timeline_chart(data, visible_levels=visible))
    if interval != "Monthly":
        st.caption(f"{interval} values are approximated from the monthly counts.")

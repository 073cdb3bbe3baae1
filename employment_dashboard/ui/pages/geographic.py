from __future__ import annotations

import pandas as pd
import streamlit as st

from employment_dashboard.data.aggregations import location_summary
from employment_dashboard.ui.components.charts import location_bubbles, render_plotly
from employment_dashboard.ui.pages.context import PageContext

METRICS = {
    "Job Count": "job_count",
    "Average Salary": "avg_salary",
}


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Geographic Summary")
    summaries = location_summary(df)
    if not summaries:
        st.info("No jobs match the current filters.")
        return

    metric_label = st.radio("Metric", list(METRICS), horizontal=True, key="ed_geo_metric")
    metric = METRICS[metric_label]
    render_plotly(location_bubbles(summaries, metric=metric, title=f"{metric_label} by Location"))

    table = pd.DataFrame(
        [
            {
                "Location": s.location,
                "Jobs": s.job_count,
                "Share %": round(s.share, 1),
                "Average Salary": round(s.avg_salary),
            }
            for s in summaries
        ]
    )
    st.dataframe(table, hide_index=True, use_container_width=True)

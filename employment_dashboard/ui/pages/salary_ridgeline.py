from __future__ import annotations

import pandas as pd
import streamlit as st

from employment_dashboard.data.aggregations import ridgeline_data, top_titles_by_median
from employment_dashboard.ui.components.charts import render_plotly, ridgeline
from employment_dashboard.ui.pages.context import PageContext


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Salary Distribution by Job Title")
    if df.empty:
        st.info("No jobs match the current filters.")
        return

    data = ridgeline_data(df)
    top_n = context.settings.ridgeline_top_titles
    show_top = st.toggle(f"Top {top_n} titles by median salary", value=True, key="ed_ridgeline_top")
    titles = top_titles_by_median(data, top_n) if show_top else data.job_titles
    render_plotly(ridgeline(data, titles, bandwidth=context.settings.kde_bandwidth))
    st.caption(
        "Epanechnikov kernel density; titles with a single posting are drawn with a ±10% spread."
    )

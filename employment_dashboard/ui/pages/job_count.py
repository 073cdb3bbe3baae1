from __future__ import annotations

import pandas as pd
import streamlit as st

from employment_dashboard.data.aggregations import sort_by_total, stacked_bar_data
from employment_dashboard.ui.components.charts import render_plotly, stacked_bar
from employment_dashboard.ui.pages.context import PageContext


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Job Count by Industry and Employment Type")
    if df.empty:
        st.info("No jobs match the current filters.")
        return

    data = stacked_bar_data(df)
    render_plotly(stacked_bar(data))

    order = sort_by_total(data.data)
    table = pd.DataFrame.from_dict(data.data, orient="index").reindex(order)
    table["Total"] = table.sum(axis=1)
    st.dataframe(table, use_container_width=True)

from __future__ import annotations

import pandas as pd
import streamlit as st

from employment_dashboard.data.aggregations import scatter_data
from employment_dashboard.ui.components.charts import render_plotly, salary_scatter
from employment_dashboard.ui.pages.context import PageContext


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Salary vs Posting Date")
    if df.empty:
        st.info("No jobs match the current filters.")
        return

    render_plotly(salary_scatter(scatter_data(df)))
    st.caption("Dashed line: least-squares trend over posting date. Not a forecast.")

from __future__ import annotations

import pandas as pd
import streamlit as st

from employment_dashboard.data.aggregations import grouped_bar_data, industries_by_average, sort_by_total
from employment_dashboard.ui.components.charts import grouped_bar, render_plotly
from employment_dashboard.ui.pages.context import PageContext


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Average Salary by Location and Industry")
    if df.empty:
        st.info("No jobs match the current filters.")
        return

    data = grouped_bar_data(df)
    industry_order = industries_by_average(data)
    max_industries = st.slider(
        "Industries shown",
        min_value=1,
        max_value=len(industry_order),
        value=min(5, len(industry_order)),
        key="ed_grouped_bar_industries",
    ) if len(industry_order) > 1 else len(industry_order)
    render_plotly(grouped_bar(data, industry_order[:max_industries]))

    with st.expander("Locations by total average salary"):
        st.write(", ".join(sort_by_total(data.data)))

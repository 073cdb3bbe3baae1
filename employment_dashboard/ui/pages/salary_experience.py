from __future__ import annotations

import pandas as pd
import streamlit as st

from employment_dashboard.data.aggregations import box_plot_data
from employment_dashboard.ui.components.charts import render_plotly, salary_box_plot
from employment_dashboard.ui.components.formatting import format_salary
from employment_dashboard.ui.pages.context import PageContext


def _outlier_table(data) -> pd.DataFrame:
    rows = [
        {
            "Experience Level": level,
            "Job Title": o.job_title,
            "Company": o.company_name,
            "Salary": format_salary(o.value),
        }
        for level in data.experience_levels
        for o in data.salaries[level].outliers
    ]
    return pd.DataFrame(rows)


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Salary by Experience Level")
    if df.empty:
        st.info("No jobs match the current filters.")
        return

    data = box_plot_data(df)
    render_plotly(salary_box_plot(data))
    st.caption("Quartiles use the nearest-rank rule; points beyond 1.5×IQR are shown as outliers.")

    outliers = _outlier_table(data)
    if not outliers.empty:
        with st.expander(f"Outliers ({len(outliers)})"):
            st.dataframe(outliers, hide_index=True, use_container_width=True)

from __future__ import annotations

import pandas as pd
import streamlit as st

from employment_dashboard.data.filters import paginate, serialize_filters
from employment_dashboard.ui.components.formatting import format_date, format_salary
from employment_dashboard.ui.pages.context import PageContext

DESCRIPTION_PREVIEW_CHARS = 220


def _render_card(job) -> None:
    with st.container(border=True):
        st.markdown(f"**{job.job_title}** · {job.company_name}")
        st.caption(
            f"{job.location} · {job.industry} · {job.experience_level} · "
            f"{job.employment_type} · Posted {format_date(job.posted_date)}"
        )
        st.markdown(f"**{format_salary(job.salary)}**")
        description = str(job.job_description)
        if len(description) > DESCRIPTION_PREVIEW_CHARS:
            description = description[:DESCRIPTION_PREVIEW_CHARS].rstrip() + "…"
        st.write(description)


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Job Listings")
    if df.empty:
        st.info("No jobs match the current filters.")
        return

    # start over from page 1 whenever the filters change
    filter_key = serialize_filters(context.filters)
    if st.session_state.get("ed_jobs_filter_key") != filter_key:
        st.session_state["ed_jobs_filter_key"] = filter_key
        st.session_state["ed_jobs_pages"] = 1

    pages = st.session_state.get("ed_jobs_pages", 1)
    limit = context.settings.default_page_size
    result = paginate(df, 1, pages * limit)

    st.caption(f"Showing {len(result.jobs):,} of {result.total:,} jobs")
    for job in result.jobs.itertuples(index=False):
        _render_card(job)

    if result.has_more and st.button("Load more", key="ed_jobs_load_more"):
        st.session_state["ed_jobs_pages"] = pages + 1
        st.rerun()

import employment_dashboard.bootstrap_env  # must be first to set env/secrets
import streamlit as st

from employment_dashboard.config import TABS, get_settings
from employment_dashboard.data.filters import apply_filters, serialize_filters
from employment_dashboard.data.loader import get_cache, get_dataset
from employment_dashboard.data.stats import calculate_stats
from employment_dashboard.logging_config import configure_logging
from employment_dashboard.ui.components.formatting import format_number
from employment_dashboard.ui.components.kpi import render_kpi_cards, stats_cards
from employment_dashboard.ui.layout import setup_page, sidebar_filters_ui
from employment_dashboard.ui.pages import (
    geographic,
    job_count,
    job_listings,
    postings_timeline,
    salary_experience,
    salary_location_industry,
    salary_ridgeline,
    salary_scatter,
)
from employment_dashboard.ui.pages.context import PageContext


PAGE_RENDERERS = {
    "salary_experience": salary_experience.render,
    "salary_location_industry": salary_location_industry.render,
    "job_count": job_count.render,
    "salary_ridgeline": salary_ridgeline.render,
    "postings_timeline": postings_timeline.render,
    "salary_scatter": salary_scatter.render,
    "geographic": geographic.render,
    "job_listings": job_listings.render,
}


def _active_filter_summary(filters, total_rows: int) -> None:
    badges = []
    if filters.experience_levels:
        badges.append("Experience: " + ", ".join(filters.experience_levels))
    if filters.locations:
        badges.append("Locations: " + ", ".join(filters.locations[:5]) + ("…" if len(filters.locations) > 5 else ""))
    if filters.industries:
        badges.append("Industries: " + ", ".join(filters.industries))
    if filters.employment_types:
        badges.append("Employment: " + ", ".join(filters.employment_types))

    summary_text = "Active Filters: " + " | ".join(badges) if badges else "Active Filters: All data"
    st.markdown(f"**{summary_text}**")
    st.caption(f"Showing {format_number(total_rows, 0)} jobs after filters.")


def main() -> None:
    setup_page()
    configure_logging()
    settings = get_settings()
    st.title("Employment Data Dashboard")

    if st.sidebar.button("🔄 Refresh Data"):
        get_cache().reset()

    dataset = get_dataset()
    if dataset.jobs.empty:
        st.warning("Dataset is empty. Check that the employment CSV exists at the configured path.")
        return

    filters = sidebar_filters_ui(dataset.jobs)
    filtered_df = apply_filters(dataset.jobs, filters)
    st.session_state["ed_active_filters"] = serialize_filters(filters)

    _active_filter_summary(filters, len(filtered_df))
    render_kpi_cards(stats_cards(calculate_stats(filtered_df)))

    context = PageContext(dataset=dataset, filters=filters, settings=settings)

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(filtered_df, context)


if __name__ == "__main__":
    main()

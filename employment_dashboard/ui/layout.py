"""
Layout helpers for the Streamlit application (page setup, sidebar filters).
"""

from __future__ import annotations

from typing import List

import pandas as pd
import streamlit as st

from employment_dashboard.data.filters import JobFilters

FILTER_FIELDS = [
    # (label, state key, dataset column)
    ("Experience Level", "ed_experience_level", "experience_level"),
    ("Location", "ed_location", "location"),
    ("Industry", "ed_industry", "industry"),
    ("Employment Type", "ed_employment_type", "employment_type"),
]


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Employment Data Dashboard",
        layout="wide",
        page_icon=":bar_chart:",
    )


def _multiselect_with_counts(
    label: str,
    key: str,
    options: List[str],
    series: pd.Series,
) -> List[str]:
    if not options:
        return []
    counts = series.value_counts(dropna=False).to_dict()
    return st.sidebar.multiselect(
        label=label,
        options=options,
        default=options,
        key=key,
        format_func=lambda v: f"{v} ({int(counts.get(v, 0))})",
    )


def sidebar_filters_ui(df: pd.DataFrame) -> JobFilters:
    """
    Render the sidebar filter controls and return the selected values.

    Selecting every option of a field, or none, means no restriction on it.
    """
    st.sidebar.header("Filters")
    selections = {}
    for label, key, column in FILTER_FIELDS:
        options = sorted(df[column].dropna().unique().tolist()) if not df.empty else []
        selected = _multiselect_with_counts(label, key=key, options=options, series=df.get(column, pd.Series(dtype=str)))
        if selected and len(selected) == len(options):
            selected = []
        selections[column] = selected

    return JobFilters.from_lists(
        experience_levels=selections["experience_level"],
        locations=selections["location"],
        industries=selections["industry"],
        employment_types=selections["employment_type"],
    )

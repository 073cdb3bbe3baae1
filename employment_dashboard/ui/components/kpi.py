from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import streamlit as st

from employment_dashboard.data.stats import DashboardStats
from employment_dashboard.ui.components.formatting import format_number, format_percent, format_salary


@dataclass
class KpiCard:
    label: str
    value: Optional[float] = None
    value_display: Optional[str] = None
    salary: bool = False
    decimals: int = 0
    delta: Optional[float] = None
    delta_display: Optional[str] = None
    help_text: Optional[str] = None


def _format_value(card: KpiCard) -> str:
    if card.value_display is not None:
        return card.value_display
    if card.salary:
        return format_salary(card.value, decimals=card.decimals)
    return format_number(card.value, decimals=card.decimals)


def _format_delta(card: KpiCard) -> Optional[str]:
    if card.delta_display is not None:
        return card.delta_display
    if card.delta is None:
        return None
    return format_percent(card.delta)


def stats_cards(stats: DashboardStats) -> List[KpiCard]:
    return [
        KpiCard(
            label="Total Jobs",
            value=stats.total_jobs,
            delta=stats.jobs_growth_rate,
            help_text="Growth figure is a placeholder; no historical snapshots exist.",
        ),
        KpiCard(
            label="Average Salary",
            value=stats.avg_salary,
            salary=True,
            delta=stats.salary_growth_rate,
            help_text="Growth figure is a placeholder; no historical snapshots exist.",
        ),
        KpiCard(
            label="Top Location",
            value_display=stats.top_location.name,
            delta_display=f"{stats.top_location.percentage}% of jobs",
        ),
        KpiCard(
            label="Top Industry",
            value_display=stats.top_industry.name,
            delta_display=f"{stats.top_industry.percentage}% of jobs",
        ),
    ]


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 4) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        st.info("No KPIs available for the current filters.")
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                value = _format_value(card)
                delta = _format_delta(card)
                st.metric(label=card.label, value=value, delta=delta, delta_color="off" if card.delta_display else "normal")
                if card.help_text:
                    st.caption(card.help_text)

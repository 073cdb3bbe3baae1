"""
Summary statistics shown in the dashboard header and returned by the API.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import pandas as pd

# The dataset has no historical snapshots, so growth cannot be derived.
# These placeholders keep the response shape and are labelled as such in the UI.
PLACEHOLDER_JOBS_GROWTH_RATE = 12.0
PLACEHOLDER_SALARY_GROWTH_RATE = 5.2


@dataclass(frozen=True)
class TopShare:
    name: str
    percentage: int


@dataclass(frozen=True)
class DashboardStats:
    total_jobs: int
    avg_salary: float
    top_location: TopShare
    top_industry: TopShare
    jobs_growth_rate: float = PLACEHOLDER_JOBS_GROWTH_RATE
    salary_growth_rate: float = PLACEHOLDER_SALARY_GROWTH_RATE


def top_share(series: pd.Series) -> TopShare:
    """Most frequent value with its rounded share of the series (in percent)."""
    if series.empty:
        return TopShare(name="N/A", percentage=0)
    # groupby(sort=False) keeps first appearance; stable sort preserves it among ties
    counts = series.groupby(series, sort=False).size().sort_values(ascending=False, kind="stable")
    name = counts.index[0]
    # half-up rounding
    percentage = int(math.floor(counts.iloc[0] / len(series) * 100 + 0.5))
    return TopShare(name=str(name), percentage=percentage)


def calculate_stats(df: pd.DataFrame) -> DashboardStats:
    total_jobs = int(len(df))
    avg_salary = float(df["salary"].mean()) if total_jobs else 0.0
    return DashboardStats(
        total_jobs=total_jobs,
        avg_salary=avg_salary,
        top_location=top_share(df["location"]),
        top_industry=top_share(df["industry"]),
    )

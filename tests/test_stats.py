"""
Tests for dashboard summary statistics
"""

import pytest

from employment_dashboard.data.filters import JobFilters, apply_filters
from employment_dashboard.data.stats import (
    PLACEHOLDER_JOBS_GROWTH_RATE,
    PLACEHOLDER_SALARY_GROWTH_RATE,
    calculate_stats,
    top_share,
)

from .conftest import jobs_frame, make_job


def test_stats_over_filtered_set(hundred_jobs):
    filtered = apply_filters(hundred_jobs, JobFilters(industries=("Technology",)))
    stats = calculate_stats(filtered)
    assert stats.total_jobs == 30
    assert stats.avg_salary == pytest.approx(filtered["salary"].mean())
    assert stats.top_industry.name == "Technology"
    assert stats.top_industry.percentage == 100


def test_top_location_share():
    df = jobs_frame([
        make_job(0, location="London"),
        make_job(1, location="Berlin"),
        make_job(2, location="London"),
    ])
    stats = calculate_stats(df)
    assert stats.top_location.name == "London"
    # 2/3 = 66.67% -> 67
    assert stats.top_location.percentage == 67


def test_tie_goes_to_first_seen():
    df = jobs_frame([
        make_job(0, location="Berlin"),
        make_job(1, location="London"),
        make_job(2, location="London"),
        make_job(3, location="Berlin"),
    ])
    share = top_share(df["location"])
    assert share.name == "Berlin"
    assert share.percentage == 50


def test_half_percent_rounds_up():
    # 1/8 = 12.5% -> 13
    df = jobs_frame([make_job(i, industry=f"Industry {i}") for i in range(8)])
    assert top_share(df["industry"]).percentage == 13


def test_empty_set_gives_zero_and_na():
    stats = calculate_stats(jobs_frame([]))
    assert stats.total_jobs == 0
    assert stats.avg_salary == 0
    assert stats.top_location.name == "N/A"
    assert stats.top_location.percentage == 0
    assert stats.top_industry.name == "N/A"


def test_growth_rates_are_placeholders(hundred_jobs):
    stats = calculate_stats(hundred_jobs)
    assert stats.jobs_growth_rate == PLACEHOLDER_JOBS_GROWTH_RATE == 12.0
    assert stats.salary_growth_rate == PLACEHOLDER_SALARY_GROWTH_RATE == 5.2

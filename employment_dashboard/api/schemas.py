"""
Response models for the employment data API.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from typing import Dict, List

import pandas as pd
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from employment_dashboard.data import aggregations as agg
from employment_dashboard.data.stats import DashboardStats


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _iso_date(value) -> str:
    return pd.Timestamp(value).strftime("%Y-%m-%d")


class JobListingOut(CamelModel):
    """Single job listing"""
    id: str
    job_title: str
    company_name: str
    location: str
    industry: str
    experience_level: str
    employment_type: str
    salary: int
    posted_date: str
    job_description: str

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> List["JobListingOut"]:
        return [
            cls(
                id=str(row.job_id),
                job_title=row.job_title,
                company_name=row.company_name,
                location=row.location,
                industry=row.industry,
                experience_level=row.experience_level,
                employment_type=row.employment_type,
                salary=int(row.salary),
                posted_date=_iso_date(row.posted_date),
                job_description=row.job_description,
            )
            for row in df.itertuples(index=False)
        ]


class TopShareOut(CamelModel):
    name: str
    percentage: int


class DashboardStatsOut(CamelModel):
    """Summary statistics over the filtered jobs"""
    total_jobs: int
    avg_salary: float
    top_location: TopShareOut
    top_industry: TopShareOut
    jobs_growth_rate: float
    salary_growth_rate: float

    @classmethod
    def from_stats(cls, stats: DashboardStats) -> "DashboardStatsOut":
        return cls(
            total_jobs=stats.total_jobs,
            avg_salary=stats.avg_salary,
            top_location=TopShareOut(name=stats.top_location.name, percentage=stats.top_location.percentage),
            top_industry=TopShareOut(name=stats.top_industry.name, percentage=stats.top_industry.percentage),
            jobs_growth_rate=stats.jobs_growth_rate,
            salary_growth_rate=stats.salary_growth_rate,
        )


class EmploymentDataResponse(CamelModel):
    """One page of filtered jobs with the dashboard stats"""
    jobs: List[JobListingOut]
    has_more: bool
    locations: List[str]
    stats: DashboardStatsOut


class ErrorResponse(BaseModel):
    message: str
    error: str


class HealthResponse(CamelModel):
    status: str
    jobs_loaded: int


# ---------------------------------------------------------------------------
# Visualization payloads
# ---------------------------------------------------------------------------


class OutlierOut(CamelModel):
    id: str
    value: float
    job_title: str
    company_name: str


class BoxStatsOut(CamelModel):
    min: float | None
    q1: float | None
    median: float | None
    q3: float | None
    max: float | None
    outliers: List[OutlierOut]


class BoxPlotOut(CamelModel):
    experience_levels: List[str]
    salaries: Dict[str, BoxStatsOut]


class GroupedBarOut(CamelModel):
    locations: List[str]
    industries: List[str]
    data: Dict[str, Dict[str, float]]


class StackedBarOut(CamelModel):
    industries: List[str]
    employment_types: List[str]
    data: Dict[str, Dict[str, int]]


class SalaryRangeOut(CamelModel):
    values: List[int]
    min: int
    max: int


class RidgelineOut(CamelModel):
    job_titles: List[str]
    salary_ranges: Dict[str, SalaryRangeOut]


class TimeLineOut(CamelModel):
    experience_levels: List[str]
    time_points: List[str]
    data: Dict[str, Dict[str, float]]
    interval: str


class ScatterPointOut(CamelModel):
    id: str
    date: str
    salary: int
    job_title: str
    company_name: str
    industry: str


class TrendPointOut(CamelModel):
    date: str
    salary: float


class ScatterPlotOut(CamelModel):
    points: List[ScatterPointOut]
    trend_line: List[TrendPointOut]


class LocationSummaryOut(CamelModel):
    location: str
    job_count: int
    avg_salary: float
    share: float


class VisualizationResponse(CamelModel):
    box_plot: BoxPlotOut
    grouped_bar: GroupedBarOut
    stacked_bar: StackedBarOut
    ridgeline: RidgelineOut
    time_line: TimeLineOut
    scatter_plot: ScatterPlotOut
    locations: List[LocationSummaryOut]

    @classmethod
    def from_data(cls, data: agg.VisualizationData) -> "VisualizationResponse":
        box = data.box_plot
        return cls(
            box_plot=BoxPlotOut(
                experience_levels=box.experience_levels,
                salaries={
                    level: BoxStatsOut(
                        min=stats.summary.min,
                        q1=stats.summary.q1,
                        median=stats.summary.median,
                        q3=stats.summary.q3,
                        max=stats.summary.max,
                        outliers=[
                            OutlierOut(
                                id=o.id,
                                value=o.value,
                                job_title=o.job_title,
                                company_name=o.company_name,
                            )
                            for o in stats.outliers
                        ],
                    )
                    for level, stats in box.salaries.items()
                },
            ),
            grouped_bar=GroupedBarOut(
                locations=data.grouped_bar.locations,
                industries=data.grouped_bar.industries,
                data=data.grouped_bar.data,
            ),
            stacked_bar=StackedBarOut(
                industries=data.stacked_bar.industries,
                employment_types=data.stacked_bar.employment_types,
                data=data.stacked_bar.data,
            ),
            ridgeline=RidgelineOut(
                job_titles=data.ridgeline.job_titles,
                salary_ranges={
                    title: SalaryRangeOut(values=r.values, min=r.min, max=r.max)
                    for title, r in data.ridgeline.salary_ranges.items()
                },
            ),
            time_line=TimeLineOut(
                experience_levels=data.time_line.experience_levels,
                time_points=data.time_line.time_points,
                data=data.time_line.data,
                interval=data.time_line.interval,
            ),
            scatter_plot=ScatterPlotOut(
                points=[
                    ScatterPointOut(
                        id=p.id,
                        date=_iso_date(p.date),
                        salary=p.salary,
                        job_title=p.job_title,
                        company_name=p.company_name,
                        industry=p.industry,
                    )
                    for p in data.scatter_plot.points
                ],
                trend_line=[
                    TrendPointOut(date=_iso_date(t.date), salary=t.salary)
                    for t in data.scatter_plot.trend_line
                ],
            ),
            locations=[
                LocationSummaryOut(
                    location=s.location,
                    job_count=s.job_count,
                    avg_salary=s.avg_salary,
                    share=s.share,
                )
                for s in data.locations
            ],
        )

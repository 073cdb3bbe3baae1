"""
Per-chart aggregations over a (filtered) job listings frame.

Every function here is pure: it takes the frame, returns a fresh structure and
never mutates its input. Aggregates are rebuilt on every call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

TIME_INTERVALS = ("Monthly", "Weekly", "Quarterly")


# ---------------------------------------------------------------------------
# Quartiles & outliers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FiveNumberSummary:
    min: Optional[float]
    q1: Optional[float]
    median: Optional[float]
    q3: Optional[float]
    max: Optional[float]

    @property
    def iqr(self) -> Optional[float]:
        if self.q1 is None or self.q3 is None:
            return None
        return self.q3 - self.q1


@dataclass(frozen=True)
class Outlier:
    id: str
    value: float
    job_title: str
    company_name: str


@dataclass(frozen=True)
class OutlierResult:
    outliers: List[Outlier]
    clean_values: List[float]


@dataclass(frozen=True)
class BoxStats:
    summary: FiveNumberSummary
    outliers: List[Outlier]


@dataclass(frozen=True)
class BoxPlotData:
    experience_levels: List[str]
    salaries: Dict[str, BoxStats]


def compute_quartiles(values: Sequence[float]) -> FiveNumberSummary:
    """Nearest-rank five-number summary.

    Q1, median and Q3 are the sorted values at indices floor(0.25n),
    floor(0.5n) and floor(0.75n). No interpolation.
    """
    ordered = sorted(values)
    n = len(ordered)
    if n == 0:
        return FiveNumberSummary(None, None, None, None, None)
    return FiveNumberSummary(
        min=ordered[0],
        q1=ordered[int(n * 0.25)],
        median=ordered[int(n * 0.5)],
        q3=ordered[int(n * 0.75)],
        max=ordered[-1],
    )


def identify_outliers(values: Sequence[float], jobs: pd.DataFrame) -> OutlierResult:
    """Flag values outside the 1.5*IQR fences of the sample's own quartiles.

    `jobs` is row-parallel to `values` and is used to attribute each outlier.
    """
    if len(values) != len(jobs):
        raise ValueError("values and jobs must have the same length")
    summary = compute_quartiles(values)
    if summary.iqr is None:
        return OutlierResult(outliers=[], clean_values=[])

    lower = summary.q1 - 1.5 * summary.iqr
    upper = summary.q3 + 1.5 * summary.iqr

    outliers: List[Outlier] = []
    clean: List[float] = []
    for value, (_, job) in zip(values, jobs.iterrows()):
        if value < lower or value > upper:
            outliers.append(
                Outlier(
                    id=str(job["job_id"]),
                    value=value,
                    job_title=str(job["job_title"]),
                    company_name=str(job["company_name"]),
                )
            )
        else:
            clean.append(value)
    return OutlierResult(outliers=outliers, clean_values=clean)


def box_plot_data(df: pd.DataFrame) -> BoxPlotData:
    """Salary box statistics per experience level, quartiles over non-outliers."""
    levels = df["experience_level"].drop_duplicates().tolist()
    salaries: Dict[str, BoxStats] = {}
    for level, level_jobs in df.groupby("experience_level", sort=False):
        values = level_jobs["salary"].tolist()
        result = identify_outliers(values, level_jobs)
        salaries[level] = BoxStats(
            summary=compute_quartiles(result.clean_values),
            outliers=result.outliers,
        )
    return BoxPlotData(experience_levels=levels, salaries=salaries)


# ---------------------------------------------------------------------------
# Grouped & stacked matrices
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GroupedBarData:
    locations: List[str]
    industries: List[str]
    data: Dict[str, Dict[str, float]]


@dataclass(frozen=True)
class StackedBarData:
    industries: List[str]
    employment_types: List[str]
    data: Dict[str, Dict[str, int]]


def _cross_tab(df: pd.DataFrame, row: str, col: str, aggfunc: str) -> Dict[str, Dict[str, float]]:
    rows = df[row].drop_duplicates().tolist()
    cols = df[col].drop_duplicates().tolist()
    if not rows:
        return {}
    grouped = df.groupby([row, col], sort=False)["salary"].agg(aggfunc)
    matrix = grouped.unstack(fill_value=0).reindex(index=rows, columns=cols, fill_value=0)
    return {r: {c: matrix.at[r, c] for c in cols} for r in rows}


def grouped_bar_data(df: pd.DataFrame) -> GroupedBarData:
    """Average salary for every observed location x industry pair (0 when absent)."""
    raw = _cross_tab(df, "location", "industry", "mean")
    data = {loc: {ind: float(v) for ind, v in row.items()} for loc, row in raw.items()}
    return GroupedBarData(
        locations=list(data),
        industries=df["industry"].drop_duplicates().tolist(),
        data=data,
    )


def stacked_bar_data(df: pd.DataFrame) -> StackedBarData:
    """Job count for every observed industry x employment type pair (0 when absent)."""
    raw = _cross_tab(df, "industry", "employment_type", "size")
    data = {ind: {emp: int(v) for emp, v in row.items()} for ind, row in raw.items()}
    return StackedBarData(
        industries=list(data),
        employment_types=df["employment_type"].drop_duplicates().tolist(),
        data=data,
    )


def sort_by_total(matrix: Mapping[str, Mapping[str, float]]) -> List[str]:
    """Row keys ordered by row total, largest first (ties by key)."""
    totals = {key: sum(row.values()) for key, row in matrix.items()}
    return sorted(totals, key=lambda key: (-totals[key], key))


def industries_by_average(grouped: GroupedBarData) -> List[str]:
    """Industries ordered by mean salary across the locations that have them."""
    averages: Dict[str, float] = {}
    for industry in grouped.industries:
        cells = [row.get(industry, 0.0) for row in grouped.data.values()]
        present = [v for v in cells if v > 0]
        averages[industry] = float(np.mean(present)) if present else 0.0
    return sorted(averages, key=lambda key: (-averages[key], key))


# ---------------------------------------------------------------------------
# Ridgeline
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SalaryRange:
    values: List[int]
    min: int
    max: int


@dataclass(frozen=True)
class RidgelineData:
    job_titles: List[str]
    salary_ranges: Dict[str, SalaryRange]


def ridgeline_data(df: pd.DataFrame) -> RidgelineData:
    ranges: Dict[str, SalaryRange] = {}
    for title, title_jobs in df.groupby("job_title", sort=False):
        values = [int(v) for v in title_jobs["salary"]]
        ranges[title] = SalaryRange(values=values, min=min(values), max=max(values))
    return RidgelineData(job_titles=list(ranges), salary_ranges=ranges)


def top_titles_by_median(data: RidgelineData, n: Optional[int] = None) -> List[str]:
    medians = {title: float(np.median(r.values)) for title, r in data.salary_ranges.items()}
    ordered = sorted(medians, key=lambda title: -medians[title])
    return ordered if n is None else ordered[:n]


# ---------------------------------------------------------------------------
# Time buckets
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TimeLineData:
    experience_levels: List[str]
    time_points: List[str]
    data: Dict[str, Dict[str, float]]
    interval: str = "Monthly"


def timeline_data(df: pd.DataFrame) -> TimeLineData:
    """Postings per experience level per calendar month (YYYY-MM)."""
    levels = df["experience_level"].drop_duplicates().tolist()
    dated = df[df["posted_date"].notna()]
    months = dated["posted_date"].dt.strftime("%Y-%m")
    time_points = sorted(months.unique().tolist())

    counts = dated.groupby([dated["experience_level"], months]).size()
    data: Dict[str, Dict[str, float]] = {}
    for level in levels:
        data[level] = {month: int(counts.get((level, month), 0)) for month in time_points}
    return TimeLineData(experience_levels=levels, time_points=time_points, data=data)


def _mondays_in_month(month: str) -> List[pd.Timestamp]:
    start = pd.Period(month, freq="M").start_time
    days = pd.date_range(start, start + pd.offsets.MonthEnd(0), freq="D")
    return [d for d in days if d.weekday() == 0]


def _week_key(day: pd.Timestamp) -> str:
    iso = day.isocalendar()
    return f"{iso[0]}-W{iso[1]:02d}"


def rebucket_timeline(data: TimeLineData, interval: str) -> TimeLineData:
    """Re-aggregate monthly cells into weekly or quarterly buckets.

    Quarterly buckets hold the mean of their monthly counts; weekly buckets
    spread each month's count evenly over the weeks starting in that month.
    Both are approximations computed from the monthly cells only.
    """
    if interval not in TIME_INTERVALS:
        raise ValueError(f"Unknown interval {interval!r}; expected one of {TIME_INTERVALS}")
    if interval == "Monthly" or not data.time_points:
        return TimeLineData(data.experience_levels, list(data.time_points), data.data, interval)

    if interval == "Quarterly":
        bucket_months: Dict[str, List[str]] = {}
        for month in data.time_points:
            quarter = str(pd.Period(month, freq="Q"))
            key = f"{quarter[:4]}-{quarter[4:]}"
            bucket_months.setdefault(key, []).append(month)
        rebucketed = {
            level: {
                key: float(np.mean([data.data[level].get(m, 0) for m in months]))
                for key, months in bucket_months.items()
            }
            for level in data.experience_levels
        }
        return TimeLineData(data.experience_levels, list(bucket_months), rebucketed, interval)

    week_sources: Dict[str, List[tuple]] = {}
    for month in data.time_points:
        mondays = _mondays_in_month(month)
        for monday in mondays:
            week_sources.setdefault(_week_key(monday), []).append((month, len(mondays)))
    rebucketed = {
        level: {
            week: float(np.mean([data.data[level].get(m, 0) / span for m, span in sources]))
            for week, sources in week_sources.items()
        }
        for level in data.experience_levels
    }
    return TimeLineData(data.experience_levels, sorted(week_sources), rebucketed, interval)


# ---------------------------------------------------------------------------
# Scatter & trend line
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScatterPoint:
    id: str
    date: pd.Timestamp
    salary: int
    job_title: str
    company_name: str
    industry: str


@dataclass(frozen=True)
class TrendPoint:
    date: pd.Timestamp
    salary: float


@dataclass(frozen=True)
class ScatterPlotData:
    points: List[ScatterPoint]
    trend_line: List[TrendPoint]


def _epoch_ms(dates: Sequence[pd.Timestamp]) -> np.ndarray:
    return np.array([pd.Timestamp(d).value // 1_000_000 for d in dates], dtype="float64")


def trend_line(dates: Sequence[pd.Timestamp], salaries: Sequence[float]) -> List[TrendPoint]:
    """Least-squares line over (epoch ms, salary), evaluated at the date extremes."""
    if len(dates) != len(salaries):
        raise ValueError("dates and salaries must have the same length")
    if len(dates) == 0:
        return []
    x = _epoch_ms(dates)
    y = np.asarray(salaries, dtype="float64")
    x_mean, y_mean = x.mean(), y.mean()
    denom = float(((x - x_mean) ** 2).sum())
    # centred form of the textbook slope; same line, no cancellation on epoch-ms magnitudes
    slope = float(((x - x_mean) * (y - y_mean)).sum()) / denom if denom else 0.0
    intercept = y_mean - slope * x_mean

    lo, hi = int(np.argmin(x)), int(np.argmax(x))
    return [
        TrendPoint(date=pd.Timestamp(dates[lo]), salary=float(slope * x[lo] + intercept)),
        TrendPoint(date=pd.Timestamp(dates[hi]), salary=float(slope * x[hi] + intercept)),
    ]


def scatter_data(df: pd.DataFrame) -> ScatterPlotData:
    points = [
        ScatterPoint(
            id=str(row.job_id),
            date=row.posted_date,
            salary=int(row.salary),
            job_title=row.job_title,
            company_name=row.company_name,
            industry=row.industry,
        )
        for row in df.itertuples(index=False)
        if pd.notna(row.posted_date)
    ]
    line = trend_line([p.date for p in points], [p.salary for p in points])
    return ScatterPlotData(points=points, trend_line=line)


# ---------------------------------------------------------------------------
# Geographic summary
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LocationSummary:
    location: str
    job_count: int
    avg_salary: float
    share: float


def location_summary(df: pd.DataFrame) -> List[LocationSummary]:
    """Job count, average salary and share of jobs per location, busiest first."""
    if df.empty:
        return []
    grouped = df.groupby("location", sort=False)["salary"].agg(["size", "mean"])
    grouped = grouped.sort_values("size", ascending=False, kind="stable")
    total = len(df)
    return [
        LocationSummary(
            location=str(location),
            job_count=int(row["size"]),
            avg_salary=float(row["mean"]),
            share=float(row["size"]) / total * 100,
        )
        for location, row in grouped.iterrows()
    ]


@dataclass(frozen=True)
class VisualizationData:
    box_plot: BoxPlotData
    grouped_bar: GroupedBarData
    stacked_bar: StackedBarData
    ridgeline: RidgelineData
    time_line: TimeLineData
    scatter_plot: ScatterPlotData
    locations: List[LocationSummary] = field(default_factory=list)


def build_visualizations(df: pd.DataFrame, interval: str = "Monthly") -> VisualizationData:
    return VisualizationData(
        box_plot=box_plot_data(df),
        grouped_bar=grouped_bar_data(df),
        stacked_bar=stacked_bar_data(df),
        ridgeline=ridgeline_data(df),
        time_line=rebucket_timeline(timeline_data(df), interval),
        scatter_plot=scatter_data(df),
        locations=location_summary(df),
    )

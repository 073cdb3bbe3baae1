"""
Plotly chart factory functions with consistent styling for the dashboard.

Each factory takes one of the aggregates from `employment_dashboard.data.aggregations`
and returns a figure; styling variants are parameters, not separate factories.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import plotly.graph_objects as go
import streamlit as st

from employment_dashboard.data.aggregations import (
    BoxPlotData,
    GroupedBarData,
    LocationSummary,
    RidgelineData,
    ScatterPlotData,
    StackedBarData,
    TimeLineData,
    sort_by_total,
)
from employment_dashboard.data.density import density_curve


DEFAULT_TEMPLATE = "plotly_white"
DEFAULT_COLOR_SEQUENCE = [
    "#3B82F6",  # entry level / primary series
    "#06B6D4",
    "#10B981",
    "#8B5CF6",
    "#F59E0B",
    "#EF4444",  # outliers and warnings
]
OUTLIER_COLOR = "#EF4444"
RIDGE_OVERLAP = 0.7


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    yaxis_tickformat: Optional[str] = None,
    legend_title: Optional[str] = None,
    hovermode: str = "x unified",
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        colorway=DEFAULT_COLOR_SEQUENCE,
        title=title,
        legend_title=legend_title,
        hovermode=hovermode,
        margin=dict(l=40, r=20, t=60, b=40),
    )
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    if yaxis_tickformat:
        fig.update_yaxes(tickformat=yaxis_tickformat)
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, zeroline=True)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def salary_box_plot(data: BoxPlotData, title: Optional[str] = "Salary Distribution by Experience Level") -> go.Figure:
    """Box per experience level drawn from precomputed quartiles, outliers as markers."""
    fig = go.Figure()
    levels = [lvl for lvl in data.experience_levels if data.salaries[lvl].summary.median is not None]
    fig.add_trace(
        go.Box(
            name="Salary",
            x=levels,
            q1=[data.salaries[lvl].summary.q1 for lvl in levels],
            median=[data.salaries[lvl].summary.median for lvl in levels],
            q3=[data.salaries[lvl].summary.q3 for lvl in levels],
            lowerfence=[data.salaries[lvl].summary.min for lvl in levels],
            upperfence=[data.salaries[lvl].summary.max for lvl in levels],
            boxpoints=False,
            marker_color=DEFAULT_COLOR_SEQUENCE[0],
        )
    )
    outlier_x, outlier_y, outlier_text = [], [], []
    for lvl in levels:
        for outlier in data.salaries[lvl].outliers:
            outlier_x.append(lvl)
            outlier_y.append(outlier.value)
            outlier_text.append(f"{outlier.job_title} at {outlier.company_name}")
    if outlier_x:
        fig.add_trace(
            go.Scatter(
                name="Outliers",
                x=outlier_x,
                y=outlier_y,
                text=outlier_text,
                mode="markers",
                marker=dict(color=OUTLIER_COLOR, size=8, symbol="circle-open"),
                hovertemplate="%{text}<br>$%{y:,.0f}<extra></extra>",
            )
        )
    return _configure_layout(fig, title, yaxis_title="Salary (USD)", yaxis_tickformat="$,.0f", hovermode="closest")


def grouped_bar(
    data: GroupedBarData,
    industry_order: Sequence[str],
    title: Optional[str] = "Average Salary by Location and Industry",
) -> go.Figure:
    fig = go.Figure()
    for industry in industry_order:
        fig.add_trace(
            go.Bar(
                name=industry,
                x=data.locations,
                y=[data.data[loc].get(industry, 0.0) for loc in data.locations],
            )
        )
    fig.update_layout(barmode="group")
    return _configure_layout(fig, title, yaxis_title="Average Salary (USD)", yaxis_tickformat="$,.0f", legend_title="Industry")


def stacked_bar(data: StackedBarData, title: Optional[str] = "Job Count by Industry and Employment Type") -> go.Figure:
    """Industries ordered by total job count, largest first."""
    order = sort_by_total(data.data)
    fig = go.Figure()
    for emp_type in data.employment_types:
        fig.add_trace(
            go.Bar(
                name=emp_type,
                x=order,
                y=[data.data[ind].get(emp_type, 0) for ind in order],
            )
        )
    fig.update_layout(barmode="stack")
    return _configure_layout(fig, title, yaxis_title="Job Count", legend_title="Employment Type")


def ridgeline(
    data: RidgelineData,
    titles: Sequence[str],
    bandwidth: float,
    title: Optional[str] = "Salary Distribution by Job Title",
) -> go.Figure:
    """One filled KDE curve per job title, stacked vertically with overlap."""
    fig = go.Figure()
    if not titles:
        return _configure_layout(fig, title)

    global_min = min(data.salary_ranges[t].min for t in titles)
    global_max = max(data.salary_ranges[t].max for t in titles)
    padding = (global_max - global_min) * 0.05 or global_max * 0.1 or 1.0
    grid_min, grid_max = global_min - padding, global_max + padding

    # top of the list is drawn highest
    for offset, job_title in enumerate(reversed(list(titles))):
        curve = density_curve(data.salary_ranges[job_title].values, grid_min, grid_max, bandwidth)
        xs = [x for x, _ in curve]
        ys = [offset + d * RIDGE_OVERLAP for _, d in curve]
        fig.add_trace(go.Scatter(x=xs, y=[offset] * len(xs), mode="lines", line=dict(width=0), showlegend=False, hoverinfo="skip"))
        fig.add_trace(
            go.Scatter(
                name=job_title,
                x=xs,
                y=ys,
                mode="lines",
                fill="tonexty",
                line=dict(width=1.5),
                hovertemplate=f"{job_title}<br>$%{{x:,.0f}}<extra></extra>",
            )
        )
    fig.update_yaxes(
        tickvals=list(range(len(titles))),
        ticktext=list(reversed(list(titles))),
    )
    fig.update_xaxes(tickformat="$,.0f")
    fig.update_layout(showlegend=False, height=max(400, 60 * len(titles)))
    return _configure_layout(fig, title, hovermode="closest")


def timeline_chart(data: TimeLineData, visible_levels: Optional[Sequence[str]] = None, title: Optional[str] = None) -> go.Figure:
    levels = list(visible_levels) if visible_levels is not None else data.experience_levels
    fig = go.Figure()
    for level in levels:
        if level not in data.data:
            continue
        fig.add_trace(
            go.Scatter(
                name=level,
                x=data.time_points,
                y=[data.data[level].get(tp, 0) for tp in data.time_points],
                mode="lines+markers",
            )
        )
    fig.update_xaxes(rangeslider=dict(visible=True))
    return _configure_layout(
        fig,
        title or f"Job Postings Over Time ({data.interval})",
        yaxis_title="Postings",
        legend_title="Experience Level",
    )


def salary_scatter(data: ScatterPlotData, title: Optional[str] = "Salary vs Posting Date") -> go.Figure:
    fig = go.Figure()
    industries: List[str] = list(dict.fromkeys(p.industry for p in data.points))
    for industry in industries:
        pts = [p for p in data.points if p.industry == industry]
        fig.add_trace(
            go.Scatter(
                name=industry,
                x=[p.date for p in pts],
                y=[p.salary for p in pts],
                text=[f"{p.job_title} at {p.company_name}" for p in pts],
                mode="markers",
                marker=dict(opacity=0.7, size=7),
                hovertemplate="%{text}<br>%{x|%b %d, %Y}<br>$%{y:,.0f}<extra></extra>",
            )
        )
    if data.trend_line:
        fig.add_trace(
            go.Scatter(
                name="Trend",
                x=[t.date for t in data.trend_line],
                y=[t.salary for t in data.trend_line],
                mode="lines",
                line=dict(color="#111827", dash="dash", width=2),
            )
        )
    return _configure_layout(fig, title, yaxis_title="Salary (USD)", yaxis_tickformat="$,.0f", legend_title="Industry", hovermode="closest")


def location_bubbles(
    summaries: Sequence[LocationSummary],
    metric: str = "job_count",
    title: Optional[str] = "Jobs by Location",
) -> go.Figure:
    """Bubble per location sized by job count, coloured by the chosen metric."""
    fig = go.Figure()
    if summaries:
        max_count = max(s.job_count for s in summaries)
        fig.add_trace(
            go.Scatter(
                x=[s.location for s in summaries],
                y=[getattr(s, metric) for s in summaries],
                text=[f"{s.job_count} jobs ({s.share:.1f}%), avg ${s.avg_salary:,.0f}" for s in summaries],
                mode="markers",
                marker=dict(
                    size=[s.job_count for s in summaries],
                    sizemode="area",
                    sizeref=2.0 * max_count / (60 ** 2),
                    sizemin=6,
                    color=[getattr(s, metric) for s in summaries],
                    colorscale="Blues",
                    showscale=True,
                ),
                hovertemplate="%{x}<br>%{text}<extra></extra>",
            )
        )
    yaxis_title = "Average Salary (USD)" if metric == "avg_salary" else "Job Count"
    return _configure_layout(fig, title, yaxis_title=yaxis_title, hovermode="closest")

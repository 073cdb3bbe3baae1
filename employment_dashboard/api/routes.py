"""
Employment data endpoints
Filter, paginate and aggregate the cached job listings
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from loguru import logger

from employment_dashboard.api.schemas import (
    DashboardStatsOut,
    EmploymentDataResponse,
    ErrorResponse,
    HealthResponse,
    JobListingOut,
    VisualizationResponse,
)
from employment_dashboard.config import Settings, get_settings
from employment_dashboard.data.aggregations import TIME_INTERVALS, build_visualizations
from employment_dashboard.data.filters import JobFilters, apply_filters, paginate, serialize_filters
from employment_dashboard.data.loader import Dataset, get_dataset
from employment_dashboard.data.stats import calculate_stats


router = APIRouter()


def job_filters(
    experienceLevels: List[str] = Query(default=[]),
    locations: List[str] = Query(default=[]),
    industries: List[str] = Query(default=[]),
    employmentTypes: List[str] = Query(default=[]),
) -> JobFilters:
    """Array filters arrive as repeated query parameters"""
    return JobFilters.from_lists(
        experience_levels=experienceLevels,
        locations=locations,
        industries=industries,
        employment_types=employmentTypes,
    )


def _error_response(message: str, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(message=message, error=str(exc)).model_dump(),
    )


@router.get(
    "/employment-data",
    response_model=EmploymentDataResponse,
    responses={500: {"model": ErrorResponse}},
)
def get_employment_data(
    page: int = Query(default=1, ge=1),
    limit: Optional[int] = Query(default=None, ge=1),
    filters: JobFilters = Depends(job_filters),
    dataset: Dataset = Depends(get_dataset),
    settings: Settings = Depends(get_settings),
):
    """Get one page of jobs matching the filters plus stats over all matches"""
    page_size = limit or settings.default_page_size
    if page_size > settings.max_page_size:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"limit must be <= {settings.max_page_size}",
        )
    try:
        filtered = apply_filters(dataset.jobs, filters)
        result = paginate(filtered, page, page_size)
        logger.debug(
            "employment-data filters={} page={} limit={} matched={}",
            serialize_filters(filters), page, page_size, result.total,
        )
        return EmploymentDataResponse(
            jobs=JobListingOut.from_frame(result.jobs),
            has_more=result.has_more,
            locations=list(dataset.locations),
            stats=DashboardStatsOut.from_stats(calculate_stats(filtered)),
        )
    except Exception as e:
        logger.exception(f"Error fetching employment data: {e}")
        return _error_response("Failed to fetch employment data", e)


@router.get(
    "/visualizations",
    response_model=VisualizationResponse,
    responses={500: {"model": ErrorResponse}},
)
def get_visualizations(
    interval: str = Query(default="Monthly", pattern="^(" + "|".join(TIME_INTERVALS) + ")$"),
    filters: JobFilters = Depends(job_filters),
    dataset: Dataset = Depends(get_dataset),
):
    """Get every chart aggregate computed over the jobs matching the filters"""
    try:
        filtered = apply_filters(dataset.jobs, filters)
        return VisualizationResponse.from_data(build_visualizations(filtered, interval))
    except Exception as e:
        logger.exception(f"Error building visualization data: {e}")
        return _error_response("Failed to build visualization data", e)


@router.get("/health", response_model=HealthResponse)
def health(dataset: Dataset = Depends(get_dataset)):
    return HealthResponse(status="ok", jobs_loaded=len(dataset))

"""
Filter utilities that apply the dashboard/API inclusion filters to the job
listings dataset, plus offset pagination over the filtered rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

import pandas as pd


@dataclass(frozen=True)
class JobFilters:
    experience_levels: Tuple[str, ...] = ()
    locations: Tuple[str, ...] = ()
    industries: Tuple[str, ...] = ()
    employment_types: Tuple[str, ...] = ()

    @classmethod
    def from_lists(
        cls,
        experience_levels: Optional[Iterable[str]] = None,
        locations: Optional[Iterable[str]] = None,
        industries: Optional[Iterable[str]] = None,
        employment_types: Optional[Iterable[str]] = None,
    ) -> "JobFilters":
        def _clean(values: Optional[Iterable[str]]) -> Tuple[str, ...]:
            if not values:
                return ()
            return tuple(v for v in values if v is not None and str(v) != "")

        return cls(
            experience_levels=_clean(experience_levels),
            locations=_clean(locations),
            industries=_clean(industries),
            employment_types=_clean(employment_types),
        )

    @property
    def is_empty(self) -> bool:
        return not (self.experience_levels or self.locations or self.industries or self.employment_types)


DEFAULT_FILTERS = JobFilters()

# filter attribute -> dataset column
FILTER_COLUMNS: Dict[str, str] = {
    "experience_levels": "experience_level",
    "locations": "location",
    "industries": "industry",
    "employment_types": "employment_type",
}


def apply_filters(df: pd.DataFrame, filters: JobFilters) -> pd.DataFrame:
    """
    Keep the rows whose value is in every non-empty filter set.

    An empty set places no restriction on its column. Row order is preserved,
    so applying the same filters twice returns the same rows.
    """
    if df.empty or filters.is_empty:
        return df

    mask = pd.Series(True, index=df.index)
    for attr, column in FILTER_COLUMNS.items():
        allowed = getattr(filters, attr)
        if allowed:
            mask &= df[column].isin(allowed)
    return df[mask]


@dataclass(frozen=True)
class Page:
    jobs: pd.DataFrame
    has_more: bool
    total: int
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def paginate(df: pd.DataFrame, page: int, limit: int) -> Page:
    """Slice one page out of the filtered rows (pages are 1-based)."""
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")
    offset = (page - 1) * limit
    total = len(df)
    return Page(
        jobs=df.iloc[offset: offset + limit],
        has_more=offset + limit < total,
        total=total,
        page=page,
        limit=limit,
    )


def serialize_filters(filters: JobFilters) -> Dict[str, Any]:
    """
    Convert the JobFilters dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    return {
        "experience_levels": list(filters.experience_levels),
        "locations": list(filters.locations),
        "industries": list(filters.industries),
        "employment_types": list(filters.employment_types),
    }

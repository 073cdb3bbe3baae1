from __future__ import annotations

from dataclasses import dataclass

from employment_dashboard.config import Settings
from employment_dashboard.data.filters import JobFilters
from employment_dashboard.data.loader import Dataset


@dataclass
class PageContext:
    dataset: Dataset
    filters: JobFilters
    settings: Settings

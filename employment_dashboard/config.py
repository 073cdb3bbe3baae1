"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv
from loguru import logger

# Ensure .env loaded for local dev (non-override)
load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CSV_PATH = "attached_assets/employment_dataset.csv"


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("salary_experience", "Salary by Experience"),
    TabConfig("salary_location_industry", "Salary by Location & Industry"),
    TabConfig("job_count", "Jobs by Industry"),
    TabConfig("salary_ridgeline", "Salary by Job Title"),
    TabConfig("postings_timeline", "Postings Over Time"),
    TabConfig("salary_scatter", "Salary vs Posting Date"),
    TabConfig("geographic", "Geographic Summary"),
    TabConfig("job_listings", "Job Listings"),
]


@dataclass(frozen=True)
class Settings:
    csv_path: str = DEFAULT_CSV_PATH
    default_page_size: int = 20
    max_page_size: int = 500
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Optional[str] = None
    cors_origins: Tuple[str, ...] = ("*",)
    kde_bandwidth: float = 10000.0
    ridgeline_top_titles: int = 10
    api_host: str = "127.0.0.1"
    api_port: int = 8000


def _parse_list(raw: Optional[str]) -> Optional[List[str]]:
    """Accept a JSON array string or a comma-separated string."""
    if raw is None:
        return None
    s = raw.strip()
    if not s:
        return None
    if s.startswith("[") and s.endswith("]"):
        try:
            arr = json.loads(s)
            return [str(x).strip() for x in arr if str(x).strip()]
        except ValueError:
            pass
    return [item.strip() for item in s.split(",") if item.strip()]


def _get_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid integer for {}: {!r}, using {}", name, raw, default)
        return default
    if value < minimum:
        logger.warning("{} must be >= {}, using {}", name, minimum, default)
        return default
    return value


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid number for {}: {!r}, using {}", name, raw, default)
        return default
    if value <= 0:
        logger.warning("{} must be positive, using {}", name, default)
        return default
    return value


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def get_settings() -> Settings:
    """Build settings from the environment (read on every call, cheap)."""
    origins = _parse_list(os.getenv("CORS_ORIGINS")) or ["*"]
    return Settings(
        csv_path=os.getenv("EMPLOYMENT_CSV_PATH") or DEFAULT_CSV_PATH,
        default_page_size=_get_int("DEFAULT_PAGE_SIZE", 20),
        max_page_size=_get_int("MAX_PAGE_SIZE", 500),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_json=_get_bool("LOG_JSON", False),
        log_file=os.getenv("LOG_FILE") or None,
        cors_origins=tuple(origins),
        kde_bandwidth=_get_float("KDE_BANDWIDTH", 10000.0),
        ridgeline_top_titles=_get_int("RIDGELINE_TOP_TITLES", 10),
        api_host=os.getenv("API_HOST") or "127.0.0.1",
        api_port=_get_int("API_PORT", 8000),
    )

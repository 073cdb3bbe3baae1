"""
CSV loading for the job listings dataset and the process-wide dataset cache.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import numpy as np
import pandas as pd
from loguru import logger

from employment_dashboard.config import PROJECT_ROOT, get_settings

# CSV header -> internal column
COLUMN_MAP: Dict[str, str] = {
    "Job ID": "job_id",
    "Job Title": "job_title",
    "Company Name": "company_name",
    "Location": "location",
    "Industry": "industry",
    "Experience Level": "experience_level",
    "Employment Type": "employment_type",
    "Salary (USD)": "salary",
    "Posted Date": "posted_date",
    "Job Description": "job_description",
}
JOB_COLUMNS: List[str] = list(COLUMN_MAP.values())
TEXT_COLUMNS: List[str] = [c for c in JOB_COLUMNS if c not in ("salary", "posted_date")]


class DatasetLoadError(RuntimeError):
    """Raised when the CSV cannot be turned into a job listings frame."""


def empty_jobs_frame() -> pd.DataFrame:
    df = pd.DataFrame({col: pd.Series(dtype=object) for col in JOB_COLUMNS})
    df["salary"] = df["salary"].astype("int64")
    df["posted_date"] = pd.to_datetime(df["posted_date"])
    return df


INT64_MAX = float(np.iinfo("int64").max)


def _clean_salary(series: pd.Series) -> pd.Series:
    """Numeric salary, NaN where the cell is not a finite number that fits in int64."""
    cleaned = series.astype(str).str.replace(r"[$,\s]", "", regex=True)
    numeric = pd.to_numeric(cleaned, errors="coerce").astype("float64")
    # "inf", "1e400" and friends parse as non-finite floats
    return numeric.where(np.isfinite(numeric) & (numeric.abs() < INT64_MAX))


def _parse_posted_dates(series: pd.Series) -> pd.Series:
    """ISO dates first, then a per-value pass over whatever else was written."""
    parsed = pd.to_datetime(series, errors="coerce", format="ISO8601", utc=True)
    retry = parsed.isna() & (series != "")
    if retry.any():
        parsed[retry] = pd.to_datetime(series[retry], errors="coerce", format="mixed", utc=True)
    return parsed.dt.tz_localize(None)


def read_employment_data(path: Union[str, Path]) -> pd.DataFrame:
    """Read the job listings CSV into a frame with one row per valid record.

    Rows with a wrong field count, a missing id, a salary that is not a finite
    number or an unparseable posted date are logged and skipped.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found at: {path}")
    logger.info("Reading employment data from {} ({} bytes)", path, path.stat().st_size)

    def _skip_bad_line(fields: List[str]) -> None:
        job_id = fields[0].strip() if fields else ""
        logger.warning(
            "Skipping job {!r}: expected {} fields, got {}", job_id, len(COLUMN_MAP), len(fields)
        )
        return None

    try:
        raw = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            skipinitialspace=True,
            engine="python",
            on_bad_lines=_skip_bad_line,
        )
    except pd.errors.EmptyDataError:
        logger.warning("CSV file {} is empty", path)
        return empty_jobs_frame()
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise DatasetLoadError(f"Could not parse {path}: {exc}") from exc

    raw.columns = [str(c).strip() for c in raw.columns]
    missing = [header for header in COLUMN_MAP if header not in raw.columns]
    if missing:
        raise DatasetLoadError(f"CSV {path} is missing columns: {missing}")

    df = raw[list(COLUMN_MAP)].rename(columns=COLUMN_MAP)
    for col in JOB_COLUMNS:
        df[col] = df[col].fillna("").astype(str).str.strip()

    salary = _clean_salary(df["salary"])
    posted = _parse_posted_dates(df["posted_date"])

    reasons = pd.Series([None] * len(df), index=df.index, dtype=object)
    reasons[posted.isna()] = "unparseable posted date"
    reasons[salary.isna()] = "non-numeric salary"
    reasons[df["job_id"] == ""] = "missing job id"
    invalid = reasons.notna()
    for idx, reason in reasons[invalid].items():
        row = df.loc[idx]
        if row["job_id"]:
            logger.warning("Skipping job {!r}: {}", row["job_id"], reason)
        else:
            logger.warning("Skipping {!r} at {!r}: {}", row["job_title"], row["company_name"], reason)

    df = df[~invalid].copy()
    df["salary"] = salary[~invalid].astype("int64")
    df["posted_date"] = posted[~invalid].dt.normalize()
    df.reset_index(drop=True, inplace=True)

    if df.empty:
        logger.error("No job listings were parsed from {}", path)
    else:
        logger.info("Successfully processed {} job listings ({} skipped)", len(df), int(invalid.sum()))
    return df


def resolve_csv_path(path: Union[str, Path]) -> Path:
    """Return the first existing candidate for the configured CSV path."""
    given = Path(path)
    candidates = [given]
    if not given.is_absolute():
        candidates.extend([Path.cwd() / given, PROJECT_ROOT / given])
    for candidate in candidates:
        if candidate.exists():
            return candidate
    logger.error("Could not find {} in any of {}", given.name, [str(c) for c in candidates])
    return candidates[0]


def unique_locations(df: pd.DataFrame) -> Tuple[str, ...]:
    if df.empty:
        return ()
    # drop_duplicates keeps first-appearance order
    return tuple(df["location"].drop_duplicates().tolist())


@dataclass(frozen=True)
class Dataset:
    jobs: pd.DataFrame = field(default_factory=empty_jobs_frame)
    locations: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.jobs)


class DatasetCache:
    """Load-once, read-only holder for the job listings dataset.

    The first `get()` parses the CSV under a lock; later calls return the same
    `Dataset`. A failed load is cached as an empty dataset until `reset()`.
    """

    def __init__(self, csv_path: Union[str, Path]):
        self.csv_path = csv_path
        self._lock = threading.Lock()
        self._dataset: Optional[Dataset] = None

    @property
    def loaded(self) -> bool:
        return self._dataset is not None

    def get(self) -> Dataset:
        dataset = self._dataset
        if dataset is not None:
            return dataset
        with self._lock:
            if self._dataset is None:
                self._dataset = self._load()
            return self._dataset

    def reset(self) -> None:
        with self._lock:
            self._dataset = None

    def _load(self) -> Dataset:
        path = resolve_csv_path(self.csv_path)
        try:
            jobs = read_employment_data(path)
        except Exception as exc:
            # cached as empty until reset()
            logger.opt(exception=exc).error("Error loading employment data from {}", path)
            return Dataset()
        locations = unique_locations(jobs)
        logger.info("Found {} unique locations", len(locations))
        return Dataset(jobs=jobs, locations=locations)


_cache: Optional[DatasetCache] = None
_cache_lock = threading.Lock()


def get_cache() -> DatasetCache:
    global _cache
    with _cache_lock:
        if _cache is None:
            _cache = DatasetCache(get_settings().csv_path)
        return _cache


def set_cache(cache: Optional[DatasetCache]) -> None:
    """Install a pre-built cache (or clear it so the next access rebuilds it)."""
    global _cache
    with _cache_lock:
        _cache = cache


def get_dataset() -> Dataset:
    return get_cache().get()

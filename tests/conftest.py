"""
Shared fixtures: small hand-built job frames and CSV files on disk.
"""

import csv
from pathlib import Path
from typing import Dict, Iterable, List

import pandas as pd
import pytest

from employment_dashboard.data.loader import COLUMN_MAP, JOB_COLUMNS, Dataset, unique_locations

CSV_HEADERS: List[str] = list(COLUMN_MAP)

EXPERIENCE_LEVELS = ["Entry-level", "Mid-level", "Senior-level", "Executive"]
LOCATIONS = ["New York", "San Francisco", "London", "Berlin", "Singapore"]
OTHER_INDUSTRIES = ["Finance", "Healthcare", "Retail", "Education"]
EMPLOYMENT_TYPES = ["Full-time", "Part-time", "Contract"]


def make_job(i: int, **overrides) -> Dict:
    job = {
        "job_id": f"J{i:04d}",
        "job_title": "Data Analyst",
        "company_name": f"Company {i % 7}",
        "location": "New York",
        "industry": "Technology",
        "experience_level": "Entry-level",
        "employment_type": "Full-time",
        "salary": 50000,
        "posted_date": pd.Timestamp("2024-01-15"),
        "job_description": "Analyse data, build reports.",
    }
    job.update(overrides)
    return job


def jobs_frame(records: Iterable[Dict]) -> pd.DataFrame:
    df = pd.DataFrame(list(records), columns=JOB_COLUMNS)
    df["salary"] = df["salary"].astype("int64")
    df["posted_date"] = pd.to_datetime(df["posted_date"])
    return df


def hundred_job_records() -> List[Dict]:
    records = []
    for i in range(100):
        records.append(
            make_job(
                i,
                job_title=["Data Analyst", "Software Engineer", "Product Manager", "Designer"][i % 4],
                location=LOCATIONS[i % 5],
                # 30 of 100 rows are Technology
                industry="Technology" if i % 10 < 3 else OTHER_INDUSTRIES[i % 4],
                experience_level=EXPERIENCE_LEVELS[i % 4],
                employment_type=EMPLOYMENT_TYPES[i % 3],
                salary=40000 + (i * 737) % 90000,
                posted_date=pd.Timestamp("2023-01-01") + pd.Timedelta(days=5 * i),
            )
        )
    return records


def write_csv(path: Path, rows: Iterable[List[str]], headers: List[str] = CSV_HEADERS) -> Path:
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(headers)
        for row in rows:
            writer.writerow(row)
    return path


def csv_row(job: Dict) -> List[str]:
    return [
        job["job_id"],
        job["job_title"],
        job["company_name"],
        job["location"],
        job["industry"],
        job["experience_level"],
        job["employment_type"],
        str(job["salary"]),
        pd.Timestamp(job["posted_date"]).strftime("%Y-%m-%d"),
        job["job_description"],
    ]


@pytest.fixture
def hundred_jobs() -> pd.DataFrame:
    return jobs_frame(hundred_job_records())


@pytest.fixture
def hundred_jobs_dataset(hundred_jobs) -> Dataset:
    return Dataset(jobs=hundred_jobs, locations=unique_locations(hundred_jobs))


@pytest.fixture
def sample_csv(tmp_path) -> Path:
    rows = [csv_row(job) for job in hundred_job_records()[:10]]
    return write_csv(tmp_path / "employment_dataset.csv", rows)

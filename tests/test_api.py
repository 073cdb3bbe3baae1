"""
Tests for the employment data API
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from employment_dashboard.api.app import create_app
from employment_dashboard.config import Settings, get_settings
from employment_dashboard.data import loader
from employment_dashboard.data.loader import Dataset, DatasetCache, get_dataset

from .conftest import csv_row, hundred_job_records, write_csv


@pytest.fixture
def app(hundred_jobs_dataset):
    app = create_app()
    app.dependency_overrides[get_dataset] = lambda: hundred_jobs_dataset
    app.dependency_overrides[get_settings] = lambda: Settings(default_page_size=20, max_page_size=50)
    return app


@pytest.fixture
def client(app):
    # no context manager: skip the lifespan so the real CSV is never read
    return TestClient(app)


class TestEmploymentData:
    def test_default_page(self, client):
        response = client.get("/api/employment-data")
        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"jobs", "hasMore", "locations", "stats"}
        assert len(data["jobs"]) == 20
        assert data["hasMore"] is True
        assert data["locations"] == ["New York", "San Francisco", "London", "Berlin", "Singapore"]
        assert data["stats"]["totalJobs"] == 100

    def test_job_shape(self, client):
        job = client.get("/api/employment-data", params={"limit": 1}).json()["jobs"][0]
        assert job == {
            "id": "J0000",
            "jobTitle": "Data Analyst",
            "companyName": "Company 0",
            "location": "New York",
            "industry": "Technology",
            "experienceLevel": "Entry-level",
            "employmentType": "Full-time",
            "salary": 40000,
            "postedDate": "2023-01-01",
            "jobDescription": "Analyse data, build reports.",
        }

    def test_stats_cover_all_matches_not_just_page(self, client):
        data = client.get(
            "/api/employment-data", params={"industries": "Technology", "limit": 5}
        ).json()
        assert len(data["jobs"]) == 5
        stats = data["stats"]
        assert stats["totalJobs"] == 30
        assert stats["topIndustry"] == {"name": "Technology", "percentage": 100}
        assert stats["jobsGrowthRate"] == 12
        assert stats["salaryGrowthRate"] == 5.2

    def test_repeated_params_are_ored(self, client):
        data = client.get(
            "/api/employment-data",
            params=[("locations", "London"), ("locations", "Berlin"), ("limit", "50")],
        ).json()
        assert data["stats"]["totalJobs"] == 40
        assert {job["location"] for job in data["jobs"]} == {"London", "Berlin"}

    def test_last_page(self, client):
        data = client.get("/api/employment-data", params={"page": 5}).json()
        assert len(data["jobs"]) == 20
        assert data["hasMore"] is False
        assert data["jobs"][-1]["id"] == "J0099"

    def test_no_matches(self, client):
        data = client.get("/api/employment-data", params={"industries": "Mining"}).json()
        assert data["jobs"] == []
        assert data["hasMore"] is False
        assert data["stats"]["totalJobs"] == 0
        assert data["stats"]["topLocation"] == {"name": "N/A", "percentage": 0}

    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"page": "x"}, {"limit": 51}])
    def test_invalid_params(self, client, params):
        assert client.get("/api/employment-data", params=params).status_code == 422

    def test_internal_error_body(self, client):
        with patch(
            "employment_dashboard.api.routes.apply_filters",
            side_effect=RuntimeError("boom"),
        ):
            response = client.get("/api/employment-data")
        assert response.status_code == 500
        assert response.json() == {"message": "Failed to fetch employment data", "error": "boom"}

    def test_failing_dataset_dependency_returns_json(self, app):
        def broken_dataset():
            raise RuntimeError("disk gone")

        app.dependency_overrides[get_dataset] = broken_dataset
        response = TestClient(app, raise_server_exceptions=False).get("/api/employment-data")
        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error", "error": "disk gone"}

    def test_bad_salary_cell_in_real_csv(self, app, tmp_path):
        rows = [csv_row(job) for job in hundred_job_records()[:5]]
        rows[2][7] = "inf"
        app.dependency_overrides.pop(get_dataset)
        loader.set_cache(DatasetCache(write_csv(tmp_path / "jobs.csv", rows)))
        try:
            response = TestClient(app).get("/api/employment-data")
        finally:
            loader.set_cache(None)
        assert response.status_code == 200
        assert [job["id"] for job in response.json()["jobs"]] == ["J0000", "J0001", "J0003", "J0004"]

    def test_empty_dataset(self, app):
        app.dependency_overrides[get_dataset] = lambda: Dataset()
        data = TestClient(app).get("/api/employment-data").json()
        assert data["jobs"] == []
        assert data["locations"] == []
        assert data["stats"]["avgSalary"] == 0


class TestVisualizations:
    def test_shape(self, client):
        response = client.get("/api/visualizations")
        assert response.status_code == 200
        data = response.json()
        assert set(data) == {
            "boxPlot", "groupedBar", "stackedBar", "ridgeline", "timeLine", "scatterPlot", "locations",
        }
        assert data["boxPlot"]["experienceLevels"] == [
            "Entry-level", "Mid-level", "Senior-level", "Executive",
        ]
        assert data["timeLine"]["interval"] == "Monthly"
        assert len(data["scatterPlot"]["points"]) == 100
        assert len(data["scatterPlot"]["trendLine"]) == 2
        assert sum(loc["jobCount"] for loc in data["locations"]) == 100

    def test_respects_filters(self, client):
        data = client.get("/api/visualizations", params={"industries": "Technology"}).json()
        assert data["stackedBar"]["industries"] == ["Technology"]
        assert len(data["scatterPlot"]["points"]) == 30

    def test_quarterly_interval(self, client):
        data = client.get("/api/visualizations", params={"interval": "Quarterly"}).json()
        assert data["timeLine"]["interval"] == "Quarterly"
        assert all("-Q" in point for point in data["timeLine"]["timePoints"])

    def test_unknown_interval(self, client):
        assert client.get("/api/visualizations", params={"interval": "Daily"}).status_code == 422

    def test_internal_error_body(self, client):
        with patch(
            "employment_dashboard.api.routes.build_visualizations",
            side_effect=ValueError("bad"),
        ):
            response = client.get("/api/visualizations")
        assert response.status_code == 500
        assert response.json()["message"] == "Failed to build visualization data"


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok", "jobsLoaded": 100}

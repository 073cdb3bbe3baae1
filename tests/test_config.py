"""
Tests for environment-driven settings
"""

import pytest

from employment_dashboard.config import DEFAULT_CSV_PATH, TABS, _parse_list, get_settings

ENV_VARS = [
    "EMPLOYMENT_CSV_PATH",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "LOG_LEVEL",
    "LOG_JSON",
    "LOG_FILE",
    "CORS_ORIGINS",
    "KDE_BANDWIDTH",
    "RIDGELINE_TOP_TITLES",
    "API_HOST",
    "API_PORT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = get_settings()
    assert settings.csv_path == DEFAULT_CSV_PATH
    assert settings.default_page_size == 20
    assert settings.max_page_size == 500
    assert settings.log_level == "INFO"
    assert settings.log_json is False
    assert settings.log_file is None
    assert settings.cors_origins == ("*",)
    assert settings.kde_bandwidth == 10000.0
    assert settings.ridgeline_top_titles == 10


def test_overrides(clean_env):
    clean_env.setenv("EMPLOYMENT_CSV_PATH", "/data/jobs.csv")
    clean_env.setenv("DEFAULT_PAGE_SIZE", "50")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("LOG_JSON", "true")
    clean_env.setenv("KDE_BANDWIDTH", "2500")
    clean_env.setenv("API_PORT", "9000")
    settings = get_settings()
    assert settings.csv_path == "/data/jobs.csv"
    assert settings.default_page_size == 50
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True
    assert settings.kde_bandwidth == 2500.0
    assert settings.api_port == 9000


@pytest.mark.parametrize("raw", ["abc", "0", "-5", "2.5"])
def test_invalid_page_size_falls_back(clean_env, raw):
    clean_env.setenv("DEFAULT_PAGE_SIZE", raw)
    assert get_settings().default_page_size == 20


@pytest.mark.parametrize("raw", ["zero", "0", "-1"])
def test_invalid_bandwidth_falls_back(clean_env, raw):
    clean_env.setenv("KDE_BANDWIDTH", raw)
    assert get_settings().kde_bandwidth == 10000.0


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("http://a.example, http://b.example", ("http://a.example", "http://b.example")),
        ('["http://a.example", "http://b.example"]', ("http://a.example", "http://b.example")),
        ("  ", ("*",)),
    ],
)
def test_cors_origins(clean_env, raw, expected):
    clean_env.setenv("CORS_ORIGINS", raw)
    assert get_settings().cors_origins == expected


def test_parse_list_bad_json_falls_back_to_commas():
    assert _parse_list("[a, b]") == ["[a", "b]"]
    assert _parse_list(None) is None


def test_tab_keys_are_unique():
    keys = [tab.key for tab in TABS]
    assert len(keys) == len(set(keys))
    assert keys[-1] == "job_listings"

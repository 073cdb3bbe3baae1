"""
Tests for secrets bridging and logging setup
"""

import logging
import os

import pytest
from loguru import logger

from employment_dashboard import logging_config
from employment_dashboard.bootstrap_env import _flatten_secrets, bridge_secrets_to_env
from employment_dashboard.config import Settings


def test_flatten_nested_secrets():
    flat = dict(_flatten_secrets("api", {"host": "0.0.0.0", "cors-origins": "http://a.example"}))
    assert flat == {"API_HOST": "0.0.0.0", "API_CORS_ORIGINS": "http://a.example"}


def test_bridge_does_not_override_existing(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("EMPLOYMENT_CSV_PATH", raising=False)
    bridge_secrets_to_env({"log_level": "DEBUG", "employment_csv_path": "/data/jobs.csv"})
    try:
        assert os.environ["LOG_LEVEL"] == "WARNING"
        assert os.environ["EMPLOYMENT_CSV_PATH"] == "/data/jobs.csv"
    finally:
        monkeypatch.delenv("EMPLOYMENT_CSV_PATH", raising=False)


@pytest.fixture
def restore_logging():
    yield
    logging_config.configure_logging(Settings(log_level="WARNING"), force=True)


def test_file_sink_receives_loguru_and_stdlib_records(tmp_path, restore_logging):
    log_file = tmp_path / "dashboard.log"
    logging_config.configure_logging(Settings(log_file=str(log_file)), force=True)

    logger.info("dataset loaded")
    logging.getLogger("uvicorn.error").warning("port busy")
    logger.remove()

    content = log_file.read_text()
    assert "dataset loaded" in content
    assert "port busy" in content


def test_configure_is_idempotent(restore_logging):
    logging_config.configure_logging(Settings(), force=True)
    handlers_before = list(logging.getLogger("uvicorn").handlers)
    logging_config.configure_logging(Settings(log_level="DEBUG"))
    assert logging.getLogger("uvicorn").handlers == handlers_before

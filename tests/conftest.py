"""
Pytest configuration and shared fixtures for the pwsuite unit tests.

Nothing here starts a browser or touches the network; Playwright request
contexts are replaced with mocks.
"""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from pwsuite.core.config import Config
from pwsuite.core.logging_config import LogManager


SUITE_ENV_VARS = [
    "CI",
    "PWSUITE_ENV",
    "PWSUITE_PROJECT",
    "PWSUITE_HEADLESS",
    "PWSUITE_TEST_DATA_DIR",
    "PWSUITE_RUN_ID",
    "LOG_LEVEL",
    "LOG_PRETTY",
    "DEV_BASE_URL",
    "STAGING_BASE_URL",
    "PROD_BASE_URL",
    "DEV_AUTH_TOKEN",
    "STAGING_AUTH_TOKEN",
    "PROD_AUTH_TOKEN",
    "DEMO_APP_URL",
    "TEST_URL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test without suite-related environment variables."""
    for name in SUITE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    LogManager.reset_instance()


@pytest.fixture
def temp_config(tmp_path):
    """Config whose directories all live under a temporary root."""
    data_dir = tmp_path / "test-data"
    data_dir.mkdir()
    return Config(
        project_root=tmp_path,
        artifacts_dir=tmp_path / "test-results",
        logs_dir=tmp_path / "logs",
        test_data_dir=data_dir,
        configs_dir=tmp_path / "configs",
    )


@pytest.fixture
def configs_dir(tmp_path):
    """Empty presets directory."""
    path = tmp_path / "configs"
    path.mkdir()
    return path


def make_response(status=200, body=None, url="https://api.example.com/objects"):
    """Mock of a Playwright APIResponse."""
    response = MagicMock()
    response.status = status
    response.ok = 200 <= status < 300
    response.url = url
    response.json.return_value = body if body is not None else {}
    response.text.return_value = json.dumps(body) if body is not None else ""
    return response


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def request_context():
    """Mock of a Playwright APIRequestContext."""
    return MagicMock()


@pytest.fixture
def csv_dir(tmp_path) -> Path:
    path = tmp_path / "data"
    path.mkdir()
    return path

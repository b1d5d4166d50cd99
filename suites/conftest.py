"""
Shared configuration for the end-to-end suites.

Resolves the environment profile once per session and feeds it to
pytest-playwright's browser fixtures, registers the suite markers and the
results plugin.
"""

import os
from pathlib import Path

import pytest
from playwright.sync_api import BrowserContext, expect

from pwsuite.core.config import Config
from pwsuite.core.profiles import resolve_profile
from pwsuite.fixtures import PLUGINS
from pwsuite.reporting import ResultsCollector


pytest_plugins = PLUGINS

SUITES_DIR = Path(__file__).parent

MARKERS = {
    "api": "tests that only talk to HTTP APIs",
    "ui": "tests that drive a browser",
    "smoke": "fast checks of the critical paths",
    "data_driven": "tests parametrized from test-data files",
    "slow": "tests that wait on delayed UI behaviour",
}


def pytest_addoption(parser):
    group = parser.getgroup("pwsuite", "PW training suite")
    group.addoption(
        "--pwsuite-env",
        default=None,
        help="Environment profile (dev, staging, prod); defaults to PWSUITE_ENV",
    )
    group.addoption(
        "--pwsuite-project",
        default=None,
        help="Unified project such as prod-firefox; defaults to PWSUITE_PROJECT",
    )
    group.addoption(
        "--faker-seed",
        type=int,
        default=None,
        help="Seed for Faker generated data",
    )


def _suite_config(pytestconfig) -> Config:
    config = Config.from_env()
    env = pytestconfig.getoption("--pwsuite-env")
    project = pytestconfig.getoption("--pwsuite-project")
    if env:
        config.environment = env
    if project:
        config.project = project
    return config


def pytest_configure(config):
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")

    suite_config = _suite_config(config)
    config.pluginmanager.register(
        ResultsCollector(
            suite_config.results_file,
            profile=suite_config.profile_name,
            artifacts_dir=suite_config.artifacts_dir,
            run_id=os.getenv("PWSUITE_RUN_ID"),
        ),
        "pwsuite-results",
    )


def pytest_collection_modifyitems(config, items):
    """Mark suites under ``suites/api`` as api and everything else as ui."""
    for item in items:
        try:
            relative = Path(item.path).relative_to(SUITES_DIR)
        except ValueError:
            continue
        if relative.parts and relative.parts[0] == "api":
            item.add_marker(pytest.mark.api)
        else:
            item.add_marker(pytest.mark.ui)


@pytest.fixture(scope="session")
def suite_config(pytestconfig) -> Config:
    return _suite_config(pytestconfig)


@pytest.fixture(scope="session")
def suite_profile(suite_config):
    """EnvironmentProfile for this run."""
    return resolve_profile(suite_config)


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args, suite_profile):
    return {**browser_context_args, **suite_profile.browser_context_args()}


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args, suite_profile):
    # Headless comes from --headed, which `pwsuite run` derives from the profile
    launch_args = suite_profile.browser_launch_args()
    launch_args.pop("headless", None)
    return {**launch_args, **browser_type_launch_args}


@pytest.fixture(scope="session", autouse=True)
def expect_timeout(suite_profile):
    expect.set_options(timeout=suite_profile.expect_timeout)


@pytest.fixture
def context(context: BrowserContext, suite_profile) -> BrowserContext:
    context.set_default_timeout(suite_profile.action_timeout)
    context.set_default_navigation_timeout(suite_profile.navigation_timeout)
    return context

"""
pytest fixture modules for the suites.

Load them from a conftest with::

    pytest_plugins = PLUGINS
"""

PLUGINS = [
    "pwsuite.fixtures.logging",
    "pwsuite.fixtures.api",
    "pwsuite.fixtures.saucedemo",
    "pwsuite.fixtures.orangehrm",
    "pwsuite.fixtures.demo_app",
]

__all__ = ["PLUGINS"]

"""
PW Training Suite - Playwright for Python end-to-end training corpus

Page objects, fixtures, test-data helpers and environment presets for the
example suites under ``suites/``.
"""

__version__ = "0.1.0"
__author__ = "PW Training Suite Team"

from .core.config import Config, EnvironmentProfile
from .core.exceptions import SuiteError
from .core.logging_config import setup_logging, LogManager
from .core.profiles import load_profile

__all__ = [
    "Config",
    "EnvironmentProfile",
    "SuiteError",
    "setup_logging",
    "LogManager",
    "load_profile",
]

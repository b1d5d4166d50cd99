"""Core components for the PW training suite."""

from .config import Config, EnvironmentProfile
from .exceptions import (
    SuiteError,
    ConfigurationError,
    ValidationError,
    DataFileError,
    ApiRequestError,
    ResourceNotFoundError,
)
from .logging_config import setup_logging, get_logger, LogManager
from .profiles import load_profile, list_profiles, resolve_profile

__all__ = [
    "Config",
    "EnvironmentProfile",
    "SuiteError",
    "ConfigurationError",
    "ValidationError",
    "DataFileError",
    "ApiRequestError",
    "ResourceNotFoundError",
    "setup_logging",
    "get_logger",
    "LogManager",
    "load_profile",
    "list_profiles",
    "resolve_profile",
]

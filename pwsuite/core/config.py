"""
Configuration management for the PW training suite.

Holds two layers of settings: ``Config`` for the suite runtime (environment
selection, logging, directories) and ``EnvironmentProfile`` for the browser
and runner settings of one environment preset.
"""

import os
from typing import Optional, Dict, Any, List, Literal
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, Field, ConfigDict, validator


VALID_LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "WARN", "ERROR", "FATAL"]
VALID_LOG_FORMATS = ["text", "json"]

# pytest-playwright only knows on/off/retain-on-failure for traces
TRACE_MODE_MAP = {
    "on": "on",
    "off": "off",
    "retain-on-failure": "retain-on-failure",
    "on-first-retry": "retain-on-failure",
}


def _env_flag(name: str) -> Optional[bool]:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    """Runtime configuration for the suite with environment variable support."""

    # Environment detection
    ci_mode: bool = field(default=False)

    # Profile selection
    environment: str = field(default="dev")
    project: Optional[str] = field(default=None)

    # Execution overrides
    headless_mode: Optional[bool] = field(default=None)

    # Logging configuration
    log_level: str = field(default="INFO")
    log_format: str = field(default="text")

    # Directory paths
    project_root: Path = field(default_factory=lambda: Path.cwd())
    artifacts_dir: Path = field(default_factory=lambda: Path.cwd() / "test-results")
    logs_dir: Path = field(default_factory=lambda: Path.cwd() / "logs")
    test_data_dir: Path = field(default_factory=lambda: Path.cwd() / "test-data")
    configs_dir: Path = field(default_factory=lambda: Path.cwd() / "configs")

    def __post_init__(self):
        """Post-initialization normalisation."""
        if _env_flag("CI") and self.ci_mode is False:
            self.ci_mode = True

        headless_env = _env_flag("PWSUITE_HEADLESS")
        if headless_env is not None:
            self.headless_mode = headless_env
        elif self.ci_mode and self.headless_mode is None:
            self.headless_mode = True

        level = self.log_level.upper()
        if level == "WARNING":
            level = "WARN"
        # the rejected value is kept for validate()
        self._rejected_log_level = None if level in VALID_LOG_LEVELS else self.log_level
        self.log_level = level if level in VALID_LOG_LEVELS else "INFO"

        # Machine-readable logs in CI unless explicitly configured otherwise
        if self.ci_mode and self.log_format == "text":
            self.log_format = "json"

    @property
    def is_ci_mode(self) -> bool:
        """Check if running in CI environment."""
        return self.ci_mode

    @property
    def debug_enabled(self) -> bool:
        """Check if debug logging is enabled."""
        return self.log_level in ("DEBUG", "TRACE")

    @property
    def profile_name(self) -> str:
        """Name of the profile to resolve: the project when set, else the environment."""
        return self.project or self.environment

    @property
    def results_file(self) -> Path:
        """JSON results written by the reporting plugin."""
        return self.artifacts_dir / "results.json"

    def get_log_file_path(self) -> Path:
        """Get the main log file path."""
        self.logs_dir.mkdir(parents=True, exist_ok=True)
        return self.logs_dir / "pwsuite.log"

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for logging."""
        return {
            "ci_mode": self.ci_mode,
            "environment": self.environment,
            "project": self.project,
            "headless_mode": self.headless_mode,
            "log_level": self.log_level,
            "log_format": self.log_format,
            "project_root": str(self.project_root),
            "artifacts_dir": str(self.artifacts_dir),
            "logs_dir": str(self.logs_dir),
            "test_data_dir": str(self.test_data_dir),
            "configs_dir": str(self.configs_dir),
        }

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        ci = bool(_env_flag("CI"))
        log_format = "json" if ci or _env_flag("LOG_PRETTY") is False else "text"
        kwargs: Dict[str, Any] = {
            "ci_mode": ci,
            "environment": os.getenv("PWSUITE_ENV", "dev"),
            "project": os.getenv("PWSUITE_PROJECT") or None,
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
            "log_format": log_format,
        }

        test_data_dir = os.getenv("PWSUITE_TEST_DATA_DIR")
        if test_data_dir:
            kwargs["test_data_dir"] = Path(test_data_dir)

        return cls(**kwargs)

    def validate(self) -> None:
        """Validate configuration and raise ValidationError if invalid."""
        from .exceptions import ValidationError

        errors = []

        rejected = self._rejected_log_level
        if rejected is not None or self.log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid log level: {rejected or self.log_level}. Must be one of {VALID_LOG_LEVELS}"
            )

        if self.log_format not in VALID_LOG_FORMATS:
            errors.append(
                f"Invalid log format: {self.log_format}. Must be one of {VALID_LOG_FORMATS}"
            )

        if not self.environment or not self.environment.strip():
            errors.append("Environment name cannot be empty")

        if not self.test_data_dir.exists():
            errors.append(f"test data directory does not exist: {self.test_data_dir}")

        if errors:
            message = "Configuration validation failed: " + "; ".join(errors)
            raise ValidationError(
                message,
                validation_type="config",
                violations=errors,
            )


class EnvironmentProfile(BaseModel):
    """Browser and runner settings for one environment preset."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Profile / project name")
    base_url: str = Field("", description="Base URL passed to the browser context")

    # Credentials sent as extra HTTP headers
    auth_token: str = Field("", description="Bearer token")
    api_key: str = Field("", description="Value for X-API-Key")
    client_id: str = Field("", description="Value for X-Client-ID")

    # Browser
    browser: Literal["chromium", "firefox", "webkit"] = Field("chromium")
    device: Optional[str] = Field(None, description="Playwright device descriptor name")
    headless: bool = Field(True)
    slow_mo: int = Field(0, ge=0, description="Delay between actions in milliseconds")
    viewport: Optional[Dict[str, int]] = Field(
        default_factory=lambda: {"width": 1280, "height": 720}
    )
    ignore_https_errors: bool = Field(False)

    # Runner
    retries: int = Field(0, ge=0, description="Reruns of a failing test")
    workers: int = Field(1, ge=1, description="Parallel worker processes")
    fully_parallel: bool = Field(True, description="Distribute single tests rather than files")
    test_match: Optional[str] = Field(None, description="pytest python_files pattern")

    # Timeouts in milliseconds
    timeout: int = Field(30000, ge=1000, description="Per-test timeout")
    expect_timeout: int = Field(5000, ge=0, description="Assertion timeout")
    action_timeout: int = Field(10000, ge=0, description="Default action timeout")
    navigation_timeout: int = Field(30000, ge=0, description="Default navigation timeout")

    # Failure artifacts
    screenshot: Literal["on", "off", "only-on-failure"] = Field("only-on-failure")
    video: Literal["on", "off", "retain-on-failure"] = Field("retain-on-failure")
    trace: Literal["on", "off", "retain-on-failure", "on-first-retry"] = Field(
        "retain-on-failure"
    )

    @validator("name")
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError("Profile name cannot be empty")
        return v.strip()

    @validator("viewport")
    def validate_viewport(cls, v):
        if v is not None and not {"width", "height"} <= set(v):
            raise ValueError("Viewport needs both width and height")
        return v

    def extra_http_headers(self) -> Dict[str, str]:
        """Headers attached to every request made by the browser context."""
        headers = {}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        if self.client_id:
            headers["X-Client-ID"] = self.client_id
        return headers

    def browser_context_args(self) -> Dict[str, Any]:
        """Keyword arguments for ``Browser.new_context``."""
        args: Dict[str, Any] = {
            "ignore_https_errors": self.ignore_https_errors,
        }
        if self.base_url:
            args["base_url"] = self.base_url
        if self.viewport is not None and not self.device:
            args["viewport"] = dict(self.viewport)
        headers = self.extra_http_headers()
        if headers:
            args["extra_http_headers"] = headers
        return args

    def browser_launch_args(self) -> Dict[str, Any]:
        """Keyword arguments for ``BrowserType.launch``."""
        args: Dict[str, Any] = {"headless": self.headless}
        if self.slow_mo:
            args["slow_mo"] = self.slow_mo
        return args

    def to_pytest_args(self, output_dir: Optional[Path] = None) -> List[str]:
        """
        Translate the profile into pytest command-line flags.

        Args:
            output_dir: Where pytest-playwright stores traces, videos and screenshots

        Returns:
            Flags for pytest-playwright, pytest-rerunfailures, pytest-xdist
            and pytest-timeout
        """
        args = ["--browser", self.browser]

        if not self.headless:
            args.append("--headed")
        if self.slow_mo:
            args.extend(["--slowmo", str(self.slow_mo)])
        if self.device:
            args.extend(["--device", self.device])
        if self.base_url:
            args.extend(["--base-url", self.base_url])

        args.extend(["--tracing", TRACE_MODE_MAP[self.trace]])
        args.extend(["--video", self.video])
        args.extend(["--screenshot", self.screenshot])

        if output_dir is not None:
            args.extend(["--output", str(output_dir)])

        if self.retries:
            args.extend(["--reruns", str(self.retries)])

        if self.workers > 1:
            args.extend(["-n", str(self.workers)])
            args.extend(["--dist", "load" if self.fully_parallel else "loadfile"])

        # pytest-timeout counts whole seconds
        args.extend(["--timeout", str(max(1, self.timeout // 1000))])

        if self.test_match:
            args.extend(["-o", f"python_files={self.test_match}"])

        return args

    def to_dict(self) -> Dict[str, Any]:
        """Profile as a plain dict with secrets masked."""
        data = self.model_dump()
        for key in ("auth_token", "api_key", "client_id"):
            if data.get(key):
                data[key] = "***"
        return data

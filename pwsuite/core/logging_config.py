"""
Logging configuration for the PW training suite.

Provides structured JSON logging for CI, readable text output for local runs,
and ``LogManager``, the shared logger that suites use for per-test context.
"""

import logging
import logging.handlers
import json
import sys
from datetime import datetime, timezone
from typing import Dict, Any, Optional

from .config import Config


TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LEVELS = {
    "TRACE": TRACE,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "FATAL": logging.CRITICAL,
}

LEVEL_LABELS = {
    TRACE: "TRACE",
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "FATAL",
}


def _level_label(record: logging.LogRecord) -> str:
    return LEVEL_LABELS.get(record.levelno, record.levelname)


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured JSON logging."""

    def __init__(self, run_id: str):
        super().__init__()
        self.run_id = run_id

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": _level_label(record),
            "component": record.name,
            "run_id": self.run_id,
            "message": record.getMessage(),
        }

        # Child logger bindings sit at the top level
        context = getattr(record, "context", None)
        if context:
            for key, value in context.items():
                log_entry.setdefault(key, value)

        if getattr(record, "metadata", None):
            log_entry["metadata"] = record.metadata

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable formatter for development."""

    def __init__(self, run_id: str):
        super().__init__()
        self.run_id = run_id

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as human-readable text."""
        timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]

        message = f"[{timestamp}] {_level_label(record):5} {record.name:20} | {record.getMessage()}"

        context = getattr(record, "context", None)
        if context and context.get("test"):
            message += f" (test: {context['test']})"

        if getattr(record, "metadata", None):
            metadata_str = " | ".join(f"{k}={v}" for k, v in record.metadata.items())
            message += f" | {metadata_str}"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


class ContextAdapter(logging.LoggerAdapter):
    """Logger adapter that attaches bound context to every record."""

    def process(self, msg, kwargs):
        extra = dict(kwargs.get("extra") or {})
        extra["context"] = {**self.extra, **extra.get("context", {})}
        kwargs["extra"] = extra
        return msg, kwargs

    def trace(self, msg, *args, **kwargs):
        self.log(TRACE, msg, *args, **kwargs)

    def fatal(self, msg, *args, **kwargs):
        self.log(logging.CRITICAL, msg, *args, **kwargs)

    def child(self, **bindings) -> "ContextAdapter":
        """Create a child adapter with additional bound context."""
        return ContextAdapter(self.logger, {**self.extra, **bindings})


def setup_logging(config: Config, run_id: str) -> logging.Logger:
    """
    Set up logging configuration based on environment and config.

    Args:
        config: Configuration object with logging settings
        run_id: Unique run identifier for log correlation

    Returns:
        Configured root logger
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    log_level = LEVELS[config.log_level]
    root_logger.setLevel(log_level)

    if config.log_format == "json":
        formatter = StructuredFormatter(run_id)
    else:
        formatter = TextFormatter(run_id)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    # File handler for non-CI environments
    if not config.is_ci_mode:
        file_handler = logging.handlers.RotatingFileHandler(
            config.get_log_file_path(),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(StructuredFormatter(run_id))
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)

    logger = logging.getLogger("pwsuite.logging")
    logger.info(
        "Logging configured",
        extra={
            "metadata": {
                "run_id": run_id,
                "log_level": config.log_level,
                "log_format": config.log_format,
                "ci_mode": config.is_ci_mode,
            }
        },
    )

    return root_logger


def get_logger(name: str, **context) -> logging.Logger:
    """
    Get a logger with optional context.

    Args:
        name: Logger name (typically module name)
        **context: Additional context to include in log records

    Returns:
        Configured logger with context
    """
    logger = logging.getLogger(name)

    if context:
        return ContextAdapter(logger, context)

    return logger


def log_performance(
    logger: logging.Logger, operation: str, duration: float, **metadata
):
    """
    Log performance metrics for operations.

    Args:
        logger: Logger instance
        operation: Name of the operation
        duration: Duration in seconds
        **metadata: Additional metadata to include
    """
    logger.info(
        f"Performance: {operation} completed in {duration:.2f}s",
        extra={"metadata": {"operation": operation, "duration": duration, **metadata}},
    )


class LogManager:
    """
    Shared logger for suites.

    One instance per process. Output level comes from ``LOG_LEVEL`` and the
    format is readable text unless ``LOG_PRETTY=false`` or ``CI`` is set.
    Every record is bound to ``framework=playwright``.

    Example:
        log = LogManager.get_instance()
        log.info("Test started", {"browser": "chromium"})
        child = log.for_test("checkout flow", browser="firefox")
        child.debug("Cart filled")
    """

    LOGGER_NAME = "pwsuite.tests"
    BASE_CONTEXT = {"framework": "playwright"}

    _instance: Optional["LogManager"] = None

    def __init__(self, config: Optional[Config] = None, run_id: str = "local"):
        config = config or Config.from_env()
        self.level = LEVELS[config.log_level]
        self.pretty = config.log_format == "text"

        logger = logging.getLogger(self.LOGGER_NAME)
        logger.handlers.clear()
        logger.setLevel(self.level)
        logger.propagate = False

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            TextFormatter(run_id) if self.pretty else StructuredFormatter(run_id)
        )
        logger.addHandler(handler)

        self._logger = ContextAdapter(logger, dict(self.BASE_CONTEXT))

    @classmethod
    def get_instance(cls) -> "LogManager":
        """Get the shared instance, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance so the next call re-reads the environment."""
        cls._instance = None

    def get_logger(self) -> ContextAdapter:
        """Underlying adapter, for direct access to the logging API."""
        return self._logger

    def for_test(self, test_name: str, **metadata) -> ContextAdapter:
        """Child logger carrying the test name and any extra metadata."""
        return self._logger.child(test=test_name, **metadata)

    def _log(self, level: int, msg: str, data: Optional[Dict[str, Any]]) -> None:
        if data:
            self._logger.log(level, msg, extra={"metadata": data})
        else:
            self._logger.log(level, msg)

    def trace(self, msg: str, data: Optional[Dict[str, Any]] = None) -> None:
        self._log(TRACE, msg, data)

    def debug(self, msg: str, data: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.DEBUG, msg, data)

    def info(self, msg: str, data: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.INFO, msg, data)

    def warn(self, msg: str, data: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.WARNING, msg, data)

    def error(self, msg: str, data: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.ERROR, msg, data)

    def fatal(self, msg: str, data: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.CRITICAL, msg, data)

"""
Base exception classes for the PW training suite.

Provides a hierarchy of exceptions for the errors the support package can
raise while preparing data, talking to demo APIs, or loading presets.
"""

from typing import Optional, Dict, Any, List


class SuiteError(Exception):
    """Base exception class for all suite support errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
        }


class ConfigurationError(SuiteError):
    """Raised when an environment profile cannot be found or parsed."""

    def __init__(
        self,
        message: str,
        profile_name: Optional[str] = None,
        source: Optional[str] = None,
    ):
        super().__init__(message, "CONFIGURATION_ERROR")
        self.profile_name = profile_name
        self.source = source
        self.context.update(
            {
                "profile_name": profile_name,
                "source": source,
            }
        )


class ValidationError(SuiteError):
    """Raised when validation fails."""

    def __init__(
        self,
        message: str,
        validation_type: Optional[str] = None,
        violations: Optional[List[str]] = None,
    ):
        super().__init__(message, "VALIDATION_FAILED")
        self.validation_type = validation_type
        self.violations = violations or []
        self.context.update(
            {
                "validation_type": validation_type,
                "violations": self.violations,
            }
        )


class DataFileError(SuiteError):
    """Raised when a test data file is missing or malformed."""

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        operation: Optional[str] = None,
    ):
        super().__init__(message, "DATA_FILE_ERROR")
        self.file_path = file_path
        self.operation = operation
        self.context.update(
            {
                "file_path": file_path,
                "operation": operation,
            }
        )


class ApiRequestError(SuiteError):
    """Raised when a demo API answers with an unexpected status."""

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        url: Optional[str] = None,
        status: Optional[int] = None,
        expected: Optional[int] = None,
    ):
        super().__init__(message, "API_REQUEST_FAILED")
        self.method = method
        self.url = url
        self.status = status
        self.expected = expected
        self.context.update(
            {
                "method": method,
                "url": url,
                "status": status,
                "expected": expected,
            }
        )


class ResourceNotFoundError(SuiteError):
    """Raised when a polled resource never shows up."""

    def __init__(
        self,
        message: str,
        resource_id: Optional[str] = None,
        attempts: Optional[int] = None,
    ):
        super().__init__(message, "RESOURCE_NOT_FOUND")
        self.resource_id = resource_id
        self.attempts = attempts
        self.context.update(
            {
                "resource_id": resource_id,
                "attempts": attempts,
            }
        )

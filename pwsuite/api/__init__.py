"""API clients for the demo services used by the suites."""

from .devices import (
    DeviceApi,
    validate_status,
    validate_json_response,
    generate_random_device,
)
from .auth import TokenAuthClient

__all__ = [
    "DeviceApi",
    "validate_status",
    "validate_json_response",
    "generate_random_device",
    "TokenAuthClient",
]

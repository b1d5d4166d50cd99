"""
Device helpers for the restful-api.dev object store.

Wraps a Playwright ``APIRequestContext`` with CRUD calls, schema checks and
bulk helpers used by the API suites and fixtures.
"""

import logging
import random
import time
from typing import Any, Callable, Dict, Iterable, List, Optional
from urllib.parse import urlencode

from playwright.sync_api import APIRequestContext, APIResponse

from ..core.exceptions import ApiRequestError, ResourceNotFoundError, ValidationError
from ..core.logging_config import log_performance


DEFAULT_BASE_URL = "https://api.restful-api.dev"

DEVICE_COLORS = ["Red", "Blue", "Green", "Black", "White"]
DEVICE_TYPES = ["Phone", "Tablet", "Laptop", "Watch", "Headphones"]


def validate_status(response: APIResponse, expected: int) -> None:
    """Raise ApiRequestError unless the response has the expected status."""
    if response.status != expected:
        raise ApiRequestError(
            f"Expected status {expected}, got {response.status} for {response.url}",
            url=response.url,
            status=response.status,
            expected=expected,
        )


def validate_json_response(data: Dict[str, Any], required_fields: Iterable[str]) -> None:
    """Raise ValidationError listing every required field missing from ``data``."""
    missing = [name for name in required_fields if name not in data]
    if missing:
        raise ValidationError(
            f"Response is missing fields: {', '.join(missing)}",
            validation_type="json_response",
            violations=[f"missing field: {name}" for name in missing],
        )


def generate_random_device(rng: Optional[random.Random] = None) -> Dict[str, Any]:
    """Random device payload: name ``Test <type>``, colour, price 500-1499, stock flag."""
    rng = rng or random.Random()
    return {
        "name": f"Test {rng.choice(DEVICE_TYPES)}",
        "data": {
            "color": rng.choice(DEVICE_COLORS),
            "price": rng.randint(500, 1499),
            "inStock": rng.random() > 0.5,
        },
    }


class DeviceApi:
    """
    Device CRUD client for restful-api.dev.

    Every call checks the response status and raises ApiRequestError when it
    does not match, so suites can simply let failures propagate.

    Example:
        api = DeviceApi(playwright.request.new_context())
        device = api.create_device("iPhone 15", {"price": 999})
        api.delete_device(device["id"])
    """

    def __init__(
        self,
        request_context: APIRequestContext,
        base_url: str = DEFAULT_BASE_URL,
        logger: Optional[logging.Logger] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.request = request_context
        self.base_url = base_url.rstrip("/")
        self.logger = logger or logging.getLogger(__name__)
        self._sleep = sleep

    def _url(self, device_id: Optional[str] = None) -> str:
        if device_id is None:
            return f"{self.base_url}/objects"
        return f"{self.base_url}/objects/{device_id}"

    def _check(self, response: APIResponse, method: str, expected: int) -> None:
        if response.status != expected:
            raise ApiRequestError(
                f"{method} {response.url} returned {response.status}, expected {expected}",
                method=method,
                url=response.url,
                status=response.status,
                expected=expected,
            )

    def create_device(self, name: str, data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        response = self.request.post(self._url(), data={"name": name, "data": data})
        self._check(response, "POST", 200)
        device = response.json()
        self.logger.info(
            f"Created device: {name} ({device['id']})",
            extra={"metadata": {"device_id": device["id"], "name": name}},
        )
        return device

    def get_device(self, device_id: str) -> Dict[str, Any]:
        response = self.request.get(self._url(device_id))
        self._check(response, "GET", 200)
        return response.json()

    def update_device(
        self, device_id: str, name: str, data: Optional[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """Replace a device with PUT."""
        response = self.request.put(self._url(device_id), data={"name": name, "data": data})
        self._check(response, "PUT", 200)
        self.logger.info(
            f"Updated device: {name} ({device_id})",
            extra={"metadata": {"device_id": device_id, "name": name}},
        )
        return response.json()

    def patch_device(self, device_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Partially update a device with PATCH."""
        response = self.request.patch(self._url(device_id), data=fields)
        self._check(response, "PATCH", 200)
        self.logger.info(
            f"Patched device: {device_id}",
            extra={"metadata": {"device_id": device_id, "fields": sorted(fields)}},
        )
        return response.json()

    def delete_device(self, device_id: str) -> None:
        response = self.request.delete(self._url(device_id))
        if not response.ok:
            raise ApiRequestError(
                f"DELETE {response.url} returned {response.status}",
                method="DELETE",
                url=response.url,
                status=response.status,
            )
        self.logger.info(
            f"Deleted device: {device_id}", extra={"metadata": {"device_id": device_id}}
        )

    def validate_device_schema(self, device: Dict[str, Any]) -> None:
        """
        Check that a device has a string id and name and an object (or null) data.

        Raises:
            ValidationError: With one violation per failed check
        """
        violations = []
        for name in ("id", "name", "data"):
            if name not in device:
                violations.append(f"missing field: {name}")

        if "id" in device and not isinstance(device["id"], str):
            violations.append("id must be a string")
        if "name" in device and not isinstance(device["name"], str):
            violations.append("name must be a string")
        if "data" in device and not (device["data"] is None or isinstance(device["data"], dict)):
            violations.append("data must be an object or null")

        if violations:
            raise ValidationError(
                f"Invalid device schema: {'; '.join(violations)}",
                validation_type="device_schema",
                violations=violations,
            )
        self.logger.debug(f"Device schema is valid: {device['name']}")

    def create_multiple_devices(self, specs: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        created = [self.create_device(spec["name"], spec.get("data")) for spec in specs]
        self.logger.info(f"Created {len(created)} devices")
        return created

    def delete_multiple_devices(self, device_ids: Iterable[str]) -> None:
        ids = list(device_ids)
        for device_id in ids:
            self.delete_device(device_id)
        self.logger.info(f"Deleted {len(ids)} devices")

    def device_exists(self, device_id: str) -> bool:
        response = self.request.get(self._url(device_id))
        return response.status == 200

    def wait_for_device(
        self, device_id: str, max_attempts: int = 10, delay_ms: int = 500
    ) -> bool:
        """
        Poll until a device can be fetched.

        Raises:
            ResourceNotFoundError: If the device is still missing after
                ``max_attempts`` lookups
        """
        start = time.time()
        for attempt in range(1, max_attempts + 1):
            if self.device_exists(device_id):
                log_performance(
                    self.logger, "wait_for_device", time.time() - start,
                    device_id=device_id, attempts=attempt,
                )
                return True
            if attempt < max_attempts:
                self._sleep(delay_ms / 1000)

        raise ResourceNotFoundError(
            f"Device not found after {max_attempts} attempts: {device_id}",
            resource_id=device_id,
            attempts=max_attempts,
        )

    def list_devices(self, ids: Optional[Iterable[str]] = None) -> List[Dict[str, Any]]:
        """List all objects, or only the given ids (``?id=1&id=2``)."""
        url = self._url()
        if ids:
            url = f"{url}?{urlencode([('id', i) for i in ids])}"
        response = self.request.get(url)
        self._check(response, "GET", 200)
        return response.json()

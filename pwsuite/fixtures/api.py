"""API fixtures: request contexts, clients and self-cleaning devices."""

import logging
from typing import Any, Dict, Generator, List

import pytest
from playwright.sync_api import APIRequestContext, Playwright

from ..api.auth import DEFAULT_BASE_URL as AUTH_BASE_URL, TokenAuthClient
from ..api.devices import DEFAULT_BASE_URL as DEVICE_BASE_URL, DeviceApi


logger = logging.getLogger(__name__)

TEST_DEVICE = {
    "name": "Test Device",
    "data": {"color": "Blue", "price": 999, "category": "test"},
}

MULTIPLE_DEVICES = [
    {"name": "Test Phone", "data": {"type": "phone", "price": 699}},
    {"name": "Test Tablet", "data": {"type": "tablet", "price": 899}},
    {"name": "Test Laptop", "data": {"type": "laptop", "price": 1299}},
]


@pytest.fixture
def api_client(playwright: Playwright) -> Generator[APIRequestContext, None, None]:
    """Request context for the device API, disposed after the test."""
    logger.debug("Setup: API client")
    context = playwright.request.new_context(base_url=DEVICE_BASE_URL)
    yield context
    context.dispose()
    logger.debug("Teardown: API client")


@pytest.fixture
def device_api(api_client: APIRequestContext) -> DeviceApi:
    return DeviceApi(api_client)


def _cleanup(api_client: APIRequestContext, device: Dict[str, Any]) -> None:
    # The test may already have deleted it; a 404 here is fine
    response = api_client.delete(f"{DEVICE_BASE_URL}/objects/{device['id']}")
    logger.info(
        f"Teardown: deleted {device.get('name')} ({device['id']})",
        extra={"metadata": {"device_id": device["id"], "status": response.status}},
    )


@pytest.fixture
def test_device(
    device_api: DeviceApi, api_client: APIRequestContext
) -> Generator[Dict[str, Any], None, None]:
    """A device created before the test and deleted after it."""
    device = device_api.create_device(TEST_DEVICE["name"], dict(TEST_DEVICE["data"]))
    yield device
    _cleanup(api_client, device)


@pytest.fixture
def multiple_devices(
    device_api: DeviceApi, api_client: APIRequestContext
) -> Generator[List[Dict[str, Any]], None, None]:
    """Three devices (phone, tablet, laptop), all deleted after the test."""
    devices = device_api.create_multiple_devices([dict(spec) for spec in MULTIPLE_DEVICES])
    yield devices
    for device in devices:
        _cleanup(api_client, device)


@pytest.fixture
def token_client(playwright: Playwright) -> Generator[TokenAuthClient, None, None]:
    """Client for the dummyjson auth endpoints."""
    context = playwright.request.new_context()
    yield TokenAuthClient(context, AUTH_BASE_URL)
    context.dispose()

"""Per-test logger and test-data generator fixtures."""

import time
from typing import Generator

import pytest

from ..core.logging_config import ContextAdapter, LogManager
from ..data.generators import FakerDataGenerator, UserDataGenerator


@pytest.fixture
def test_logger(request) -> Generator[ContextAdapter, None, None]:
    """LogManager child bound to the current test node."""
    log = LogManager.get_instance().for_test(request.node.nodeid)
    start = time.time()
    log.info("Test started")
    yield log
    log.info("Test finished", extra={"metadata": {"duration": round(time.time() - start, 3)}})


@pytest.fixture
def faker_data(request) -> FakerDataGenerator:
    """Faker generator, seeded from ``--faker-seed`` when given."""
    seed = request.config.getoption("--faker-seed", default=None)
    return FakerDataGenerator(seed=seed)


@pytest.fixture
def user_data() -> UserDataGenerator:
    return UserDataGenerator()

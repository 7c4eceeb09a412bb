import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from app.core.config import Settings


@pytest.fixture
def fast_settings():
    """Settings with budgets small enough to exercise timeouts quickly."""
    return Settings(
        request_timeout_ms=200,
        navigation_timeout_ms=150,
        network_idle_timeout_ms=50,
    )


@pytest.fixture
def navigation_error():
    return PlaywrightError("net::ERR_CONNECTION_RESET")


@pytest.fixture
def idle_timeout():
    return PlaywrightTimeoutError("Timeout 5000ms exceeded.")

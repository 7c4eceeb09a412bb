"""Bounded-retry page navigation."""

import logging
from typing import Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, Response
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_none,
)

from app.services.errors import NavigationError

logger = logging.getLogger(__name__)

NAVIGATION_TIMEOUT_MS = 15_000
DEFAULT_ATTEMPTS = 2


async def navigate_with_retry(
    page: Page,
    url: str,
    *,
    attempts: int = DEFAULT_ATTEMPTS,
    timeout_ms: int = NAVIGATION_TIMEOUT_MS,
    log: Optional[logging.Logger] = None,
) -> Optional[Response]:
    """Navigate *page* to *url*, retrying immediately on browser errors.

    Each attempt waits only for ``domcontentloaded`` so pages with
    long-lived connections (analytics beacons, websockets) still finish.
    Returns the navigation response, which Playwright reports as ``None``
    for same-document navigations. Errors that are not Playwright errors
    propagate on the first attempt.

    Raises:
        ValueError: if *attempts* is less than 1.
        NavigationError: once every attempt has failed, chained from the
            last Playwright error.
    """
    log = log or logger
    if attempts < 1:
        raise ValueError("attempts must be at least 1")

    response: Optional[Response] = None
    try:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(attempts),
            retry=retry_if_exception_type(PlaywrightError),
            wait=wait_none(),
            before_sleep=before_sleep_log(log, logging.INFO),
            reraise=True,
        ):
            with attempt:
                response = await page.goto(
                    url, wait_until="domcontentloaded", timeout=timeout_ms
                )
    except PlaywrightError as exc:
        log.warning("Navigation to %s failed after %d attempts: %s", url, attempts, exc)
        raise NavigationError(
            f"Navigation to {url} failed after {attempts} attempts", cause=exc
        ) from exc

    return response

"""Request-scoped Playwright browser sessions."""

import logging
from contextlib import AsyncExitStack, asynccontextmanager
from typing import AsyncIterator, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, async_playwright

from app.core.config import Settings, settings as default_settings
from app.services.errors import ExtractionError

logger = logging.getLogger(__name__)


async def _close_quietly(resource, name: str, log: logging.Logger) -> None:
    """Close *resource*, logging instead of raising on failure.

    A failed close must never replace the outcome of the scrape itself.
    """
    try:
        await resource.close()
    except Exception as exc:
        log.warning("Failed to close browser %s: %s", name, exc)


async def _open_page(stack: AsyncExitStack, cfg: Settings, log: logging.Logger) -> Page:
    pw = await stack.enter_async_context(async_playwright())
    browser = await pw.chromium.launch(headless=True, args=cfg.browser_args)
    stack.push_async_callback(_close_quietly, browser, "instance", log)

    context = await browser.new_context(
        user_agent=cfg.user_agent,
        viewport={"width": cfg.viewport_width, "height": cfg.viewport_height},
    )
    # Registered last, so it closes before the browser that owns it.
    stack.push_async_callback(_close_quietly, context, "context", log)

    return await context.new_page()


@asynccontextmanager
async def open_browser_session(
    cfg: Optional[Settings] = None,
    *,
    log: Optional[logging.Logger] = None,
) -> AsyncIterator[Page]:
    """Launch a fresh headless Chromium and yield a page in an isolated context.

    The context and browser are closed on every exit path, including
    exceptions and cancellation. Nothing is shared between sessions.

    Raises:
        ExtractionError: if the browser, context or page cannot be created.
    """
    cfg = cfg or default_settings
    log = log or logger

    async with AsyncExitStack() as stack:
        try:
            page = await _open_page(stack, cfg, log)
        except PlaywrightError as exc:
            log.error("Unable to start a browser session: %s", exc)
            raise ExtractionError("Unable to start a browser session", cause=exc) from exc
        yield page

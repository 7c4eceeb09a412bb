"""Page extraction: one browser session, one page, four metadata fields."""

import logging
from typing import AsyncContextManager, Callable, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from app.core.config import Settings, settings as default_settings
from app.models.metadata import PageMetadata
from app.services.browser_fetcher import open_browser_session
from app.services.errors import ExtractionError
from app.services.extractor import extract_fields
from app.services.navigation import navigate_with_retry
from app.services.sanitizer import sanitize_text

logger = logging.getLogger(__name__)

SessionFactory = Callable[..., AsyncContextManager[Page]]

DEFAULT_STATUS = 200


async def _wait_for_network_idle(page: Page, timeout_ms: int, log: logging.Logger) -> None:
    """Give the page a short chance to go quiet; carry on either way."""
    try:
        await page.wait_for_load_state("networkidle", timeout=timeout_ms)
    except PlaywrightError as exc:
        log.info("Network idle not reached within %d ms, using current DOM (%s)", timeout_ms, exc)


async def extract_page_metadata(
    url: str,
    *,
    cfg: Optional[Settings] = None,
    session_factory: Optional[SessionFactory] = None,
    log: Optional[logging.Logger] = None,
) -> PageMetadata:
    """Render *url* in a fresh browser session and return its metadata.

    Steps run strictly in order: open session, navigate (with retries),
    best-effort wait for network idle, read the document, sanitise. The
    session is released before this coroutine returns or raises.

    Raises:
        ExtractionError: if the session cannot be opened or the document
            cannot be read.
        NavigationError: if every navigation attempt failed.
    """
    cfg = cfg or default_settings
    log = log or logger
    session_factory = session_factory or open_browser_session

    async with session_factory(cfg, log=log) as page:
        response = await navigate_with_retry(
            page,
            url,
            attempts=cfg.navigation_attempts,
            timeout_ms=cfg.navigation_timeout_ms,
            log=log,
        )

        await _wait_for_network_idle(page, cfg.network_idle_timeout_ms, log)

        try:
            html = await page.content()
        except PlaywrightError as exc:
            log.error("Unable to read the rendered document for %s: %s", url, exc)
            raise ExtractionError("Unable to read the rendered document", cause=exc) from exc

        fields = extract_fields(html)
        return PageMetadata(
            title=sanitize_text(fields.title),
            meta_description=sanitize_text(fields.meta_description),
            h1=sanitize_text(fields.h1),
            status=response.status if response is not None else DEFAULT_STATUS,
        )

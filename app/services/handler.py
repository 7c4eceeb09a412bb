"""Request handling: validate, extract under a deadline, classify the outcome."""

import logging
import time
from typing import Awaitable, Callable, Optional

from app.core.config import Settings, settings as default_settings
from app.models.metadata import PageMetadata
from app.models.outcome import FailureKind, ScrapeFailure, ScrapeOutcome, ScrapeSuccess
from app.models.request import ScrapeTarget
from app.services.deadline import race_with_deadline
from app.services.errors import DeadlineExceeded, InvalidUrlError, NavigationError
from app.services.scraper import extract_page_metadata

logger = logging.getLogger(__name__)

Extractor = Callable[..., Awaitable[PageMetadata]]


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)


async def handle_scrape_request(
    raw_url: Optional[str],
    *,
    cfg: Optional[Settings] = None,
    extractor: Optional[Extractor] = None,
    log: Optional[logging.Logger] = None,
) -> ScrapeOutcome:
    """Scrape *raw_url* and return a tagged outcome; never raises for scrape failures.

    An invalid URL is rejected before any browser work. Everything else runs
    under the overall request budget from *cfg*.
    """
    cfg = cfg or default_settings
    log = log or logger
    extractor = extractor or extract_page_metadata

    try:
        target = ScrapeTarget.parse(raw_url)
    except InvalidUrlError as exc:
        log.info("Rejected scrape request: %s", exc)
        return ScrapeFailure(FailureKind.INVALID_URL, cause=exc)

    url = str(target)
    started = time.monotonic()
    try:
        metadata = await race_with_deadline(
            extractor(url, cfg=cfg, log=log),
            cfg.request_timeout_ms,
            log=log,
        )
    except DeadlineExceeded as exc:
        log.warning("Scrape of %s timed out after %d ms", url, _elapsed_ms(started))
        return ScrapeFailure(FailureKind.TIMEOUT, cause=exc)
    except NavigationError as exc:
        log.error("Scrape of %s failed after %d ms: %s", url, _elapsed_ms(started), exc)
        return ScrapeFailure(FailureKind.NAVIGATION_FAILED, cause=exc)
    except Exception as exc:
        log.error("Scrape of %s failed after %d ms: %s", url, _elapsed_ms(started), exc)
        return ScrapeFailure(FailureKind.EXTRACTION_FAILED, cause=exc)

    log.info("Successfully scraped %s in %d ms", url, _elapsed_ms(started))
    return ScrapeSuccess(metadata)

"""Tagged result of one scrape request."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from app.models.metadata import PageMetadata


class FailureKind(str, Enum):
    INVALID_URL = "invalid_url"
    TIMEOUT = "timeout"
    NAVIGATION_FAILED = "navigation_failed"
    EXTRACTION_FAILED = "extraction_failed"


@dataclass(frozen=True)
class ScrapeSuccess:
    metadata: PageMetadata


@dataclass(frozen=True)
class ScrapeFailure:
    kind: FailureKind
    # Kept for logs only; never serialised into a response body.
    cause: Optional[BaseException] = None


ScrapeOutcome = Union[ScrapeSuccess, ScrapeFailure]

import logging
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.models.metadata import PageMetadata
from app.models.outcome import FailureKind, ScrapeOutcome, ScrapeSuccess
from app.models.response import (
    FAILURE_MESSAGE,
    INVALID_URL_MESSAGE,
    TIMEOUT_MESSAGE,
    ErrorResponse,
)
from app.services.handler import handle_scrape_request

logger = logging.getLogger(__name__)

router = APIRouter()

# FailureKind -> (HTTP status, public message)
_FAILURE_RESPONSES = {
    FailureKind.INVALID_URL: (400, INVALID_URL_MESSAGE),
    FailureKind.TIMEOUT: (504, TIMEOUT_MESSAGE),
    FailureKind.NAVIGATION_FAILED: (500, FAILURE_MESSAGE),
    FailureKind.EXTRACTION_FAILED: (500, FAILURE_MESSAGE),
}


@router.get(
    "/scrape",
    response_model=PageMetadata,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
    summary="Extract title, description, first heading and status from a page",
)
async def scrape(
    url: Optional[str] = Query(default=None, description="Absolute http(s) URL to scrape."),
) -> JSONResponse:
    """Render *url* in a headless browser and return its metadata.

    - **200** – metadata extracted (cacheable)
    - **400** – ``url`` missing or not an http(s) URL
    - **504** – the overall request budget was exceeded
    - **500** – navigation or extraction failed
    """
    outcome = await handle_scrape_request(url)
    return _to_response(outcome)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _to_response(outcome: ScrapeOutcome) -> JSONResponse:
    if isinstance(outcome, ScrapeSuccess):
        return JSONResponse(
            status_code=200,
            content=outcome.metadata.model_dump(by_alias=True),
            headers={"Cache-Control": settings.cache_control},
        )

    status_code, message = _FAILURE_RESPONSES[outcome.kind]
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )

"""Tests for the GET /scrape endpoint.

The browser pipeline is replaced with lightweight mocks so the tests run
without internet access or an installed Chromium.
"""

import asyncio
import time
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import app
from app.models.metadata import PageMetadata
from app.services.errors import ExtractionError, NavigationError

client = TestClient(app)

_METADATA = PageMetadata(
    title="Example", meta_description="A test site", h1="Welcome", status=200
)


def _get(url: str | None = "https://example.com"):
    params = {} if url is None else {"url": url}
    return client.get("/scrape", params=params)


def _patch_extractor(**kwargs):
    return patch("app.services.handler.extract_page_metadata", new=AsyncMock(**kwargs))


# ---------------------------------------------------------------------------
# 200 – success
# ---------------------------------------------------------------------------

class TestScrapeSuccess:
    def test_returns_metadata_fields(self):
        with _patch_extractor(return_value=_METADATA):
            resp = _get()

        assert resp.status_code == 200
        assert resp.json() == {
            "title": "Example",
            "metaDescription": "A test site",
            "h1": "Welcome",
            "status": 200,
        }

    def test_response_is_cacheable(self):
        with _patch_extractor(return_value=_METADATA):
            resp = _get()

        assert resp.headers["cache-control"] == (
            "public, s-maxage=3600, stale-while-revalidate=86400"
        )

    def test_target_status_is_reported_not_used(self):
        with _patch_extractor(return_value=_METADATA.model_copy(update={"status": 404})):
            resp = _get()

        assert resp.status_code == 200
        assert resp.json()["status"] == 404


# ---------------------------------------------------------------------------
# 400 – invalid URL
# ---------------------------------------------------------------------------

class TestScrapeInvalidUrl:
    def test_missing_url(self):
        with _patch_extractor(side_effect=AssertionError("extractor must not be called")) as mock:
            resp = _get(None)

        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid URL"}
        mock.assert_not_called()

    def test_malformed_url(self):
        with _patch_extractor() as mock:
            resp = _get("not a url")

        assert resp.status_code == 400
        mock.assert_not_called()

    def test_unsupported_scheme(self):
        with _patch_extractor() as mock:
            resp = _get("ftp://example.com/file")

        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid URL"}
        mock.assert_not_called()


# ---------------------------------------------------------------------------
# 504 – overall budget exceeded
# ---------------------------------------------------------------------------

class TestScrapeTimeout:
    def test_slow_extraction_returns_504_at_budget(self):
        async def _slow(url, **kwargs):
            await asyncio.sleep(25)
            return _METADATA

        with (
            patch("app.services.handler.default_settings", Settings(request_timeout_ms=100)),
            patch("app.services.handler.extract_page_metadata", new=_slow),
        ):
            started = time.monotonic()
            resp = _get()
            elapsed = time.monotonic() - started

        assert resp.status_code == 504
        assert resp.json() == {"error": "Timeout"}
        assert elapsed < 2


# ---------------------------------------------------------------------------
# 500 – everything else
# ---------------------------------------------------------------------------

class TestScrapeFailure:
    def test_navigation_failure_returns_500(self):
        with _patch_extractor(side_effect=NavigationError("net::ERR_NAME_NOT_RESOLVED")):
            resp = _get()

        assert resp.status_code == 500
        assert resp.json() == {"error": "Unable to complete scrape"}

    def test_extraction_failure_returns_500(self):
        with _patch_extractor(side_effect=ExtractionError("browser missing")):
            resp = _get()

        assert resp.status_code == 500
        assert resp.json() == {"error": "Unable to complete scrape"}

    def test_unexpected_error_returns_500_without_details(self):
        with _patch_extractor(side_effect=RuntimeError("secret internal detail")):
            resp = _get()

        assert resp.status_code == 500
        assert "secret" not in resp.text

    def test_failure_is_not_cacheable(self):
        with _patch_extractor(side_effect=NavigationError("down")):
            resp = _get()

        assert "cache-control" not in resp.headers


def test_health_check():
    resp = client.get("/")
    assert resp.status_code == 200
    assert "message" in resp.json()

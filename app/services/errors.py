"""Exception types raised by the scraping pipeline."""


class ScrapeError(Exception):
    """Base class for every failure the scraping pipeline reports."""


class InvalidUrlError(ScrapeError, ValueError):
    """The caller supplied a missing, malformed, or non-http(s) URL."""


class DeadlineExceeded(ScrapeError):
    """The overall request budget elapsed before extraction finished."""

    def __init__(self, budget_ms: int) -> None:
        super().__init__(f"Operation exceeded its {budget_ms} ms budget")
        self.budget_ms = budget_ms


class NavigationError(ScrapeError):
    """Every navigation attempt failed; ``cause`` holds the last error."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ExtractionError(ScrapeError):
    """Session setup or the document query failed."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause

from pydantic import BaseModel

INVALID_URL_MESSAGE = "Invalid URL"
TIMEOUT_MESSAGE = "Timeout"
FAILURE_MESSAGE = "Unable to complete scrape"


class ErrorResponse(BaseModel):
    """Body returned for every non-200 scrape response.

    ``error`` is a short fixed message; causes and tracebacks never leak here.
    """

    error: str

from typing import Annotated, Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, UrlConstraints, ValidationError

from app.services.errors import InvalidUrlError

# http(s) with a host, without the 2083-character cap HttpUrl carries.
WebUrl = Annotated[AnyUrl, UrlConstraints(allowed_schemes=["http", "https"], host_required=True)]


class ScrapeTarget(BaseModel):
    """A validated absolute http(s) URL for a single scrape request."""

    model_config = ConfigDict(frozen=True)

    url: WebUrl

    @classmethod
    def parse(cls, raw: Optional[str]) -> "ScrapeTarget":
        """Build a target from raw user input.

        Raises:
            InvalidUrlError: if *raw* is missing, blank, unparsable, has no
                host, or uses a scheme other than http/https.
        """
        if raw is None or not raw.strip():
            raise InvalidUrlError("A URL is required.")
        try:
            return cls(url=raw.strip())
        except ValidationError as exc:
            raise InvalidUrlError(f"Not a valid http(s) URL: {raw!r}") from exc

    def __str__(self) -> str:
        return str(self.url)

from typing import NamedTuple, Optional

from bs4 import BeautifulSoup


class PageFields(NamedTuple):
    """Raw, unsanitised fields read from a rendered document."""

    title: str
    meta_description: str
    h1: str


def _extract_title(soup: BeautifulSoup) -> str:
    title_tag = soup.find("title")
    if title_tag:
        return title_tag.get_text()
    return ""


def _meta_content(soup: BeautifulSoup, **attrs: str) -> Optional[str]:
    """Return the ``content`` of the first matching <meta>, or None if absent."""
    meta = soup.find("meta", attrs=attrs)
    if meta is None:
        return None
    content = meta.get("content")
    return None if content is None else str(content)


def _extract_description(soup: BeautifulSoup) -> str:
    description = _meta_content(soup, name="description")
    if description is None:
        description = _meta_content(soup, property="og:description")
    return description or ""


def _extract_h1(soup: BeautifulSoup) -> str:
    h1 = soup.find("h1")
    if h1:
        return h1.get_text()
    return ""


def extract_fields(html: str) -> PageFields:
    """Read the title, meta description and first <h1> from *html*.

    The description comes from ``<meta name="description">`` and falls back
    to ``<meta property="og:description">``. A tag with no ``content``
    attribute counts as missing; one with ``content=""`` does not.
    """
    soup = BeautifulSoup(html, "lxml")
    return PageFields(
        title=_extract_title(soup),
        meta_description=_extract_description(soup),
        h1=_extract_h1(soup),
    )

import re
from typing import Optional

# Any run of whitespace, including newlines, tabs and non-breaking spaces
_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_text(value: Optional[str]) -> str:
    """Collapse whitespace runs in *value* to one space and trim the ends.

    ``None`` is treated as an empty string.
    """
    if not value:
        return ""
    return _WHITESPACE_RE.sub(" ", value).strip()

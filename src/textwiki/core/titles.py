"""Page title validation."""

import re

from textwiki.core.errors import InvalidTitleError

# Letters, digits and spaces only. Anything else (".", "/", "]", ...) is
# rejected before a filename is ever built from the title.
TITLE_PATTERN = re.compile(r"[A-Za-z0-9 ]+")


def is_valid_title(raw: str) -> bool:
    """Return True if ``raw`` is a legal page title."""
    return TITLE_PATTERN.fullmatch(raw) is not None


def require_valid_title(raw: str) -> str:
    """Return ``raw`` unchanged or raise InvalidTitleError."""
    if not is_valid_title(raw):
        raise InvalidTitleError(raw)
    return raw

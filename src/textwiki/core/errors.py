"""Exception types raised by the wiki core."""


class WikiError(Exception):
    """Base class for wiki errors."""


class InvalidTitleError(WikiError):
    """A path segment is not a legal page title.

    Reported to clients as "not found" so the reason is not revealed.
    """

    def __init__(self, title: str):
        super().__init__(f"invalid page title: {title!r}")
        self.title = title


class PageNotFoundError(WikiError):
    """A valid title has no backing file."""

    def __init__(self, title: str):
        super().__init__(f"page not found: {title}")
        self.title = title


class StorageWriteError(WikiError):
    """Persisting a page failed."""

    def __init__(self, title: str, reason: str):
        super().__init__(reason)
        self.title = title
        self.reason = reason


class RenderError(WikiError):
    """Template execution failed."""

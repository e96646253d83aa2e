"""Storage abstraction for wiki pages."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from starlette.concurrency import run_in_threadpool

from textwiki.core.errors import PageNotFoundError, StorageWriteError
from textwiki.core.models import Page

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Abstract base class for page storage."""

    @abstractmethod
    async def load(self, title: str) -> Page:
        """Load a page by title. Raises PageNotFoundError if absent."""
        ...

    @abstractmethod
    async def save(self, page: Page) -> Page:
        """Save a page, replacing any previous body."""
        ...

    @abstractmethod
    async def exists(self, title: str) -> bool:
        """Check if a page exists."""
        ...


class FileStorage(Storage):
    """File-based storage implementation.

    One file per page: ``<base_path>/<title><suffix>``, holding the raw body
    with no header. Titles are not checked here; callers must validate them
    before asking for a page. File access runs in the thread pool so a slow
    disk only holds up the request that touches it.
    """

    def __init__(self, base_path: Path, suffix: str = ".txt", file_mode: int = 0o600):
        self.base_path = base_path
        self.suffix = suffix
        self.file_mode = file_mode
        self.base_path.mkdir(parents=True, exist_ok=True)

    def path_for(self, title: str) -> Path:
        """Get full path for a page."""
        return self.base_path / (title + self.suffix)

    def _read(self, path: Path) -> bytes:
        return path.read_bytes()

    def _write(self, path: Path, data: bytes) -> None:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.file_mode)
        with os.fdopen(fd, "wb") as f:
            f.write(data)

    async def load(self, title: str) -> Page:
        """Load a page.

        Any read failure counts as a missing page. Invalid UTF-8 is
        replaced rather than rejected.
        """
        path = self.path_for(title)
        try:
            data = await run_in_threadpool(self._read, path)
        except FileNotFoundError:
            raise PageNotFoundError(title) from None
        except OSError as e:
            logger.warning("Cannot read page %r: %s", title, e)
            raise PageNotFoundError(title) from e

        return Page(title=title, body=data.decode("utf-8", errors="replace"))

    async def save(self, page: Page) -> Page:
        """Save a page in a single whole-file write."""
        path = self.path_for(page.title)
        data = page.body.encode("utf-8")
        try:
            await run_in_threadpool(self._write, path, data)
        except OSError as e:
            raise StorageWriteError(page.title, str(e)) from e

        logger.info("Saved page %r (%d bytes)", page.title, len(data))
        return page

    async def exists(self, title: str) -> bool:
        """Check if a page exists."""
        try:
            return await run_in_threadpool(self.path_for(title).is_file)
        except OSError:
            return False

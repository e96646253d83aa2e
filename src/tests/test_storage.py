"""Unit tests for FileStorage."""

import stat
import threading

import pytest

from textwiki.core.errors import PageNotFoundError, StorageWriteError
from textwiki.core.models import Page
from textwiki.core.storage import FileStorage


@pytest.fixture
def storage(tmp_path):
    return FileStorage(tmp_path)


# ============================================================
# Paths
# ============================================================


class TestPaths:
    def test_path_for(self, storage, tmp_path):
        assert storage.path_for("FrontPage") == tmp_path / "FrontPage.txt"

    def test_path_for_keeps_spaces(self, storage, tmp_path):
        assert storage.path_for("My Page 1") == tmp_path / "My Page 1.txt"

    def test_custom_suffix(self, tmp_path):
        storage = FileStorage(tmp_path, suffix=".wiki")
        assert storage.path_for("Home") == tmp_path / "Home.wiki"

    def test_creates_base_path(self, tmp_path):
        base = tmp_path / "nested" / "pages"
        FileStorage(base)
        assert base.is_dir()


# ============================================================
# Load / save
# ============================================================


class TestLoadSave:
    @pytest.mark.asyncio
    async def test_round_trip(self, storage):
        await storage.save(Page(title="My Page 1", body="Hello [[World]]\n"))
        page = await storage.load("My Page 1")
        assert page.title == "My Page 1"
        assert page.body == "Hello [[World]]\n"

    @pytest.mark.asyncio
    async def test_body_stored_verbatim(self, storage, tmp_path):
        body = "line one\r\nline two [[http://example.com]]\n\tünïcode"
        await storage.save(Page(title="Raw", body=body))
        assert (tmp_path / "Raw.txt").read_bytes() == body.encode("utf-8")

    @pytest.mark.asyncio
    async def test_empty_body(self, storage):
        await storage.save(Page(title="Empty", body=""))
        page = await storage.load("Empty")
        assert page.body == ""

    @pytest.mark.asyncio
    async def test_overwrite(self, storage):
        await storage.save(Page(title="Page", body="a much longer first version"))
        await storage.save(Page(title="Page", body="v2"))
        page = await storage.load("Page")
        assert page.body == "v2"

    @pytest.mark.asyncio
    async def test_save_returns_page(self, storage):
        page = Page(title="Page", body="text")
        assert await storage.save(page) == page

    @pytest.mark.asyncio
    async def test_load_missing_raises(self, storage):
        with pytest.raises(PageNotFoundError) as exc_info:
            await storage.load("Missing")
        assert exc_info.value.title == "Missing"

    @pytest.mark.asyncio
    async def test_load_directory_is_not_found(self, storage, tmp_path):
        (tmp_path / "Folder.txt").mkdir()
        with pytest.raises(PageNotFoundError):
            await storage.load("Folder")

    @pytest.mark.asyncio
    async def test_load_name_too_long_is_not_found(self, storage):
        with pytest.raises(PageNotFoundError):
            await storage.load("A" * 300)

    @pytest.mark.asyncio
    async def test_load_invalid_utf8(self, storage, tmp_path):
        (tmp_path / "Latin.txt").write_bytes(b"caf\xe9 [[Home]]")
        page = await storage.load("Latin")
        assert page.body == "caf\ufffd [[Home]]"

    @pytest.mark.asyncio
    async def test_file_is_private(self, storage, tmp_path):
        await storage.save(Page(title="Secret", body="x"))
        mode = stat.S_IMODE((tmp_path / "Secret.txt").stat().st_mode)
        assert mode & 0o077 == 0

    @pytest.mark.asyncio
    async def test_write_failure(self, tmp_path):
        storage = FileStorage(tmp_path)
        storage.base_path = tmp_path / "gone"
        with pytest.raises(StorageWriteError) as exc_info:
            await storage.save(Page(title="Page", body="x"))
        assert exc_info.value.title == "Page"
        assert "gone" in str(exc_info.value)


class TestExists:
    @pytest.mark.asyncio
    async def test_exists(self, storage):
        assert not await storage.exists("Page")
        await storage.save(Page(title="Page", body=""))
        assert await storage.exists("Page")


class RecordingStorage(FileStorage):
    """Records which thread performs file access."""

    def __init__(self, base_path):
        super().__init__(base_path)
        self.threads: list[int] = []

    def _read(self, path):
        self.threads.append(threading.get_ident())
        return super()._read(path)

    def _write(self, path, data):
        self.threads.append(threading.get_ident())
        super()._write(path, data)


class TestThreadPool:
    @pytest.mark.asyncio
    async def test_file_access_off_event_loop(self, tmp_path):
        storage = RecordingStorage(tmp_path)
        await storage.save(Page(title="Page", body="x"))
        await storage.load("Page")
        assert len(storage.threads) == 2
        assert threading.get_ident() not in storage.threads

"""Request dispatching for the view, edit and save operations.

Every operation checks the title first. An invalid title is answered with
404 before storage or templates are touched, so a client cannot tell a
rejected title from a missing page.
"""

import logging
from urllib.parse import quote

from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response

from textwiki.core.errors import (
    InvalidTitleError,
    PageNotFoundError,
    RenderError,
    StorageWriteError,
)
from textwiki.core.links import LinkRewriter, Sink, extract_links, link_filter
from textwiki.core.models import Page
from textwiki.core.render import TemplateRenderer
from textwiki.core.storage import Storage
from textwiki.core.titles import require_valid_title

logger = logging.getLogger(__name__)

NOT_FOUND_TEXT = "404 page not found"


def _url(prefix: str, title: str) -> str:
    return prefix + quote(title)


def not_found() -> Response:
    return PlainTextResponse(NOT_FOUND_TEXT, status_code=404)


def server_error(detail: str) -> Response:
    return PlainTextResponse(detail, status_code=500)


class WikiDispatcher:
    """Maps validated titles onto storage, templates and link rewriting."""

    def __init__(
        self,
        storage: Storage,
        renderer: TemplateRenderer,
        rewriter: LinkRewriter,
        front_page: str = "FrontPage",
    ):
        self.storage = storage
        self.renderer = renderer
        self.rewriter = rewriter
        self.front_page = front_page

    def front(self) -> Response:
        """Redirect to the front page."""
        return RedirectResponse(url=_url("/view/", self.front_page), status_code=302)

    async def view(self, title: str) -> Response:
        """Show a page with its links rewritten, or send the client to edit it."""
        try:
            require_valid_title(title)
        except InvalidTitleError as e:
            logger.warning("Rejected view: %s", e)
            return not_found()

        try:
            page = await self.storage.load(title)
        except PageNotFoundError:
            logger.info("Page %r does not exist, redirecting to edit", title)
            return RedirectResponse(url=_url("/edit/", title), status_code=302)

        logger.debug("Rendering %r with %d links", title, len(extract_links(page.body)))
        chunks: list[str] = []
        return self._render(link_filter(chunks.append, self.rewriter), chunks, "view", page)

    async def edit(self, title: str) -> Response:
        """Show the edit form, empty if the page does not exist yet."""
        try:
            require_valid_title(title)
        except InvalidTitleError as e:
            logger.warning("Rejected edit: %s", e)
            return not_found()

        try:
            page = await self.storage.load(title)
        except PageNotFoundError:
            page = Page(title=title, body="")

        chunks: list[str] = []
        return self._render(chunks.append, chunks, "edit", page)

    async def save(self, title: str, body: str) -> Response:
        """Store the submitted body and redirect to the page."""
        try:
            require_valid_title(title)
        except InvalidTitleError as e:
            logger.warning("Rejected save: %s", e)
            return not_found()

        page = Page(title=title, body=body)
        try:
            await self.storage.save(page)
        except StorageWriteError as e:
            logger.error("Failed to save %r: %s", title, e)
            return server_error(str(e))

        return RedirectResponse(url=_url("/view/", title), status_code=302)

    def _render(self, sink: Sink, chunks: list[str], name: str, page: Page) -> Response:
        try:
            self.renderer.render(sink, name, page)
        except RenderError as e:
            logger.exception("Failed to render %r", page.title)
            return server_error(str(e))
        return HTMLResponse("".join(chunks))

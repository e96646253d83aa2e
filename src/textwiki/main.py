"""TextWiki FastAPI application.

Run with:
    uvicorn textwiki.main:create_app --factory
"""

import logging

from fastapi import FastAPI, Form, Request

from textwiki.config import Settings, settings as default_settings
from textwiki.core.links import LinkRewriter
from textwiki.core.render import TemplateRenderer
from textwiki.core.storage import FileStorage
from textwiki.dispatcher import WikiDispatcher

logger = logging.getLogger(__name__)


def create_dispatcher(settings: Settings) -> WikiDispatcher:
    """Build the storage, renderer and link rewriter shared by all requests."""
    storage = FileStorage(settings.data_dir)
    renderer = TemplateRenderer(settings.templates_dir, app_title=settings.app_title)
    rewriter = LinkRewriter(view_prefix="/view/", default_scheme=settings.default_scheme)
    return WikiDispatcher(storage, renderer, rewriter, front_page=settings.front_page)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the wiki application."""
    settings = settings or default_settings

    app = FastAPI(
        title=settings.app_title,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.dispatcher = create_dispatcher(settings)
    logger.info("Serving pages from %s", settings.data_dir.resolve())

    @app.get("/")
    async def front_page(request: Request):
        """Redirect to the front page."""
        return request.app.state.dispatcher.front()

    @app.get("/view/{title:path}")
    async def view_page(request: Request, title: str):
        """View a wiki page."""
        return await request.app.state.dispatcher.view(title)

    @app.get("/edit/{title:path}")
    async def edit_page(request: Request, title: str):
        """Edit page form."""
        return await request.app.state.dispatcher.edit(title)

    @app.post("/save/{title:path}")
    async def save_page(request: Request, title: str, body: str = Form("")):
        """Save page content."""
        return await request.app.state.dispatcher.save(title, body)

    return app

"""Jinja2 template rendering for wiki pages."""

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from textwiki.core.errors import RenderError
from textwiki.core.links import Sink
from textwiki.core.models import Page

DEFAULT_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


class TemplateRenderer:
    """Renders pages with named templates into an output sink."""

    def __init__(self, directory: Path | None = None, **env_globals: Any):
        self.directory = directory or DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.directory)),
            autoescape=select_autoescape(["html"]),
        )
        self.env.globals.update(env_globals)

    def render(self, sink: Sink, name: str, page: Page, **context: Any) -> None:
        """Render template ``name`` for ``page`` and write it to ``sink``.

        Raises:
            RenderError: If the template is missing or fails to execute.
        """
        try:
            template = self.env.get_template(f"{name}.html")
            output = template.render(page=page, **context)
        except TemplateError as e:
            raise RenderError(f"template {name!r}: {e}") from e
        sink(output)

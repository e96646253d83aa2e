"""Rewriting of ``[[...]]`` link tokens into HTML anchors.

Three patterns are applied in order, each to the output of the previous one:

1. ``[[Title]]`` where Title has no ``.``, ``]`` or ``/`` becomes a link to
   the wiki's own view route.
2. ``[[http...]]`` becomes a link to that URL.
3. Any other ``[[text]]`` becomes a link to ``text`` with a default scheme.

Each pass consumes the tokens it matches, and the anchors it emits hold no
``]]``, so a second run over rewritten output finds nothing new to match.
Nested tokens such as ``[[x [[y]]]]`` may leave ``[[`` inside an anchor.
Link text is inserted as-is; nothing is HTML-escaped here.
"""

import re
from typing import Callable

# Output sink: receives rendered text one chunk at a time.
Sink = Callable[[str], None]

ARTICLE_LINK_PATTERN = r"\[\[([^.\]/]+)\]\]"
FULL_LINK_PATTERN = r"\[\[(http.+?)\]\]"
NAKED_LINK_PATTERN = r"\[\[(.+?)\]\]"


class LinkRewriter:
    """Turns link tokens in rendered text into anchors."""

    def __init__(self, view_prefix: str = "/view/", default_scheme: str = "http://"):
        self.view_prefix = view_prefix
        self.default_scheme = default_scheme
        self._passes: tuple[tuple[re.Pattern, str], ...] = (
            (
                re.compile(ARTICLE_LINK_PATTERN),
                _anchor(_escape_repl(view_prefix) + r"\1"),
            ),
            (re.compile(FULL_LINK_PATTERN), _anchor(r"\1")),
            (
                re.compile(NAKED_LINK_PATTERN),
                _anchor(_escape_repl(default_scheme) + r"\1"),
            ),
        )

    def rewrite(self, text: str) -> str:
        """Rewrite every link token in ``text``."""
        for pattern, replacement in self._passes:
            text = pattern.sub(replacement, text)
        return text

    def filter(self, sink: Sink) -> Sink:
        """Wrap ``sink`` so each chunk written to it is rewritten first.

        A chunk is rewritten as a whole; a token split across two writes is
        left alone.
        """

        def write(chunk: str) -> None:
            sink(self.rewrite(chunk))

        return write


def _anchor(href: str) -> str:
    return f'<a href="{href}">' + r"\1</a>"


def _escape_repl(value: str) -> str:
    """Make a literal safe for use in a re.sub replacement template."""
    return value.replace("\\", r"\\")


def link_filter(sink: Sink, rewriter: LinkRewriter | None = None) -> Sink:
    """Wrap ``sink`` with link rewriting, using default settings if needed."""
    return (rewriter or LinkRewriter()).filter(sink)


def extract_links(text: str) -> list[str]:
    """Extract the targets of all link tokens in ``text``.

    Args:
        text: Raw page body.

    Returns:
        Link targets in order of appearance.
    """
    return re.findall(NAKED_LINK_PATTERN, text)

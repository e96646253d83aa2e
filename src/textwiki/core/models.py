"""Data models for TextWiki."""

from pydantic import BaseModel


class Page(BaseModel):
    """Represents a wiki page."""

    title: str
    body: str = ""

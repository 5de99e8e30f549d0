"""Utilities for rendering and publishing blog pages."""

from .page_renderer import PageRenderer, page_href, render
from .publisher import WriteResult, publish
from .renderer import HtmlContentRenderer, escape_markup

__all__ = [
    "HtmlContentRenderer",
    "PageRenderer",
    "WriteResult",
    "escape_markup",
    "page_href",
    "publish",
    "render",
]

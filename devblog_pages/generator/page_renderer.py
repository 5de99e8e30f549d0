"""Render validated document sets into standalone HTML pages.

:class:`PageRenderer` turns a document set into a mapping of slug to page text.
It validates the whole set up front, renders each document's nodes with
:class:`~devblog_pages.generator.renderer.HtmlContentRenderer`, and wraps them in
the shared Jinja page template. Rendering is a pure function of its inputs: no
timestamps, no filesystem writes, and no network access, so two calls with the
same documents produce byte-identical pages.

Example
-------
>>> from devblog_pages.content import Document, Heading
>>> from devblog_pages.generator import render
>>> pages = render([Document(title="Hi", slug="hi", content=(Heading(2, "Intro"),))], "style.css")
>>> sorted(pages)
['hi']
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from devblog_pages._constants import DEFAULT_SITE_TITLE, PAGE_FILENAME_TEMPLATE
from devblog_pages.validation import validate_documents

from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from devblog_pages.content.models import Document


def page_href(slug: str) -> str:
    """Return the relative link used to reach the page stored under ``slug``."""
    return PAGE_FILENAME_TEMPLATE.format(slug=slug)


class PageRenderer:
    """Render article and index pages from the shared templates."""

    def __init__(
        self,
        *,
        pygments_style: str | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        pygments_style : str, optional
            Pygments style for highlighted code blocks; ``None`` keeps plain
            escaped blocks.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        """
        self.templates_dir = templates_dir or Path(__file__).resolve().parents[1] / "templates"
        self.content_renderer = HtmlContentRenderer(pygments_style)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.article_template = self.env.get_template("article_page.jinja")
        self.index_template = self.env.get_template("index_page.jinja")

    def render(
        self, documents: cabc.Sequence[Document], stylesheet_path: str
    ) -> dict[str, str]:
        """Validate ``documents`` and render one page per document.

        Parameters
        ----------
        documents : Sequence[Document]
            Complete document set for the site.
        stylesheet_path : str
            Relative stylesheet path referenced from every page head.

        Returns
        -------
        dict[str, str]
            Rendered page text keyed by slug, in input order.

        Raises
        ------
        ValidationError
            Raised (or one of its subclasses) when the set is invalid; no page
            is rendered in that case.
        """
        validate_documents(documents)
        return {
            document.slug: self.render_document(document, stylesheet_path)
            for document in documents
        }

    def render_document(self, document: Document, stylesheet_path: str) -> str:
        """Render a single, already validated document into page text."""
        fragments = [self.content_renderer.node(node) for node in document.content]
        html = self.article_template.render(
            document=document,
            fragments=fragments,
            stylesheet_path=stylesheet_path,
            pygments_css=self.content_renderer.stylesheet,
            back_href=page_href(document.footer_link.target),
        )
        return _ensure_newline(html)

    def render_index(
        self,
        documents: cabc.Sequence[Document],
        stylesheet_path: str,
        *,
        site_title: str = DEFAULT_SITE_TITLE,
    ) -> str:
        """Render the index page listing every document in input order."""
        validate_documents(documents)
        entries = [
            {
                "title": document.title,
                "href": page_href(document.slug),
                "summary": document.summary or "",
            }
            for document in documents
        ]
        html = self.index_template.render(
            site_title=site_title,
            entries=entries,
            stylesheet_path=stylesheet_path,
        )
        return _ensure_newline(html)


def render(documents: cabc.Sequence[Document], stylesheet_path: str) -> dict[str, str]:
    """Render ``documents`` with default settings; see :meth:`PageRenderer.render`."""
    return PageRenderer().render(documents, stylesheet_path)


def _ensure_newline(html: str) -> str:
    if not html.endswith("\n"):
        html += "\n"
    return html


__all__ = ["PageRenderer", "page_href", "render"]

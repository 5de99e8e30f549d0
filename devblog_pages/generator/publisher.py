"""Validate, render, and hand pages to a page sink.

Publishing is fail-fast for validation and per-page for I/O: an invalid
document set raises before the sink sees anything, while an ``OSError`` from the
sink is recorded against its slug and the remaining pages are still written.
Nothing is retried.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from devblog_pages._constants import INDEX_SLUG

from .page_renderer import PageRenderer

if typ.TYPE_CHECKING:
    from devblog_pages.content.models import Document
    from devblog_pages.sinks import PageSink


@dc.dataclass(frozen=True, slots=True)
class WriteResult:
    """Outcome of handing one page to the sink.

    Attributes
    ----------
    slug : str
        Slug of the page that was written.
    error : OSError | None
        The sink's error, unchanged, or ``None`` on success.
    """

    slug: str
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when the sink accepted the page."""
        return self.error is None


def publish(
    documents: cabc.Sequence[Document],
    stylesheet_path: str,
    sink: PageSink,
    *,
    renderer: PageRenderer | None = None,
    site_title: str | None = None,
) -> dict[str, WriteResult]:
    """Render every document and write each page through ``sink``.

    Parameters
    ----------
    documents : Sequence[Document]
        Complete document set for the site.
    stylesheet_path : str
        Stylesheet path referenced from every page.
    sink : PageSink
        Destination for rendered pages.
    renderer : PageRenderer, optional
        Renderer to use; a default :class:`PageRenderer` is built when omitted.
    site_title : str, optional
        When given, the index page is rendered with this title and written
        under the ``index`` slug after the documents.

    Returns
    -------
    dict[str, WriteResult]
        One result per attempted page, keyed by slug.

    Raises
    ------
    ValidationError
        Raised before any write when the document set is invalid.
    """
    active = renderer or PageRenderer()
    pages = active.render(documents, stylesheet_path)
    if site_title is not None:
        pages[INDEX_SLUG] = active.render_index(
            documents, stylesheet_path, site_title=site_title
        )

    results: dict[str, WriteResult] = {}
    for slug, content in pages.items():
        try:
            sink.write(slug, content)
        except OSError as exc:
            results[slug] = WriteResult(slug=slug, error=exc)
        else:
            results[slug] = WriteResult(slug=slug)
    return results


__all__ = ["WriteResult", "publish"]

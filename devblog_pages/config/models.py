"""Typed dataclasses describing blog site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from devblog_pages._constants import DEFAULT_BACK_LABEL
from devblog_pages.content.models import Document  # noqa: TC001 - runtime dataclass field


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteConfig:
    """A fully resolved site definition sourced from YAML config.

    Attributes
    ----------
    title : str
        Title of the generated index page.
    stylesheet : str
        Stylesheet path referenced verbatim from every page.
    output_dir : Path
        Directory the CLI writes pages into.
    pygments_style : str | None
        Pygments style for highlighted code; ``None`` keeps plain blocks.
    back_label : str
        Default footer link label.
    documents : tuple[Document, ...]
        Loaded documents in configured order.
    """

    title: str
    stylesheet: str
    output_dir: Path
    pygments_style: str | None = None
    back_label: str = DEFAULT_BACK_LABEL
    documents: tuple[Document, ...] = ()

    def get_document(self, slug: str) -> Document:
        """Return the document registered under ``slug``."""
        for document in self.documents:
            if document.slug == slug:
                return document
        available = ", ".join(sorted(doc.slug for doc in self.documents))
        msg = f"Unknown document '{slug}'. Known documents: {available}"
        raise KeyError(msg)


__all__ = ["SiteConfig", "SiteConfigError"]

"""Whole-site validation run before any page is rendered or written.

Validation is eager and treats the document set as a unit: the first problem
found raises, so a failing site never produces partial output.

Example
-------
>>> from devblog_pages.content import Document
>>> from devblog_pages.validation import validate_documents
>>> validate_documents([Document(title="Hello", slug="hello")])
"""

from __future__ import annotations

import collections.abc as cabc
import re

from ._constants import INDEX_SLUG
from .content.models import CodeBlock, Document, Heading, Paragraph, Span
from .errors import BrokenLinkError, DuplicateSlugError, ValidationError

HEADING_LEVELS = frozenset({1, 2})
SLUG_PATTERN = re.compile(r"^[a-z0-9][a-z0-9-]*$")


def validate_documents(documents: cabc.Sequence[Document]) -> None:
    """Check every document, slug uniqueness, and every footer link target.

    Parameters
    ----------
    documents : Sequence[Document]
        Complete document set for the site.

    Raises
    ------
    ValidationError
        If a document has an empty title or slug, a slug that is not safe
        as a filename, uses the reserved index slug, or carries a malformed
        content node.
    DuplicateSlugError
        If two documents share a slug.
    BrokenLinkError
        If a footer link targets neither a known slug nor the index.
    """
    seen: set[str] = set()
    for document in documents:
        validate_document(document)
        if document.slug in seen:
            raise DuplicateSlugError(document.slug)
        seen.add(document.slug)

    for document in documents:
        link = document.footer_link
        if not link.is_index and link.target not in seen:
            raise BrokenLinkError(document.slug, link.target)


def validate_document(document: Document) -> None:
    """Validate a single document in isolation."""
    if not document.title.strip():
        msg = f"Document '{document.slug}' has an empty title."
        raise ValidationError(msg)
    if not document.slug.strip():
        msg = f"Document '{document.title}' has an empty slug."
        raise ValidationError(msg)
    if document.slug == INDEX_SLUG:
        msg = f"Slug '{INDEX_SLUG}' is reserved for the site index."
        raise ValidationError(msg)
    if not SLUG_PATTERN.match(document.slug):
        msg = (
            f"Slug '{document.slug}' must use lowercase letters, digits, and hyphens."
        )
        raise ValidationError(msg)
    if not document.footer_link.label.strip():
        msg = f"Document '{document.slug}' has an empty footer link label."
        raise ValidationError(msg)
    for position, node in enumerate(document.content, start=1):
        _validate_node(document.slug, position, node)


def _validate_node(slug: str, position: int, node: object) -> None:
    """Raise ValidationError when ``node`` is not a well-formed content node."""
    where = f"Document '{slug}' node {position}"
    match node:
        case Heading(level=level, text=text):
            if level not in HEADING_LEVELS:
                msg = f"{where}: heading level must be 1 or 2, got {level!r}."
                raise ValidationError(msg)
            if not text.strip():
                msg = f"{where}: heading text is empty."
                raise ValidationError(msg)
        case Paragraph(spans=spans):
            if not spans or not all(isinstance(span, Span) for span in spans):
                msg = f"{where}: paragraph must contain at least one span."
                raise ValidationError(msg)
            if not node.text.strip():
                msg = f"{where}: paragraph text is empty."
                raise ValidationError(msg)
        case CodeBlock(language=language, body=body):
            if not isinstance(language, str) or not isinstance(body, str):
                msg = f"{where}: code block language and body must be strings."
                raise ValidationError(msg)
        case _:
            msg = f"{where}: unsupported content node {type(node).__name__}."
            raise ValidationError(msg)


__all__ = ["HEADING_LEVELS", "SLUG_PATTERN", "validate_document", "validate_documents"]

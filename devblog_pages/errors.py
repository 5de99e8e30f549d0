"""Error taxonomy raised while validating and rendering blog documents.

Every error derives from :class:`ValidationError`, itself a ``ValueError``, so
callers can treat any malformed document set uniformly while still matching on
the specific failure when they need to.
"""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when a document or one of its content nodes is malformed."""


class DuplicateSlugError(ValidationError):
    """Raised when two documents in the same site claim one slug."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        msg = f"Duplicate document slug '{slug}'."
        super().__init__(msg)


class BrokenLinkError(ValidationError):
    """Raised when a navigation link points at a slug outside the site."""

    def __init__(self, slug: str, target: str) -> None:
        self.slug = slug
        self.target = target
        msg = f"Document '{slug}' links to unknown target '{target}'."
        super().__init__(msg)


__all__ = ["BrokenLinkError", "DuplicateSlugError", "ValidationError"]

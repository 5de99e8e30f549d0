"""Immutable dataclasses describing authored blog documents."""

from __future__ import annotations

import dataclasses as dc

from devblog_pages._constants import DEFAULT_BACK_LABEL, INDEX_SLUG


@dc.dataclass(frozen=True, slots=True)
class Heading:
    """Section heading inside an article body.

    Attributes
    ----------
    level : int
        Heading depth; only ``1`` and ``2`` are accepted by validation.
    text : str
        Heading text, rendered escaped.
    """

    level: int
    text: str


@dc.dataclass(frozen=True, slots=True)
class Span:
    """Inline run of paragraph text.

    Attributes
    ----------
    text : str
        Literal text, escaped on output.
    href : str | None
        Link target emitted as authored; ``None`` for plain text.
    code : bool
        Whether the run is inline code.
    """

    text: str
    href: str | None = None
    code: bool = False


@dc.dataclass(frozen=True, slots=True)
class Paragraph:
    """Block of prose made up of ordered inline spans."""

    spans: tuple[Span, ...]

    @property
    def text(self) -> str:
        """Return the paragraph text with link markup dropped."""
        return "".join(span.text for span in self.spans)


@dc.dataclass(frozen=True, slots=True)
class CodeBlock:
    """Illustrative code sample shown verbatim.

    Attributes
    ----------
    language : str
        Free-form display label such as ``"csharp"``; used for highlighting
        hints only.
    body : str
        Literal snippet text. Whitespace and line breaks are preserved exactly
        and the text is never interpreted.
    """

    language: str
    body: str


ContentNode = Heading | Paragraph | CodeBlock


@dc.dataclass(frozen=True, slots=True)
class NavigationLink:
    """Footer link from a document to another document or the site index."""

    label: str
    target: str

    @property
    def is_index(self) -> bool:
        """Return ``True`` when the link points at the index sentinel."""
        return self.target == INDEX_SLUG


def back_to_index(label: str = DEFAULT_BACK_LABEL) -> NavigationLink:
    """Return the standard footer link pointing at the site index."""
    return NavigationLink(label=label, target=INDEX_SLUG)


@dc.dataclass(frozen=True, slots=True)
class Document:
    """One authored article page.

    Attributes
    ----------
    title : str
        Page title used for the ``<title>`` element and the top heading.
    slug : str
        Unique identifier used as the output key and link target.
    content : tuple[ContentNode, ...]
        Ordered body nodes.
    footer_link : NavigationLink
        The single back-navigation link shown in the footer.
    summary : str | None
        Optional one-line blurb listed on the index page.
    """

    title: str
    slug: str
    content: tuple[ContentNode, ...] = ()
    footer_link: NavigationLink = dc.field(default_factory=back_to_index)
    summary: str | None = None


__all__ = [
    "CodeBlock",
    "ContentNode",
    "Document",
    "Heading",
    "NavigationLink",
    "Paragraph",
    "Span",
    "back_to_index",
]

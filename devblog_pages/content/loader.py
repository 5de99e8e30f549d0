"""Load documents from Markdown files or inline YAML records."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from devblog_pages._constants import DEFAULT_BACK_LABEL, DEFAULT_CODE_LANGUAGE, INDEX_SLUG
from devblog_pages.errors import ValidationError

from .markdown_parser import parse_document
from .models import CodeBlock, ContentNode, Document, Heading, NavigationLink, Paragraph, Span


def load_markdown_document(path: Path, *, back_label: str = DEFAULT_BACK_LABEL) -> Document:
    """Read a Markdown article from ``path`` and parse it into a Document.

    The slug defaults to the file stem when the front matter omits it.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ValidationError
        If the article cannot be parsed.
    """
    if not path.exists():
        msg = f"Article file '{path}' not found."
        raise FileNotFoundError(msg)
    text = path.read_text(encoding="utf-8")
    return parse_document(text, default_slug=path.stem, back_label=back_label)


def document_from_mapping(
    payload: cabc.Mapping[str, typ.Any], *, back_label: str = DEFAULT_BACK_LABEL
) -> Document:
    """Build a Document from an inline YAML record.

    Parameters
    ----------
    payload : Mapping[str, Any]
        Mapping with ``title``, ``slug``, optional ``summary``,
        ``back_label``/``back_target``, and a ``content`` list of node
        mappings (``heading``, ``paragraph``, or ``code``).
    back_label : str, optional
        Footer label used when the record does not define one.

    Raises
    ------
    ValidationError
        If the content list or any node mapping is malformed.
    """
    raw_content = payload.get("content") or []
    if not isinstance(raw_content, list):
        msg = f"Document '{payload.get('slug')}' content must be a list."
        raise ValidationError(msg)
    footer_link = NavigationLink(
        label=str(payload.get("back_label") or back_label),
        target=str(payload.get("back_target") or INDEX_SLUG),
    )
    summary = payload.get("summary")
    return Document(
        title=str(payload.get("title") or "").strip(),
        slug=str(payload.get("slug") or "").strip(),
        content=tuple(_build_node(item) for item in raw_content),
        footer_link=footer_link,
        summary=str(summary).strip() if summary else None,
    )


def _build_node(item: object) -> ContentNode:
    """Convert one YAML node mapping into a content node."""
    match item:
        case {"heading": text, **rest}:
            level = rest.get("level", 2)
            if not isinstance(level, int) or isinstance(level, bool):
                msg = f"Heading level must be an integer, got {level!r}."
                raise ValidationError(msg)
            return Heading(level=level, text=str(text))
        case {"paragraph": spans}:
            return Paragraph(spans=_build_spans(spans))
        case {"code": body, **rest}:
            language = rest.get("language") or DEFAULT_CODE_LANGUAGE
            return CodeBlock(language=str(language), body=str(body))
        case _:
            msg = f"Unrecognised content node: {item!r}"
            raise ValidationError(msg)


def _build_spans(raw: object) -> tuple[Span, ...]:
    """Normalise a paragraph value into spans."""
    if isinstance(raw, str):
        return (Span(text=raw),)
    if not isinstance(raw, list):
        msg = f"Paragraph must be a string or list of spans, got {raw!r}."
        raise ValidationError(msg)
    spans: list[Span] = []
    for entry in raw:
        match entry:
            case str():
                spans.append(Span(text=entry))
            case {"text": text, "href": str() as href}:
                spans.append(Span(text=str(text), href=href))
            case {"code": text}:
                spans.append(Span(text=str(text), code=True))
            case {"text": text}:
                spans.append(Span(text=str(text)))
            case _:
                msg = f"Unrecognised paragraph span: {entry!r}"
                raise ValidationError(msg)
    return tuple(spans)


__all__ = ["document_from_mapping", "load_markdown_document"]

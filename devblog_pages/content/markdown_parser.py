r"""Parse Markdown-authored articles into structured documents.

This module splits an article file into optional YAML front matter and a body
made of headings, paragraphs, and fenced code blocks, returning the immutable
:class:`~devblog_pages.content.models.Document` the renderer consumes. Only the
small Markdown subset the blog uses is recognised: ``#``/``##`` headings,
backtick or tilde fences, and paragraphs. Paragraph text is tokenised by the
Markdown library so links and inline code become typed spans; code fence
bodies are copied through untouched.

Example
-------
>>> from devblog_pages.content.markdown_parser import parse_document
>>> doc = parse_document("# Hello\nBody text\n", default_slug="hello")
>>> doc.title, doc.slug
('Hello', 'hello')
"""

from __future__ import annotations

import re
import typing as typ
from html import unescape

from markdown import Markdown, util
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from devblog_pages._constants import DEFAULT_BACK_LABEL, DEFAULT_CODE_LANGUAGE, INDEX_SLUG
from devblog_pages.errors import ValidationError

from .models import CodeBlock, ContentNode, Document, Heading, NavigationLink, Paragraph, Span

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element
else:  # pragma: no cover - type-checking fallback
    Element = typ.Any

FRONT_MATTER_PATTERN = re.compile(r"\A---[ \t]*\n(.*?)^---[ \t]*(?:\n|\Z)", re.DOTALL | re.MULTILINE)
HEADING_PATTERN = re.compile(r"^(#{1,6})[ \t]+(.+?)[ \t]*$")
FENCE_OPEN_PATTERN = re.compile(r"^[ ]{0,3}(`{3,}|~{3,})[ \t]*([^\s`]*)[^\n]*$")
ESCAPED_CHAR_PATTERN = re.compile(f"{util.STX}([0-9]+){util.ETX}")
MAX_HEADING_LEVEL = 2
# paragraphs are already split out; only inline markup is left to Markdown
BLOCK_PROCESSORS_TO_DROP = (
    "indent",
    "code",
    "hashheader",
    "setextheader",
    "hr",
    "olist",
    "ulist",
    "quote",
    "reference",
)


def parse_document(
    text: str, *, default_slug: str, back_label: str = DEFAULT_BACK_LABEL
) -> Document:
    """Build a :class:`Document` from a Markdown article.

    Parameters
    ----------
    text : str
        Full file contents, optionally starting with ``---`` delimited YAML
        front matter.
    default_slug : str
        Slug used when the front matter does not provide one (usually the
        file stem).
    back_label : str, optional
        Footer link label used when the front matter omits ``back_label``.

    Returns
    -------
    Document
        Parsed document. The title comes from front matter or, failing that,
        the first level-one heading. A heading used as the title, or a
        leading one repeating the front matter title, is dropped from the
        body because the page template prints the title itself.

    Raises
    ------
    ValidationError
        If the front matter is not a YAML mapping, a heading deeper than
        level two appears, or a code fence is never closed.
    """
    meta, body = split_front_matter(text)
    nodes = parse_body(body)
    title = _optional_text(meta.get("title"))
    if title is None:
        title_heading = next(
            (node for node in nodes if isinstance(node, Heading) and node.level == 1),
            None,
        )
        title = title_heading.text if title_heading else ""
        if title_heading:
            nodes.remove(title_heading)
    elif nodes and nodes[0] == Heading(level=1, text=title):
        del nodes[0]
    footer_link = NavigationLink(
        label=_optional_text(meta.get("back_label")) or back_label,
        target=_optional_text(meta.get("back_target")) or INDEX_SLUG,
    )
    return Document(
        title=title,
        slug=_optional_text(meta.get("slug")) or default_slug,
        content=tuple(nodes),
        footer_link=footer_link,
        summary=_optional_text(meta.get("summary")),
    )


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Return the parsed front matter mapping and the remaining body."""
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(match.group(1)) or {}
    except YAMLError as exc:
        msg = f"Front matter could not be parsed: {exc}"
        raise ValidationError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "Front matter must be a mapping."
        raise ValidationError(msg)
    return dict(loaded), text[match.end() :]


def parse_body(body: str) -> list[ContentNode]:
    """Split Markdown body text into ordered content nodes."""
    lines = body.split("\n")
    nodes: list[ContentNode] = []
    pending: list[str] = []

    def _flush() -> None:
        if pending:
            nodes.append(parse_paragraph(" ".join(pending)))
            pending.clear()

    idx = 0
    while idx < len(lines):
        line = lines[idx]
        fence = FENCE_OPEN_PATTERN.match(line)
        if fence:
            _flush()
            close_idx = _find_closing_fence(lines, idx, fence.group(1))
            nodes.append(
                CodeBlock(
                    language=fence.group(2) or DEFAULT_CODE_LANGUAGE,
                    body="\n".join(lines[idx + 1 : close_idx]),
                )
            )
            idx = close_idx + 1
            continue
        heading = HEADING_PATTERN.match(line)
        if heading:
            _flush()
            level = len(heading.group(1))
            if level > MAX_HEADING_LEVEL:
                msg = f"Line {idx + 1}: heading level {level} is not supported."
                raise ValidationError(msg)
            nodes.append(Heading(level=level, text=heading.group(2)))
        elif line.strip():
            pending.append(line.strip())
        else:
            _flush()
        idx += 1
    _flush()
    return nodes


def parse_paragraph(text: str) -> Paragraph:
    """Tokenise paragraph text into plain, hyperlinked, and inline-code spans.

    Examples
    --------
    >>> parse_paragraph("Use `using` with [Dapper](https://dapper.dev)").spans[1]
    Span(text='using', href=None, code=True)
    """
    collector = InlineSpanExtension()
    Markdown(extensions=[collector]).convert(text)
    return Paragraph(spans=tuple(collector.spans))


class InlineSpanExtension(Extension):
    """Collect paragraph spans from Markdown's parsed inline tree.

    Block-level processors other than paragraphs are removed, so list markers,
    quote markers, and rules inside a paragraph stay literal text.
    """

    def __init__(self) -> None:
        super().__init__()
        self.spans: list[Span] = []

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the span collector and strip non-paragraph block parsing."""
        for name in BLOCK_PROCESSORS_TO_DROP:
            md.parser.blockprocessors.deregister(name, strict=False)
        processor = InlineSpanTreeprocessor(md, self.spans)
        md.treeprocessors.register(processor, "devblog_inline_spans", 15)


class InlineSpanTreeprocessor(Treeprocessor):
    """Turn the inline elements of a parsed paragraph into spans."""

    def __init__(self, md: Markdown, spans: list[Span]) -> None:
        super().__init__(md)
        self.spans = spans

    def run(self, root: Element) -> Element:
        """Walk every block in document order, appending spans."""
        for block in root:
            self._collect(block)
        return root

    def _collect(self, element: Element) -> None:
        match element.tag:
            case "a":
                href = self._clean(element.get("href", ""))
                self.spans.append(Span(text=self._text_of(element), href=href))
            case "code":
                self.spans.append(Span(text=unescape(element.text or ""), code=True))
            case "br":
                self._append_text(" ")
            case "img":
                self._append_text(element.get("alt", ""))
            case _:
                # emphasis and other wrappers flatten to their text
                self._append_text(element.text)
                for child in element:
                    self._collect(child)
                    self._append_text(child.tail)

    def _text_of(self, element: Element) -> str:
        """Return the visible text of ``element`` and its descendants."""
        parts = [self._clean(element.text or "")]
        for child in element:
            if child.tag == "code":
                parts.append(unescape(child.text or ""))
            else:
                parts.append(self._text_of(child))
            parts.append(self._clean(child.tail or ""))
        return "".join(parts)

    def _append_text(self, text: str | None) -> None:
        """Append plain text, merging it into a preceding plain span."""
        if not text:
            return
        text = self._clean(text)
        if self.spans and self.spans[-1].href is None and not self.spans[-1].code:
            text = self.spans.pop().text + text
        self.spans.append(Span(text=text))

    def _clean(self, text: str) -> str:
        """Resolve stashed raw HTML or entities and backslash escapes."""
        text = util.HTML_PLACEHOLDER_RE.sub(self._stashed, text)
        return ESCAPED_CHAR_PATTERN.sub(lambda match: chr(int(match.group(1))), text)

    def _stashed(self, match: re.Match[str]) -> str:
        raw = self.md.htmlStash.rawHtmlBlocks[int(match.group(1))]
        if isinstance(raw, str):
            return unescape(raw)
        return "".join(raw.itertext())


def _find_closing_fence(lines: list[str], open_idx: int, marker: str) -> int:
    """Return the index of the line closing the fence opened at ``open_idx``."""
    closing = re.compile(rf"^[ ]{{0,3}}{re.escape(marker[0])}{{{len(marker)},}}[ \t]*$")
    for idx in range(open_idx + 1, len(lines)):
        if closing.match(lines[idx]):
            return idx
    msg = f"Line {open_idx + 1}: code fence is never closed."
    raise ValidationError(msg)


def _optional_text(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


__all__ = [
    "InlineSpanExtension",
    "InlineSpanTreeprocessor",
    "parse_body",
    "parse_document",
    "parse_paragraph",
    "split_front_matter",
]

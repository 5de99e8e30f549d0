"""Utilities for rendering content nodes into HTML fragments."""

from __future__ import annotations

import re
from html import escape

from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from devblog_pages._constants import DEFAULT_CODE_LANGUAGE
from devblog_pages.content.models import CodeBlock, ContentNode, Heading, Paragraph
from devblog_pages.errors import ValidationError

CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
TRAILING_PRE_NEWLINE = re.compile(r"\n</pre>")
LANGUAGE_CLASS_PATTERN = re.compile(r"[^A-Za-z0-9_+#.-]+")


def escape_markup(text: str) -> str:
    """Escape only ``&``, ``<``, ``>``, ``"`` and ``'``; leave everything else.

    Whitespace and line breaks pass through untouched, so unescaping the
    result yields ``text`` exactly.

    Examples
    --------
    >>> escape_markup('if (a < b && c > "d")')
    'if (a &lt; b &amp;&amp; c &gt; &quot;d&quot;)'
    """
    return escape(text, quote=True)


class HtmlContentRenderer:
    """Render content nodes with consistent markup and optional highlighting."""

    def __init__(self, pygments_style: str | None = None) -> None:
        """Initialize a renderer.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. When
            ``None`` (the default) code blocks are emitted as plain escaped
            ``<pre><code>`` blocks.
        """
        self.pygments_style = pygments_style
        self._formatter = (
            HtmlFormatter(style=pygments_style, cssclass="codehilite")
            if pygments_style
            else None
        )

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks, or ``""``."""
        if self._formatter is None:
            return ""
        return self._formatter.get_style_defs(".codehilite")

    def node(self, node: ContentNode) -> str:
        """Render a single content node into an HTML fragment."""
        match node:
            case Heading():
                return self.heading(node)
            case Paragraph():
                return self.paragraph(node)
            case CodeBlock():
                return self.code_block(node.body, node.language)
            case _:
                msg = f"Cannot render content node of type {type(node).__name__}."
                raise ValidationError(msg)

    @staticmethod
    def heading(node: Heading) -> str:
        """Render a heading at its own level."""
        return f"<h{node.level}>{escape_markup(node.text)}</h{node.level}>"

    @staticmethod
    def paragraph(node: Paragraph) -> str:
        """Render a paragraph, turning hyperlinked spans into anchors.

        Link targets are emitted as authored; only attribute escaping is
        applied. Inline code spans become ``<code>`` elements.
        """
        parts: list[str] = []
        for span in node.spans:
            text = escape_markup(span.text)
            if span.code:
                text = f"<code>{text}</code>"
            if span.href is None:
                parts.append(text)
            else:
                parts.append(f'<a href="{escape_markup(span.href)}">{text}</a>')
        return f"<p>{''.join(parts)}</p>"

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` into a preformatted block tagged with its language.

        Parameters
        ----------
        code : str
            Snippet text, kept verbatim apart from markup escaping.
        language : str, optional
            Display label; defaults to ``"text"``.

        Returns
        -------
        str
            HTML containing the block with ``data-language`` metadata applied.
        """
        lang = language or DEFAULT_CODE_LANGUAGE
        if self._formatter is None:
            safe_lang = escape_markup(lang)
            css_lang = LANGUAGE_CLASS_PATTERN.sub("-", lang)
            return (
                f'<pre class="code-block" data-language="{safe_lang}">'
                f'<code class="language-{escape_markup(css_lang)}">'
                f"{escape_markup(code)}</code></pre>"
            )
        try:
            lexer = get_lexer_by_name(lang, stripnl=False, ensurenl=False)
        except ClassNotFound:
            lexer = get_lexer_by_name(
                DEFAULT_CODE_LANGUAGE, stripnl=False, ensurenl=False
            )
        html = highlight(code, lexer, self._formatter)
        if not code.endswith("\n"):
            # the formatter terminates the last line; the snippet may not
            html = TRAILING_PRE_NEWLINE.sub("</pre>", html, 1)
        return self._attach_language_attribute(html, lang)

    @staticmethod
    def _attach_language_attribute(html: str, language: str) -> str:
        """Add a single language attribute to an already highlighted block."""
        safe_lang = escape_markup(language or DEFAULT_CODE_LANGUAGE)

        def _repl(match: re.Match[str]) -> str:
            return f'<div class="codehilite" data-language="{safe_lang}">'

        return CODEHILITE_OPEN_TAG.sub(_repl, html, 1)


__all__ = ["HtmlContentRenderer", "escape_markup"]

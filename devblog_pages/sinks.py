"""Page sinks that persist rendered pages under their slug.

The renderer never performs I/O itself; publishing hands each page to an
object implementing :class:`PageSink`. Sinks raise ``OSError`` on failure and
the publisher records that error against the slug.

Example
-------
>>> from devblog_pages.sinks import MemoryPageSink
>>> sink = MemoryPageSink()
>>> sink.write("hello", "<html></html>\\n")
>>> sink.pages["hello"]
'<html></html>\\n'
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ._constants import PAGE_FILENAME_TEMPLATE


class PageSink(typ.Protocol):
    """Write capability for rendered pages."""

    def write(self, slug: str, content: str) -> None:
        """Persist ``content`` under ``slug``; raise ``OSError`` on failure."""
        ...


class DirectoryPageSink:
    """Write each page to ``<output_dir>/<slug>.html`` as UTF-8."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir

    def path_for(self, slug: str) -> Path:
        """Return the file path used for ``slug``."""
        return self.output_dir / PAGE_FILENAME_TEMPLATE.format(slug=slug)

    def write(self, slug: str, content: str) -> None:
        """Write ``content`` to the page file, creating the directory as needed."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.path_for(slug).write_text(content, encoding="utf-8")


class MemoryPageSink:
    """Keep rendered pages in a dictionary, mainly for previews and tests."""

    def __init__(self) -> None:
        self.pages: dict[str, str] = {}

    def write(self, slug: str, content: str) -> None:
        """Store ``content`` under ``slug``."""
        self.pages[slug] = content


__all__ = ["DirectoryPageSink", "MemoryPageSink", "PageSink"]

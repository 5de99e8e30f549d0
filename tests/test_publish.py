"""Tests for handing rendered pages to page sinks."""

from __future__ import annotations

import typing as typ

import pytest

from devblog_pages.content import Document
from devblog_pages.generator import PageRenderer, WriteResult, publish
from devblog_pages.sinks import DirectoryPageSink, MemoryPageSink

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture


@pytest.fixture
def documents() -> list[Document]:
    """Return a small valid site."""
    return [
        Document(title="Alpha", slug="alpha", summary="First post"),
        Document(title="Beta", slug="beta"),
        Document(title="Gamma", slug="gamma"),
    ]


class FlakySink:
    """Sink that fails for selected slugs and records every attempt."""

    def __init__(self, failing: set[str]) -> None:
        self.failing = failing
        self.attempts: list[str] = []
        self.pages: dict[str, str] = {}

    def write(self, slug: str, content: str) -> None:
        self.attempts.append(slug)
        if slug in self.failing:
            msg = f"disk full while writing {slug}"
            raise OSError(msg)
        self.pages[slug] = content


def test_publish_writes_every_page(documents: list[Document]) -> None:
    """Every document should reach the sink with a success result."""
    sink = MemoryPageSink()
    results = publish(documents, "style.css", sink)
    assert list(results) == ["alpha", "beta", "gamma"]
    assert all(result.ok for result in results.values())
    assert sink.pages == PageRenderer().render(documents, "style.css")


def test_publish_includes_index_when_titled(documents: list[Document]) -> None:
    """A site title should add the index page after the documents."""
    sink = MemoryPageSink()
    results = publish(documents, "style.css", sink, site_title="Notes")
    assert list(results) == ["alpha", "beta", "gamma", "index"]
    assert "First post" in sink.pages["index"]


def test_sink_failure_is_isolated(documents: list[Document]) -> None:
    """An OSError for one slug should not stop the remaining writes."""
    sink = FlakySink(failing={"beta"})
    results = publish(documents, "style.css", sink)
    assert sink.attempts == ["alpha", "beta", "gamma"]
    assert results["alpha"] == WriteResult(slug="alpha")
    assert results["gamma"].ok
    failure = results["beta"]
    assert not failure.ok
    assert isinstance(failure.error, OSError)
    assert str(failure.error) == "disk full while writing beta"
    assert set(sink.pages) == {"alpha", "gamma"}


def test_sink_failure_not_retried(documents: list[Document]) -> None:
    """Failed writes are attempted exactly once."""
    sink = FlakySink(failing={"alpha", "gamma"})
    publish(documents, "style.css", sink)
    assert sink.attempts.count("alpha") == 1
    assert sink.attempts.count("gamma") == 1


def test_directory_sink_writes_html_files(tmp_path: Path, documents: list[Document]) -> None:
    """The directory sink should create ``<slug>.html`` files as UTF-8."""
    output_dir = tmp_path / "public"
    sink = DirectoryPageSink(output_dir)
    publish(documents, "style.css", sink, site_title="Notes")
    names = sorted(path.name for path in output_dir.iterdir())
    assert names == ["alpha.html", "beta.html", "gamma.html", "index.html"]
    html = sink.path_for("alpha").read_text(encoding="utf-8")
    assert "<title>Alpha</title>" in html


def test_sink_receives_slug_and_rendered_text(
    mocker: MockerFixture, documents: list[Document]
) -> None:
    """The sink should be called once per page with the rendered text."""
    sink = mocker.Mock()
    sink.write.side_effect = [None, PermissionError("read-only"), None]
    results = publish(documents, "style.css", sink)

    pages = PageRenderer().render(documents, "style.css")
    assert sink.write.call_args_list == [
        mocker.call(slug, html) for slug, html in pages.items()
    ]
    assert isinstance(results["beta"].error, PermissionError)
    assert results["alpha"].ok
    assert results["gamma"].ok

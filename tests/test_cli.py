"""Tests for the ``blog`` Cyclopts commands."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from devblog_pages import cli
from devblog_pages.errors import DuplicateSlugError
from devblog_pages.sinks import DirectoryPageSink

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def site_config(tmp_path: Path) -> Path:
    """Write a two-article site and return its config path."""
    articles = tmp_path / "articles"
    articles.mkdir()
    (articles / "one.md").write_text("# One\n\nFirst.\n", encoding="utf-8")
    (articles / "two.md").write_text(
        "# Two\n\n```csharp\nvar x = 1 < 2;\n```\n", encoding="utf-8"
    )
    config_path = tmp_path / "site.yaml"
    config_path.write_text(
        dedent(
            f"""
            site:
              title: Notes
              stylesheet: style.css
              output_dir: {tmp_path / "public"}
            documents:
              - articles/one.md
              - articles/two.md
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    return config_path


def test_build_writes_pages(
    site_config: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``blog build`` should write every page and report each path."""
    cli.build(config=site_config)
    output_dir = tmp_path / "public"
    assert sorted(p.name for p in output_dir.iterdir()) == [
        "index.html",
        "one.html",
        "two.html",
    ]
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert all(line.startswith("wrote ") for line in lines)
    assert lines[-1].endswith("index.html")


def test_build_output_dir_override(site_config: Path, tmp_path: Path) -> None:
    """The output directory option should win over the config value."""
    override = tmp_path / "dist"
    cli.build(config=site_config, output_dir=override)
    assert (override / "one.html").exists()
    assert not (tmp_path / "public").exists()


def test_build_reports_failed_writes(
    site_config: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Sink failures are printed per slug and turn into a non-zero exit."""
    original = DirectoryPageSink.write

    def _write(self: DirectoryPageSink, slug: str, content: str) -> None:
        if slug == "one":
            msg = "permission denied"
            raise PermissionError(msg)
        original(self, slug, content)

    monkeypatch.setattr(DirectoryPageSink, "write", _write)
    with pytest.raises(SystemExit) as excinfo:
        cli.build(config=site_config)
    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert "failed one: permission denied" in out
    assert "two.html" in out


def test_build_validation_failure_writes_nothing(tmp_path: Path) -> None:
    """Duplicate slugs abort the build before any file is created."""
    config_path = tmp_path / "site.yaml"
    config_path.write_text(
        dedent(
            f"""
            site:
              stylesheet: style.css
              output_dir: {tmp_path / "public"}
            documents:
              - {{title: A, slug: a}}
              - {{title: B, slug: a}}
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    with pytest.raises(DuplicateSlugError):
        cli.build(config=config_path)
    assert not (tmp_path / "public").exists()


def test_check_reports_document_count(
    site_config: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``blog check`` validates in memory and writes nothing."""
    cli.check(config=site_config)
    assert capsys.readouterr().out.strip() == "ok 2 documents"
    assert not (tmp_path / "public").exists()

"""Behaviour tests for building the shipped blog articles.

The scenario loads ``content/site.yaml`` from the repository, publishes the
site into a temporary directory, and inspects the written pages.

Usage
-----
Run ``pytest tests/bdd/test_site_build.py -v``. The feature file lives at
``features/site_build.feature``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from devblog_pages.config import SiteConfig, load_site_config
from devblog_pages.generator import PageRenderer, publish
from devblog_pages.sinks import DirectoryPageSink

REPO_ROOT = Path(__file__).resolve().parents[2]
FEATURE_FILE = REPO_ROOT / "features" / "site_build.feature"
scenarios(FEATURE_FILE)

ARTICLE_TITLES = {
    "cleaning-up-sql-access": "Cleaning up SQL access code",
    "discriminated-unions-in-csharp": "Discriminated Unions in C#",
}


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _soup(scenario_state: dict[str, object], slug: str) -> BeautifulSoup:
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    html = (output_dir / f"{slug}.html").read_text(encoding="utf-8")
    return BeautifulSoup(html, "html.parser")


@given("the shipped blog site configuration")
def given_site(scenario_state: dict[str, object]) -> None:
    """Load the repository's site configuration."""
    scenario_state["site"] = load_site_config(REPO_ROOT / "content" / "site.yaml")


@when("I build the site into a temporary directory")
def when_build(scenario_state: dict[str, object], tmp_path: Path) -> None:
    """Publish every page through a directory sink under ``tmp_path``."""
    site = typ.cast("SiteConfig", scenario_state["site"])
    output_dir = tmp_path / "public"
    results = publish(
        site.documents,
        site.stylesheet,
        DirectoryPageSink(output_dir),
        renderer=PageRenderer(pygments_style=site.pygments_style),
        site_title=site.title,
    )
    assert all(result.ok for result in results.values()), "expected every write to succeed"
    scenario_state["output_dir"] = output_dir


@then("a page exists for each article and for the index")
def then_pages_exist(scenario_state: dict[str, object]) -> None:
    """Verify one file per article plus ``index.html``."""
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    names = sorted(path.name for path in output_dir.iterdir())
    assert names == [
        "cleaning-up-sql-access.html",
        "discriminated-unions-in-csharp.html",
        "index.html",
    ], f"unexpected output files {names!r}"


@then("each article page shows its title in a single heading")
def then_titles(scenario_state: dict[str, object]) -> None:
    """Verify the title fills the only ``<h1>`` on the page."""
    for slug, title in ARTICLE_TITLES.items():
        headings = _soup(scenario_state, slug).select("h1")
        assert [heading.get_text() for heading in headings] == [title], (
            f"expected exactly one <h1> on {slug}"
        )


@then("inline code in the prose is rendered as code")
def then_inline_code(scenario_state: dict[str, object]) -> None:
    """Verify backtick spans become ``<code>`` and no raw backticks remain."""
    soup = _soup(scenario_state, "cleaning-up-sql-access")
    inline = [code.get_text() for code in soup.select("article p code")]
    assert "using" in inline, f"expected `using` as inline code, got {inline!r}"
    for paragraph in soup.select("article p"):
        assert "`" not in paragraph.get_text()


@then("each article page links back to the index")
def then_back_links(scenario_state: dict[str, object]) -> None:
    """Verify the single footer link targets ``index.html``."""
    for slug in ARTICLE_TITLES:
        links = _soup(scenario_state, slug).select("footer a")
        assert [link["href"] for link in links] == ["index.html"]


@then("the truncated product list snippet is reproduced verbatim")
def then_snippet_verbatim(scenario_state: dict[str, object]) -> None:
    """Verify the authored (incomplete) C# line survives untouched."""
    blocks = _soup(scenario_state, "cleaning-up-sql-access").select("pre code")
    texts = [block.get_text() for block in blocks]
    assert any("    var = new List<Product>();\n" in text for text in texts), (
        "expected the snippet with the missing identifier to be kept as written"
    )

"""Cyclopts CLI entrypoint for building the static blog.

The ``blog`` console script defined here loads ``site.yaml``, validates every
article as a set, renders the pages, and writes them into the output
directory. Typical usage is ``blog build`` locally or in CI, and ``blog check``
to validate the articles without writing anything.

Examples
--------
Build the default site:

>>> from devblog_pages.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory:

>>> from devblog_pages.cli import app
>>> app(["build", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .generator import PageRenderer, publish
from .sinks import DirectoryPageSink

DEFAULT_CONFIG = Path("content/site.yaml")

app = App(name="blog", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render every article and the index page to HTML.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Build the site described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override the configured output directory.

    Raises
    ------
    ValidationError
        If the articles do not form a valid site; nothing is written.
    SystemExit
        With status 1 when one or more pages could not be written.
    """
    site = load_site_config(config)
    sink = DirectoryPageSink(output_dir or site.output_dir)
    renderer = PageRenderer(pygments_style=site.pygments_style)
    results = publish(
        site.documents,
        site.stylesheet,
        sink,
        renderer=renderer,
        site_title=site.title,
    )
    failed = False
    for slug, result in results.items():
        if result.ok:
            print(f"wrote {_format_path(sink.path_for(slug))}")
        else:
            failed = True
            print(f"failed {slug}: {result.error}")
    if failed:
        raise SystemExit(1)


@app.command(help="Validate the articles without writing any pages.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Load and render the site in memory, reporting how many documents passed."""
    site = load_site_config(config)
    pages = PageRenderer(pygments_style=site.pygments_style).render(
        site.documents, site.stylesheet
    )
    print(f"ok {len(pages)} documents")


def main() -> None:
    """Invoke the Cyclopts application that powers the `blog` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

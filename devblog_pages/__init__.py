"""Utilities for generating the static developer blog.

This package exposes the CLI entry points used by ``blog build`` and the
rendering API used to turn authored articles into standalone HTML pages.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from devblog_pages import main
>>> main()  # doctest: +SKIP
>>> from devblog_pages import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]

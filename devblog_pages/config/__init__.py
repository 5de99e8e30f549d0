"""Load and validate site configuration YAML for blog builds.

This subpackage parses the project's ``site.yaml`` file, resolves article
paths relative to it, loads every document, and produces a typed
:class:`SiteConfig` that the CLI hands to the publisher. The primary entry
point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from devblog_pages.config import load_site_config
>>> site = load_site_config(Path("content/site.yaml"))  # doctest: +SKIP
>>> site.stylesheet  # doctest: +SKIP
'style.css'
"""

from .loader import load_site_config
from .models import SiteConfig, SiteConfigError

__all__ = ["SiteConfig", "SiteConfigError", "load_site_config"]

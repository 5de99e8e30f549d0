"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from devblog_pages._constants import DEFAULT_BACK_LABEL, DEFAULT_SITE_TITLE
from devblog_pages.content.loader import document_from_mapping, load_markdown_document

from .models import SiteConfig, SiteConfigError

if typ.TYPE_CHECKING:
    from devblog_pages.content.models import Document


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the site and its documents.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML site file (for example, ``site.yaml``).
        Article paths inside it are resolved relative to its directory.

    Returns
    -------
    SiteConfig
        Parsed site configuration with every document loaded.

    Raises
    ------
    FileNotFoundError
        If the configuration file, or an article it references, is missing.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required sections or fields are missing or invalid.
    ValidationError
        If an article cannot be parsed into a document.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from devblog_pages.config import load_site_config
    >>> site = load_site_config(Path("content/site.yaml"))  # doctest: +SKIP
    >>> [doc.slug for doc in site.documents]  # doctest: +SKIP
    ['cleaning-up-sql-access', 'discriminated-unions-in-csharp']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    site_raw = raw.get("site", {}) or {}
    if not isinstance(site_raw, dict):
        msg = "The 'site' section must be a mapping."
        raise SiteConfigError(msg)

    stylesheet = _optional_str(site_raw.get("stylesheet"))
    if not stylesheet:
        msg = "The 'site.stylesheet' setting is required."
        raise SiteConfigError(msg)
    back_label = _optional_str(site_raw.get("back_label")) or DEFAULT_BACK_LABEL
    base_dir = path.parent

    documents_raw = raw.get("documents") or []
    if not isinstance(documents_raw, list) or not documents_raw:
        msg = "No documents defined in site configuration."
        raise SiteConfigError(msg)

    documents = tuple(
        _build_document(entry, base_dir=base_dir, back_label=back_label)
        for entry in documents_raw
    )

    return SiteConfig(
        title=_optional_str(site_raw.get("title")) or DEFAULT_SITE_TITLE,
        stylesheet=stylesheet,
        output_dir=Path(site_raw.get("output_dir", "public")),
        pygments_style=_optional_str(site_raw.get("pygments_style")),
        back_label=back_label,
        documents=documents,
    )


def _build_document(entry: object, *, base_dir: Path, back_label: str) -> Document:
    """Load one ``documents`` entry, either a file reference or inline record."""
    match entry:
        case str() as relative:
            return load_markdown_document(
                _resolve_path(base_dir, relative), back_label=back_label
            )
        case {"path": relative}:
            return load_markdown_document(
                _resolve_path(base_dir, relative), back_label=back_label
            )
        case dict():
            return document_from_mapping(entry, back_label=back_label)
        case _:
            msg = f"Unsupported document entry: {entry!r}"
            raise SiteConfigError(msg)


def _resolve_path(base_dir: Path, value: object) -> Path:
    """Return ``value`` as a path, anchored at ``base_dir`` when relative."""
    candidate = Path(str(value))
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


__all__ = ["load_site_config"]

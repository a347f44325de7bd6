"""Load book configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from learnbook._constants import DEFAULT_CONFIG
from learnbook.manifest import SectionEntry

from .models import BookConfig, BookConfigError


def load_book_config(path: Path | None) -> BookConfig:
    """Load the YAML configuration describing the book layout.

    Parameters
    ----------
    path : Path or None
        Filesystem path to the YAML configuration file (for example,
        ``config/book.yaml``). ``None`` returns the built-in defaults,
        including the compiled-in manifest.

    Returns
    -------
    BookConfig
        Parsed configuration with defaults applied for every omitted key.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    BookConfigError
        If ``defaults`` or ``sections`` are malformed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from learnbook.config import load_book_config
    >>> config = load_book_config(None)
    >>> config.sections[0].name
    'Getting Started'
    """
    if path is None:
        return BookConfig()
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    if not isinstance(defaults, dict):
        msg = "'defaults' must be a mapping."
        raise BookConfigError(msg)

    base = BookConfig()
    sections_raw = raw.get("sections")
    sections = (
        _build_sections(sections_raw) if sections_raw is not None else base.sections
    )
    return BookConfig(
        base_dir=Path(defaults.get("base_dir", base.base_dir)),
        output=Path(defaults.get("output", base.output)),
        page_format=str(defaults.get("page_format", base.page_format)),
        margin=str(defaults.get("margin", base.margin)),
        pygments_style=str(defaults.get("pygments_style", base.pygments_style)),
        title=str(defaults.get("title", base.title)),
        sections=sections,
    )


def resolve_config_path(explicit: Path | None) -> Path | None:
    """Return ``explicit`` or the default config path when that file exists."""
    if explicit is not None:
        return explicit
    if DEFAULT_CONFIG.exists():
        return DEFAULT_CONFIG
    return None


def _build_sections(payload: object) -> tuple[SectionEntry, ...]:
    """Build the ordered manifest from a ``sections`` YAML list."""
    if not isinstance(payload, list) or not payload:
        msg = "'sections' must be a non-empty list."
        raise BookConfigError(msg)
    sections: list[SectionEntry] = []
    for index, item in enumerate(payload, start=1):
        match item:
            case {"name": str() as name, "files": list() as files}:
                sections.append(SectionEntry(name, _build_files(name, files)))
            case _:
                msg = f"Section #{index} must define 'name' and a 'files' list."
                raise BookConfigError(msg)
    return tuple(sections)


def _build_files(section: str, files: list[object]) -> tuple[str, ...]:
    """Validate the file entries of one section."""
    result: list[str] = []
    for entry in files:
        if not isinstance(entry, str) or not entry.strip():
            msg = f"Section '{section}' has an invalid file entry: {entry!r}"
            raise BookConfigError(msg)
        result.append(entry.strip())
    return tuple(result)


__all__ = ["load_book_config", "resolve_config_path"]

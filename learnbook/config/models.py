"""Typed dataclasses describing learnbook build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from learnbook._constants import (
    DEFAULT_BASE_DIR,
    DEFAULT_MARGIN,
    DEFAULT_OUTPUT,
    DEFAULT_PAGE_FORMAT,
    DEFAULT_PYGMENTS_STYLE,
    DEFAULT_TITLE,
)
from learnbook.manifest import DEFAULT_MANIFEST, SectionEntry


class BookConfigError(ValueError):
    """Raised when the book configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class BookConfig:
    """A fully resolved book definition.

    Attributes
    ----------
    base_dir : Path
        Directory holding one subdirectory per section slug.
    output : Path
        Destination of the generated PDF; overwritten on every build.
    page_format : str
        Paper size passed to the browser's PDF export.
    margin : str
        CSS length applied to all four page margins.
    pygments_style : str
        Pygments style used for the code-block stylesheet.
    title : str
        Document title placed in the HTML shell.
    sections : tuple[SectionEntry, ...]
        Ordered manifest of sections and files.
    """

    base_dir: Path = DEFAULT_BASE_DIR
    output: Path = DEFAULT_OUTPUT
    page_format: str = DEFAULT_PAGE_FORMAT
    margin: str = DEFAULT_MARGIN
    pygments_style: str = DEFAULT_PYGMENTS_STYLE
    title: str = DEFAULT_TITLE
    sections: tuple[SectionEntry, ...] = DEFAULT_MANIFEST


__all__ = ["BookConfig", "BookConfigError"]

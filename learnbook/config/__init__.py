"""Load and validate book configuration YAML for learnbook builds.

This subpackage parses an optional ``book.yaml`` file, merges its
``defaults`` with the built-in values, optionally replaces the compiled-in
manifest with a ``sections`` list, and produces a :class:`BookConfig` that the
assembler and exporter consume. The primary entry point is
:func:`load_book_config`.

Examples
--------
>>> from pathlib import Path
>>> from learnbook.config import load_book_config
>>> config = load_book_config(Path("config/book.yaml"))  # doctest: +SKIP
>>> config.output  # doctest: +SKIP
PosixPath('NodeJS_Learn_Content.pdf')
"""

from .loader import load_book_config, resolve_config_path
from .models import BookConfig, BookConfigError

__all__ = [
    "BookConfig",
    "BookConfigError",
    "load_book_config",
    "resolve_config_path",
]

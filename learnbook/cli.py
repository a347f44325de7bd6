"""Cyclopts CLI entrypoint for building the learn-content PDF.

The ``learnbook`` console script defined here walks the configured manifest,
renders each Markdown file into one HTML body, and prints it to a single PDF
with headless Chromium. ``learnbook manifest`` lists the resolved input paths
and whether each exists, without rendering anything.

Options can also be supplied through ``INPUT_*`` environment variables, which
keeps the command usable from CI workflows.

Examples
--------
Build the PDF with the built-in manifest:

>>> from learnbook.cli import main
>>> main()  # doctest: +SKIP

Build from a checkout in another directory:

>>> from learnbook.cli import app
>>> app.run(["build", "--base-dir", "../nodejs.org/apps/site/pages/en/learn"])  # doctest: +SKIP
"""

from __future__ import annotations

import asyncio
import dataclasses as dc
import traceback
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import BookConfig, load_book_config, resolve_config_path
from .manifest import iter_manifest_paths
from .pipeline import build_book

app = App(name="learnbook", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_config(
    config: Path | None,
    *,
    base_dir: Path | None = None,
    output: Path | None = None,
) -> BookConfig:
    """Load the book config and apply command-line overrides."""
    book = load_book_config(resolve_config_path(config))
    if base_dir is not None:
        book = dc.replace(book, base_dir=base_dir)
    if output is not None:
        book = dc.replace(book, output=output)
    return book


@app.command(help="Render the manifest into a single PDF.")
def build(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to book config", env_var="INPUT_CONFIG")
    ] = None,
    base_dir: typ.Annotated[
        Path | None,
        Parameter(help="Directory holding the section folders", env_var="INPUT_BASE_DIR"),
    ] = None,
    output: typ.Annotated[
        Path | None, Parameter(help="Override the PDF path", env_var="INPUT_OUTPUT")
    ] = None,
) -> None:
    """Build the PDF for the configured manifest.

    Parameters
    ----------
    config : Path or None, optional
        Path to a ``book.yaml`` file. When omitted, ``config/book.yaml`` is
        used if present, otherwise the built-in defaults apply.
    base_dir : Path or None, optional
        Override for the directory containing one folder per section.
    output : Path or None, optional
        Override for the PDF destination.

    Returns
    -------
    None
        Writes the PDF and prints its path. Missing input files are reported
        on stderr and skipped.
    """
    book = _load_config(config, base_dir=base_dir, output=output)
    written = asyncio.run(build_book(book))
    print(f"wrote {_format_path(written)}")


@app.command(help="List manifest entries and whether each file exists.")
def manifest(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to book config", env_var="INPUT_CONFIG")
    ] = None,
    base_dir: typ.Annotated[
        Path | None,
        Parameter(help="Directory holding the section folders", env_var="INPUT_BASE_DIR"),
    ] = None,
) -> None:
    """Print every resolved manifest path prefixed with ``ok`` or ``missing``."""
    book = _load_config(config, base_dir=base_dir)
    for section, _relative, path in iter_manifest_paths(book.sections, book.base_dir):
        status = "ok" if path.exists() else "missing"
        print(f"{status:<7} {section.name}: {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``learnbook`` command.

    Any exception escaping a command is printed with its traceback and the
    process exits with status 1.
    """
    try:
        app()
    except Exception:  # noqa: BLE001
        traceback.print_exc()
        raise SystemExit(1) from None


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

"""Build a single PDF book from an ordered manifest of Markdown files.

This package exposes the CLI entry points used by ``learnbook build`` to walk
the section manifest, render each file to HTML with highlighted code blocks,
and print the combined document to PDF with headless Chromium.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from learnbook import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]

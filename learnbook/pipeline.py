"""Sequential build pipeline: manifest, renderer, assembler, exporter."""

from __future__ import annotations

import typing as typ

from learnbook.assembler import BookAssembler
from learnbook.exporter import PdfExporter
from learnbook.renderer import MarkdownRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from learnbook.config import BookConfig


def assemble_body(config: BookConfig, renderer: MarkdownRenderer) -> str:
    """Render every manifest file in order and return the combined body."""
    assembler = BookAssembler(renderer, config.base_dir)
    return assembler.assemble(config.sections)


async def build_book(config: BookConfig) -> Path:
    """Assemble the configured manifest and export it as one PDF.

    Assembly runs synchronously before the single awaited export step, so the
    document body is complete before the browser is launched.

    Parameters
    ----------
    config : BookConfig
        Resolved configuration describing inputs, manifest, and output.

    Returns
    -------
    Path
        Path of the written PDF.
    """
    renderer = MarkdownRenderer(config.pygments_style)
    body = assemble_body(config, renderer)
    exporter = PdfExporter(
        config.output,
        page_format=config.page_format,
        margin=config.margin,
        title=config.title,
        stylesheet=renderer.stylesheet,
    )
    return await exporter.export(body)


__all__ = ["assemble_body", "build_book"]

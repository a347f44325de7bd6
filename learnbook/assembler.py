"""Walk the manifest and assemble one combined HTML body.

:class:`BookAssembler` visits every section and file in manifest order. Each
section contributes a level-one heading; each file that exists contributes a
level-two heading, its rendered fragment, and a page-break rule. Missing files
are reported on stderr and skipped, while any other error (for example a file
that exists but cannot be read) aborts assembly.

Example
-------
>>> from pathlib import Path
>>> from learnbook.assembler import BookAssembler
>>> from learnbook.manifest import SectionEntry
>>> from learnbook.renderer import MarkdownRenderer
>>> assembler = BookAssembler(MarkdownRenderer(), Path("learn"))
>>> body = assembler.assemble([SectionEntry("Intro", ())])
>>> body
'<h1>Intro</h1>\\n'
"""

from __future__ import annotations

import dataclasses as dc
import sys
import typing as typ
from html import escape

from learnbook._constants import PAGE_BREAK_CLASS
from learnbook.manifest import file_title, resolve_file_path

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from learnbook.manifest import SectionEntry
    from learnbook.renderer import MarkdownRenderer


@dc.dataclass(slots=True)
class DocumentBuilder:
    """Append-only accumulator for the document body.

    Attributes
    ----------
    parts : list[str]
        HTML chunks in the order they were appended.
    """

    parts: list[str] = dc.field(default_factory=list)

    def add_section(self, name: str) -> None:
        """Append the level-one heading for a section."""
        self.parts.append(f"<h1>{escape(name)}</h1>\n")

    def add_file(self, title: str, fragment: str) -> None:
        """Append a file heading, its fragment, and a page-break separator."""
        self.parts.append(
            f"<h2>{escape(title)}</h2>\n{fragment}\n"
            f'<hr class="{PAGE_BREAK_CLASS}">\n'
        )

    def html(self) -> str:
        """Return the concatenated body markup."""
        return "".join(self.parts)


class BookAssembler:
    """Render manifest files and concatenate them into a single body."""

    def __init__(self, renderer: MarkdownRenderer, base_dir: Path) -> None:
        self.renderer = renderer
        self.base_dir = base_dir

    def assemble(self, manifest: cabc.Iterable[SectionEntry]) -> str:
        """Build the HTML body for ``manifest``.

        Parameters
        ----------
        manifest : Iterable[SectionEntry]
            Sections in document order.

        Returns
        -------
        str
            Body markup containing one heading group per existing file, in
            manifest order.

        Raises
        ------
        OSError
            If an existing file cannot be read.
        """
        builder = DocumentBuilder()
        for section in manifest:
            builder.add_section(section.name)
            for relative in section.files:
                path = resolve_file_path(self.base_dir, section.name, relative)
                self._append_file(builder, relative, path)
        return builder.html()

    def _append_file(self, builder: DocumentBuilder, relative: str, path: Path) -> None:
        """Render ``path`` into the builder or report it as missing."""
        if not path.exists():
            print(f"File not found: {path}", file=sys.stderr)
            return
        fragment = self.renderer.render_file(path)
        builder.add_file(file_title(relative), fragment)


__all__ = ["BookAssembler", "DocumentBuilder"]

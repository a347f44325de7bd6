r"""Ordered section manifest describing the structure of the generated book.

The manifest is a hand-ordered tuple of :class:`SectionEntry` values. Its order
defines the order of sections and files in the rendered document; nothing here
scans the filesystem. Files are addressed as
``{base_dir}/{section-slug}/{relative-path}``, where nested documents simply
carry a subdirectory in their relative path (``memory/index.md``).

Example
-------
>>> from pathlib import Path
>>> from learnbook.manifest import SectionEntry, file_title, resolve_file_path
>>> entry = SectionEntry("Getting Started", ("a.md",))
>>> resolve_file_path(Path("learn"), entry.name, entry.files[0]).as_posix()
'learn/getting-started/a.md'
>>> file_title("memory/index.md")
'memory/index'
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ
from pathlib import Path

if typ.TYPE_CHECKING:
    import collections.abc as cabc

WHITESPACE_PATTERN = re.compile(r"\s+")


@dc.dataclass(frozen=True, slots=True)
class SectionEntry:
    """Named section and the ordered files that compose it.

    Attributes
    ----------
    name : str
        Section heading, also used to derive the section's directory slug.
    files : tuple[str, ...]
        File paths relative to the section directory, in document order.
    """

    name: str
    files: tuple[str, ...]


DEFAULT_MANIFEST: tuple[SectionEntry, ...] = (
    SectionEntry(
        "Getting Started",
        (
            "introduction-to-nodejs.md",
            "how-to-install-nodejs.md",
            "how-much-javascript-do-you-need-to-know-to-use-nodejs.md",
            "differences-between-nodejs-and-the-browser.md",
            "the-v8-javascript-engine.md",
            "an-introduction-to-the-npm-package-manager.md",
            "ecmascript-2015-es6-and-beyond.md",
            "nodejs-the-difference-between-development-and-production.md",
            "nodejs-with-webassembly.md",
            "debugging.md",
            "profiling.md",
            "security-best-practices.md",
        ),
    ),
    SectionEntry(
        "TypeScript",
        (
            "introduction.md",
            "transpile.md",
            "run.md",
            "run-natively.md",
        ),
    ),
    SectionEntry(
        "Asynchronous Work",
        (
            "asynchronous-flow-control.md",
            "overview-of-blocking-vs-non-blocking.md",
            "javascript-asynchronous-programming-and-callbacks.md",
            "discover-javascript-timers.md",
            "event-loop-timers-and-nexttick.md",
            "the-nodejs-event-emitter.md",
            "understanding-processnexttick.md",
            "understanding-setimmediate.md",
            "dont-block-the-event-loop.md",
        ),
    ),
    SectionEntry(
        "Manipulating Files",
        (
            "nodejs-file-stats.md",
            "nodejs-file-paths.md",
            "working-with-file-descriptors-in-nodejs.md",
            "reading-files-with-nodejs.md",
            "writing-files-with-nodejs.md",
            "working-with-folders-in-nodejs.md",
            "working-with-different-filesystems.md",
        ),
    ),
    SectionEntry(
        "Command Line",
        (
            "run-nodejs-scripts-from-the-command-line.md",
            "how-to-read-environment-variables-from-nodejs.md",
            "how-to-use-the-nodejs-repl.md",
            "output-to-the-command-line-using-nodejs.md",
            "accept-input-from-the-command-line-in-nodejs.md",
        ),
    ),
    SectionEntry(
        "Modules",
        (
            "publishing-node-api-modules.md",
            "anatomy-of-an-http-transaction.md",
            "abi-stability.md",
            "backpressuring-in-streams.md",
        ),
    ),
    SectionEntry(
        "Diagnostics",
        (
            "user-journey.md",
            "memory/index.md",
            "live-debugging/index.md",
            "poor-performance/index.md",
            "flame-graphs.md",
        ),
    ),
    SectionEntry(
        "Test Runner",
        (
            "introduction.md",
            "using-test-runner.md",
            "mocking.md",
        ),
    ),
)


def section_slug(name: str) -> str:
    """Return the directory slug for a section name.

    Lowercases the name and collapses whitespace runs into single hyphens, so
    ``"Getting Started"`` maps to ``getting-started``.
    """
    return WHITESPACE_PATTERN.sub("-", name.lower())


def resolve_file_path(base_dir: Path, section_name: str, relative: str) -> Path:
    """Return the on-disk location of ``relative`` within a section."""
    return base_dir / section_slug(section_name) / relative


def file_title(relative: str) -> str:
    """Derive the level-two heading text for a manifest file entry."""
    stem = relative.removesuffix(".md")
    return stem.replace("-", " ")


def iter_manifest_paths(
    manifest: cabc.Iterable[SectionEntry], base_dir: Path
) -> cabc.Iterator[tuple[SectionEntry, str, Path]]:
    """Yield ``(section, relative, resolved)`` triples in manifest order.

    Parameters
    ----------
    manifest : Iterable[SectionEntry]
        Sections to walk; consumed once from start to finish.
    base_dir : Path
        Root directory containing one subdirectory per section slug.

    Yields
    ------
    tuple[SectionEntry, str, Path]
        The owning section, the file entry as written in the manifest, and
        its resolved path. Existence is not checked here.
    """
    for section in manifest:
        for relative in section.files:
            yield section, relative, resolve_file_path(base_dir, section.name, relative)


__all__ = [
    "DEFAULT_MANIFEST",
    "SectionEntry",
    "file_title",
    "iter_manifest_paths",
    "resolve_file_path",
    "section_slug",
]

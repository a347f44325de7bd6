"""Unit tests for manifest path resolution and title derivation."""

from __future__ import annotations

from pathlib import Path

from learnbook.manifest import (
    DEFAULT_MANIFEST,
    SectionEntry,
    file_title,
    iter_manifest_paths,
    resolve_file_path,
    section_slug,
)


def test_section_slug_collapses_whitespace() -> None:
    """Section names lowercase and join words with single hyphens."""
    assert section_slug("Getting Started") == "getting-started"
    assert section_slug("Asynchronous  Work") == "asynchronous-work"
    assert section_slug("TypeScript") == "typescript"


def test_resolve_file_path_handles_nested_entries() -> None:
    """Nested entries keep their subdirectory below the section slug."""
    path = resolve_file_path(Path("learn"), "Diagnostics", "memory/index.md")
    assert path == Path("learn/diagnostics/memory/index.md")


def test_file_title_strips_extension_and_hyphens() -> None:
    """Titles drop ``.md`` and turn hyphens into spaces."""
    assert file_title("how-to-install-nodejs.md") == "how to install nodejs"
    assert file_title("live-debugging/index.md") == "live debugging/index"


def test_iter_manifest_paths_follows_manifest_order() -> None:
    """Resolved paths are yielded section by section, file by file."""
    manifest = (
        SectionEntry("B Section", ("z.md", "a.md")),
        SectionEntry("A Section", ("m.md",)),
    )
    resolved = [
        (section.name, relative, path.as_posix())
        for section, relative, path in iter_manifest_paths(manifest, Path("base"))
    ]
    assert resolved == [
        ("B Section", "z.md", "base/b-section/z.md"),
        ("B Section", "a.md", "base/b-section/a.md"),
        ("A Section", "m.md", "base/a-section/m.md"),
    ]


def test_default_manifest_shape() -> None:
    """The built-in manifest keeps its hand-authored section order."""
    names = [section.name for section in DEFAULT_MANIFEST]
    assert names == [
        "Getting Started",
        "TypeScript",
        "Asynchronous Work",
        "Manipulating Files",
        "Command Line",
        "Modules",
        "Diagnostics",
        "Test Runner",
    ]
    diagnostics = DEFAULT_MANIFEST[names.index("Diagnostics")]
    assert "memory/index.md" in diagnostics.files

"""Unit tests for loading ``book.yaml`` configuration files.

Usage
-----
Run ``pytest tests/test_config.py -v``. Configuration files are written into
pytest's ``tmp_path``; ``monkeypatch.chdir`` isolates default-path lookups.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from learnbook._constants import DEFAULT_CONFIG
from learnbook.config import (
    BookConfig,
    BookConfigError,
    load_book_config,
    resolve_config_path,
)
from learnbook.manifest import DEFAULT_MANIFEST, SectionEntry


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "book.yaml"
    path.write_text(body.strip() + "\n", encoding="utf-8")
    return path


def test_defaults_without_config_file() -> None:
    """No path means the compiled-in manifest and A4 geometry."""
    config = load_book_config(None)
    assert config == BookConfig()
    assert config.sections == DEFAULT_MANIFEST
    assert config.page_format == "A4"
    assert config.margin == "40px"


def test_yaml_overrides_defaults_and_sections(tmp_path: Path) -> None:
    """Values under ``defaults`` and ``sections`` replace the built-ins."""
    path = _write_config(
        tmp_path,
        """
defaults:
  base_dir: docs/learn
  output: out/book.pdf
  margin: 20mm
  pygments_style: monokai
sections:
  - name: Getting Started
    files:
      - a.md
      - nested/index.md
  - name: Extras
    files: []
        """,
    )
    config = load_book_config(path)
    assert config.base_dir == Path("docs/learn")
    assert config.output == Path("out/book.pdf")
    assert config.margin == "20mm"
    assert config.page_format == "A4"
    assert config.pygments_style == "monokai"
    assert config.sections == (
        SectionEntry("Getting Started", ("a.md", "nested/index.md")),
        SectionEntry("Extras", ()),
    )


def test_missing_explicit_config_raises(tmp_path: Path) -> None:
    """A requested config file that does not exist is an error."""
    with pytest.raises(FileNotFoundError):
        load_book_config(tmp_path / "absent.yaml")


def test_non_mapping_config_raises(tmp_path: Path) -> None:
    """Top-level YAML must be a mapping."""
    path = _write_config(tmp_path, "- one\n- two")
    with pytest.raises(TypeError):
        load_book_config(path)


@pytest.mark.parametrize(
    "sections",
    [
        "sections: []",
        "sections:\n  - name: Only name",
        "sections:\n  - name: Bad\n    files:\n      - 3",
    ],
    ids=["empty", "no-files", "non-string-file"],
)
def test_malformed_sections_raise(tmp_path: Path, sections: str) -> None:
    """Invalid section entries are reported as configuration errors."""
    path = _write_config(tmp_path, sections)
    with pytest.raises(BookConfigError):
        load_book_config(path)


def test_resolve_config_path_prefers_existing_default(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The default path is only used when the file exists."""
    monkeypatch.chdir(tmp_path)
    assert resolve_config_path(None) is None
    DEFAULT_CONFIG.parent.mkdir(parents=True)
    DEFAULT_CONFIG.write_text("defaults: {}\n", encoding="utf-8")
    assert resolve_config_path(None) == DEFAULT_CONFIG
    explicit = tmp_path / "other.yaml"
    assert resolve_config_path(explicit) == explicit

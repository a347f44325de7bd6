"""Utilities for rendering markdown files and syntax-highlighted code blocks.

:class:`MarkdownRenderer` turns one documentation file into an HTML fragment
ready for concatenation. Leading front matter is stripped, the remaining text
is converted with Python-Markdown (raw HTML passes through untouched), and
fenced code blocks are highlighted with Pygments inside a
``<pre class="hljs"><code>`` container. Blocks whose language is missing or
unknown, or whose highlighting fails, are emitted as escaped plain text in the
same container.

Example
-------
>>> from learnbook.renderer import MarkdownRenderer
>>> html = MarkdownRenderer().render("---\\ntitle: x\\n---\\n# Hi\\n")
>>> html
'<h1>Hi</h1>'
"""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown import Markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from learnbook._constants import DEFAULT_PYGMENTS_STYLE

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pygments.lexer import Lexer

FRONT_MATTER_PATTERN = re.compile(
    r"\A(?:[ \t]*\r?\n)*---[ \t]*\r?\n.*?^---[ \t]*$(?:\r?\n)?",
    re.DOTALL | re.MULTILINE,
)
FENCED_BLOCK_PATTERN = re.compile(
    r"^(?P<indent>[ ]*)(?P<fence>`{3,}|~{3,})[ ]*(?P<lang>[A-Za-z0-9_+#.-]*)[^\n]*\n"
    r"(?P<code>.*?)(?<=\n)[ ]*(?P=fence)[ ]*$",
    re.DOTALL | re.MULTILINE,
)
LIST_ITEM_PATTERN = re.compile(r"^[ ]*(?:[*+-]|\d+[.)])[ ]+\S")
LANGUAGE_ALIASES: dict[str, str] = {
    "cjs": "javascript",
    "mjs": "javascript",
}


def strip_front_matter(text: str) -> str:
    """Remove a single leading ``---`` delimited metadata block from ``text``.

    Only a block that opens the document is removed; later ``---`` lines,
    such as horizontal rules, are left in place.

    Parameters
    ----------
    text : str
        Raw file content.

    Returns
    -------
    str
        The content following the closing delimiter, or ``text`` unchanged
        when it does not start with front matter.
    """
    return FRONT_MATTER_PATTERN.sub("", text, count=1)


class CodeHighlighter:
    """Highlight code snippets into ``hljs`` containers using Pygments."""

    def __init__(self, pygments_style: str = DEFAULT_PYGMENTS_STYLE) -> None:
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, nowrap=True)

    @property
    def stylesheet(self) -> str:
        """Return the Pygments CSS scoped to ``.hljs`` containers."""
        return self._formatter.get_style_defs(".hljs")

    def block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` as a highlighted or escaped ``hljs`` block.

        Parameters
        ----------
        code : str
            Source snippet taken from a fenced block.
        language : str, optional
            Fence language tag; ``None`` or an empty string skips highlighting.

        Returns
        -------
        str
            ``<pre class="hljs"><code>...</code></pre>`` markup.
        """
        lexer = self._lexer_for(language)
        if lexer is None:
            return self._plain_block(code)
        try:
            highlighted = highlight(code, lexer, self._formatter)
        except Exception:  # noqa: BLE001
            return self._plain_block(code)
        return f'<pre class="hljs"><code>{highlighted}</code></pre>'

    @staticmethod
    def _lexer_for(language: str | None) -> Lexer | None:
        """Return a Pygments lexer for ``language`` or None when unknown."""
        if not language:
            return None
        name = LANGUAGE_ALIASES.get(language.lower(), language)
        try:
            return get_lexer_by_name(name)
        except ClassNotFound:
            return None

    @staticmethod
    def _plain_block(code: str) -> str:
        return f'<pre class="hljs"><code>{escape(code)}</code></pre>'


class HljsFenceExtension(Extension):
    """Replace fenced code blocks with stashed ``hljs`` markup.

    Registering this extension on a ``markdown.Markdown`` instance takes over
    fenced-block handling from the stock ``fenced_code`` extension so every
    block, highlighted or not, ends up in the same container markup.
    """

    def __init__(self, highlighter: CodeHighlighter) -> None:
        self.highlighter = highlighter
        super().__init__()

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the fence preprocessor ahead of raw HTML block handling."""
        processor = HljsFencePreprocessor(md, self.highlighter)
        md.preprocessors.register(processor, "learnbook_hljs_fence", 25)


class HljsFencePreprocessor(Preprocessor):
    """Highlight fenced code blocks before block-level parsing."""

    def __init__(self, md: Markdown, highlighter: CodeHighlighter) -> None:
        super().__init__(md)
        self.highlighter = highlighter

    def run(self, lines: list[str]) -> list[str]:
        """Swap each fenced block for an HTML stash placeholder."""
        text = "\n".join(lines)

        def _replace(match: re.Match[str]) -> str:
            indent = len(match.group("indent"))
            in_list = bool(indent) and _in_list_item(text[: match.start()], indent)
            if indent > 3 and not in_list:
                # Four or more spaces outside a list is an indented code block.
                return match.group(0)
            code = _dedent(match.group("code"), indent)
            html = self.highlighter.block(code, match.group("lang"))
            placeholder = self.md.htmlStash.store(html)
            prefix = " " * self._continuation_width(indent) if in_list else ""
            return f"\n\n{prefix}{placeholder}\n\n"

        return FENCED_BLOCK_PATTERN.sub(_replace, text).split("\n")

    def _continuation_width(self, indent: int) -> int:
        """Round ``indent`` up to the list nesting width Markdown expects."""
        tab = self.md.tab_length
        return -(-indent // tab) * tab


def _in_list_item(preceding: str, indent: int) -> bool:
    """Return True when the closest shallower line before a fence is a list item."""
    for line in reversed(preceding.split("\n")):
        if not line.strip():
            continue
        if len(line) - len(line.lstrip(" ")) >= indent:
            continue
        return bool(LIST_ITEM_PATTERN.match(line))
    return False


def _dedent(code: str, width: int) -> str:
    """Strip up to ``width`` leading spaces from every line of ``code``."""
    if not width:
        return code
    prefix = re.compile(rf"^[ ]{{0,{width}}}", re.MULTILINE)
    return prefix.sub("", code)


class MarkdownRenderer:
    """Render documentation markdown into HTML fragments."""

    def __init__(self, pygments_style: str = DEFAULT_PYGMENTS_STYLE) -> None:
        """Initialize the renderer with the Pygments style used for code blocks.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style; only affects :attr:`stylesheet`, since
            highlighted markup carries token classes rather than inline colours.
        """
        self.highlighter = CodeHighlighter(pygments_style)

    @property
    def stylesheet(self) -> str:
        """Return the CSS needed to colour highlighted code blocks."""
        return self.highlighter.stylesheet

    def render_file(self, path: Path) -> str:
        """Read ``path`` as UTF-8 and render it; read errors propagate."""
        return self.render(path.read_text(encoding="utf-8-sig"))

    def render(self, text: str) -> str:
        """Render markdown ``text`` into an HTML fragment."""
        md = Markdown(
            extensions=[
                HljsFenceExtension(self.highlighter),
                "tables",
                "sane_lists",
            ]
        )
        return md.convert(strip_front_matter(text))


__all__ = [
    "FENCED_BLOCK_PATTERN",
    "FRONT_MATTER_PATTERN",
    "CodeHighlighter",
    "HljsFenceExtension",
    "MarkdownRenderer",
    "strip_front_matter",
]

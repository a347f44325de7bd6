"""Wrap the assembled body in an HTML shell and print it to PDF.

:class:`PdfExporter` renders ``templates/book.jinja`` around the document body
and hands the result to headless Chromium through Playwright's async API. The
browser is always closed after the export attempt, whether ``page.pdf``
succeeded or raised; errors are not caught here.

Example
-------
>>> import asyncio
>>> from pathlib import Path
>>> from learnbook.exporter import PdfExporter
>>> exporter = PdfExporter(Path("book.pdf"))
>>> asyncio.run(exporter.export("<h1>Hi</h1>"))  # doctest: +SKIP
PosixPath('book.pdf')
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from playwright.async_api import async_playwright

from learnbook._constants import (
    DEFAULT_MARGIN,
    DEFAULT_PAGE_FORMAT,
    DEFAULT_TITLE,
    PAGE_BREAK_CLASS,
)

if typ.TYPE_CHECKING:
    from playwright.async_api import Browser

TEMPLATE_NAME = "book.jinja"


class PdfExporter:
    """Render an HTML body into a single PDF file."""

    def __init__(
        self,
        output_path: Path,
        *,
        page_format: str = DEFAULT_PAGE_FORMAT,
        margin: str = DEFAULT_MARGIN,
        title: str = DEFAULT_TITLE,
        stylesheet: str = "",
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the exporter with page geometry and template context.

        Parameters
        ----------
        output_path : Path
            Destination PDF; an existing file is overwritten.
        page_format : str, optional
            Paper format understood by Chromium, ``"A4"`` by default.
        margin : str, optional
            CSS length used for the body margin and all four page margins.
        title : str, optional
            Title placed in the HTML shell.
        stylesheet : str, optional
            Extra CSS for highlighted code, usually
            :attr:`MarkdownRenderer.stylesheet`.
        templates_dir : Path, optional
            Directory containing ``book.jinja``; defaults to the package
            templates.
        """
        self.output_path = output_path
        self.page_format = page_format
        self.margin = margin
        self.title = title
        self.stylesheet = stylesheet
        default_templates = Path(__file__).resolve().parent / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template(TEMPLATE_NAME)

    def wrap(self, body: str) -> str:
        """Return a complete HTML document embedding ``body`` and the stylesheet."""
        return self.template.render(
            title=self.title,
            margin=self.margin,
            page_break_class=PAGE_BREAK_CLASS,
            pygments_css=self.stylesheet,
            body=body,
        )

    async def export(self, body: str) -> Path:
        """Print ``body`` to :attr:`output_path` using headless Chromium.

        Returns
        -------
        Path
            The written PDF path.

        Raises
        ------
        playwright.async_api.Error
            If the browser cannot be launched or the page cannot be loaded or
            printed. The browser is closed before the error propagates.
        """
        document = self.wrap(body)
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch()
            try:
                await self._print(browser, document)
            finally:
                await browser.close()
        return self.output_path

    async def _print(self, browser: Browser, document: str) -> None:
        page = await browser.new_page()
        await page.set_content(document)
        await page.pdf(
            path=str(self.output_path),
            format=self.page_format,
            margin={
                "top": self.margin,
                "right": self.margin,
                "bottom": self.margin,
                "left": self.margin,
            },
        )


__all__ = ["PdfExporter"]

"""Common literal values used across learnbook.

These constants keep default paths and page geometry centralized so the
configuration loader, exporter, and tests can import the same values without
drifting. Intended for internal use within the learnbook package.

Examples
--------
>>> from learnbook import _constants
>>> _constants.DEFAULT_PAGE_FORMAT
'A4'
>>> str(_constants.DEFAULT_OUTPUT)
'NodeJS_Learn_Content.pdf'
"""

from pathlib import Path

DEFAULT_CONFIG = Path("config/book.yaml")
DEFAULT_BASE_DIR = Path("apps/site/pages/en/learn")
DEFAULT_OUTPUT = Path("NodeJS_Learn_Content.pdf")
DEFAULT_PAGE_FORMAT = "A4"
DEFAULT_MARGIN = "40px"
DEFAULT_PYGMENTS_STYLE = "default"
DEFAULT_TITLE = "Node.js Learn"
PAGE_BREAK_CLASS = "page-break"

"""Tablita renderers.

Renderers turn a ``Table`` plus its ``TableDecoration`` into one output format.

Available Renderers:
- TextRenderer: aligned monospaced text, split into blocks when too wide
- MarkdownRenderer: pipe-table lines
- HtmlRenderer: HTML fragment with inline alignment styles

Thread Safety:
Renderers hold only their options; all per-render state is local to render().

"""

from tablita.renderers.html import HtmlRenderer
from tablita.renderers.markdown import MarkdownRenderer
from tablita.renderers.protocol import TableRenderer
from tablita.renderers.text import TextRenderer

__all__ = ["HtmlRenderer", "MarkdownRenderer", "TableRenderer", "TextRenderer"]

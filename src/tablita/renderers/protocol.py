"""TableRenderer protocol: the interface shared by all output formats.

Example:
    from tablita.renderers.protocol import TableRenderer

    def render_all(renderer: TableRenderer, tables: list[Table]) -> list[object]:
        return [renderer.render(t) for t in tables]

"""

from typing import Protocol

from tablita.decoration import TableDecoration
from tablita.output import HtmlTable, MarkdownTable, TextTable
from tablita.table import Table


class TableRenderer(Protocol):
    """Protocol for table renderers.

    The built-in ``TextRenderer``, ``MarkdownRenderer`` and ``HtmlRenderer``
    conform to this protocol.

    """

    def render(
        self, table: Table, decoration: TableDecoration | None = None
    ) -> TextTable | MarkdownTable | HtmlTable:
        """Render a single non-empty table.

        Args:
            table: The table to render.
            decoration: Resolved caption, subtitle and footer.

        Returns:
            Rendered output in the renderer's format.

        """
        ...

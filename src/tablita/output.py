"""Tagged render results.

Each format returns a thin subclass of a builtin so results compare and
concatenate like plain values while consumers can recognise them:

- ``TextTable``: pre-formatted text, print it as-is
- ``MarkdownTable``: list of pipe-table lines for document pipelines
- ``HtmlTable``: HTML fragment, shown rendered by notebook front ends
"""

from __future__ import annotations


class TextTable(str):
    """Pre-formatted plain-text table."""

    __slots__ = ()

    table_format = "text"


class MarkdownTable(list[str]):
    """Lines of a Markdown pipe table, caption and footer included."""

    table_format = "pipe"

    def __str__(self) -> str:
        return "\n".join(self)

    def _repr_markdown_(self) -> str:
        return str(self)


class HtmlTable(str):
    """HTML table fragment."""

    __slots__ = ()

    table_format = "html"

    def _repr_html_(self) -> str:
        return str(self)

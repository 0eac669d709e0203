"""Markdown pipe-table renderer.

Produces a list of lines:

    Table: Caption subtitle
    <blank line>
    |header   |   cells|
    |:--------|-------:|
    |row      |   value|
    footer text

Alignment is expressed in the separator row: ``:---`` left, ``---:`` right,
``:---:`` centre. Without a directive each column gets one colon on the
side it is already aligned to. Markdown has no table footer, so footers
become plain trailing lines.
"""

from __future__ import annotations

from collections.abc import Sequence

from tablita.alignment import resolve_alignment
from tablita.decoration import TableDecoration
from tablita.indent import apply_indent, choose_indent
from tablita.matrix import Alignment, CellMatrix, build_cell_matrix, justify
from tablita.output import MarkdownTable
from tablita.table import Table

# Width added to column 0 when indentation is requested
_INDENT_WIDTH = 2


def separator_cell(side: Alignment, width: int) -> str:
    """Dashes with the colon markers for ``side``."""
    dashes = "-" * width
    match side:
        case Alignment.LEFT:
            return f":{dashes}"
        case Alignment.RIGHT:
            return f"{dashes}:"
        case Alignment.CENTER:
            return f":{dashes}:"


def caption_line(decoration: TableDecoration) -> str:
    text = decoration.caption.text if decoration.caption else ""
    if decoration.subtitle is not None:
        text = f"{text} {decoration.subtitle.text}"
    return f"Table: {text.strip()}"


class MarkdownRenderer:
    """Render tables as Markdown pipe tables."""

    __slots__ = (
        "_digits",
        "_protect_integers",
        "_missing",
        "_width",
        "_align",
        "_zap_small",
        "_indent_groups",
        "_indent_rows",
    )

    def __init__(
        self,
        *,
        digits: int = 2,
        protect_integers: bool = True,
        missing: str = "",
        width: int | None = None,
        align: str | None = None,
        zap_small: bool = False,
        indent_groups: str | None = None,
        indent_rows: Sequence[int] | None = None,
    ) -> None:
        self._digits = digits
        self._protect_integers = protect_integers
        self._missing = missing
        self._width = width
        self._align = align
        self._zap_small = zap_small
        self._indent_groups = indent_groups
        self._indent_rows = indent_rows

    def render(self, table: Table, decoration: TableDecoration | None = None) -> MarkdownTable:
        """Render one table to Markdown lines."""
        decoration = decoration or TableDecoration()
        matrix, separator = self._layout(table)

        lines = MarkdownTable()
        if decoration.has_caption:
            lines.extend([caption_line(decoration), ""])
        for index, cells in enumerate(matrix.rows):
            lines.append(f"|{'|'.join(cells)}|")
            if index == 0:
                lines.append(separator)
        lines.extend(footer.text for footer in decoration.footer_lines)
        return lines

    def _layout(self, table: Table) -> tuple[CellMatrix, str]:
        matrix, base = build_cell_matrix(
            table,
            digits=self._digits,
            protect_integers=self._protect_integers,
            missing=self._missing,
            width=self._width,
            zap_small=self._zap_small,
        )
        widths = [len(cell) for cell in matrix.header]
        if self._indent_groups is not None or self._indent_rows is not None:
            widths[0] += _INDENT_WIDTH

        alignments = resolve_alignment(self._align, matrix, base, infer=True)
        separator = []
        for index, side in enumerate(alignments):
            separator.append(separator_cell(side, widths[index]))
            extra = 2 if side is Alignment.CENTER else 1
            values = [v.strip() for v in matrix.column(index)]
            matrix.set_column(index, justify(values, side, widths[index] + extra))

        scheme = choose_indent(matrix, self._indent_groups, self._indent_rows)
        if scheme is not None:
            apply_indent(matrix, scheme)
        return matrix, f"|{'|'.join(separator)}|"

"""Plain-text table renderer.

Pipeline per table:

    build matrix -> align -> centre header -> indent -> column widths
    -> split -> render blocks -> caption / footer

Output layout:

    Caption subtitle
    <blank line>
    header row
    ----------------        (header rule, optional)
    data rows
    <blank line>            (between split blocks)
    ...
    footer text             (appended verbatim)

Thread Safety:
All per-render state lives in locals of render(); a TextRenderer instance
can be shared across threads.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from tablita.alignment import apply_alignment, center_header, resolve_alignment
from tablita.builder import TextBuilder
from tablita.decoration import TableDecoration
from tablita.indent import apply_indent, choose_indent
from tablita.matrix import Alignment, CellMatrix, build_cell_matrix, justify
from tablita.output import TextTable
from tablita.split import apply_split, plan_split, resolve_budget
from tablita.table import Table

logger = logging.getLogger(__name__)


def title_line(decoration: TableDecoration) -> str:
    """Caption and subtitle on one line, colourised, without double spaces."""
    caption = decoration.caption.styled() if decoration.caption else ""
    subtitle = decoration.subtitle.styled() if decoration.subtitle else ""
    return f"{caption} {subtitle}".strip().replace("  ", " ")


class TextRenderer:
    """Render tables as aligned monospaced text.

    Usage:
        >>> from tablita.table import Table
        >>> t = Table.from_dict({"a": [1, 10, 100], "b": ["x", "yy", "zzz"]})
        >>> lines = TextRenderer().render(t).splitlines()
        >>> lines[1], lines[2], lines[4]
        ('---------', '  1 |   x', '100 | zzz')
    """

    __slots__ = (
        "_sep",
        "_header",
        "_empty_line",
        "_digits",
        "_protect_integers",
        "_missing",
        "_width",
        "_align",
        "_table_width",
        "_zap_small",
        "_indent_groups",
        "_indent_rows",
    )

    def __init__(
        self,
        *,
        sep: str = " | ",
        header: str | None = "-",
        empty_line: str | None = None,
        digits: int = 2,
        protect_integers: bool = True,
        missing: str = "",
        width: int | Mapping[str, int] | None = None,
        align: str | None = None,
        table_width: float | str | None = None,
        zap_small: bool = False,
        indent_groups: str | None = None,
        indent_rows: Sequence[int] | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            sep: Column separator
            header: Fill character for the rule under the header row;
                None or "" for no rule
            empty_line: Fill character for rows whose cells are all blank
            digits: Decimal places for numeric columns
            protect_integers: Print whole-number columns without decimals
            missing: Placeholder for missing values
            width: Minimum width of numeric columns, or a mapping of column
                name to fixed minimum width
            align: Alignment directive (see ``tablita.alignment``)
            table_width: Line budget for splitting, a number or "auto"
            zap_small: Round tiny values to zero
            indent_groups: Group-marker token for row indentation
            indent_rows: 0-based data rows to indent
        """
        self._sep = sep
        self._header = header
        self._empty_line = empty_line
        self._digits = digits
        self._protect_integers = protect_integers
        self._missing = missing
        self._width = width
        self._align = align
        self._table_width = table_width
        self._zap_small = zap_small
        self._indent_groups = indent_groups
        self._indent_rows = indent_rows

    def build_matrix(self, table: Table) -> CellMatrix:
        """Run every layout step before splitting and return the matrix."""
        matrix, base = build_cell_matrix(
            table,
            digits=self._digits,
            protect_integers=self._protect_integers,
            missing=self._missing,
            width=self._width,
            zap_small=self._zap_small,
        )
        alignments = resolve_alignment(self._align, matrix, base)
        if self._align is not None:
            apply_alignment(matrix, alignments)
        center_header(matrix)

        scheme = choose_indent(matrix, self._indent_groups, self._indent_rows)
        if scheme is not None:
            apply_indent(matrix, scheme)

        if isinstance(self._width, Mapping):
            self._apply_column_widths(matrix, table.names, alignments)
        return matrix

    def render(self, table: Table, decoration: TableDecoration | None = None) -> TextTable:
        """Render one table to text."""
        decoration = decoration or TableDecoration()
        matrix = self.build_matrix(table)
        plan = plan_split(matrix, self._sep, resolve_budget(self._table_width))

        tb = TextBuilder()
        if decoration.has_caption:
            tb.append(title_line(decoration)).append("\n\n")
        for index, block in enumerate(apply_split(matrix, plan)):
            if index:
                tb.append_line()
            self._render_block(block, tb)
        for footer in decoration.footer_lines:
            tb.append(footer.styled())
        return TextTable(tb.build())

    def _apply_column_widths(
        self,
        matrix: CellMatrix,
        names: list[str],
        alignments: list[Alignment],
    ) -> None:
        for name, width in self._width.items():
            if name not in names:
                logger.debug("No column %r for width %d", name, width)
                continue
            index = names.index(name)
            values = [v.strip() for v in matrix.column(index)]
            matrix.set_column(index, justify(values, alignments[index], width))

    def _render_block(self, block: CellMatrix, tb: TextBuilder) -> None:
        for index, cells in enumerate(block.rows):
            width = len(self._sep.join(cells))
            if self._empty_line and all(not c.strip() for c in cells):
                tb.append_rule(self._empty_line, width)
            else:
                tb.append_row(cells, self._sep)
            if index == 0 and self._header:
                tb.append_rule(self._header, width)

"""HTML table renderer using the TextBuilder pattern.

Cells are formatted like the other formats but not padded; alignment is
carried by ``style="text-align: ..."`` on every header and data cell.

Structure:

    <table class="tablita">
    <thead>   title / subtitle rows, column headers
    <tbody>   group heading rows (from group columns) and data rows
    <tfoot>   one row per footer line
    </table>

Group columns (``Group``, ``Response``, ``Effects``, ``Component`` and any
``group_by`` names) are taken out of the grid. When such a column has more
than one distinct value its values become group heading rows, otherwise it
is dropped. Rows keep their order within a group; groups appear in order of
first occurrence.
"""

from __future__ import annotations

import html
from collections.abc import Sequence

from tablita.alignment import parse_directive
from tablita.builder import TextBuilder
from tablita.decoration import StyledText, TableDecoration
from tablita.indent import ROW_MARKER, strip_row_marker
from tablita.matrix import Alignment, format_columns
from tablita.output import HtmlTable
from tablita.table import Table

DEFAULT_GROUP_COLUMNS = ("Group", "Response", "Effects", "Component")
DEFAULT_HTML_ALIGN = "firstleft"
GROUP_LABEL_SEP = " - "

_CSS: dict[str, str] = {
    "bold": "font-weight: bold",
    "italic": "font-style: italic",
    "grey": "color: grey",
}


def html_escape(s: str) -> str:
    """Escape <, >, & and double quotes; single quotes stay."""
    return html.escape(s, quote=False).replace('"', "&quot;")


def _css_for(fragment: StyledText) -> str | None:
    if fragment.colour is None:
        return None
    css = _CSS.get(fragment.colour)
    if css is not None:
        return css
    return f"color: {fragment.colour.removeprefix('bright_')}"


def _styled_html(fragment: StyledText) -> str:
    text = html_escape(fragment.text.strip())
    css = _css_for(fragment)
    return f'<span style="{css}">{text}</span>' if css else text


def group_columns(table: Table, group_by: str | Sequence[str] | None) -> list[str]:
    """Names of the table's grouping columns, default names first."""
    names = [n for n in DEFAULT_GROUP_COLUMNS if n in table.names]
    if isinstance(group_by, str):
        group_by = [group_by]
    for name in group_by or ():
        if name in table.names and name not in names:
            names.append(name)
    return names


class HtmlRenderer:
    """Render tables as HTML.

    Usage:
        >>> from tablita.table import Table
        >>> out = HtmlRenderer().render(Table.from_dict({"a": [1], "b": ["<x>"]}))
        >>> "<td style=\\"text-align: center\\">&lt;x&gt;</td>" in out
        True
    """

    __slots__ = (
        "_digits",
        "_protect_integers",
        "_missing",
        "_width",
        "_align",
        "_zap_small",
        "_group_by",
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
        group_by: str | Sequence[str] | None = None,
        indent_rows: Sequence[int] | None = None,
    ) -> None:
        self._digits = digits
        self._protect_integers = protect_integers
        self._missing = missing
        self._width = width
        self._align = align or DEFAULT_HTML_ALIGN
        self._zap_small = zap_small
        self._group_by = group_by
        self._indent_rows = indent_rows

    def render(self, table: Table, decoration: TableDecoration | None = None) -> HtmlTable:
        """Render one table to an HTML fragment."""
        decoration = decoration or TableDecoration()
        columns = format_columns(
            table,
            self._digits,
            self._protect_integers,
            self._missing,
            self._width,
            self._zap_small,
        )
        by_name = {c[0]: c[1:] for c in columns}

        labels: list[str] | None = None
        grouping = [n for n in group_columns(table, self._group_by) if len(set(by_name[n])) > 1]
        hidden = set(group_columns(table, self._group_by))
        if grouping:
            labels = [GROUP_LABEL_SEP.join(parts) for parts in zip(*(by_name[n] for n in grouping))]
        shown = [c for c in columns if c[0] not in hidden]
        if not shown:
            # only group columns: show them as plain columns
            shown, labels = columns, None

        indented: set[int] = set()
        if self._indent_rows is not None and shown and any(ROW_MARKER in v for v in shown[0][1:]):
            shown[0] = [shown[0][0], *strip_row_marker(shown[0][1:])]
            indented = set(self._indent_rows)

        alignments = parse_directive(self._align, len(shown))
        n_cols = len(shown)

        tb = TextBuilder()
        tb.append_line('<table class="tablita">')
        self._render_head(shown, alignments, decoration, tb)
        self._render_body(shown, alignments, labels, indented, tb)
        self._render_foot(decoration, n_cols, tb)
        tb.append_line("</table>")
        return HtmlTable(tb.build())

    def _render_head(
        self,
        shown: list[list[str]],
        alignments: list[Alignment],
        decoration: TableDecoration,
        tb: TextBuilder,
    ) -> None:
        n_cols = len(shown)
        tb.append_line("<thead>")
        if decoration.has_caption:
            tb.append_line(
                f'<tr class="tablita-title"><th colspan="{n_cols}">'
                f"{_styled_html(decoration.caption)}</th></tr>"
            )
        if decoration.subtitle is not None and not decoration.subtitle.is_empty:
            tb.append_line(
                f'<tr class="tablita-subtitle"><th colspan="{n_cols}">'
                f"{_styled_html(decoration.subtitle)}</th></tr>"
            )
        tb.append_line("<tr>")
        for column, side in zip(shown, alignments, strict=True):
            tb.append_line(f'<th style="text-align: {side.value}">{html_escape(column[0])}</th>')
        tb.append_line("</tr>")
        tb.append_line("</thead>")

    def _render_body(
        self,
        shown: list[list[str]],
        alignments: list[Alignment],
        labels: list[str] | None,
        indented: set[int],
        tb: TextBuilder,
    ) -> None:
        n_cols = len(shown)
        n_rows = len(shown[0]) - 1 if shown else 0
        groups: dict[str | None, list[int]] = {}
        for row in range(n_rows):
            groups.setdefault(labels[row] if labels else None, []).append(row)

        tb.append_line("<tbody>")
        for label, rows in groups.items():
            if label is not None:
                tb.append_line(
                    f'<tr class="tablita-group"><td colspan="{n_cols}">{html_escape(label)}</td></tr>'
                )
            for row in rows:
                tb.append_line("<tr>")
                for index, (column, side) in enumerate(zip(shown, alignments, strict=True)):
                    style = f"text-align: {side.value}"
                    if index == 0 and row in indented:
                        style += "; padding-left: 2em"
                    tb.append_line(f'<td style="{style}">{html_escape(column[row + 1])}</td>')
                tb.append_line("</tr>")
        tb.append_line("</tbody>")

    def _render_foot(self, decoration: TableDecoration, n_cols: int, tb: TextBuilder) -> None:
        footers = decoration.footer_lines
        if not footers:
            return
        tb.append_line("<tfoot>")
        for footer in footers:
            tb.append_line(f'<tr><td colspan="{n_cols}">{_styled_html(footer)}</td></tr>')
        tb.append_line("</tfoot>")

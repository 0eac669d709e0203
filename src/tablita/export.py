"""High-level export entry point.

``export_table`` resolves the output format and the decoration of each
table, picks a renderer and, for a list of tables, renders each one and
joins the results.

Example:
    >>> from tablita import export_table
    >>> out = export_table({"a": [1, 10, 100], "b": ["x", "yy", "zzz"]}, format="md")
    >>> out[1]
    '|---:|---:|'
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from tablita.decoration import TableDecoration, resolve_decoration
from tablita.errors import RenderError, UnsupportedFormatError
from tablita.output import HtmlTable, MarkdownTable, TextTable
from tablita.renderers import HtmlRenderer, MarkdownRenderer, TableRenderer, TextRenderer
from tablita.table import DecorationInput, Table, TextColumn, column_from_values

logger = logging.getLogger(__name__)

FORMATS: dict[str | None, str] = {
    None: "text",
    "text": "text",
    "md": "markdown",
    "markdown": "markdown",
    "html": "html",
}
COMPONENT_COLUMN = "Component"

TableInput = Table | Mapping[str, Sequence[object]]


def normalize_format(format: str | None) -> str:
    """Map a format name or alias to ``text``, ``markdown`` or ``html``.

    Raises:
        UnsupportedFormatError: For any other value.
    """
    try:
        return FORMATS[format]
    except (KeyError, TypeError):
        raise UnsupportedFormatError(format) from None


def _as_table(value: TableInput | None) -> Table | None:
    if value is None or isinstance(value, Table):
        return value
    return Table.from_dict(value)


def _compact(items: Sequence[TableInput | None]) -> list[Table]:
    tables = (_as_table(item) for item in items)
    return [t for t in tables if t is not None and not t.is_empty]


def _text_of(value: DecorationInput) -> str | None:
    match value:
        case None:
            return None
        case str():
            return value
        case (text, *_):
            return str(text)
        case _:
            return str(value)


def merge_for_html(tables: Sequence[Table]) -> Table:
    """Stack tables into one, adding a ``Component`` column from each caption.

    Raises:
        RenderError: If the tables do not share the same column names.
    """
    names = tables[0].names
    for table in tables[1:]:
        if table.names != names:
            raise RenderError(f"Cannot combine tables with columns {names} and {table.names}")

    data: dict[str, list[object]] = {name: [] for name in names}
    components: list[str | None] = []
    for table in tables:
        for name in names:
            data[name].extend(table.column(name).values)
        components.extend([_text_of(table.meta.effective_caption)] * table.n_rows)

    columns = [column_from_values(name, values) for name, values in data.items()]
    if COMPONENT_COLUMN not in names:
        columns.append(TextColumn(COMPONENT_COLUMN, tuple(components)))
    return Table(tuple(columns))


def _list_decoration(
    table: Table,
    position: int,
    count: int,
    caption: DecorationInput,
    footer: DecorationInput,
) -> TableDecoration:
    own_caption = table.meta.effective_caption
    if own_caption is None and position == 0 and caption is not None and not isinstance(caption, list):
        own_caption = caption
    if own_caption is None and isinstance(caption, list) and len(caption) == count:
        own_caption = caption[position]

    own_footer = table.meta.footer
    last = position == count - 1
    if own_footer is None and last and footer is not None and not isinstance(footer, list):
        own_footer = footer
    if own_footer is None and isinstance(footer, list) and len(footer) == count:
        own_footer = footer[position]

    return resolve_decoration(
        caption=own_caption, subtitle=table.meta.subtitle, footer=own_footer
    )


def _make_renderer(fmt: str, table: Table | None, options: dict[str, Any]) -> TableRenderer:
    indent_groups = options["indent_groups"]
    indent_rows = options["indent_rows"]
    if table is not None:
        indent_groups = indent_groups if indent_groups is not None else table.meta.indent_groups
        indent_rows = indent_rows if indent_rows is not None else table.meta.indent_rows

    width = options["width"]
    common = {
        "digits": options["digits"],
        "protect_integers": options["protect_integers"],
        "missing": options["missing"],
        "align": options["align"],
        "zap_small": options["zap_small"],
        "indent_rows": indent_rows,
    }
    match fmt:
        case "text":
            return TextRenderer(
                sep=options["sep"],
                header=options["header"],
                empty_line=options["empty_line"],
                width=width,
                table_width=options["table_width"],
                indent_groups=indent_groups,
                **common,
            )
        case "markdown":
            return MarkdownRenderer(
                width=width if isinstance(width, int) else None,
                indent_groups=indent_groups,
                **common,
            )
        case _:
            return HtmlRenderer(
                width=width if isinstance(width, int) else None,
                group_by=options["group_by"],
                **common,
            )


def _is_empty(x: object) -> bool:
    if x is None:
        return True
    if isinstance(x, Table):
        return x.is_empty
    if isinstance(x, Mapping):
        return _as_table(x).is_empty
    return not _compact(x)


def export_table(
    x: TableInput | Sequence[TableInput | None] | None,
    *,
    sep: str = " | ",
    header: str | None = "-",
    empty_line: str | None = None,
    digits: int = 2,
    protect_integers: bool = True,
    missing: str = "",
    width: int | Mapping[str, int] | None = None,
    format: str | None = None,
    title: DecorationInput = None,
    caption: DecorationInput = None,
    subtitle: DecorationInput = None,
    footer: DecorationInput = None,
    align: str | None = None,
    group_by: str | Sequence[str] | None = None,
    zap_small: bool = False,
    table_width: float | str | None = None,
    indent_groups: str | None = None,
    indent_rows: Sequence[int] | None = None,
    verbose: bool = True,
) -> TextTable | MarkdownTable | HtmlTable | None:
    """Render a table, or a list of tables, as text, Markdown or HTML.

    Args:
        x: A ``Table``, a mapping of column name to values, or a list of those
        sep: Column separator (text)
        header: Fill character of the rule under the header row (text);
            None for no rule
        empty_line: Fill character for all-blank rows (text)
        digits: Decimal places for numeric columns
        protect_integers: Print whole-number columns without decimals
        missing: Placeholder for missing values
        width: Minimum width of numeric columns, or (text only) a mapping of
            column name to minimum width
        format: ``None``/``"text"``, ``"markdown"``/``"md"`` or ``"html"``
        title: Alias for ``caption``. For a single table it takes
            precedence over ``caption``; for a list ``caption`` wins
        caption: Caption; a string or ``(text, colour)``. For a list of
            tables, a list of captions (one per table), or one caption for
            the first table
        subtitle: Subtitle, a string or ``(text, colour)``
        footer: Footer, a string, ``(text, colour)`` or a list of those.
            For a list of tables, a list with one footer per table, or one
            footer for the last table
        align: Alignment directive (``"left"``, ``"right"``, ``"center"``,
            ``"firstleft"`` or per-column letters such as ``"lcr"``)
        group_by: Extra grouping column name(s) (HTML)
        zap_small: Round tiny values to zero instead of scientific notation
        table_width: Split text tables wider than this; a number or ``"auto"``
        indent_groups: Group-marker token for row indentation
        indent_rows: 0-based data rows to indent (rows marked with ``"# "``)
        verbose: Log a notice when there is nothing to export

    Returns:
        The rendered table(s), or None if the input is empty.

    Raises:
        UnsupportedFormatError: If ``format`` is not a known format name.
        TableShapeError: If a mapping has columns of different lengths.
        RenderError: If a list of tables cannot be merged for HTML.
    """
    fmt = normalize_format(format)

    if _is_empty(x):
        if verbose:
            logger.info("Can't export table to %s, data frame is empty.", fmt)
        return None

    options = {
        "sep": sep,
        "header": header,
        "empty_line": empty_line,
        "digits": digits,
        "protect_integers": protect_integers,
        "missing": missing,
        "width": width,
        "align": align,
        "group_by": group_by,
        "zap_small": zap_small,
        "table_width": table_width,
        "indent_groups": indent_groups,
        "indent_rows": indent_rows,
    }

    if fmt == "html" and not isinstance(x, (Table, Mapping)):
        x = merge_for_html(_compact(x))

    if isinstance(x, (Table, Mapping)):
        table = _as_table(x)
        # title wins over caption for a single table, caption wins for a list
        decoration = resolve_decoration(
            table.meta,
            caption=title if title is not None else caption,
            subtitle=subtitle,
            footer=footer,
        )
        return _make_renderer(fmt, table, options).render(table, decoration)

    if caption is None:
        caption = title
    tables = _compact(x)
    results = [
        _make_renderer(fmt, table, options).render(
            table, _list_decoration(table, position, len(tables), caption, footer)
        )
        for position, table in enumerate(tables)
    ]

    if fmt == "text":
        return TextTable("\n".join(results))
    lines = MarkdownTable()
    for position, result in enumerate(results):
        if position:
            lines.append("")
        lines.extend(result)
    return lines

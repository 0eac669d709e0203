"""Row indentation for grouped tables.

Two schemes nest rows under group headings, both touching column 0 only:

- ``GroupMarker(token)``: rows whose first cell contains ``token`` are group
  headings. Every later row that is not a heading is indented by
  ``len(token)`` spaces, then the token is removed.
- ``ExplicitRows(rows)``: the listed 0-based data rows are indented by two
  spaces; headings are marked with a literal ``"# "`` in the first cell.

Example:
    >>> m = CellMatrix([["Name"], ["# A"], ["x1"], ["# B"], ["y1"]])
    >>> apply_indent(m, GroupMarker("# "))
    >>> m.column(0)
    ['Name', 'A   ', '  x1', 'B   ', '  y1']
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from tablita.matrix import Alignment, CellMatrix, justify

logger = logging.getLogger(__name__)

ROW_MARKER = "# "
ROW_INDENT = "  "


@dataclass(frozen=True, slots=True)
class GroupMarker:
    """Indent rows that follow a heading marked with ``token``."""

    token: str


@dataclass(frozen=True, slots=True)
class ExplicitRows:
    """Indent the given 0-based data rows."""

    rows: tuple[int, ...]


IndentScheme = GroupMarker | ExplicitRows


def choose_indent(
    matrix: CellMatrix,
    indent_groups: str | None,
    indent_rows: Sequence[int] | None,
) -> IndentScheme | None:
    """Pick the scheme whose marker occurs in column 0, if any.

    The group marker wins over explicit rows.
    """
    first = matrix.column(0)
    if indent_groups and any(indent_groups in cell for cell in first):
        logger.debug("Indenting by group marker %r", indent_groups)
        return GroupMarker(indent_groups)
    if indent_rows is not None and any(ROW_MARKER in cell for cell in first):
        logger.debug("Indenting %d explicit rows", len(indent_rows))
        return ExplicitRows(tuple(indent_rows))
    return None


def _indent_groups(values: list[str], token: str) -> list[str]:
    headings = [i for i, v in enumerate(values) if token in v]
    whitespace = " " * len(token)
    for i in range(headings[0], len(values)):
        if i not in headings:
            values[i] = whitespace + values[i]
    values = [v.replace(token, "").rstrip() for v in values]
    return justify(values, Alignment.LEFT)


def _indent_rows(values: list[str], rows: tuple[int, ...]) -> list[str]:
    indented = {r + 1 for r in rows}
    values = [
        ROW_INDENT + v if i in indented else v + ROW_INDENT for i, v in enumerate(values)
    ]
    headings = [i for i, v in enumerate(values) if ROW_MARKER in v]
    values = [v.replace(ROW_MARKER, "") for v in values]
    width = max(len(v) for v in values)
    for i in headings:
        values[i] = values[i].ljust(width)
    return values


def apply_indent(matrix: CellMatrix, scheme: IndentScheme) -> None:
    """Rewrite column 0 in place according to ``scheme``."""
    values = matrix.column(0)
    match scheme:
        case GroupMarker(token=token):
            values = _indent_groups(values, token)
        case ExplicitRows(rows=rows):
            values = _indent_rows(values, rows)
    matrix.set_column(0, values)


def strip_row_marker(values: Sequence[str]) -> list[str]:
    """Remove the ``"# "`` heading marker, for formats that indent by style."""
    return [v.replace(ROW_MARKER, "") for v in values]

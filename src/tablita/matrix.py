"""Cell matrix: the string grid every text and Markdown render works on.

Row 0 holds the column headers, rows 1.. the data. Every cell is a final
display string; every column is padded to a common width, so the rendered
width of a row is the sum of column widths plus separators.

The grid is mutable and owned by a single render call. Column-wise updates
go through ``set_column``; sub-grids for split tables are copied with
``select``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum

from tablita.formatting import format_value
from tablita.table import NumericColumn, Table, TextColumn


class Alignment(Enum):
    """Horizontal alignment of a column."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


def justify(values: Sequence[str], side: Alignment, width: int | None = None) -> list[str]:
    """Pad strings to a common width.

    The width is the longest value, or ``width`` if that is larger. Values
    are not trimmed first. Centring puts the odd space on the right.

    Example:
        >>> justify(["a", "bbb"], Alignment.CENTER)
        [' a ', 'bbb']
        >>> justify(["ab"], Alignment.CENTER, width=5)
        [' ab  ']
    """
    target = max([len(v) for v in values] + [width or 0])
    match side:
        case Alignment.LEFT:
            return [v.ljust(target) for v in values]
        case Alignment.RIGHT:
            return [v.rjust(target) for v in values]
        case Alignment.CENTER:
            out = []
            for v in values:
                left = (target - len(v)) // 2
                out.append(" " * left + v + " " * (target - len(v) - left))
            return out


class CellMatrix:
    """Mutable grid of display strings with a header row.

    Usage:
        >>> m = CellMatrix([["a", "b"], ["1", "x"]])
        >>> m.n_rows, m.n_cols
        (2, 2)
        >>> m.select([1]).rows
        [['b'], ['x']]
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Sequence[str]]) -> None:
        self._rows: list[list[str]] = [list(r) for r in rows]
        widths = {len(r) for r in self._rows}
        if len(widths) > 1:
            raise ValueError(f"All matrix rows must have the same length, got {sorted(widths)}")

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[str]]) -> CellMatrix:
        """Build a matrix from column lists (each including its header)."""
        return cls(zip(*columns, strict=True))

    @property
    def rows(self) -> list[list[str]]:
        """Copy of all rows."""
        return [list(r) for r in self._rows]

    @property
    def n_rows(self) -> int:
        return len(self._rows)

    @property
    def n_cols(self) -> int:
        return len(self._rows[0]) if self._rows else 0

    @property
    def header(self) -> list[str]:
        return list(self._rows[0])

    def row(self, index: int) -> list[str]:
        return list(self._rows[index])

    def column(self, index: int) -> list[str]:
        return [r[index] for r in self._rows]

    def set_column(self, index: int, values: Sequence[str]) -> None:
        if len(values) != self.n_rows:
            raise ValueError(f"Column has {len(values)} values, matrix has {self.n_rows} rows")
        for row, value in zip(self._rows, values, strict=True):
            row[index] = value

    def set_row(self, index: int, values: Sequence[str]) -> None:
        if len(values) != self.n_cols:
            raise ValueError(f"Row has {len(values)} values, matrix has {self.n_cols} columns")
        self._rows[index] = list(values)

    def select(self, indices: Sequence[int]) -> CellMatrix:
        """Copy of the given columns, in the given order."""
        for i in indices:
            if not 0 <= i < self.n_cols:
                raise IndexError(f"Column index {i} out of range for {self.n_cols} columns")
        return CellMatrix([[r[i] for i in indices] for r in self._rows])

    def column_widths(self) -> list[int]:
        return [max(len(r[i]) for r in self._rows) for i in range(self.n_cols)]

    def row_width(self, index: int, sep: str) -> int:
        """Rendered length of a row joined by ``sep``."""
        return len(sep.join(self._rows[index]))

    def copy(self) -> CellMatrix:
        return CellMatrix(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellMatrix):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"CellMatrix({self._rows!r})"


def format_columns(
    table: Table,
    digits: int,
    protect_integers: bool,
    missing: str,
    width: int | None,
    zap_small: bool,
) -> list[list[str]]:
    """Stringify every column, header first, without padding."""
    columns: list[list[str]] = []
    for col in table.columns:
        match col:
            case NumericColumn():
                values = format_value(
                    col.values,
                    digits=digits,
                    protect_integers=protect_integers,
                    missing=missing,
                    width=width,
                    zap_small=zap_small,
                )
            case TextColumn():
                values = [missing if v is None else v for v in col.values]
        columns.append([col.name, *values])
    return columns


def build_cell_matrix(
    table: Table,
    *,
    digits: int = 2,
    protect_integers: bool = True,
    missing: str = "",
    width: int | Mapping[str, int] | None = None,
    zap_small: bool = False,
) -> tuple[CellMatrix, list[Alignment]]:
    """Format and pad a table into a cell matrix.

    Every column is right-justified to its widest cell, header included;
    a textual first column is then left-justified.

    Args:
        table: Non-empty table
        digits: Decimal places for numeric columns
        protect_integers: Print whole-number columns without decimals
        missing: Placeholder for missing values
        width: Minimum width for numeric columns; a mapping is ignored here
            and applied per column by the text renderer
        zap_small: Round tiny values to zero

    Returns:
        The matrix and the alignment each column currently has
    """
    numeric_width = width if isinstance(width, int) else None
    columns = format_columns(table, digits, protect_integers, missing, numeric_width, zap_small)
    padded = [justify(c, Alignment.RIGHT) for c in columns]
    alignments = [Alignment.RIGHT] * len(padded)

    if isinstance(table.columns[0], TextColumn):
        padded[0] = justify([v.strip() for v in padded[0]], Alignment.LEFT)
        alignments[0] = Alignment.LEFT

    return CellMatrix.from_columns(padded), alignments

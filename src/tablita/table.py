"""Typed table model.

A table is an ordered tuple of columns plus metadata. Columns are a small
sum type so that formatting dispatch is a ``match`` over two variants rather
than runtime sniffing of values:

    Column
    ├── NumericColumn   ints / floats, None or NaN for missing
    └── TextColumn      strings (categorical data included), None for missing

Metadata that the renderers need (caption, subtitle, footer, indentation
markers) lives in ``TableMeta``; it is read once by ``export_table`` and
never consulted mid-pipeline.

Example:
    >>> t = Table.from_dict({"a": [1, 10, 100], "b": ["x", "yy", "zzz"]}, caption="Demo")
    >>> [type(c).__name__ for c in t.columns]
    ['NumericColumn', 'TextColumn']
    >>> t.n_rows
    3
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from tablita.errors import TableShapeError
from tablita.formatting import is_missing

# Decoration as accepted from callers: "text", ("text", "colour") or a list of those
DecorationInput = Any


@dataclass(frozen=True, slots=True)
class NumericColumn:
    """Column of numbers."""

    name: str
    values: tuple[float | int | None, ...]

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True, slots=True)
class TextColumn:
    """Column of strings."""

    name: str
    values: tuple[str | None, ...]

    def __len__(self) -> int:
        return len(self.values)


Column = NumericColumn | TextColumn


def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def column_from_values(name: str, values: Iterable[object]) -> Column:
    """Build the column variant that fits ``values``.

    All non-missing values numeric (bools excluded) gives a NumericColumn;
    anything else becomes text via ``str()``. An all-missing column is text.
    """
    items = tuple(values)
    present = [v for v in items if not is_missing(v)]
    if present and all(_is_number(v) for v in present):
        return NumericColumn(name, tuple(None if is_missing(v) else v for v in items))
    return TextColumn(name, tuple(None if is_missing(v) else str(v) for v in items))


@dataclass(frozen=True, slots=True)
class TableMeta:
    """Named metadata fields attached to a table.

    Attributes:
        caption: Table caption
        title: Alias for caption, used when caption is unset
        subtitle: Subtitle printed after the caption
        footer: Footer, or list of footer lines
        indent_groups: Group-marker token for row indentation
        indent_rows: 0-based data rows to indent
    """

    caption: DecorationInput = None
    title: DecorationInput = None
    subtitle: DecorationInput = None
    footer: DecorationInput = None
    indent_groups: str | None = None
    indent_rows: tuple[int, ...] | None = None

    @property
    def effective_caption(self) -> DecorationInput:
        """Caption, falling back to title."""
        return self.caption if self.caption is not None else self.title


@dataclass(frozen=True, slots=True)
class Table:
    """Ordered, equal-length named columns plus metadata."""

    columns: tuple[Column, ...]
    meta: TableMeta = field(default_factory=TableMeta)

    def __post_init__(self) -> None:
        lengths = {c.name: len(c) for c in self.columns}
        if len(set(lengths.values())) > 1:
            raise TableShapeError(lengths)

    @classmethod
    def from_dict(cls, data: Mapping[str, Iterable[object]], **meta: Any) -> Table:
        """Create a table from a mapping of column name to values.

        Keyword arguments are ``TableMeta`` fields.
        """
        columns = tuple(column_from_values(str(name), values) for name, values in data.items())
        return cls(columns, _make_meta(meta))

    @classmethod
    def from_records(
        cls,
        records: Sequence[Mapping[str, object]],
        columns: Sequence[str] | None = None,
        **meta: Any,
    ) -> Table:
        """Create a table from row dicts.

        Column order follows ``columns`` or first appearance across records;
        keys absent from a record are missing values.
        """
        if columns is None:
            names: dict[str, None] = {}
            for record in records:
                names.update(dict.fromkeys(record))
            columns = list(names)
        data = {name: [record.get(name) for record in records] for name in columns}
        return cls.from_dict(data, **meta)

    @property
    def names(self) -> list[str]:
        return [c.name for c in self.columns]

    @property
    def n_rows(self) -> int:
        return len(self.columns[0]) if self.columns else 0

    @property
    def is_empty(self) -> bool:
        return not self.columns or self.n_rows == 0

    def column(self, name: str) -> Column:
        for col in self.columns:
            if col.name == name:
                return col
        raise KeyError(name)

    def with_meta(self, **changes: Any) -> Table:
        """Return a copy with updated metadata fields."""
        return Table(self.columns, replace(self.meta, **_normalize_meta(changes)))

    def drop(self, name: str) -> Table:
        """Return a copy without the named column."""
        return Table(tuple(c for c in self.columns if c.name != name), self.meta)


def _normalize_meta(meta: dict[str, Any]) -> dict[str, Any]:
    rows = meta.get("indent_rows")
    if rows is not None:
        meta = {**meta, "indent_rows": tuple(int(r) for r in rows)}
    return meta


def _make_meta(meta: dict[str, Any]) -> TableMeta:
    return TableMeta(**_normalize_meta(meta))

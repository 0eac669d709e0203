"""Tests for the table model."""

import math

import pytest

from tablita.errors import TableShapeError, TablitaError
from tablita.table import NumericColumn, Table, TableMeta, TextColumn, column_from_values


class TestColumnFromValues:
    """Column variant inference."""

    def test_numbers_are_numeric(self) -> None:
        col = column_from_values("x", [1, 2.5, None])
        assert isinstance(col, NumericColumn)
        assert col.values == (1, 2.5, None)

    def test_nan_becomes_missing(self) -> None:
        col = column_from_values("x", [1.0, math.nan])
        assert col.values == (1.0, None)

    def test_strings_are_text(self) -> None:
        col = column_from_values("x", ["a", None])
        assert isinstance(col, TextColumn)
        assert col.values == ("a", None)

    def test_mixed_values_are_text(self) -> None:
        col = column_from_values("x", [1, "b"])
        assert isinstance(col, TextColumn)
        assert col.values == ("1", "b")

    def test_bools_are_text(self) -> None:
        col = column_from_values("flag", [True, False])
        assert isinstance(col, TextColumn)
        assert col.values == ("True", "False")

    def test_all_missing_is_text(self) -> None:
        assert isinstance(column_from_values("x", [None, None]), TextColumn)


class TestTable:
    """Table construction and helpers."""

    def test_from_dict(self) -> None:
        t = Table.from_dict({"a": [1, 2], "b": ["x", "y"]}, caption="Cap")
        assert t.names == ["a", "b"]
        assert t.n_rows == 2
        assert t.meta.caption == "Cap"

    def test_unequal_columns_raise(self) -> None:
        with pytest.raises(TableShapeError) as exc:
            Table.from_dict({"a": [1, 2], "b": ["x"]})
        assert isinstance(exc.value, TablitaError)
        assert exc.value.lengths == {"a": 2, "b": 1}
        assert "a=2" in str(exc.value)

    def test_from_records(self) -> None:
        t = Table.from_records([{"a": 1, "b": "x"}, {"a": 2, "c": 3.5}])
        assert t.names == ["a", "b", "c"]
        assert t.column("b").values == ("x", None)
        assert t.column("c").values == (None, 3.5)

    def test_from_records_with_column_order(self) -> None:
        t = Table.from_records([{"a": 1, "b": "x"}], columns=["b", "a"])
        assert t.names == ["b", "a"]

    def test_is_empty(self) -> None:
        assert Table(()).is_empty
        assert Table.from_dict({"a": []}).is_empty
        assert not Table.from_dict({"a": [1]}).is_empty

    def test_column_lookup(self) -> None:
        t = Table.from_dict({"a": [1]})
        assert t.column("a").name == "a"
        with pytest.raises(KeyError):
            t.column("missing")

    def test_with_meta_returns_copy(self) -> None:
        t = Table.from_dict({"a": [1]})
        t2 = t.with_meta(subtitle="sub", indent_rows=[0, 2])
        assert t.meta.subtitle is None
        assert t2.meta.subtitle == "sub"
        assert t2.meta.indent_rows == (0, 2)

    def test_drop(self) -> None:
        t = Table.from_dict({"a": [1], "b": [2]})
        assert t.drop("a").names == ["b"]

    def test_frozen(self) -> None:
        t = Table.from_dict({"a": [1]})
        with pytest.raises(AttributeError):
            t.columns = ()  # type: ignore[misc]


class TestTableMeta:
    def test_caption_falls_back_to_title(self) -> None:
        assert TableMeta(title="T").effective_caption == "T"
        assert TableMeta(caption="C", title="T").effective_caption == "C"
        assert TableMeta().effective_caption is None

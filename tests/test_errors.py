"""Tests for the error hierarchy and the paths that raise it."""

import pytest

from tablita import Table, TablitaConfig, config_context, export_table
from tablita.errors import (
    AlignmentError,
    RenderError,
    TablitaError,
    TableShapeError,
    UnsupportedFormatError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type", [TableShapeError, UnsupportedFormatError, AlignmentError, RenderError]
    )
    def test_all_derive_from_base(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, TablitaError)


class TestMessages:
    def test_shape_error_lists_lengths(self) -> None:
        err = TableShapeError({"a": 2, "b": 1})
        assert err.lengths == {"a": 2, "b": 1}
        assert str(err) == "All columns must have the same length (a=2, b=1)"

    def test_alignment_error(self) -> None:
        err = AlignmentError("lrx", "unknown letter 'x'")
        assert err.directive == "lrx"
        assert str(err) == "Alignment 'lrx': unknown letter 'x'"

    def test_format_error_names_value(self) -> None:
        assert "'latex'" in str(UnsupportedFormatError("latex"))


class TestRaisedFromApi:
    def test_unequal_columns(self) -> None:
        with pytest.raises(TableShapeError):
            Table.from_dict({"a": [1, 2], "b": [1]})

    def test_strict_alignment(self, abc_table: Table) -> None:
        with config_context(TablitaConfig(strict_align=True)), pytest.raises(AlignmentError):
            export_table(abc_table, align="lrc")

    def test_lenient_alignment(self, abc_table: Table) -> None:
        assert export_table(abc_table, align="lrc") is not None

    def test_catch_all(self) -> None:
        with pytest.raises(TablitaError):
            export_table({"a": [1]}, format="pdf")

"""Tests for caption, subtitle and footer resolution."""

import pytest

from tablita.decoration import (
    StyledText,
    TableDecoration,
    normalize_footer,
    normalize_fragment,
    resolve_decoration,
)
from tablita.table import TableMeta


class TestNormalizeFragment:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, None),
            ("Title", StyledText("Title")),
            (("Title",), StyledText("Title")),
            (("Title", "red"), StyledText("Title", "red")),
            (("Title", None), StyledText("Title")),
            (("Title", "red", "ignored"), StyledText("Title", "red")),
            (42, StyledText("42")),
        ],
    )
    def test_shapes(self, value: object, expected: StyledText | None) -> None:
        assert normalize_fragment(value) == expected

    def test_styled_text_passes_through(self) -> None:
        fragment = StyledText("x", "blue")
        assert normalize_fragment(fragment) is fragment


class TestNormalizeFooter:
    def test_none(self) -> None:
        assert normalize_footer(None) == ()

    def test_tuple_is_one_fragment(self) -> None:
        assert normalize_footer(("note", "yellow")) == (StyledText("note", "yellow"),)

    def test_list_is_several_lines(self) -> None:
        assert normalize_footer(["a", ("b", "red"), None]) == (
            StyledText("a"),
            StyledText("b", "red"),
        )


class TestStyledText:
    def test_plain_without_colour(self, with_color: None) -> None:
        assert StyledText("x").styled() == "x"

    def test_coloured(self, with_color: None) -> None:
        assert StyledText("x", "red").styled() == "\x1b[31mx\x1b[0m"

    def test_unknown_colour_is_plain(self, with_color: None) -> None:
        assert StyledText("x", "mauve").styled() == "x"

    def test_colours_disabled(self, no_color: None) -> None:
        assert StyledText("x", "red").styled() == "x"

    def test_is_empty(self) -> None:
        assert StyledText("").is_empty
        assert not StyledText(" ").is_empty


class TestTableDecoration:
    def test_empty_caption_is_absent(self) -> None:
        assert not TableDecoration(caption=StyledText("")).has_caption
        assert not TableDecoration().has_caption
        assert TableDecoration(caption=StyledText("c")).has_caption

    def test_footer_lines_skip_empty(self) -> None:
        deco = TableDecoration(footer=(StyledText(""), StyledText("x")))
        assert deco.footer_lines == (StyledText("x"),)


class TestResolveDecoration:
    def test_explicit_beats_meta(self) -> None:
        meta = TableMeta(caption="meta", subtitle="meta sub", footer="meta foot")
        deco = resolve_decoration(meta, caption="arg", subtitle="arg sub", footer="arg foot")
        assert deco == TableDecoration(
            caption=StyledText("arg"),
            subtitle=StyledText("arg sub"),
            footer=(StyledText("arg foot"),),
        )

    def test_meta_fallback(self) -> None:
        meta = TableMeta(title=("T", "blue"), footer=["f1", "f2"])
        deco = resolve_decoration(meta)
        assert deco.caption == StyledText("T", "blue")
        assert deco.subtitle is None
        assert len(deco.footer) == 2

    def test_caption_beats_title(self) -> None:
        assert resolve_decoration(TableMeta(caption="C", title="T")).caption == StyledText("C")

    def test_no_meta(self) -> None:
        assert resolve_decoration() == TableDecoration()

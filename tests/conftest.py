"""Shared fixtures for Tablita tests."""

from __future__ import annotations

import pytest

from tablita import Table
from tablita.config import TablitaConfig, config_context


@pytest.fixture
def abc_table() -> Table:
    """Three rows: a numeric and a text column."""
    return Table.from_dict({"a": [1, 10, 100], "b": ["x", "yy", "zzz"]})


@pytest.fixture
def named_table() -> Table:
    """Text label column followed by a decimal column."""
    return Table.from_dict({"name": ["alpha", "b"], "v": [1.5, 22.25]})


@pytest.fixture
def wide_table() -> Table:
    """Label column plus four 4-character numeric columns."""
    return Table.from_dict(
        {
            "label": ["r1"],
            "aaaa": [1111],
            "bbbb": [2222],
            "cccc": [3333],
            "dddd": [4444],
        }
    )


@pytest.fixture
def no_color():
    """Disable colour codes for the duration of a test."""
    with config_context(TablitaConfig(color=False)):
        yield


@pytest.fixture
def with_color():
    """Force colour codes on for the duration of a test."""
    with config_context(TablitaConfig(color=True)):
        yield

"""Property-based tests for layout invariants using Hypothesis.

These tests verify properties that hold for any table:
1. Text output round-trips to the formatted cell values when the separator
   is unique
2. Alignment is idempotent and keeps column widths
3. Split points agree with a naive scan over joined header widths
4. Split blocks keep the label column and the original column order
5. A budget at least as wide as the table never changes the output
"""

import string

from hypothesis import given, settings
from hypothesis import strategies as st

from tablita import NumericColumn, Table, export_table, format_value
from tablita.alignment import apply_alignment
from tablita.matrix import Alignment, CellMatrix
from tablita.split import MAX_BLOCKS, plan_split, split_point

words = st.text(alphabet=string.ascii_letters + string.digits, min_size=1, max_size=6)
alignments = st.sampled_from(list(Alignment))
numbers = st.one_of(
    st.integers(min_value=-(10**6), max_value=10**6),
    st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False),
)


@st.composite
def tables(draw: st.DrawFn) -> Table:
    """Text and numeric columns in any order."""
    names = draw(st.lists(words, min_size=1, max_size=6, unique=True))
    n_rows = draw(st.integers(min_value=1, max_value=5))
    data = {}
    for name in names:
        values = draw(st.sampled_from([words, numbers]))
        data[name] = draw(st.lists(values, min_size=n_rows, max_size=n_rows))
    return Table.from_dict(data)


def _display_values(table: Table, name: str) -> list[str]:
    column = table.column(name)
    if isinstance(column, NumericColumn):
        return format_value(list(column.values))
    return list(column.values)


@st.composite
def matrices(draw: st.DrawFn) -> CellMatrix:
    n_cols = draw(st.integers(min_value=1, max_value=5))
    n_rows = draw(st.integers(min_value=1, max_value=5))
    cell = st.text(alphabet=" ab", max_size=6)
    rows = [draw(st.lists(cell, min_size=n_cols, max_size=n_cols)) for _ in range(n_rows)]
    return CellMatrix(rows)


def _naive_split_point(header: list[str], sep: str, budget: int) -> int | None:
    if len(sep.join(header)) <= budget:
        return None
    count = 1
    while count < len(header) and len(sep.join(header[:count])) < budget:
        count += 1
    return count if 2 < count < len(header) else None


class TestTextRoundTrip:
    @given(table=tables())
    @settings(max_examples=100)
    def test_cells_are_recoverable(self, table: Table) -> None:
        """Splitting each line on the separator gives back the values."""
        out = export_table(table, sep="|", header=None)
        lines = out.splitlines()
        columns = [_display_values(table, name) for name in table.names]
        assert [c.strip() for c in lines[0].split("|")] == table.names
        for row, line in enumerate(lines[1:]):
            assert [c.strip() for c in line.split("|")] == [cells[row] for cells in columns]

    @given(table=tables())
    @settings(max_examples=50)
    def test_rows_have_equal_width(self, table: Table) -> None:
        lines = export_table(table).splitlines()
        assert len({len(line) for line in lines}) == 1


class TestAlignmentProperties:
    @given(matrix=matrices(), side=alignments)
    @settings(max_examples=100)
    def test_idempotent(self, matrix: CellMatrix, side: Alignment) -> None:
        sides = [side] * matrix.n_cols
        apply_alignment(matrix, sides)
        once = matrix.copy()
        apply_alignment(matrix, sides)
        assert matrix == once

    @given(matrix=matrices(), side=alignments)
    @settings(max_examples=100)
    def test_keeps_column_widths(self, matrix: CellMatrix, side: Alignment) -> None:
        before = matrix.column_widths()
        apply_alignment(matrix, [side] * matrix.n_cols)
        assert matrix.column_widths() == before
        for index in range(matrix.n_cols):
            assert len({len(v) for v in matrix.column(index)}) == 1


class TestSplitProperties:
    @given(
        widths=st.lists(st.integers(min_value=1, max_value=12), min_size=1, max_size=10),
        sep=st.sampled_from([" ", " | ", "|"]),
        budget=st.integers(min_value=1, max_value=80),
    )
    @settings(max_examples=200)
    def test_matches_naive_scan(self, widths: list[int], sep: str, budget: int) -> None:
        header = ["x" * w for w in widths]
        assert split_point(widths, len(sep), budget) == _naive_split_point(header, sep, budget)

    @given(
        widths=st.lists(st.integers(min_value=1, max_value=12), min_size=1, max_size=12),
        budget=st.integers(min_value=1, max_value=60),
    )
    @settings(max_examples=200)
    def test_blocks_preserve_columns(self, widths: list[int], budget: int) -> None:
        matrix = CellMatrix([["x" * w for w in widths]])
        plan = plan_split(matrix, " | ", budget)

        assert 1 <= len(plan) <= MAX_BLOCKS
        assert all(block[0] == 0 for block in plan)
        rest = [i for block in plan for i in block[1:]]
        assert rest == list(range(1, len(widths)))
        if len(plan) > 1:
            assert all(len(block) >= 2 for block in plan[:-1])

    @given(table=tables(), extra=st.integers(min_value=0, max_value=20))
    @settings(max_examples=50)
    def test_wide_budget_is_noop(self, table: Table, extra: int) -> None:
        unsplit = export_table(table)
        width = len(unsplit.splitlines()[0])
        assert export_table(table, table_width=width + extra) == unsplit


def test_group_marker_example() -> None:
    table = Table.from_dict(
        {"Parameter": ["# Fixed", "a", "b", "# Random", "c"], "Estimate": [1.0, 2.0, 3.0, 4.0, 5.0]}
    )
    lines = export_table(table, indent_groups="# ").splitlines()
    assert [line.split(" | ")[0].rstrip() for line in lines[2:]] == [
        "Fixed",
        "  a",
        "  b",
        "Random",
        "  c",
    ]

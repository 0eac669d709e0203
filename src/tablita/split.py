"""Splitting wide tables into stacked blocks.

When the header row, joined by the column separator, is wider than the
budget, columns are scanned left to right until the joined width reaches
the budget. The column that reaches it starts a new block, which repeats
column 0 so each block keeps its row labels. The new block is checked once
more, so a table renders as at most three blocks.

A split that would leave the first block with only the label column, or
that would move nothing, is skipped and the table stays full width.

Example:
    >>> m = CellMatrix([["label", "aaaa", "bbbb", "cccc", "dddd"]])
    >>> plan_split(m, " | ", budget=20)
    ((0, 1, 2), (0, 3, 4))
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tablita.config import get_config
from tablita.matrix import CellMatrix

logger = logging.getLogger(__name__)

MAX_BLOCKS = 3

SplitPlan = tuple[tuple[int, ...], ...]


def resolve_budget(table_width: float | str | None) -> float | None:
    """Turn a ``table_width`` argument into a line budget.

    ``"auto"`` uses the configured line width; numbers are used as given,
    without rounding. ``None`` and anything else disable splitting.
    """
    if table_width is None:
        return None
    if table_width == "auto":
        return get_config().resolved_line_width()
    if isinstance(table_width, (int, float)) and not isinstance(table_width, bool):
        return table_width
    logger.debug("Ignoring table_width=%r; expected a number or 'auto'", table_width)
    return None


def split_point(widths: Sequence[int], sep_width: int, budget: float) -> int | None:
    """Number of leading columns whose joined width first reaches ``budget``.

    Returns None when the row fits or the split would be degenerate.
    Joined widths are accumulated as running sums:
    ``width(c) = sum(widths[:c]) + (c - 1) * sep_width``.
    """
    n = len(widths)
    total = sum(widths) + sep_width * (n - 1)
    if total <= budget:
        return None

    joined = 0
    count = 0
    for count in range(1, n + 1):
        joined += widths[count - 1] + (sep_width if count > 1 else 0)
        if joined >= budget:
            break

    if 2 < count < n:
        return count
    logger.debug("Split at %d of %d columns skipped", count, n)
    return None


def plan_split(matrix: CellMatrix, sep: str, budget: float | None) -> SplitPlan:
    """Partition column indices into up to three blocks."""
    blocks: list[tuple[int, ...]] = []
    remaining = tuple(range(matrix.n_cols))
    if budget is None:
        return (remaining,)

    header_widths = [len(cell) for cell in matrix.header]
    while len(blocks) < MAX_BLOCKS - 1:
        count = split_point([header_widths[i] for i in remaining], len(sep), budget)
        if count is None:
            break
        blocks.append(remaining[: count - 1])
        remaining = (remaining[0], *remaining[count - 1 :])
    blocks.append(remaining)

    if len(blocks) > 1:
        logger.debug("Split %d columns into %d blocks at width %s", matrix.n_cols, len(blocks), budget)
    return tuple(blocks)


def apply_split(matrix: CellMatrix, plan: SplitPlan) -> list[CellMatrix]:
    """Copy each planned block out of ``matrix``."""
    if len(plan) == 1:
        return [matrix]
    return [matrix.select(block) for block in plan]

"""Column alignment resolution.

An alignment directive is one of:

- ``None``: use the format's default (see ``resolve_alignment``)
- ``"left"``, ``"right"``, ``"center"`` / ``"centre"``: every column
- ``"firstleft"``: first column left, all others centred
- a string of per-column letters, e.g. ``"lccr"``

Per-column strings are lenient. A letter other than ``l``, ``r`` or ``c``,
or a column past the end of a short string, is centred. Extra letters are
ignored. Set ``TablitaConfig.strict_align`` to turn these cases into
``AlignmentError``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tablita.config import get_config
from tablita.errors import AlignmentError
from tablita.matrix import Alignment, CellMatrix, justify

logger = logging.getLogger(__name__)

KEYWORDS: dict[str, Alignment] = {
    "left": Alignment.LEFT,
    "right": Alignment.RIGHT,
    "center": Alignment.CENTER,
    "centre": Alignment.CENTER,
}
FIRST_LEFT = "firstleft"

_LETTERS: dict[str, Alignment] = {
    "l": Alignment.LEFT,
    "r": Alignment.RIGHT,
    "c": Alignment.CENTER,
}
_FALLBACK_ALIGNMENT = Alignment.CENTER


def _letter_alignment(directive: str, index: int) -> Alignment:
    letter = directive[index] if index < len(directive) else ""
    side = _LETTERS.get(letter)
    if side is not None:
        return side
    if get_config().strict_align:
        raise AlignmentError(directive, f"no alignment letter for column {index + 1}")
    logger.debug("Alignment %r: column %d falls back to center", directive, index + 1)
    return _FALLBACK_ALIGNMENT


def parse_directive(directive: str, n_cols: int) -> list[Alignment]:
    """Expand a directive string into one alignment per column.

    Example:
        >>> [a.value for a in parse_directive("firstleft", 3)]
        ['left', 'center', 'center']
        >>> [a.value for a in parse_directive("lx", 3)]
        ['left', 'center', 'center']
    """
    keyword = KEYWORDS.get(directive)
    if keyword is not None:
        return [keyword] * n_cols
    if directive == FIRST_LEFT:
        return ([Alignment.LEFT] + [Alignment.CENTER] * (n_cols - 1))[:n_cols]
    if get_config().strict_align and len(directive) != n_cols:
        raise AlignmentError(directive, f"expected {n_cols} letters, got {len(directive)}")
    return [_letter_alignment(directive, i) for i in range(n_cols)]


def infer_alignment(matrix: CellMatrix) -> list[Alignment]:
    """Right for columns whose first data cell starts with whitespace, else left."""
    probe = matrix.row(1) if matrix.n_rows > 1 else matrix.header
    return [Alignment.RIGHT if cell[:1].isspace() else Alignment.LEFT for cell in probe]


def resolve_alignment(
    directive: str | None,
    matrix: CellMatrix,
    base: Sequence[Alignment],
    *,
    infer: bool = False,
) -> list[Alignment]:
    """Decide the alignment of every column.

    Args:
        directive: Alignment directive, or None for the format default
        matrix: Freshly built matrix
        base: Alignment the builder produced
        infer: For ``directive=None``, infer from leading whitespace
            (Markdown) instead of keeping ``base`` (text)
    """
    if directive is None:
        return infer_alignment(matrix) if infer else list(base)
    return parse_directive(directive, matrix.n_cols)


def apply_alignment(matrix: CellMatrix, alignments: Sequence[Alignment]) -> None:
    """Trim and re-pad each column in place; column widths are kept."""
    for index, side in enumerate(alignments):
        values = matrix.column(index)
        width = max(len(v) for v in values)
        matrix.set_column(index, justify([v.strip() for v in values], side, width))


def center_header(matrix: CellMatrix) -> None:
    """Centre every header cell within its own width."""
    matrix.set_row(
        0, [justify([cell.strip()], Alignment.CENTER, len(cell))[0] for cell in matrix.header]
    )

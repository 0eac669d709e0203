"""TextBuilder for O(n) assembly of rendered tables.

Appends fragments to a list and joins once at the end, instead of
re-concatenating the growing output for every row.

Thread Safety:
TextBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations

from collections.abc import Sequence


class TextBuilder:
    """Accumulates table rows, rules and free text.

    Usage:
        >>> tb = TextBuilder()
        >>> _ = tb.append_row(["a", "b"], " | ").append_rule("-", 5)
        >>> tb.build()
        'a | b\\n-----\\n'
    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> TextBuilder:
        """Append text verbatim (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> TextBuilder:
        """Append text followed by a newline."""
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def append_row(self, cells: Sequence[str], sep: str) -> TextBuilder:
        """Append cells joined by ``sep`` as one line."""
        return self.append_line(sep.join(cells))

    def append_rule(self, fill: str, width: int) -> TextBuilder:
        """Append ``fill`` repeated ``width`` times as one line."""
        return self.append_line(fill * width)

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)

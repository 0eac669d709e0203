"""Caption, subtitle and footer decoration.

Callers pass decorations loosely: a plain string, a ``(text, colour)`` tuple,
or for footers a list of either. ``resolve_decoration`` turns that into one
immutable ``TableDecoration`` before rendering starts, preferring explicit
arguments over the table's own metadata.

A tuple is always one fragment and a list is always several footer lines:

    >>> normalize_footer(("Note", "yellow"))
    (StyledText(text='Note', colour='yellow'),)
    >>> len(normalize_footer(["\\nfirst", ("\\nsecond", "red")]))
    2
"""

from __future__ import annotations

from dataclasses import dataclass

from tablita.colors import colour, is_valid_colour
from tablita.table import DecorationInput, TableMeta


@dataclass(frozen=True, slots=True)
class StyledText:
    """A decoration fragment with an optional colour name."""

    text: str
    colour: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.text == ""

    def styled(self) -> str:
        """Text with colour codes applied when the colour name is valid."""
        if is_valid_colour(self.colour):
            return colour(self.colour, self.text)
        return self.text


def normalize_fragment(value: DecorationInput) -> StyledText | None:
    """Coerce one caption/subtitle/footer value to ``StyledText``."""
    match value:
        case None:
            return None
        case StyledText():
            return value
        case str():
            return StyledText(value)
        case (text,):
            return StyledText(str(text))
        case (text, name, *_):
            return StyledText(str(text), None if name is None else str(name))
        case _:
            return StyledText(str(value))


def normalize_footer(value: DecorationInput) -> tuple[StyledText, ...]:
    """Coerce a footer, or a list of footer lines, to a tuple of fragments."""
    if value is None:
        return ()
    if isinstance(value, list):
        fragments = (normalize_fragment(item) for item in value)
        return tuple(f for f in fragments if f is not None)
    fragment = normalize_fragment(value)
    return (fragment,) if fragment is not None else ()


@dataclass(frozen=True, slots=True)
class TableDecoration:
    """Resolved decoration for one rendered table."""

    caption: StyledText | None = None
    subtitle: StyledText | None = None
    footer: tuple[StyledText, ...] = ()

    @property
    def has_caption(self) -> bool:
        return self.caption is not None and not self.caption.is_empty

    @property
    def footer_lines(self) -> tuple[StyledText, ...]:
        """Footer fragments that carry text."""
        return tuple(f for f in self.footer if not f.is_empty)


def resolve_decoration(
    meta: TableMeta | None = None,
    *,
    caption: DecorationInput = None,
    subtitle: DecorationInput = None,
    footer: DecorationInput = None,
) -> TableDecoration:
    """Build a decoration from explicit values, falling back to metadata.

    Example:
        >>> meta = TableMeta(title="From table", subtitle="sub")
        >>> resolve_decoration(meta, caption="Explicit").caption.text
        'Explicit'
        >>> resolve_decoration(meta).caption.text
        'From table'
    """
    meta = meta or TableMeta()
    if caption is None:
        caption = meta.effective_caption
    if subtitle is None:
        subtitle = meta.subtitle
    if footer is None:
        footer = meta.footer
    return TableDecoration(
        caption=normalize_fragment(caption),
        subtitle=normalize_fragment(subtitle),
        footer=normalize_footer(footer),
    )

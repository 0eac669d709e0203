"""Terminal colours for table decorations.

Captions, subtitles and footers may be given as ``(text, colour)`` pairs.
The text renderer wraps such fragments in ANSI SGR codes; the colour names
are the fixed set below, anything else leaves the text untouched.
"""

from __future__ import annotations

from tablita.config import get_config

_RESET = "\x1b[0m"

COLOURS: dict[str, str] = {
    "bold": "1",
    "italic": "3",
    "black": "30",
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "violet": "35",
    "cyan": "36",
    "white": "37",
    "grey": "90",
    "bright_red": "91",
    "bright_green": "92",
    "bright_yellow": "93",
    "bright_blue": "94",
    "bright_violet": "95",
    "bright_cyan": "96",
    "bright_white": "97",
}


def is_valid_colour(name: str | None) -> bool:
    """Return True if ``name`` is a known colour name."""
    return name is not None and name in COLOURS


def colour(name: str, text: str) -> str:
    """Wrap ``text`` in the escape codes for ``name``.

    Returns ``text`` unchanged when colours are disabled in the current
    config, when ``text`` is empty, or when the name is unknown.

    Example:
        >>> from tablita.config import TablitaConfig, config_context
        >>> with config_context(TablitaConfig(color=True)):
        ...     colour("red", "alert")
        '\\x1b[31malert\\x1b[0m'
    """
    if not text or not is_valid_colour(name) or not get_config().colors_enabled():
        return text
    return f"\x1b[{COLOURS[name]}m{text}{_RESET}"

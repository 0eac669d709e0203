"""Exception classes for Tablita.

Provides standardized exceptions for error handling throughout Tablita.
Recoverable layout problems (bad alignment letters, degenerate split points)
never raise; these exceptions cover input the library cannot render at all.
"""

from __future__ import annotations


class TablitaError(Exception):
    """Base exception for all Tablita errors.

    Subclass this for specific error categories.
    """

    pass


class TableShapeError(TablitaError):
    """Columns of a table do not have the same number of rows."""

    def __init__(self, lengths: dict[str, int]) -> None:
        """Initialize shape error.

        Args:
            lengths: Mapping of column name to its row count
        """
        self.lengths = lengths
        detail = ", ".join(f"{name}={n}" for name, n in lengths.items())
        super().__init__(f"All columns must have the same length ({detail})")


class UnsupportedFormatError(TablitaError):
    """Requested output format is not one of text, markdown or html."""

    def __init__(self, format_name: object) -> None:
        """Initialize format error.

        Args:
            format_name: The rejected format value
        """
        self.format_name = format_name
        super().__init__(
            f"Unsupported format {format_name!r}; expected 'text', 'markdown' (or 'md') or 'html'"
        )


class AlignmentError(TablitaError):
    """Malformed alignment directive in strict mode.

    Only raised when ``TablitaConfig.strict_align`` is set; otherwise
    offending columns silently fall back to centre alignment.
    """

    def __init__(self, directive: str, message: str) -> None:
        self.directive = directive
        super().__init__(f"Alignment {directive!r}: {message}")


class RenderError(TablitaError):
    """Error during table rendering.

    Raised when a set of tables cannot be combined into one output,
    e.g. merging tables with different columns for HTML.
    """

    pass

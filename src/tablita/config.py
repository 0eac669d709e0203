"""ContextVar-based render configuration for Tablita.

Holds the settings that describe the output medium rather than a single
table: the line width used when ``table_width="auto"``, whether colour codes
are emitted, and whether malformed alignment strings are tolerated.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from tablita.config import TablitaConfig, config_context

    with config_context(TablitaConfig(line_width=60, color=False)):
        print(export_table(table, table_width="auto"))

"""

import os
import shutil
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

DEFAULT_LINE_WIDTH = 80


@dataclass(frozen=True, slots=True)
class TablitaConfig:
    """Immutable output-medium configuration.

    Attributes:
        line_width: Line width for ``table_width="auto"``; ``None`` asks the
            terminal (falling back to 80 columns)
        color: Emit ANSI colour codes for styled decorations; ``None`` detects
            from the environment (``NO_COLOR``, ``TERM=dumb``)
        strict_align: Raise ``AlignmentError`` on malformed per-column
            alignment strings instead of centring the offending columns

    """

    line_width: int | None = None
    color: bool | None = None
    strict_align: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TablitaConfig":
        """Create TablitaConfig from dictionary.

        Only includes keys that are valid TablitaConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> TablitaConfig.from_dict({"line_width": 100, "theme": "dark"}).line_width
            100

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def resolved_line_width(self) -> int:
        """Line width of the current output medium."""
        if self.line_width is not None:
            return self.line_width
        return shutil.get_terminal_size(fallback=(DEFAULT_LINE_WIDTH, 24)).columns

    def colors_enabled(self) -> bool:
        """Whether styled decorations should carry colour codes."""
        if self.color is not None:
            return self.color
        return os.environ.get("NO_COLOR") is None and os.environ.get("TERM") != "dumb"


_DEFAULT_CONFIG: TablitaConfig = TablitaConfig()

_config: ContextVar[TablitaConfig] = ContextVar("tablita_config", default=_DEFAULT_CONFIG)


def get_config() -> TablitaConfig:
    """Get current configuration (thread-local)."""
    return _config.get()


def set_config(config: TablitaConfig) -> None:
    """Set configuration for current context.

    Args:
        config: TablitaConfig instance to use for this context.

    """
    _config.set(config)


def reset_config() -> None:
    """Reset to the module-level default configuration."""
    _config.set(_DEFAULT_CONFIG)


@contextmanager
def config_context(config: TablitaConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with config_context(TablitaConfig(line_width=40)):
        ...     get_config().line_width
        40

    """
    previous = _config.get()
    _config.set(config)
    try:
        yield
    finally:
        _config.set(previous)


__all__ = [
    "DEFAULT_LINE_WIDTH",
    "TablitaConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
]

"""Numeric value formatting.

Turns a numeric column into display strings before it reaches the cell
matrix. Rounding is fixed-point with ``digits`` decimals; values too small
to show at that precision switch to scientific notation unless ``zap_small``
is set.

Example:
    >>> format_value([0.0000453, 0.12, 1.2, 0.0001234])
    ['4.53e-05', '0.12', '1.20', '1.23e-04']
    >>> format_value([0.0000453, 0.12, 1.2, 0.0001234], zap_small=True)
    ['0.00', '0.12', '1.20', '0.00']
"""

from __future__ import annotations

import math
from collections.abc import Sequence

# Magnitudes at or above this always print in scientific notation
_LARGE_VALUE = 1e15


def is_missing(value: object) -> bool:
    """True for ``None`` and float NaN."""
    return value is None or (isinstance(value, float) and math.isnan(value))


def _is_whole(value: float) -> bool:
    if isinstance(value, int):
        return True
    return math.isfinite(value) and float(value).is_integer()


def _format_one(value: float, digits: int, zap_small: bool) -> str:
    if math.isinf(value):
        return "Inf" if value > 0 else "-Inf"
    magnitude = abs(value)
    if magnitude >= _LARGE_VALUE:
        return f"{value:.{digits}e}"
    if not zap_small and value != 0 and magnitude < 10 ** (-digits):
        return f"{value:.{digits}e}"
    return f"{value:.{digits}f}"


def format_value(
    values: Sequence[float | int | None],
    digits: int = 2,
    protect_integers: bool = True,
    missing: str = "",
    width: int | None = None,
    zap_small: bool = False,
) -> list[str]:
    """Format a numeric column as display strings.

    Args:
        values: Numbers; ``None`` and NaN are missing
        digits: Decimal places for non-integer columns
        protect_integers: Print a column of whole numbers without decimals
        missing: Placeholder for missing values
        width: Minimum width; shorter strings are right-justified
        zap_small: Round tiny values to zero instead of using scientific
            notation

    Returns:
        One string per input value, in order
    """
    present = [v for v in values if not is_missing(v)]
    as_integers = protect_integers and all(_is_whole(v) for v in present)

    out: list[str] = []
    for value in values:
        if is_missing(value):
            out.append(missing)
        elif as_integers and math.isfinite(value) and abs(value) < _LARGE_VALUE:
            out.append(str(int(value)))
        else:
            out.append(_format_one(float(value), digits, zap_small))

    if width is not None:
        out = [s.rjust(width) for s in out]
    return out

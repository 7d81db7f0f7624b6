"""Byte-count formatting for the size column.

``kB``/``MB``/... labels are used for both 1000- and 1024-based scaling;
changing them to binary prefixes would alter established output.
"""

from __future__ import annotations

from .errors import FormatError
from .flags import DisplayFlags

SIZE_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def _exponent(num: int, divisor: int) -> int:
    """Return ``floor(log(num) / log(divisor))`` using exact integer math."""
    exponent = 0
    while num >= divisor ** (exponent + 1):
        exponent += 1
    return exponent


def format_size(num: int, base_1000: bool) -> str:
    """Format ``num`` bytes like ``4.14 kB`` or ``1.50 MB``.

    Zero formats as ``0.00 B``. Sizes beyond the largest unit fall back to
    the raw byte count. Raises :class:`FormatError` for negative or
    non-integer input.
    """
    if isinstance(num, bool) or not isinstance(num, int) or num < 0:
        raise FormatError(f"invalid byte count: {num!r}")
    divisor = 1000 if base_1000 else 1024
    exponent = _exponent(num, divisor)
    if exponent > len(SIZE_UNITS) - 1:
        return f"{num} B"
    return f"{num / divisor ** exponent:.2f} {SIZE_UNITS[exponent]}"


def size_label(size: int, flags: DisplayFlags) -> str:
    """Return the size-column text for ``size`` under ``flags``."""
    if not flags.human_readable:
        return f"{size} B"
    return format_size(size, flags.base_1000)


__all__ = ["SIZE_UNITS", "format_size", "size_label"]

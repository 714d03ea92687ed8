"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

import re

_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse the leading decimal number in ``text``.

    Leading white space and one optional sign are accepted; parsing stops at
    the first non-digit. Text without digits gives 0. Results outside the
    32-bit signed range wrap around.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return _wrap_int(-value if sign == "-" else value)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    return f"{int(n):d}"
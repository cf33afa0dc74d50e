"""Small string helpers: number conversion, splitting, trimming and comparison."""

from __future__ import annotations

import re
from itertools import zip_longest

_LONG_MAX = 2**63 - 1
_INT_RANGE = 2**32
_INT_HALF = 2**31
_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _to_int32(value: int) -> int:
    return (value + _INT_HALF) % _INT_RANGE - _INT_HALF


def atoi(text: str) -> int:
    """Read a leading decimal integer, the way C's ``atoi`` does.

    Leading blanks are skipped and one sign is allowed; reading stops at the
    first non-digit. A value too large for a 64-bit long gives ``-1`` when
    positive and ``0`` when negative; otherwise it wraps to 32 bits.
    """
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    negative = sign == "-"
    value = int(digits) if digits else 0
    if value > _LONG_MAX:
        return 0 if negative else -1
    result = _to_int32(value)
    return _to_int32(-result if negative else result)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(number)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces.

    An empty separator never matches, so the whole text is one piece.
    """
    if not sep:
        return [text] if text else []
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, chars: str) -> str:
    """Remove characters found in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start : start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first match, ``0`` for an empty needle, or
    ``None`` when there is no match that ends inside the limit.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index == -1 else index


def _compare(first: str, second: str) -> int:
    for a, b in zip_longest(first, second, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign of the result orders them."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _compare(first[:n], second[:n])


def strcmp(first: str, second: str) -> int:
    """Compare two strings; the sign of the result orders them."""
    return _compare(first, second)


def is_word_char(char: str) -> bool:
    """Tell whether ``char`` may appear in a variable name: ASCII letter, digit or ``_``."""
    return len(char) == 1 and ((char.isascii() and char.isalnum()) or char == "_")
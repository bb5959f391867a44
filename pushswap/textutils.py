"""String helpers with the conventions of the classic C string routines."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Optional

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit.  Text without digits gives 0.  The
    result wraps like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        result = result * 10 + (ord(char) - ord("0"))
    return _wrap_int(sign * result)


def itoa(number: int) -> str:
    """The decimal representation of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError("itoa expects an integer")
    return str(number)


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on a single separator character, dropping empty parts.

    An empty separator never matches, so non-empty text comes back whole.
    """
    if len(separator) > 1:
        raise ValueError("separator must be a single character")
    if not separator:
        return [text] if text else []
    return [part for part in text.split(separator) if part]


def strtrim(text: str, charset: str) -> str:
    """Remove every character of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end gives an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Position of ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at position 0.  Returns None when there is no match.
    """
    if not needle:
        return 0
    if limit <= 0:
        return None
    position = haystack[:limit].find(needle)
    return None if position < 0 else position


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters.

    Returns the difference of the first differing character codes, counting
    the end of a string as code 0, or 0 when the compared parts are equal.
    A NUL character ends the comparison.
    """
    if limit <= 0:
        return 0
    pairs = zip_longest(first, second, fillvalue="\0")
    for left, right in islice(pairs, limit):
        if left != right:
            return ord(left) - ord(right)
        if left == "\0":
            return 0
    return 0


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying ``func(index, char)`` to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))
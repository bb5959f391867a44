"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code.  Conversions return the same kind of value they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(char: CharLike) -> int:
    if isinstance(char, bool):
        raise TypeError("expected a one-character string or an integer code")
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    if isinstance(char, int):
        return char
    raise TypeError("expected a one-character string or an integer code")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(char: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(char)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(char: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    code = _code(char)
    return ord("0") <= code <= ord("9")


def is_alnum(char: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(char) <= 127


def is_print(char: CharLike) -> bool:
    """True for the printable ASCII range, space through tilde."""
    return 32 <= _code(char) <= 126


def to_upper(char: CharLike) -> CharLike:
    """Map a-z to A-Z and leave everything else unchanged."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(char, code)


def to_lower(char: CharLike) -> CharLike:
    """Map A-Z to a-z and leave everything else unchanged."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(char, code)
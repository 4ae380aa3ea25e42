"""Classification and case conversion of single ASCII characters.

Every function accepts either a one-character string or an integer code
point. The case converters give back the same kind of value they were given.
"""

from __future__ import annotations

from typing import TypeVar

CharLike = TypeVar("CharLike", str, int)

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: str | int) -> int:
    """Return the integer code of *c*, validating its form."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an integer")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError("expected a one-character string or an integer")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: str | int) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: str | int) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """Return True for a code in the range 0 to 127."""
    return 0 <= _code(c) < 128


def is_print(c: str | int) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int) -> CharLike:
    if isinstance(c, str):
        return chr(code)
    return code


def to_upper(c: CharLike) -> CharLike:
    """Return the upper-case form of an ASCII lower-case letter, else *c*."""
    code = _code(c)
    if not _is_lower(code):
        return c
    return _convert(c, code - _CASE_OFFSET)


def to_lower(c: CharLike) -> CharLike:
    """Return the lower-case form of an ASCII upper-case letter, else *c*."""
    code = _code(c)
    if not _is_upper(code):
        return c
    return _convert(c, code + _CASE_OFFSET)
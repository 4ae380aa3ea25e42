"""String utilities with bounded copying, searching, parsing and splitting.

Searches return an index into the string, or None when nothing is found.
Bounded copies return the resulting text together with the length the
operation tried to produce, so callers can detect truncation.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, NamedTuple

_WHITESPACE = " \t\n\v\f\r"
_NUL = "\0"


class Bounded(NamedTuple):
    """Result of a size-limited copy: the text and the untruncated length."""

    text: str
    length: int


def _char(c: str | int) -> str:
    """Return *c* as a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an integer")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError("expected a one-character string or an integer")


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in *s*."""
    return len(s)


def strlcpy(src: str, size: int) -> Bounded:
    """Copy at most ``size - 1`` characters of *src*; report ``len(src)``."""
    _non_negative("size", size)
    if size == 0:
        return Bounded("", len(src))
    return Bounded(src[: size - 1], len(src))


def strlcat(dest: str, src: str, size: int) -> Bounded:
    """Append *src* to *dest* so the result fits a buffer of *size*.

    The reported length is ``min(len(dest), size) + len(src)``.
    """
    _non_negative("size", size)
    dest_length = len(dest)
    if size > 0 and dest_length < size - 1:
        dest += src[: size - 1 - dest_length]
    return Bounded(dest, min(dest_length, size) + len(src))


def strchr(s: str, c: str | int) -> int | None:
    """Return the index of the first *c* in *s*; NUL matches the end."""
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: str | int) -> int | None:
    """Return the index of the last *c* in *s*; NUL matches the end."""
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; return the code difference at the first mismatch."""
    _non_negative("n", n)
    for left, right in zip(s1[:n], s2[:n]):
        if left != right:
            return ord(left) - ord(right)
    compared = min(len(s1), len(s2), n)
    if compared < n:
        return _code_at(s1, compared) - _code_at(s2, compared)
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return the index of *little* found wholly within the first *length* characters of *big*."""
    _non_negative("length", length)
    index = big.find(little, 0, length)
    return None if index < 0 else index


def atoi(s: str) -> int:
    """Parse an optionally signed decimal integer after leading whitespace.

    Parsing stops at the first character that is not a digit; a string with
    no digits gives 0.
    """
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    result = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* beginning at *start*."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return *s1* followed by *s2*."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters in *charset* from both ends of *s*."""
    return s.strip(charset)


def split(s: str, delimiter: str | int) -> list[str]:
    """Split *s* on *delimiter*, dropping empty pieces."""
    return [word for word in s.split(_char(delimiter)) if word]


def itoa(n: int) -> str:
    """Return the decimal representation of *n*."""
    return str(n)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` for each element, storing any value it returns in place."""
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement
"""Rendering of printf-style conversions and a small formatter built on them.

Supported conversions are ``%c %s %p %d %i %u %x %X %%``. Integer
conversions behave like their fixed-width counterparts: ``%d``/``%i`` wrap to
a signed 32-bit value, ``%u``/``%x``/``%X`` to an unsigned 32-bit value and
``%p`` to an unsigned 64-bit address. An unknown conversion produces nothing
and consumes no argument; a lone ``%`` at the end is ignored. Text after a
NUL character in the format string is not processed.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterator, TextIO

from miniformat.strings import itoa

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_UINT_MASK = 2**32 - 1
_INT_LIMIT = 2**31
_ULONG_MASK = 2**64 - 1
_NUL = "\0"


def _integer(value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"expected an integer, got {type(value).__name__}"
        ) from None


def _until_nul(s: str) -> str:
    return s.split(_NUL, 1)[0]


def format_char(c: str | int) -> str:
    """Render a character; an integer contributes its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_integer(c) & 0xFF)


def format_str(s: str | None) -> str:
    """Render a string, or ``(null)`` for None."""
    if s is None:
        return NULL_STRING
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return _until_nul(s)


def format_pointer(address: int | None) -> str:
    """Render an address as lower-case hex with ``0x``, or ``(nil)`` for zero."""
    if address is None:
        return NULL_POINTER
    value = _integer(address) & _ULONG_MASK
    if value == 0:
        return NULL_POINTER
    return f"0x{value:x}"


def format_signed(n: int) -> str:
    """Render *n* as a signed 32-bit decimal integer."""
    value = _integer(n) & _UINT_MASK
    if value >= _INT_LIMIT:
        value -= 2 * _INT_LIMIT
    return itoa(value)


def format_unsigned(n: int) -> str:
    """Render *n* as an unsigned 32-bit decimal integer."""
    return itoa(_integer(n) & _UINT_MASK)


def format_hex(n: int, upper: bool = False) -> str:
    """Render *n* as an unsigned 32-bit hexadecimal integer."""
    value = _integer(n) & _UINT_MASK
    return f"{value:X}" if upper else f"{value:x}"


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_str,
    "p": format_pointer,
    "d": format_signed,
    "i": format_signed,
    "u": format_unsigned,
    "x": format_hex,
    "X": lambda n: format_hex(n, upper=True),
}


def format_conversion(spec: str, arg: Any = None) -> str:
    """Render one conversion character applied to *arg*.

    ``%`` ignores *arg*; an unknown conversion renders as an empty string.
    """
    if spec == "%":
        return "%"
    converter = _CONVERTERS.get(spec)
    if converter is None:
        return ""
    return converter(arg)


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    pending = iter(args)
    chars = iter(_until_nul(fmt))
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        arg = None
        if spec in _CONVERTERS:
            try:
                arg = next(pending)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for conversion %{spec}"
                ) from None
        yield format_conversion(spec, arg)


def sprintf(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by the rendered *args*.

    Surplus arguments are ignored; too few raise TypeError.
    """
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to *stream* (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)
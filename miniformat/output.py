"""Writing characters, strings and integers to text streams.

Every function writes to *stream* when one is given and to standard output
otherwise. Standard output is looked up at call time, so redirection works.
"""

from __future__ import annotations

import operator
import sys
from typing import TextIO

from miniformat.strings import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_char(c: str | int) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an integer")
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c)
    raise TypeError("expected a one-character string or an integer")


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write the single character *c* (a string or a code point)."""
    _target(stream).write(_as_char(c))


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write *s*; nothing is written when *s* is None."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write *s* followed by a newline; nothing is written when *s* is None."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of the integer *n*."""
    _target(stream).write(itoa(operator.index(n)))
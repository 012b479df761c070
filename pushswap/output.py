"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from pushswap.strings import itoa

CharLike = Union[int, str]


def _target(stream: Optional[TextIO]) -> TextIO:
    return stream if stream is not None else sys.stdout


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a one-character string or a byte code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        ch = c
    else:
        ch = chr(int(c) & 0xFF)
    _target(stream).write(ch)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` as it is."""
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline."""
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    _target(stream).write(itoa(n))
"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Optional, TextIO

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError("%c needs a single character")
        return arg
    return chr(arg & 0xFF)


def _string(arg: Any) -> str:
    return "(null)" if arg is None else str(arg)


def _pointer(arg: int) -> str:
    return "0x" + format(arg & _UINT64, "x")


def _signed(arg: int) -> str:
    return str(((arg + 2**31) & _UINT32) - 2**31)


def _unsigned(arg: int) -> str:
    return str(arg & _UINT32)


def _hex_lower(arg: int) -> str:
    return format(arg & _UINT32, "x")


def _hex_upper(arg: int) -> str:
    return format(arg & _UINT32, "X")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def render(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt``.

    Unknown conversions are dropped without consuming an argument, and a
    trailing lone ``%`` is ignored. Raises ``ValueError`` when arguments
    run out.
    """
    pieces = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise ValueError(f"no argument left for %{spec}") from None
        pieces.append(convert(arg))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default); return its length."""
    text = render(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)
"""String helpers with C-library semantics expressed on Python ``str``.

Searches return an index or ``None`` rather than a pointer. Functions that
fill a fixed-size buffer in C return the resulting string together with the
length they report.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

INT_MIN = -2147483648
INT_MAX = 2147483647

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    return chr(int(c) & 0xFF)


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise ValueError(f"{n} is out of the 32-bit integer range")
    return str(n)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; ``len(s)`` when ``c`` is NUL."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index == -1 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; ``len(s)`` when ``c`` is NUL."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index == -1 else index


def strdup(s: str) -> str:
    """A copy of ``s``."""
    return "".join(s)


def striteri(chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` on each element of ``chars`` in order.

    A non-``None`` result replaces the character in place.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strjoin(first: str, second: str) -> str:
    """``first`` followed by ``second``."""
    return first + second


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` (terminator included).

    Returns the resulting text and the length the call reports: the length
    it tried to create, or ``size + len(src)`` when ``dst`` already fills
    the buffer (in which case ``dst`` is left as is).
    """
    _non_negative("size", size)
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` (terminator included).

    Returns the copied text and ``len(src)``.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    _non_negative("n", n)
    left = first[:n]
    right = second[:n]
    for a, b in zip(left, right):
        if a != b:
            return ord(a) - ord(b)
    if len(left) != len(right):
        a = ord(left[len(right)]) if len(left) > len(right) else 0
        b = ord(right[len(left)]) if len(right) > len(left) else 0
        return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    _non_negative("length", length)
    if not needle:
        return 0
    limit = min(length, len(haystack))
    index = haystack[:limit].find(needle)
    return None if index == -1 else index


def strtrim(s: str, charset: str) -> str:
    """``s`` without leading and trailing characters found in ``charset``."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def _chars(s: str) -> List[str]:
    return list(s)
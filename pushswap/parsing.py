"""Validation and conversion of the command-line numbers."""

from __future__ import annotations

from typing import Iterable, List, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647
MAX_WORD_LENGTH = 11

_WHITESPACE = "\t\n\v\f\r "
_CONTROL_SPACE = "\t\n\v\f\r"
_DIGITS = "0123456789"
_SIGNS = "+-"


class InputError(ValueError):
    """Raised when the arguments do not describe a valid list of integers."""


def split_words(text: str, separator: str = " ") -> List[str]:
    """Split ``text`` on ``separator``.

    The number of words is decided by the separator alone, while control
    whitespace (tab to carriage return) in front of a word is skipped too,
    so such whitespace can yield an empty word.
    """
    count = sum(1 for part in text.split(separator) if part)
    words: List[str] = []
    pos = 0
    while pos < len(text) and len(words) < count:
        while pos < len(text) and (
            text[pos] == separator or text[pos] in _CONTROL_SPACE
        ):
            pos += 1
        end = text.find(separator, pos)
        if end == -1:
            end = len(text)
        words.append(text[pos:end])
        pos = end
    return words


def parse_int(text: str) -> int:
    """Read a leading integer like ``atoi``; raise if it leaves 32-bit range."""
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = ""
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits += ch
    value = int(digits) if digits else 0
    if negative:
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"{text!r} is out of the 32-bit integer range")
    return value


def has_valid_characters(text: str) -> bool:
    """True if every word of ``text`` holds only digits and signs."""
    allowed = set(_DIGITS + _SIGNS)
    return all(set(word) <= allowed for word in split_words(text, " "))


def has_double_sign(words: Iterable[str]) -> bool:
    """True if any string holds two minus signs or two plus signs."""
    return any(word.count("-") >= 2 or word.count("+") >= 2 for word in words)


def is_well_formed(word: str) -> bool:
    """Reject a lone sign and any sign that follows a digit."""
    digits = signs = 0
    for index, ch in enumerate(word):
        if ch in _DIGITS:
            digits += 1
        if ch in _SIGNS and index != 0:
            signs += 1
        if digits and signs:
            return False
        if len(word) == 1 and (ch == "-" or word[0] == "+"):
            return False
    return True


def has_duplicates(values: Sequence[int]) -> bool:
    """True if some value occurs more than once."""
    return len(set(values)) != len(values)


def format_list(values: Iterable[int]) -> str:
    """Render values as ``1 -> 2 -> NULL`` followed by a newline."""
    return "".join(f"{value} -> " for value in values) + "NULL\n"


def _parse_single(text: str) -> List[int]:
    if not text.strip(_WHITESPACE):
        raise InputError("argument holds no numbers")
    words = split_words(text, " ")
    if not all(is_well_formed(word) for word in words):
        raise InputError("malformed number")
    if has_double_sign(words):
        raise InputError("repeated sign")
    return [parse_int(word) for word in words]


def _parse_many(args: Sequence[str]) -> List[int]:
    if has_double_sign(args):
        raise InputError("repeated sign")
    values: List[int] = []
    for arg in args:
        words = split_words(arg, " ")
        if not words:
            raise InputError("argument holds no numbers")
        if not all(is_well_formed(word) for word in words):
            raise InputError("malformed number")
        if any(len(word) > MAX_WORD_LENGTH for word in words):
            raise InputError("number is too long")
        values.extend(parse_int(word) for word in words)
    return values


def parse_arguments(args: Iterable[str]) -> List[int]:
    """Turn the program arguments (without the program name) into integers.

    A single argument is read as a space-separated list; several arguments
    may each hold one or more numbers. No arguments give an empty list.
    Raises :class:`InputError` on any invalid input or duplicate value.
    """
    args = list(args)
    if not args:
        return []
    if not all(has_valid_characters(arg) for arg in args):
        raise InputError("invalid character")
    if len(args) == 1:
        values = _parse_single(args[0])
    else:
        values = _parse_many(args)
    if has_duplicates(values):
        raise InputError("duplicate value")
    return values
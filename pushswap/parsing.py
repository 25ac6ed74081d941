"""Reading the command-line arguments into a stack of integers."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647
UNKNOWN_FLAG = -15

_FLAGS = {
    "--simple": 1,
    "--medium": 2,
    "--complex": 3,
    "--adaptive": 0,
    "--bench": 10,
}
_ALLOWED = frozenset("0123456789+-")
_DIGITS = "0123456789"
_WHITESPACE = " \t\n\v\f\r"
_WORD = 2**64


class ParseError(ValueError):
    """Raised when the arguments do not form a valid stack."""


def _atoi(token: str) -> int:
    """Leading-integer conversion with 64-bit wrap-around."""
    i, length = 0, len(token)
    while i < length and token[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < length and token[i] in "+-":
        if token[i] == "-":
            sign = -1
        i += 1
    result = 0
    while i < length and token[i] in _DIGITS:
        result = (result * 10 + int(token[i])) % _WORD
        i += 1
    value = (result * sign) % _WORD
    return value - _WORD if value >= _WORD // 2 else value


def _split(text: str) -> list[str]:
    return [part for part in text.split(" ") if part]


def parse_int(token: str) -> int:
    """Convert one argument to an int, rejecting anything invalid."""
    if any(char not in _ALLOWED for char in token):
        raise ParseError(f"not a number: {token!r}")
    value = _atoi(token)
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f"out of range: {token!r}")
    if value == 0 and token[:1] != "0" and token[1:2] != "0":
        raise ParseError(f"not a number: {token!r}")
    return value


def parse_numbers(args: Sequence[str]) -> list[int]:
    """Build stack a from the arguments that follow the flags.

    When the first argument holds a space, only that argument is read and
    split on spaces; otherwise every argument is one number.
    """
    args = list(args)
    if not args:
        raise ParseError("no numbers given")
    tokens = _split(args[0]) if " " in args[0] else args
    if not tokens:
        raise ParseError("no numbers given")
    values = [parse_int(token) for token in tokens]
    if has_duplicates(values):
        raise ParseError("duplicate numbers")
    return values


def has_duplicates(values: Iterable[int]) -> bool:
    """Tell whether any value occurs twice."""
    values = list(values)
    return len(set(values)) != len(values)


def identify_flag(text: str) -> int:
    """Return the code of a ``--`` option, or ``UNKNOWN_FLAG``."""
    return _FLAGS.get(text, UNKNOWN_FLAG)


def to_indices(values: Sequence[int]) -> list[int]:
    """Replace each value by the number of values smaller than it."""
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]


def count_int(text: str) -> int:
    """Count the numbers in a space-separated argument."""
    count = 1
    for position in range(2, len(text)):
        char = text[position]
        if (char in _DIGITS or char == "-") and text[position - 1] == " ":
            count += 1
    return count
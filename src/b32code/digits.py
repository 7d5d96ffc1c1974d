from __future__ import annotations

from typing import Any

from .constants import CANONICAL, DIGITS, INVALID_DIGIT, INVALID_VALUE, VALUES


def canonical(digit: str) -> str:
    """
    Return the canonical form of `digit`, or `INVALID_DIGIT` if it is not a digit.

    Lowercase letters fold to uppercase, `o`/`O` read as `0` and `i`/`I`/`l`/`L`
    read as `1`. Anything that is not a single character is invalid.
    """

    return CANONICAL.get(digit, INVALID_DIGIT) if isinstance(digit, str) else INVALID_DIGIT


def is_valid(text: str) -> bool:
    """True if every character of `text` is a digit or an alias (vacuously for "")."""

    return isinstance(text, str) and all(c in CANONICAL for c in text)


def value(digit: str) -> int:
    c = canonical(digit)
    if c == INVALID_DIGIT:
        return INVALID_VALUE
    return VALUES[c]


def digit_for(value: Any) -> str:
    # bool is an int subclass but never a digit value.
    if not isinstance(value, int) or isinstance(value, bool):
        return INVALID_DIGIT
    if value < 0 or value >= len(DIGITS):
        return INVALID_DIGIT
    return DIGITS[value]

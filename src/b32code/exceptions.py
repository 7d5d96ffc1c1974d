from __future__ import annotations


class B32CodeError(Exception):
    """Base error for the b32code library."""


class InvalidDigitError(B32CodeError, ValueError):
    """
    A character could not be canonicalized to a Base32 digit.

    Raised when a `Code` is constructed from text containing anything other
    than alphabet digits and their tolerated aliases.
    """

    def __init__(self, *, digit: str, position: int) -> None:
        super().__init__(f"invalid Base32 digit {digit!r} at position {position}")
        self.digit = digit
        self.position = position

"""
b32code: a Crockford-style Base32 codec for human-transcribable codes.

Bytes are packed 5 bits per digit, most significant bit first, using the
alphabet `0123456789ABCDEFGHJKMNPQRSTVWXYZ`. Decoding tolerates lowercase
input and the usual transcription slips (`O` for `0`, `I`/`L` for `1`).
"""

from __future__ import annotations

from .code import Code, decoded_size, encoded_size, padding_digits
from .constants import DIGITS, INVALID_DIGIT, INVALID_VALUE
from .digits import canonical, digit_for, is_valid, value
from .exceptions import B32CodeError, InvalidDigitError
from .format import DEFAULT_FORMAT, CodeFormat

__all__ = [
    "DEFAULT_FORMAT",
    "DIGITS",
    "INVALID_DIGIT",
    "INVALID_VALUE",
    "B32CodeError",
    "Code",
    "CodeFormat",
    "InvalidDigitError",
    "canonical",
    "decoded_size",
    "digit_for",
    "encoded_size",
    "is_valid",
    "padding_digits",
    "value",
]

__version__ = "0.1.0"

from __future__ import annotations

import secrets
from collections.abc import Iterable
from dataclasses import dataclass

from . import digits as _digits
from .constants import CANONICAL, CHAR_BITS, DIGIT_BITS, DIGITS, INVALID_DIGIT, VALUES
from .exceptions import InvalidDigitError
from .format import DEFAULT_FORMAT, CodeFormat
from .util.bytes import ceil_div, iter_octets


def decoded_size(digit_count: int) -> int:
    """Number of bytes `Code.decode()` produces for a code of `digit_count` digits."""

    return ceil_div(digit_count * DIGIT_BITS, CHAR_BITS)


def encoded_size(byte_count: int) -> int:
    """Number of digits `Code.encode()` produces for `byte_count` bytes."""

    return ceil_div(byte_count * CHAR_BITS, DIGIT_BITS)


def padding_digits(digit_count: int) -> int:
    """
    Trailing `'0'` digits gained by re-encoding the decoded bytes of a code.

    Decoding rounds the bit count up to whole bytes; the zero bits added there
    come back as extra `'0'` digits when those bytes are encoded again.
    """

    padding_bits = decoded_size(digit_count) * CHAR_BITS - digit_count * DIGIT_BITS
    return ceil_div(padding_bits, DIGIT_BITS)


@dataclass(frozen=True, slots=True)
class Code:
    """
    An immutable string of canonical Base32 digits.

    Construction canonicalizes every character (`o` -> `0`, `l` -> `1`,
    lowercase -> uppercase, ...) and raises `InvalidDigitError` on the first
    character that is not a digit or a tolerated alias.
    """

    digits: str = ""

    def __post_init__(self) -> None:
        raw = self.digits
        if not isinstance(raw, str):
            raise TypeError(f"code must be a str, got {type(raw).__name__}")
        out = []
        for i, c in enumerate(raw):
            d = CANONICAL.get(c, INVALID_DIGIT)
            if d == INVALID_DIGIT:
                raise InvalidDigitError(digit=c, position=i)
            out.append(d)
        object.__setattr__(self, "digits", "".join(out))

    canonical = staticmethod(_digits.canonical)
    is_valid = staticmethod(_digits.is_valid)
    value = staticmethod(_digits.value)
    digit_for = staticmethod(_digits.digit_for)
    decoded_size = staticmethod(decoded_size)

    @classmethod
    def encode(cls, data: Iterable[int]) -> Code:
        """
        Encode bytes 5 bits at a time, most significant bit first.

        The high bits of the first byte become the first digit. A trailing
        partial group is left-aligned in the last digit and zero-filled.
        Only the lowest 8 bits of each item are used.
        """

        out: list[str] = []
        acc = 0
        nbits = 0
        for b in iter_octets(data):
            acc = (acc << CHAR_BITS) | b
            nbits += CHAR_BITS
            while nbits >= DIGIT_BITS:
                nbits -= DIGIT_BITS
                out.append(DIGITS[acc >> nbits])
                acc &= (1 << nbits) - 1
        if nbits:
            out.append(DIGITS[acc << (DIGIT_BITS - nbits)])
        return cls("".join(out))

    def decode(self) -> bytes:
        """
        Decode into exactly `decoded_size(len(self))` bytes.

        The first digit lands in the highest bits of the first byte. Leftover
        bits fill the high end of one last byte whose low bits are zero.
        Non-zero padding bits in the code are not rejected.
        """

        out = bytearray()
        acc = 0
        nbits = 0
        for d in self.digits:
            acc = (acc << DIGIT_BITS) | VALUES[d]
            nbits += DIGIT_BITS
            if nbits >= CHAR_BITS:
                nbits -= CHAR_BITS
                out.append(acc >> nbits)
                acc &= (1 << nbits) - 1
        if nbits:
            out.append(acc << (CHAR_BITS - nbits))
        return bytes(out)

    @classmethod
    def random(cls, size: int) -> Code:
        """Generate `size` random digits, e.g. for pairing codes."""

        if size < 0:
            raise ValueError("size must be non-negative")
        return cls("".join(secrets.choice(DIGITS) for _ in range(size)))

    @classmethod
    def parse(cls, text: str, fmt: CodeFormat = DEFAULT_FORMAT) -> Code:
        """Parse display text produced by `formatted()`, dropping separators."""

        return cls(fmt.strip(text))

    def formatted(self, fmt: CodeFormat = DEFAULT_FORMAT) -> str:
        return fmt.format(self)

    @property
    def size(self) -> int:
        return len(self.digits)

    def __len__(self) -> int:
        return len(self.digits)

    def __str__(self) -> str:
        return self.digits

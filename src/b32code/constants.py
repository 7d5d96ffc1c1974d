from __future__ import annotations

from types import MappingProxyType

# Canonical digits in ascending order of value. No I, L, O or U.
DIGITS = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

DIGIT_BITS = 5
CHAR_BITS = 8
DIGIT_MASK = (1 << DIGIT_BITS) - 1
BYTE_MASK = (1 << CHAR_BITS) - 1

# Sentinels returned by the lookup functions instead of raising.
INVALID_DIGIT = "\0"
INVALID_VALUE = -1

# Visually ambiguous characters accepted in place of a canonical digit.
ALIASES = MappingProxyType(
    {
        "o": "0",
        "O": "0",
        "i": "1",
        "I": "1",
        "l": "1",
        "L": "1",
    }
)


def _build_canonical_table() -> dict[str, str]:
    table = {d: d for d in DIGITS}
    table.update({d.lower(): d for d in DIGITS if d.isalpha()})
    table.update(ALIASES)
    return table


CANONICAL = MappingProxyType(_build_canonical_table())
VALUES = MappingProxyType({d: i for i, d in enumerate(DIGITS)})

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..constants import BYTE_MASK


def iter_octets(data: Iterable[int]) -> Iterator[int]:
    """
    Yield the lowest 8 bits of each item of `data`.

    Accepts bytes-like objects as well as any iterable of ints. Text is
    rejected since iterating a `str` yields characters, not byte values.
    """

    if isinstance(data, str):
        raise TypeError("data must be bytes-like or an iterable of ints, not str")
    # Single-byte views are read as octets; wider formats are masked per item.
    if isinstance(data, memoryview) and data.format in ("c", "b"):
        data = data.cast("B")
    for b in data:
        if not isinstance(b, int):
            raise TypeError(f"byte values must be ints, got {type(b).__name__}")
        yield b & BYTE_MASK


def ceil_div(n: int, d: int) -> int:
    return -(-n // d)

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .constants import CANONICAL

if TYPE_CHECKING:
    from .code import Code


@dataclass(frozen=True, slots=True)
class CodeFormat:
    """Human-facing grouping of a code, e.g. `ABCD-EFGH`."""

    group_size: int = 4
    separator: str = "-"

    def __post_init__(self) -> None:
        if not isinstance(self.group_size, int) or self.group_size < 0:
            raise ValueError("group_size must be a non-negative int")
        if not isinstance(self.separator, str) or not self.separator:
            raise ValueError("separator must be a non-empty string")
        # A separator made of digits could not be told apart from the code itself.
        if any(c in CANONICAL for c in self.separator):
            raise ValueError(f"separator {self.separator!r} contains a Base32 digit")

    def format(self, code: Code) -> str:
        s = str(code)
        n = self.group_size
        if not n:
            return s
        return self.separator.join(s[i : i + n] for i in range(0, len(s), n))

    def strip(self, text: str) -> str:
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, got {type(text).__name__}")
        return text.replace(self.separator, "")

    def parse(self, text: str) -> Code:
        from .code import Code

        return Code(self.strip(text))


DEFAULT_FORMAT = CodeFormat()

"""Offsets and spans into config source text.

Offsets count characters, the same as Python string indices, so a span
slices the source directly.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """A character offset or length. Never negative."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"TextSize cannot be negative: {self.value}")


@dataclass(frozen=True, slots=True)
class TextRange:
    """Half-open span `[start, end)` of source text."""

    start: TextSize
    end: TextSize

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"TextRange starts at {self.start.value}, past its end at {self.end.value}")

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        return TextRange(offset, offset)

    def len(self) -> TextSize:
        return TextSize(self.end.value - self.start.value)

    def slice(self, text: str) -> str:
        return text[self.start.value : self.end.value]

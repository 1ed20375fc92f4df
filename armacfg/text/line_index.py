"""Offset to line/column translation."""

from bisect import bisect_right
from dataclasses import dataclass

from armacfg.text.text import TextSize


@dataclass(frozen=True, slots=True)
class LineCol:
    """1-based line and column of a text offset."""

    line: int
    column: int


class LineIndex:
    """Line start table for one source text.

    `\\n`, `\\r\\n` and a lone `\\r` all end a line, matching the lexer's
    NEWLINE token.
    """

    def __init__(self, text: str) -> None:
        self._len = len(text)
        starts = [0]
        index = 0
        while index < len(text):
            ch = text[index]
            if ch == "\r" and index + 1 < len(text) and text[index + 1] == "\n":
                index += 2
                starts.append(index)
                continue
            index += 1
            if ch == "\n" or ch == "\r":
                starts.append(index)
        self._line_starts = starts

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_col(self, offset: TextSize | int) -> LineCol:
        value = offset.value if isinstance(offset, TextSize) else offset
        if value < 0 or value > self._len:
            raise ValueError(f"Offset {value} outside of text (length {self._len})")
        line = bisect_right(self._line_starts, value) - 1
        return LineCol(line=line + 1, column=value - self._line_starts[line] + 1)

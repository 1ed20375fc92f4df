"""Text offsets and ranges."""

from armacfg.text.line_index import LineCol, LineIndex
from armacfg.text.text import TextRange, TextSize

__all__ = [
    "LineCol",
    "LineIndex",
    "TextRange",
    "TextSize",
]

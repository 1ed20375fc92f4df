import pytest

from armacfg.text import LineIndex, TextRange, TextSize


def test_text_range_length_and_slice() -> None:
    range_ = TextRange(TextSize(6), TextSize(9))
    assert range_.len() == TextSize(3)
    assert range_.slice("class Foo;") == "Foo"

    empty = TextRange.empty(TextSize(7))
    assert empty.len() == TextSize(0)
    assert empty.slice("class Foo;") == ""


def test_text_range_rejects_inverted_bounds() -> None:
    with pytest.raises(ValueError):
        TextRange(TextSize(3), TextSize(1))


def test_text_size_rejects_negative_offsets() -> None:
    with pytest.raises(ValueError):
        TextSize(-1)


def test_line_index_handles_all_newline_styles() -> None:
    text = "a\nb\r\nc\rd"
    index = LineIndex(text)
    assert index.line_count == 4
    assert (index.line_col(0).line, index.line_col(0).column) == (1, 1)
    assert (index.line_col(2).line, index.line_col(2).column) == (2, 1)
    assert (index.line_col(5).line, index.line_col(5).column) == (3, 1)
    assert (index.line_col(7).line, index.line_col(7).column) == (4, 1)


def test_line_index_offset_at_end_of_text() -> None:
    index = LineIndex("x = 1")
    location = index.line_col(TextSize(5))
    assert (location.line, location.column) == (1, 6)


def test_line_index_rejects_out_of_range_offsets() -> None:
    index = LineIndex("abc")
    with pytest.raises(ValueError):
        index.line_col(4)

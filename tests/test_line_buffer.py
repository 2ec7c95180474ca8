from __future__ import annotations

import pytest

from powerchurch_excel.errors import EmptyBufferError
from powerchurch_excel.line_buffer import LineBuffer, is_blank


def test_line_terminators_are_stripped():
    buffer = LineBuffer(["first\r\n", "second\n", "third"])
    assert [buffer.pop_front(), buffer.pop_front(), buffer.pop_front()] == [
        "first",
        "second",
        "third",
    ]
    assert buffer.is_empty()


def test_from_text_keeps_form_feeds_inside_lines():
    buffer = LineBuffer.from_text("101 Fund 1.00\f\nnext\n")
    assert len(buffer) == 2
    assert buffer.pop_front() == "101 Fund 1.00\f"
    assert buffer.peek_front() == "next"


def test_peek_does_not_consume():
    buffer = LineBuffer(["only"])
    assert buffer.peek_front() == "only"
    assert buffer.peek_front() == "only"
    assert len(buffer) == 1


def test_pop_from_empty_buffer_raises():
    buffer = LineBuffer([])
    with pytest.raises(EmptyBufferError):
        buffer.pop_front()
    with pytest.raises(EmptyBufferError):
        buffer.peek_front()


def test_drop_leading_blank_lines_counts_removals():
    buffer = LineBuffer(["", "   ", "\t", "\f", "data", ""])
    assert buffer.drop_leading_blank_lines() == 4
    assert buffer.peek_front() == "data"
    assert buffer.drop_leading_blank_lines() == 0


def test_drop_leading_blank_lines_on_empty_buffer():
    buffer = LineBuffer([])
    assert buffer.drop_leading_blank_lines() == 0
    assert buffer.is_empty()


def test_replace_front():
    buffer = LineBuffer(["\fTitle", "rest"])
    buffer.replace_front("Title")
    assert buffer.pop_front() == "Title"
    assert buffer.pop_front() == "rest"


def test_eof_marker_is_blank():
    assert is_blank("\x1a")
    assert is_blank("  ")
    assert not is_blank(" x ")

"""
Cursor-based line buffer for a single report file.

Lines are stored once with their terminators removed and consumed from the
front. Consumption only advances the cursor, so peeking is free.
"""

from __future__ import annotations

import re
from typing import Iterable, List

from .errors import EmptyBufferError

_LINE_TERMINATOR_RE = re.compile(r"\r?\n?\Z")
# DOS end-of-file markers count as blank.
_BLANK_RE = re.compile(r"^[\s\x1a]*$")


def is_blank(line: str) -> bool:
    return _BLANK_RE.match(line) is not None


class LineBuffer:
    def __init__(self, lines: Iterable[str]):
        self._lines: List[str] = [_LINE_TERMINATOR_RE.sub("", line) for line in lines]
        self._cursor = 0

    @classmethod
    def from_text(cls, text: str) -> "LineBuffer":
        # splitlines() would also break on form feeds, which mark page ends.
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return cls(lines)

    def __len__(self) -> int:
        return len(self._lines) - self._cursor

    def is_empty(self) -> bool:
        return self._cursor >= len(self._lines)

    def peek_front(self) -> str:
        if self.is_empty():
            raise EmptyBufferError("No lines left to peek at")
        return self._lines[self._cursor]

    def pop_front(self) -> str:
        line = self.peek_front()
        self._cursor += 1
        return line

    def replace_front(self, line: str) -> None:
        if self.is_empty():
            raise EmptyBufferError("No line left to replace")
        self._lines[self._cursor] = line

    def drop_leading_blank_lines(self) -> int:
        """Skip whitespace-only lines at the front and return how many were removed."""
        removed = 0
        while not self.is_empty() and is_blank(self._lines[self._cursor]):
            self._cursor += 1
            removed += 1
        return removed


__all__ = ["LineBuffer", "is_blank"]

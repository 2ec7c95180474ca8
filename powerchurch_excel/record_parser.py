"""Line-item extraction from the body of a report page."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from .line_buffer import LineBuffer, is_blank

PAGE_BREAK = "\f"

# Optional three-digit fund code, free-text description, right-aligned amount.
# Trailing whitespace (form feed included) and DOS EOF markers are allowed.
RECORD_LINE_RE = re.compile(
    r"^\s*(?P<fund>\d{3})?\s*(?P<description>.+)\s+"
    r"(?P<amount>-?(?:\d+,)*\d+\.\d\d)(?P<trailer>[\s\x1a]*)$"
)


@dataclass(frozen=True)
class LineItemRecord:
    fund_code: str
    description: str
    amount: str

    @property
    def is_continuation(self) -> bool:
        """Rows without a fund number continue or total the rows above them."""
        return not self.fund_code


def normalize_amount(text: str) -> str:
    """Strip whitespace and thousands separators: '12,345.67' -> '12345.67'."""
    return text.strip().replace(",", "")


def _record_from_match(match: re.Match) -> LineItemRecord:
    return LineItemRecord(
        fund_code=(match.group("fund") or "").strip(),
        description=match.group("description").strip(),
        amount=normalize_amount(match.group("amount")),
    )


def parse_record_line(line: str) -> Optional[LineItemRecord]:
    """Return a LineItemRecord for `line`, or None if it is not a record."""
    match = RECORD_LINE_RE.match(line)
    return _record_from_match(match) if match else None


def parse_records(buffer: LineBuffer, *, verbosity: int = 0) -> List[LineItemRecord]:
    """
    Consume the body lines of the current page.

    Stops at a line starting with a form feed, after a record line ending in a
    form feed, or in front of the first line that is not a record. That line
    stays in the buffer for the next header.
    """
    results: List[LineItemRecord] = []

    while not buffer.is_empty() and not buffer.peek_front().startswith(PAGE_BREAK):
        line = buffer.peek_front()
        if is_blank(line):
            buffer.pop_front()
            continue

        match = RECORD_LINE_RE.match(line)
        if not match:
            if verbosity >= 1:
                logging.debug("Failed to parse %r", line)
            break

        buffer.pop_front()
        record = _record_from_match(match)
        results.append(record)
        if verbosity >= 2:
            logging.debug("%s\t%s\t%s", record.fund_code, record.description, record.amount)
        if PAGE_BREAK in match.group("trailer"):
            break

    if not buffer.is_empty() and PAGE_BREAK in buffer.peek_front():
        buffer.replace_front(buffer.peek_front().replace(PAGE_BREAK, "", 1))

    return results


__all__ = [
    "LineItemRecord",
    "PAGE_BREAK",
    "normalize_amount",
    "parse_record_line",
    "parse_records",
]

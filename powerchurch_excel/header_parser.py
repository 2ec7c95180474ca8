"""
Page header recognition for PowerChurch text reports.

Every page opens with a title block followed by the column-title line::

    First Baptist Church
    Fund Balance Report
    01/02/2023 10:15 AM  Period: 01/01/2023 to 01/31/2023    Page: 1
    Fund #  Description                                  Amount

PowerChurch v9 prints the run timestamp, date range and page number on one
line. PowerChurch v7 splits them across two lines: the date range first, then
the run date and the page number.
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from typing import Optional

from .errors import ReportFormatError
from .line_buffer import LineBuffer

_DATE = r"\d{2}/\d{2}/\d{4}"

V9_DATE_LINE_RE = re.compile(
    rf"(?P<run_date>{_DATE}\s\d{{2}}:\d{{2}}\s+[AP]M)\s+\w[\w\s]+:\s*"
    rf"(?P<start>{_DATE})\s+to\s+(?P<end>{_DATE})\s+Page:\s*(?P<page>\d+)\s*$",
    re.IGNORECASE,
)
V7_RANGE_LINE_RE = re.compile(
    rf"\w[\w\s]+:\s*(?P<start>{_DATE})\s+to\s+(?P<end>{_DATE})\s*$",
    re.IGNORECASE,
)
V7_RUN_DATE_LINE_RE = re.compile(
    rf"\w[\w\s]+:\s*(?P<run_date>{_DATE})\s+Page:\s*(?P<page>\d+)\s*$",
    re.IGNORECASE,
)
COLUMN_TITLE_RE = re.compile(r"^\s*fund\s*#?\s*description\s*amount\s*$", re.IGNORECASE)
REPORT_WORD_RE = re.compile(r"\bReport\b", re.IGNORECASE)


class HeaderDialect(enum.Enum):
    V7 = "7"
    V9 = "9"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class HeaderDates:
    """Outcome of matching the date line(s), tagged with the dialect that matched."""

    dialect: HeaderDialect
    run_date: Optional[str] = None
    range_start: str = ""
    range_end: str = ""
    page: Optional[str] = None


UNKNOWN_DATES = HeaderDates(HeaderDialect.UNKNOWN)


@dataclass
class ReportHeader:
    main_title: Optional[str]
    sub_title: str
    run_date: Optional[str] = None
    range_start: str = ""
    range_end: str = ""
    page: Optional[str] = None
    dialect: HeaderDialect = HeaderDialect.UNKNOWN

    @property
    def version(self) -> Optional[str]:
        """PowerChurch version label, or None when the dialect was not recognised."""
        if self.dialect is HeaderDialect.UNKNOWN:
            return None
        return self.dialect.value


def _require_line(buffer: LineBuffer, expected: str, verbosity: int) -> str:
    removed = buffer.drop_leading_blank_lines()
    if verbosity >= 2:
        logging.debug("Removed %d blank line(s) before %s", removed, expected)
    if buffer.is_empty():
        raise ReportFormatError(f"Report header truncated: expected {expected}")
    return buffer.pop_front()


def parse_dates(line: str, buffer: LineBuffer, *, verbosity: int = 0) -> HeaderDates:
    """
    Match the date line against the v9 grammar, then the v7 grammar.

    A v7 match consumes one more line from `buffer` for the run date and page
    number; that line is mandatory. A line matching neither grammar is
    tolerated and yields empty fields.
    """
    if verbosity >= 3:
        logging.debug("Parsing line: %r", line)

    match = V9_DATE_LINE_RE.search(line)
    if match:
        if verbosity >= 2:
            logging.debug("Found a Version 9 header")
        return HeaderDates(
            HeaderDialect.V9,
            run_date=match.group("run_date"),
            range_start=match.group("start"),
            range_end=match.group("end"),
            page=match.group("page"),
        )

    match = V7_RANGE_LINE_RE.search(line)
    if match:
        if verbosity >= 2:
            logging.debug("Found a Version 7 header")
        run_line = _require_line(buffer, "the run date and page line", verbosity)
        if verbosity >= 3:
            logging.debug("Parsing line: %r", run_line)
        run_match = V7_RUN_DATE_LINE_RE.search(run_line)
        if not run_match:
            raise ReportFormatError("Malformed version 7 run date line", line=run_line)
        return HeaderDates(
            HeaderDialect.V7,
            run_date=run_match.group("run_date"),
            range_start=match.group("start"),
            range_end=match.group("end"),
            page=run_match.group("page"),
        )

    logging.warning("Unrecognised report date line %r; leaving dates empty", line)
    return UNKNOWN_DATES


def parse_header(buffer: LineBuffer, *, verbosity: int = 0) -> Optional[ReportHeader]:
    """
    Consume one page header from `buffer`.

    Returns None when only blank lines remain. Raises ReportFormatError when
    the header is truncated or the column-title line is missing.
    """
    buffer.drop_leading_blank_lines()
    if buffer.is_empty():
        return None

    main_title: Optional[str] = buffer.pop_front().strip()
    if verbosity >= 2:
        logging.debug("Report main title: %s", main_title)

    buffer.drop_leading_blank_lines()
    if buffer.is_empty():
        raise ReportFormatError("Report header truncated after the title line")

    sub_title: Optional[str] = None
    if REPORT_WORD_RE.search(main_title):
        if verbosity >= 2:
            logging.debug("Demoting main title to sub-title")
        main_title, sub_title = None, main_title

    if sub_title is None:
        sub_title = buffer.pop_front().strip()
    if verbosity >= 2:
        logging.debug("Report sub-title: %s", sub_title)

    date_line = _require_line(buffer, "the report date line", verbosity)
    dates = parse_dates(date_line, buffer, verbosity=verbosity)
    if verbosity >= 2:
        logging.debug("Report run date/time: %s", dates.run_date)
        logging.debug("Report start date: %s", dates.range_start)
        logging.debug("Report end date: %s", dates.range_end)
        logging.debug("Page: %s", dates.page)

    column_line = _require_line(buffer, "the column title line", verbosity)
    if not COLUMN_TITLE_RE.match(column_line):
        raise ReportFormatError("Was expecting the column title line", line=column_line)

    buffer.drop_leading_blank_lines()

    return ReportHeader(
        main_title=main_title,
        sub_title=sub_title,
        run_date=dates.run_date,
        range_start=dates.range_start,
        range_end=dates.range_end,
        page=dates.page,
        dialect=dates.dialect,
    )


__all__ = [
    "HeaderDialect",
    "HeaderDates",
    "ReportHeader",
    "parse_dates",
    "parse_header",
]

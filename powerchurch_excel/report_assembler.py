"""Drive header and record parsing across every page of a report."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .header_parser import ReportHeader, parse_header
from .line_buffer import LineBuffer
from .record_parser import LineItemRecord, parse_records


@dataclass
class ReportDocument:
    header: Optional[ReportHeader] = None
    records: List[LineItemRecord] = field(default_factory=list)
    pages: List[Optional[str]] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)


def _log_canonical_header(header: ReportHeader, verbosity: int) -> None:
    if verbosity == 1:
        logging.debug("Report main title: %s", header.main_title)
        logging.debug("Report sub-title:  %s", header.sub_title)
        logging.debug("Report run date:   %s", header.run_date)
        logging.debug("Report start date: %s", header.range_start)
        logging.debug("Report end date:   %s", header.range_end)
    if header.version:
        logging.info("Detected PowerChurch version %s", header.version)


def assemble_report(buffer: LineBuffer, *, verbosity: int = 0) -> ReportDocument:
    """
    Parse every page left in `buffer` into a single ReportDocument.

    The first page header is kept as the report's metadata; later headers only
    contribute their page numbers. Records are concatenated in page order.
    """
    document = ReportDocument()

    while True:
        header = parse_header(buffer, verbosity=verbosity)
        if header is None:
            break

        if document.header is None:
            document.header = header
            _log_canonical_header(header, verbosity)

        document.pages.append(header.page)
        logging.info("Processing page %s", header.page)

        records = parse_records(buffer, verbosity=verbosity)
        if records and verbosity >= 1:
            logging.debug("Found %d funds on page %s", len(records), header.page)
        document.records.extend(records)

    if verbosity >= 1:
        logging.debug("Found %d total lines of report data", len(document.records))
    return document


def assemble_lines(lines: Iterable[str], *, verbosity: int = 0) -> ReportDocument:
    return assemble_report(LineBuffer(lines), verbosity=verbosity)


__all__ = ["ReportDocument", "assemble_report", "assemble_lines"]

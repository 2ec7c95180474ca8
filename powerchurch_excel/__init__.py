"""
Convert PowerChurch plain-text fund reports into delimited text for Excel.

This package exposes a programmatic API for:
  * parsing page headers in both report dialects (`header_parser.parse_header`)
  * extracting fund line items from page bodies (`record_parser.parse_records`)
  * assembling all pages of a report (`report_assembler.assemble_report`)
  * formatting the records as delimited rows (`output_formatter.format_rows`)
  * converting a report file end-to-end (`converter.convert_file`)
"""

from .converter import ConversionSummary, ConverterOptions, convert_file, parse_report_bytes
from .errors import EmptyBufferError, ReportFormatError, ReportParseError
from .header_parser import HeaderDialect, ReportHeader, parse_header
from .line_buffer import LineBuffer
from .output_formatter import format_rows, render_rows, to_dataframe
from .record_parser import LineItemRecord, parse_records
from .report_assembler import ReportDocument, assemble_report

__all__ = [
    "ConversionSummary",
    "ConverterOptions",
    "EmptyBufferError",
    "HeaderDialect",
    "LineBuffer",
    "LineItemRecord",
    "ReportDocument",
    "ReportFormatError",
    "ReportHeader",
    "ReportParseError",
    "assemble_report",
    "convert_file",
    "format_rows",
    "parse_header",
    "parse_records",
    "parse_report_bytes",
    "render_rows",
    "to_dataframe",
]

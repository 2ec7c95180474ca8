"""
Convert PowerChurch text reports into delimited files for Excel import.

For each report file given on the command line:
1. Reads the lines and assembles every page into one ReportDocument.
2. Formats the records with the column prefix and separator.
3. Writes `xl<name>` next to the other outputs, never overwriting a file.

Usage:
    python -m powerchurch_excel [-v] [-p PFX] [-s SEP] report.txt [report.txt ...]
"""

from __future__ import annotations

import argparse
import codecs
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import ReportParseError
from .line_buffer import LineBuffer
from .output_formatter import (
    DEFAULT_EOL,
    DEFAULT_PREFIX,
    DEFAULT_SEPARATOR,
    format_rows,
    render_rows,
)
from .report_assembler import ReportDocument, assemble_report

__version__ = "1.2.1"

DEFAULT_ENCODING = "utf-8"
OUTPUT_PREFIX = "xl"


@dataclass
class ConverterOptions:
    prefix: str = DEFAULT_PREFIX
    separator: str = DEFAULT_SEPARATOR
    eol: str = DEFAULT_EOL
    encoding: str = DEFAULT_ENCODING
    output_dir: Path = Path(".")
    verbosity: int = 0


@dataclass
class ConversionSummary:
    source: Path
    output_path: Path
    pages_processed: int
    records_written: int
    version: Optional[str]


def parse_report_text(text: str, *, verbosity: int = 0) -> ReportDocument:
    buffer = LineBuffer.from_text(text)
    if verbosity >= 1:
        logging.debug("Found %d lines of data", len(buffer))
    return assemble_report(buffer, verbosity=verbosity)


def parse_report_bytes(
    data: bytes, *, encoding: str = DEFAULT_ENCODING, verbosity: int = 0
) -> ReportDocument:
    """Parse an in-memory report, e.g. an upload."""
    return parse_report_text(data.decode(encoding, errors="replace"), verbosity=verbosity)


def next_output_path(source: Path, output_dir: Path) -> Path:
    """
    Pick a name for the converted copy of `source` inside `output_dir`.

    Tries `xl<name>` first, then `xl-1-<name>`, `xl-2-<name>` and so on until
    the name is free.
    """
    candidate = output_dir / f"{OUTPUT_PREFIX}{source.name}"
    suffix = 1
    while candidate.exists():
        candidate = output_dir / f"{OUTPUT_PREFIX}-{suffix}-{source.name}"
        suffix += 1
    return candidate


def convert_file(source: Path, options: ConverterOptions) -> ConversionSummary:
    """
    Convert one report file.

    Raises ReportParseError if the file is not a recognised report; in that
    case nothing is written.
    """
    if options.verbosity >= 1:
        logging.debug("Attempting to open '%s' for reading", source)
    text = source.read_text(encoding=options.encoding, errors="replace")
    document = parse_report_text(text, verbosity=options.verbosity)

    rows = format_rows(document, prefix=options.prefix)
    # Encode before touching the output file so a failure leaves nothing behind.
    data = render_rows(rows, separator=options.separator, eol=options.eol).encode(
        options.encoding, errors="replace"
    )
    options.output_dir.mkdir(parents=True, exist_ok=True)
    output_path = next_output_path(source, options.output_dir)
    output_path.write_bytes(data)

    if options.verbosity >= 1:
        logging.debug("Converted %s to %s", source, output_path)

    return ConversionSummary(
        source=source,
        output_path=output_path,
        pages_processed=document.page_count,
        records_written=len(rows) - 1,
        version=document.header.version if document.header else None,
    )


_SEPARATOR_ESCAPE_RE = re.compile(r"\\([\\t])")
_SEPARATOR_ESCAPES = {"t": "\t", "\\": "\\"}


def unescape_separator(value: str) -> str:
    r"""Translate '\t' (tab) and '\\' (backslash); everything else is taken literally."""
    return _SEPARATOR_ESCAPE_RE.sub(lambda match: _SEPARATOR_ESCAPES[match.group(1)], value)


def check_separator(value: str) -> str:
    """Unescape a separator given by the user and require a single character."""
    separator = unescape_separator(value)
    if len(separator) != 1:
        raise ValueError(f"Separator must be a single character, got {value!r}")
    return separator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pc2xl",
        description="Convert PowerChurch report files into delimited text for Excel.",
    )
    parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Name of PowerChurch report file(s) to convert.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Print extra information about the file. Use more than once to increase verbosity.",
    )
    parser.add_argument(
        "-p",
        "--prefix",
        default=DEFAULT_PREFIX,
        help="Column name prefix (default: %(default)s).",
    )
    parser.add_argument(
        "-s",
        "--separator",
        default=DEFAULT_SEPARATOR,
        help="Field separator; '\\t' means tab (default: %(default)s).",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory to write converted files to (default: current directory).",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help="Encoding used to read reports and write output (default: %(default)s).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s v{__version__}")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    for path in args.files:
        if not path.is_file() or not os.access(path, os.R_OK):
            parser.error(f"Unrecognized file, {path}.")

    try:
        codecs.lookup(args.encoding)
    except LookupError:
        parser.error(f"Unknown encoding: {args.encoding}")

    try:
        separator = check_separator(args.separator)
    except ValueError as exc:
        parser.error(str(exc))

    options = ConverterOptions(
        prefix=args.prefix,
        separator=separator,
        encoding=args.encoding,
        output_dir=args.output_dir,
        verbosity=args.verbose,
    )

    summaries: List[ConversionSummary] = []
    failed: List[Path] = []
    for path in args.files:
        try:
            summary = convert_file(path, options)
        except ReportParseError as exc:
            logging.error("Unable to convert %s: %s", path, exc)
            failed.append(path)
            continue
        summaries.append(summary)
        print(
            f"{summary.source} -> {summary.output_path} "
            f"({summary.pages_processed} pages, {summary.records_written} rows)"
        )

    if failed:
        logging.error("%d of %d file(s) could not be converted", len(failed), len(args.files))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

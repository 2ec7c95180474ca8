"""
Turn an assembled report into delimited rows.

Rows without a fund number (continuation and sub-total lines) keep their text
by moving it into the fund column and leaving the description column empty.
"""

from __future__ import annotations

import csv
import io
from typing import Iterable, List, Sequence, Tuple

import pandas as pd

from .report_assembler import ReportDocument

DEFAULT_PREFIX = "s###_"
DEFAULT_SEPARATOR = ";"
DEFAULT_EOL = "\n"

Row = Tuple[str, str, str]


def title_row(prefix: str = DEFAULT_PREFIX) -> Row:
    return (f"{prefix}Fund#", f"{prefix}Description", f"{prefix}Amount")


def format_rows(document: ReportDocument, *, prefix: str = DEFAULT_PREFIX) -> List[Row]:
    rows: List[Row] = [title_row(prefix)]
    for record in document.records:
        if record.is_continuation:
            rows.append((prefix + record.description, "", record.amount))
        else:
            rows.append((prefix + record.fund_code, record.description, record.amount))
    return rows


def render_rows(
    rows: Iterable[Sequence[str]],
    *,
    separator: str = DEFAULT_SEPARATOR,
    eol: str = DEFAULT_EOL,
) -> str:
    """
    Write `rows` as delimited text; every row, the last included, ends with `eol`.

    Fields containing the separator, a quote or a line break are quoted.
    `separator` must be a single character.
    """
    stream = io.StringIO()
    writer = csv.writer(stream, delimiter=separator, lineterminator=eol)
    writer.writerows(rows)
    return stream.getvalue()


def to_dataframe(document: ReportDocument, *, prefix: str = DEFAULT_PREFIX) -> pd.DataFrame:
    """Rows as a DataFrame whose columns are the title row."""
    header, *body = format_rows(document, prefix=prefix)
    return pd.DataFrame(body, columns=list(header))


__all__ = [
    "DEFAULT_EOL",
    "DEFAULT_PREFIX",
    "DEFAULT_SEPARATOR",
    "Row",
    "format_rows",
    "render_rows",
    "title_row",
    "to_dataframe",
]

from __future__ import annotations

import csv
import io

from powerchurch_excel.output_formatter import format_rows, render_rows, title_row, to_dataframe
from powerchurch_excel.record_parser import LineItemRecord
from powerchurch_excel.report_assembler import ReportDocument, assemble_lines


def _document() -> ReportDocument:
    return ReportDocument(
        records=[
            LineItemRecord("101", "General Fund", "1234.56"),
            LineItemRecord("", "Sub-total", "-50.00"),
        ]
    )


def test_title_row_uses_prefix():
    assert title_row("s001_") == ("s001_Fund#", "s001_Description", "s001_Amount")


def test_continuation_rows_move_description_to_fund_column():
    rows = format_rows(_document())
    assert rows == [
        ("s###_Fund#", "s###_Description", "s###_Amount"),
        ("s###_101", "General Fund", "1234.56"),
        ("s###_Sub-total", "", "-50.00"),
    ]


def test_empty_document_has_only_the_title_row():
    assert format_rows(ReportDocument(), prefix="") == [("Fund#", "Description", "Amount")]


def test_formatting_is_repeatable():
    document = _document()
    first = render_rows(format_rows(document, prefix="x_"))
    second = render_rows(format_rows(document, prefix="x_"))
    assert first == second
    assert len(document.records) == 2


def test_render_rows_with_custom_separator():
    text = render_rows(format_rows(_document(), prefix=""), separator="\t", eol="\r\n")
    assert text == (
        "Fund#\tDescription\tAmount\r\n"
        "101\tGeneral Fund\t1234.56\r\n"
        "Sub-total\t\t-50.00\r\n"
    )


def test_to_dataframe():
    df = to_dataframe(_document())
    assert list(df.columns) == ["s###_Fund#", "s###_Description", "s###_Amount"]
    assert df.shape == (2, 3)
    assert df.iloc[1].tolist() == ["s###_Sub-total", "", "-50.00"]


def test_to_dataframe_without_records():
    df = to_dataframe(ReportDocument())
    assert df.empty
    assert list(df.columns) == ["s###_Fund#", "s###_Description", "s###_Amount"]


def test_fields_containing_the_separator_are_quoted():
    document = assemble_lines(
        [
            "Fund Balance Report",
            "01/02/2023 10:15 AM Period: 01/01/2023 to 01/31/2023 Page: 1",
            "Fund # Description Amount",
            "101 Building; Grounds 5.00",
            '102 The "Annex" Fund 7.00',
        ]
    )
    text = render_rows(format_rows(document))

    rows = list(csv.reader(io.StringIO(text), delimiter=";"))
    assert rows[1] == ["s###_101", "Building; Grounds", "5.00"]
    assert rows[2] == ["s###_102", 'The "Annex" Fund', "7.00"]
    assert all(len(row) == 3 for row in rows)

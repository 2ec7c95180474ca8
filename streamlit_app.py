#!/usr/bin/env python3
"""
Streamlit UI for converting PowerChurch fund reports:
  - upload a plain-text report (v7 or v9 layout)
  - preview the report header and the parsed fund rows
  - download the delimited text for Excel import
"""

from __future__ import annotations

from pathlib import Path

import streamlit as st

from powerchurch_excel.converter import DEFAULT_ENCODING, OUTPUT_PREFIX, check_separator, parse_report_bytes
from powerchurch_excel.errors import ReportParseError
from powerchurch_excel.output_formatter import (
    DEFAULT_PREFIX,
    DEFAULT_SEPARATOR,
    format_rows,
    render_rows,
    to_dataframe,
)


st.set_page_config(page_title="PowerChurch to Excel", layout="wide")
st.title("PowerChurch to Excel")
st.write(
    "Upload a PowerChurch fund report saved as text. Every page is parsed and the fund "
    "lines are combined into one delimited file ready for Excel import."
)

col_prefix, col_separator, col_encoding = st.columns(3)
prefix = col_prefix.text_input("Column prefix", value=DEFAULT_PREFIX)
separator = col_separator.text_input("Field separator", value=DEFAULT_SEPARATOR)
encoding = col_encoding.text_input("Encoding", value=DEFAULT_ENCODING)

uploaded_report = st.file_uploader(
    "Upload a PowerChurch report",
    type=["txt", "prn", "rpt"],
    accept_multiple_files=False,
)

if uploaded_report is None:
    st.info("Upload a report to begin parsing.")


def _render_header(document) -> None:
    header = document.header
    if header is None:
        st.warning("No report pages were found in the upload.")
        return
    st.subheader(header.main_title or header.sub_title)
    if header.main_title:
        st.caption(header.sub_title)
    details = {
        "Run date": header.run_date or "",
        "Start date": header.range_start,
        "End date": header.range_end,
        "PowerChurch version": header.version or "unknown",
        "Pages": str(document.page_count),
    }
    st.table({"Field": list(details.keys()), "Value": list(details.values())})


if uploaded_report is not None:
    report_name = getattr(uploaded_report, "name", None) or "report.txt"

    try:
        output_separator = check_separator(separator)
    except ValueError as exc:
        st.error(str(exc))
        st.stop()

    try:
        with st.spinner("Parsing PowerChurch report..."):
            document = parse_report_bytes(uploaded_report.getvalue(), encoding=encoding)

        st.success(f"Parsed {len(document.records)} fund lines from {document.page_count} pages.")
        _render_header(document)

        df = to_dataframe(document, prefix=prefix)
        if df.empty:
            st.info("No rows available.")
        else:
            st.dataframe(df.head(25), use_container_width=True)
            st.caption("Preview limited to the first 25 rows.")

        output_text = render_rows(format_rows(document, prefix=prefix), separator=output_separator)
        st.download_button(
            "Download Delimited Text",
            data=output_text.encode(encoding, errors="replace"),
            file_name=f"{OUTPUT_PREFIX}{Path(report_name).name}",
            mime="text/plain",
        )

    except ReportParseError as exc:
        st.error(f"Not a recognised PowerChurch report: {exc}")
    except LookupError as exc:
        st.error(f"Unknown encoding {encoding!r}: {exc}")

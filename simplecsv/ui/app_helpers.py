#!/usr/bin/env python3
"""
simplecsv.ui.app_helpers
------------------------
Rendering and parsing helpers for the Streamlit explorer.
Kept separate from app.py so make_app() stays a thin coordinator.
"""
from __future__ import annotations

import gzip
import io
from typing import Any, Dict, List, Tuple

import pandas as pd
import streamlit as st

from simplecsv.core.constants import DELIMITER_CHOICES, GZIP_SUFFIX
from simplecsv.core.errors import ArityError, CsvFormatError
from simplecsv.core.frames import frame_to_excel_bytes, frame_to_jsonl, records_to_frame
from simplecsv.core.options_io import ReaderOptions, dump_options, load_options
from simplecsv.core.reader import CsvReader
from simplecsv.core.record import Record


def decode_upload(data: bytes, gzipped: bool, encoding: str) -> str:
    """Undo the optional gzip layer and decode to text."""
    if gzipped:
        data = gzip.decompress(data)
    return data.decode(encoding)


def collect_records(text: str, options: ReaderOptions, max_errors: int = 50) -> Tuple[List[Record], Tuple[str, ...], List[Dict[str, Any]]]:
    """Parse `text`, skipping bad lines instead of aborting.

    Returns (records, header, errors) where each error is a dict with the
    physical line number and the message.
    """
    records: List[Record] = []
    errors: List[Dict[str, Any]] = []
    with CsvReader(stream=io.StringIO(text), delimiter=options.delimiter, quote_char=options.quote_char,
                   lines_to_skip=options.lines_to_skip, skip_empty_values=options.skip_empty_values) as reader:
        while True:
            try:
                rec = reader.read_next()
            except (CsvFormatError, ArityError) as ex:
                errors.append({"line": reader.line_number, "error": type(ex).__name__, "message": str(ex)})
                if len(errors) >= max_errors:
                    break
                continue
            if rec is None:
                break
            records.append(rec)
        header = reader.header or ()
    return records, header, errors


def render_options_sidebar(uploaded_name: str | None) -> ReaderOptions:
    """Render reader options controls and return the chosen ReaderOptions."""
    st.sidebar.header("Reader options")
    loaded = None
    opts_upl = st.sidebar.file_uploader("Load options (YAML)", type=["yaml", "yml", "json"], key="options_uploader")
    if opts_upl is not None:
        try:
            loaded = load_options(opts_upl.getvalue())
        except (ValueError, TypeError) as ex:
            st.sidebar.error(f"Invalid options file: {ex}")
    base = loaded or ReaderOptions()

    labels = list(DELIMITER_CHOICES.keys())
    default_label = next((k for k, v in DELIMITER_CHOICES.items() if v == base.delimiter), None)
    choice = st.sidebar.selectbox("Delimiter", labels + ["Other"], index=labels.index(default_label) if default_label else len(labels))
    delimiter = DELIMITER_CHOICES.get(choice) or st.sidebar.text_input("Custom delimiter", value=base.delimiter, max_chars=1) or ","

    disable_quotes = st.sidebar.toggle("Disable quoting", value=base.quote_char is None)
    quote_char = None
    if not disable_quotes:
        quote_char = st.sidebar.text_input("Quote character", value=base.quote_char or '"', max_chars=1) or '"'

    lines_to_skip = int(st.sidebar.number_input("Lines to skip before header", min_value=0, value=base.lines_to_skip, step=1))
    skip_empty = st.sidebar.toggle("Skip empty values", value=base.skip_empty_values)
    encoding = st.sidebar.text_input("Encoding", value=base.encoding)
    gzipped = bool(uploaded_name and uploaded_name.lower().endswith(GZIP_SUFFIX)) or base.gzipped

    try:
        options = ReaderOptions(
            delimiter=delimiter,
            quote_char=quote_char,
            gzipped=gzipped,
            lines_to_skip=lines_to_skip,
            skip_empty_values=skip_empty,
            encoding=encoding,
        )
    except ValueError as ex:
        st.sidebar.error(f"Invalid options, using defaults: {ex}")
        options = ReaderOptions(gzipped=gzipped)
    st.sidebar.download_button("Download options.yaml", dump_options(options).encode("utf-8"), file_name="options.yaml", mime="text/yaml")
    return options


def render_errors(errors: List[Dict[str, Any]]) -> None:
    if not errors:
        return
    st.error(f"{len(errors)} line(s) could not be parsed.")
    with st.expander("Parse errors", expanded=False):
        st.dataframe(pd.DataFrame(errors), hide_index=True, use_container_width=True)


def render_records_table(records: List[Record], header: Tuple[str, ...]) -> pd.DataFrame:
    """Render the searchable record table and return the (filtered) frame."""
    df = records_to_frame(records, list(header) or None)
    query = st.text_input("Search records")
    if query:
        q = query.lower()
        df = df[df.apply(lambda r: any(str(v).lower().find(q) >= 0 for v in r.values), axis=1)]
    st.dataframe(df, hide_index=True, use_container_width=True)
    return df


def render_exports_sidebar(df: pd.DataFrame) -> None:
    """Render sidebar exports: CSV, Excel and JSON Lines."""
    st.sidebar.header("Exports")
    st.sidebar.download_button("Export CSV", df.to_csv(index=False).encode("utf-8"), file_name="records.csv", mime="text/csv")
    st.sidebar.download_button(
        "Export Excel",
        frame_to_excel_bytes(df),
        file_name="records.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
    st.sidebar.download_button("Export JSON Lines", frame_to_jsonl(df).encode("utf-8"), file_name="records.jsonl", mime="application/json")

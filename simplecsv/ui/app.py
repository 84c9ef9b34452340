#!/usr/bin/env python3
"""
simplecsv.ui.app
----------------
Streamlit UI for exploring delimited text files.
"""
from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# Under `streamlit run` this file executes as a bare script; make the package importable
_pkg_parent = str(Path(__file__).resolve().parents[2])
if _pkg_parent not in sys.path:
    sys.path.insert(0, _pkg_parent)

from simplecsv.core.constants import UPLOAD_TYPES  # noqa: E402
from simplecsv.ui.app_helpers import (  # noqa: E402
    collect_records,
    decode_upload,
    render_errors,
    render_exports_sidebar,
    render_options_sidebar,
    render_records_table,
)

try:
    from streamlit.runtime.scriptrunner import get_script_run_ctx  # type: ignore
except ImportError:
    get_script_run_ctx = None  # type: ignore


def _has_streamlit_ctx() -> bool:
    """Return True when running under Streamlit runtime (ScriptRunContext exists)."""
    return bool(get_script_run_ctx and get_script_run_ctx())


# Only set page config under Streamlit (avoids the ScriptRunContext warning in bare mode)
if _has_streamlit_ctx():
    st.set_page_config(page_title="SimpleCsv Explorer", layout="wide")


def make_app():
    """Main Streamlit application entry point.
    Reads input and options from the sidebar, parses records, and renders
    the overview, record table and exports.
    """
    st.title("SimpleCsv Explorer")

    st.sidebar.header("Inputs")
    input_mode = st.sidebar.radio("Provide data via", ["Upload file", "Paste text"], horizontal=False)
    uploaded = None
    pasted_text = None
    if input_mode == "Upload file":
        uploaded = st.sidebar.file_uploader("Upload delimited file", type=UPLOAD_TYPES)
    else:
        pasted_text = st.sidebar.text_area("Paste delimited data", height=200, help="First retained line is the header.")

    options = render_options_sidebar(uploaded.name if uploaded is not None else None)

    text = None
    if uploaded is not None:
        try:
            text = decode_upload(uploaded.getvalue(), options.gzipped, options.encoding)
        except (OSError, EOFError, UnicodeDecodeError, LookupError) as ex:
            st.error(f"Could not read {uploaded.name}: {ex}")
            return
    elif pasted_text:
        text = pasted_text

    if not text:
        st.info("Upload or paste delimited data to begin.")
        return

    records, header, errors = collect_records(text, options)
    render_errors(errors)

    if not header:
        st.warning("No header line found.")
        return

    st.subheader("Overview")
    c1, c2, c3 = st.columns(3)
    c1.metric("Records", len(records))
    c2.metric("Columns", len(header))
    c3.metric("Rejected lines", len(errors))
    with st.expander("Header", expanded=False):
        st.write(list(header))

    st.subheader("Records")
    df = render_records_table(records, header)

    render_exports_sidebar(df)


if __name__ == "__main__":
    # If not running under Streamlit, relaunch via `streamlit run` so the UI shows up.
    if not _has_streamlit_ctx():
        import os
        import subprocess

        if os.environ.get("SIMPLECSV_LAUNCHED") != "1":
            os.environ["SIMPLECSV_LAUNCHED"] = "1"
            cmd = [sys.executable, "-m", "streamlit", "run", str(Path(__file__).resolve())]
            subprocess.run(cmd)
        else:
            make_app()
    else:
        make_app()

#!/usr/bin/env python3
"""
Module entry point for `python -m simplecsv`.
Launches the Streamlit explorer, even when invoked directly from Python.
"""
from __future__ import annotations

from pathlib import Path


def main():
    try:
        from streamlit.runtime.scriptrunner import get_script_run_ctx  # type: ignore
    except ImportError:
        get_script_run_ctx = None  # type: ignore

    def _has_streamlit_ctx() -> bool:
        return bool(get_script_run_ctx and get_script_run_ctx())

    if not _has_streamlit_ctx():
        import os
        import sys
        import subprocess

        if os.environ.get("SIMPLECSV_LAUNCHED") != "1":
            os.environ["SIMPLECSV_LAUNCHED"] = "1"
            # Compute the path to ui/app.py without importing it (works even when run as a bare script)
            script_path = (Path(__file__).parent / "ui" / "app.py").resolve()
            # Ensure the parent of the package dir is on PYTHONPATH so absolute imports work under Streamlit
            pkg_parent = str(Path(__file__).resolve().parent.parent)
            existing_pp = os.environ.get("PYTHONPATH", "")
            os.environ["PYTHONPATH"] = (pkg_parent + (os.pathsep + existing_pp if existing_pp else ""))
            cmd = [sys.executable, "-m", "streamlit", "run", str(script_path)]
            subprocess.run(cmd)
            return

    # Already inside Streamlit (or relaunched): build the app in-process
    from simplecsv.ui import app as app_mod

    app_mod.make_app()


if __name__ == "__main__":
    main()

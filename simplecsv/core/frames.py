#!/usr/bin/env python3
"""
simplecsv.core.frames
---------------------
Tabular views of parsed records: DataFrame conversion and export helpers
shared by the explorer UI and library callers.
"""
from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

import pandas as pd

from .sources import RecordSource, read_all


def collect_columns(records: Iterable[Mapping[str, Any]]) -> List[str]:
    """Union of field names in first-seen order."""
    seen: Dict[str, None] = {}
    for rec in records:
        for key in rec.keys():
            seen.setdefault(key, None)
    return list(seen)


def records_to_frame(records: Sequence[Mapping[str, Any]], columns: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """Build a DataFrame with one row per record.

    Fields missing from a record (e.g. skipped empty values) come out as NaN.
    """
    cols = list(columns) if columns is not None else collect_columns(records)
    return pd.DataFrame([dict(r) for r in records], columns=cols)


def read_frame(reader: RecordSource, columns: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """Read every remaining record from `reader` into a DataFrame.

    When no columns are given and the reader exposes a captured header, the
    header order is used so that columns dropped by skip_empty_values still
    appear.
    """
    records = read_all(reader)
    if columns is None:
        header = getattr(reader, "header", None)
        if header:
            columns = list(header)
    return records_to_frame(records, columns)


def frame_to_excel_bytes(df: pd.DataFrame, sheet_name: str = "records") -> bytes:
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="xlsxwriter") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name[:31])
    return buf.getvalue()


def frame_to_jsonl(df: pd.DataFrame) -> str:
    """One JSON object per row; NaN cells are written as null."""
    out = io.StringIO()
    clean = df.astype(object).where(pd.notna(df), None)
    for row in clean.to_dict(orient="records"):
        out.write(json.dumps(row, ensure_ascii=False) + "\n")
    return out.getvalue()


def save_outputs(df: pd.DataFrame, outdir: Path, excel_path: Optional[Path] = None, jsonl: bool = False) -> None:
    outdir.mkdir(parents=True, exist_ok=True)
    df.to_csv(outdir / "records.csv", index=False)
    if jsonl:
        (outdir / "records.jsonl").write_text(frame_to_jsonl(df), encoding="utf-8")
    if excel_path:
        Path(excel_path).write_bytes(frame_to_excel_bytes(df))


def print_summary(df: pd.DataFrame) -> None:
    """Print record and column counts followed by the first rows."""
    print(f"\n=== {len(df)} record(s), {len(df.columns)} column(s) ===")
    print(", ".join(str(c) for c in df.columns))
    print("\nExample rows:")
    print(df.head(5).to_string(index=False))

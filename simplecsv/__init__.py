"""
simplecsv package
-----------------
A small package for reading delimited text files (optionally gzipped) into
field-name/value records, one at a time or all at once.

Entrypoints:
- Streamlit UI: `python -m simplecsv` which launches Streamlit.
- Library usage: reader classes and helpers are exposed on the package; attributes are loaded lazily.
"""
from __future__ import annotations

import importlib
from typing import Any

# Public API name -> defining module under core/
_EXPORTS = {
    "CsvReader": "reader",
    "open_reader": "reader",
    "MemoryReader": "sources",
    "RecordIterator": "sources",
    "RecordSource": "sources",
    "read_all": "sources",
    "Record": "record",
    "records_equal": "record",
    "record_hash": "record",
    "split_line": "tokenizer",
    "join_line": "tokenizer",
    "quote_value": "tokenizer",
    "assemble_record": "assembler",
    "ReaderOptions": "options_io",
    "load_options": "options_io",
    "save_options": "options_io",
    "dump_options": "options_io",
    "records_to_frame": "frames",
    "read_frame": "frames",
    "save_outputs": "frames",
    "print_summary": "frames",
    "CsvError": "errors",
    "CsvFormatError": "errors",
    "ArityError": "errors",
    "SessionStateError": "errors",
}

__all__ = list(_EXPORTS)

__version__ = "0.1.0"


# PEP 562: Lazy attribute access to avoid importing heavy deps (pandas/yaml) at package import time
def __getattr__(name: str) -> Any:  # pragma: no cover
    if name in _EXPORTS:
        module = importlib.import_module(f".core.{_EXPORTS[name]}", __name__)
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

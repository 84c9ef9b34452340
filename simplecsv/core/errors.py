#!/usr/bin/env python3
"""
simplecsv.core.errors
---------------------
Exceptions raised by the reader. I/O failures (missing file, permissions,
corrupt gzip data) are not wrapped and reach the caller as raised by Python.
"""
from __future__ import annotations

from typing import Optional, Sequence


class CsvError(Exception):
    """Base class for all SimpleCsv errors."""


class CsvFormatError(CsvError, ValueError):
    """A quoted value is malformed."""

    def __init__(self, message: str, line: Optional[str] = None, position: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.position = position


class ArityError(CsvError, ValueError):
    """A row does not have as many fields as the header."""

    def __init__(self, header_size: int, row: Sequence[str]):
        self.header_size = header_size
        self.row_size = len(row)
        self.row = list(row)
        joined = "\n".join("" if v is None else str(v) for v in row)
        super().__init__(
            "Header and rows must be of the same length. "
            f"Header size is {header_size}, row size is {self.row_size}. Row: {joined}"
        )


class SessionStateError(CsvError, RuntimeError):
    """The reader session does not allow the requested operation."""

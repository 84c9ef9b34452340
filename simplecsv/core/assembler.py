#!/usr/bin/env python3
"""
simplecsv.core.assembler
------------------------
Pairs a captured header with a tokenized row to build a Record.
"""
from __future__ import annotations

from typing import Optional, Sequence

from .errors import ArityError
from .record import Record


def assemble_record(
    header: Sequence[str],
    row: Sequence[Optional[str]],
    skip_empty_values: bool = False,
) -> Record:
    """Zip header names with row values in header order.

    Raises ArityError when the row and the header differ in length. With
    skip_empty_values, empty (or None) values are left out of the record
    instead of being stored as "".
    """
    if len(header) != len(row):
        raise ArityError(len(header), row)
    record = Record()
    for name, value in zip(header, row):
        if skip_empty_values and not value:
            continue
        record[name] = value
    return record

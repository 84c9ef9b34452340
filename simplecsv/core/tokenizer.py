#!/usr/bin/env python3
"""
simplecsv.core.tokenizer
------------------------
Quote-aware line splitter for delimited text.

One line (without its terminator) is fed character by character through a
four-state automaton. After the last character a synthetic delimiter is fed
so the final field is always emitted. Quoted values may contain the delimiter
and doubled quote characters; they may not span lines.
"""
from __future__ import annotations

import enum
from typing import List, Optional

from .constants import DEFAULT_DELIMITER, DEFAULT_QUOTE_CHAR
from .errors import CsvFormatError


class ParseState(enum.Enum):
    VALUE_START = "value_start"
    SIMPLE_VALUE = "simple_value"
    QUOTED_VALUE = "quoted_value"
    QUOTE_IN_QUOTED_VALUE = "quote_in_quoted_value"


def quoting_enabled(quote_char: Optional[str]) -> bool:
    return bool(quote_char)


def check_dialect(delimiter: str, quote_char: Optional[str]) -> None:
    """Raise ValueError unless delimiter/quote_char are usable single characters."""
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    if quoting_enabled(quote_char):
        if not isinstance(quote_char, str) or len(quote_char) != 1:
            raise ValueError(f"quote_char must be a single character or None, got {quote_char!r}")
        if quote_char == delimiter:
            raise ValueError("delimiter and quote_char must differ")


def step(
    state: ParseState,
    char: str,
    current: List[str],
    values: List[str],
    delimiter: str,
    quote_char: Optional[str],
) -> ParseState:
    """Consume one character and return the next state.

    `current` is the value buffer and `values` the output list; both are
    mutated in place.
    """
    if state is ParseState.VALUE_START:
        current.clear()
        if quote_char and char == quote_char:
            return ParseState.QUOTED_VALUE
        if char == delimiter:
            values.append("")
            return ParseState.VALUE_START
        current.append(char)
        return ParseState.SIMPLE_VALUE

    if state is ParseState.SIMPLE_VALUE:
        if char == delimiter:
            values.append("".join(current))
            return ParseState.VALUE_START
        current.append(char)
        return ParseState.SIMPLE_VALUE

    if state is ParseState.QUOTED_VALUE:
        if char == quote_char:
            return ParseState.QUOTE_IN_QUOTED_VALUE
        current.append(char)
        return ParseState.QUOTED_VALUE

    if state is ParseState.QUOTE_IN_QUOTED_VALUE:
        if char == quote_char:
            # doubled quote -> one literal quote
            current.append(char)
            return ParseState.QUOTED_VALUE
        if char == delimiter:
            values.append("".join(current))
            return ParseState.VALUE_START
        raise CsvFormatError("Quoted value contains an unescaped quote character")

    raise AssertionError(f"unknown parse state {state!r}")


def split_line(
    line: str,
    delimiter: str = DEFAULT_DELIMITER,
    quote_char: Optional[str] = DEFAULT_QUOTE_CHAR,
) -> List[str]:
    """Split one line into unquoted, unescaped field values.

    Examples:
        'a,"b, c",d'        -> ['a', 'b, c', 'd']
        '"a ""b"" c",x'     -> ['a "b" c', 'x']
        ''                  -> ['']
    """
    check_dialect(delimiter, quote_char)
    values: List[str] = []
    current: List[str] = []
    state = ParseState.VALUE_START
    for pos, char in enumerate(line):
        try:
            state = step(state, char, current, values, delimiter, quote_char)
        except CsvFormatError as ex:
            raise CsvFormatError(str(ex), line=line, position=pos) from None
    state = step(state, delimiter, current, values, delimiter, quote_char)
    if state is not ParseState.VALUE_START:
        # the synthetic delimiter landed inside an open quoted value
        raise CsvFormatError("Quoted value is not terminated", line=line, position=len(line))
    return values


def quote_value(
    value: str,
    delimiter: str = DEFAULT_DELIMITER,
    quote_char: Optional[str] = DEFAULT_QUOTE_CHAR,
) -> str:
    """Return `value` wrapped in quotes with embedded quotes doubled."""
    check_dialect(delimiter, quote_char)
    if not quoting_enabled(quote_char):
        if delimiter in value:
            raise ValueError("value contains the delimiter and quoting is disabled")
        return value
    return quote_char + value.replace(quote_char, quote_char * 2) + quote_char


def join_line(
    values: List[str],
    delimiter: str = DEFAULT_DELIMITER,
    quote_char: Optional[str] = DEFAULT_QUOTE_CHAR,
) -> str:
    """Inverse of split_line: quote only the values that need it."""
    out: List[str] = []
    for v in values:
        v = "" if v is None else str(v)
        needs_quotes = delimiter in v or (quoting_enabled(quote_char) and quote_char in v)
        out.append(quote_value(v, delimiter, quote_char) if needs_quotes else v)
    return delimiter.join(out)

#!/usr/bin/env python3
"""
simplecsv.core.reader
---------------------
Delimited file reader. Reads plain or gzipped files, or an already open text
stream, whose first retained line is a header of column names.

Session lifecycle:
    created -> opened (header pending) -> reading -> exhausted

The underlying resource is acquired once; a second open() is an error.
Once the source runs dry every further read_next() returns None.
"""
from __future__ import annotations

import contextlib
import gzip
import io
import logging
import os
from pathlib import Path
from typing import IO, Iterator, List, Optional, Tuple, Union

from .assembler import assemble_record
from .constants import DEFAULT_DELIMITER, DEFAULT_ENCODING, DEFAULT_QUOTE_CHAR
from .errors import SessionStateError
from .options_io import ReaderOptions
from .record import Record
from .sources import RecordIterator, read_all
from .tokenizer import check_dialect, split_line

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class CsvReader:
    """Reads one Record per data line.

    Exactly one of `path` or `stream` must be given. `gzipped` is only valid
    with a path. A caller-supplied stream is owned by the reader from then on
    and is closed by close().
    """

    def __init__(
        self,
        path: Optional[PathLike] = None,
        *,
        stream: Optional[IO[str]] = None,
        delimiter: str = DEFAULT_DELIMITER,
        quote_char: Optional[str] = DEFAULT_QUOTE_CHAR,
        gzipped: bool = False,
        lines_to_skip: int = 0,
        skip_empty_values: bool = False,
        encoding: str = DEFAULT_ENCODING,
    ):
        if (path is None) == (stream is None):
            raise ValueError("Provide exactly one of path or stream")
        if gzipped and stream is not None:
            raise ValueError("gzipped is only supported when reading from a path")
        if int(lines_to_skip) < 0:
            raise ValueError(f"lines_to_skip must be >= 0, got {lines_to_skip!r}")
        check_dialect(delimiter, quote_char)

        self._path = Path(path) if path is not None else None
        self._delimiter = delimiter
        self._quote_char = quote_char or None
        self._gzipped = bool(gzipped)
        self._lines_to_skip = int(lines_to_skip)
        self._skip_empty_values = bool(skip_empty_values)
        self._encoding = encoding

        self._stack = contextlib.ExitStack()
        self._lines: Optional[IO[str]] = stream
        if stream is not None:
            self._stack.callback(stream.close)

        self._opened = False
        self._closed = False
        self._exhausted = False
        self._header_failed = False
        self._header: Optional[Tuple[str, ...]] = None
        self._line_number = 0

    @classmethod
    def from_options(cls, source: Union[PathLike, IO[str]], options: ReaderOptions) -> "CsvReader":
        """Build a reader for a path or open text stream from a ReaderOptions bundle."""
        kwargs = dict(
            delimiter=options.delimiter,
            quote_char=options.quote_char,
            lines_to_skip=options.lines_to_skip,
            skip_empty_values=options.skip_empty_values,
            encoding=options.encoding,
        )
        if isinstance(source, (str, os.PathLike)):
            return cls(source, gzipped=options.gzipped, **kwargs)
        return cls(stream=source, **kwargs)

    # -----------------------------
    # Read-only configuration/state
    # -----------------------------

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def quote_char(self) -> Optional[str]:
        return self._quote_char

    @property
    def gzipped(self) -> bool:
        return self._gzipped

    @property
    def lines_to_skip(self) -> int:
        return self._lines_to_skip

    @property
    def skip_empty_values(self) -> bool:
        return self._skip_empty_values

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def header(self) -> Optional[Tuple[str, ...]]:
        return self._header

    @property
    def opened(self) -> bool:
        return self._opened

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def line_number(self) -> int:
        """Number of physical lines consumed so far (skipped and header lines included)."""
        return self._line_number

    # -----------------------------
    # Session
    # -----------------------------

    def open(self) -> None:
        """Acquire the underlying resource. Allowed once per reader."""
        if self._opened:
            raise SessionStateError("A reader is already opened")
        if self._closed:
            raise SessionStateError("Reader is closed")
        self._opened = True
        if self._lines is not None:
            return
        try:
            raw: IO[bytes] = self._stack.enter_context(open(self._path, "rb"))
            if self._gzipped:
                raw = self._stack.enter_context(gzip.GzipFile(fileobj=raw, mode="rb"))
            self._lines = self._stack.enter_context(io.TextIOWrapper(raw, encoding=self._encoding))
        except BaseException:
            self.close()
            raise
        logger.debug("Opened %s (gzipped=%s)", self._path, self._gzipped)

    def close(self) -> None:
        """Release everything this reader holds. Safe to call repeatedly."""
        if self._closed:
            return
        self._closed = True
        self._stack.close()
        self._lines = None
        logger.debug("Closed reader for %s", self._path or "stream")

    def __enter__(self) -> "CsvReader":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -----------------------------
    # Reading
    # -----------------------------

    def _next_line(self) -> Optional[str]:
        line = self._lines.readline()  # type: ignore[union-attr]
        if not line:
            return None
        self._line_number += 1
        return line.rstrip("\r\n")

    def _read_header(self) -> bool:
        for _ in range(self._lines_to_skip):
            if self._next_line() is None:
                return False
        if self._lines_to_skip:
            logger.debug("Skipped %d leading line(s)", self._lines_to_skip)
        line = self._next_line()
        if line is None:
            return False
        # header is split raw, without quote handling
        self._header = tuple(line.split(self._delimiter))
        logger.debug("Captured header with %d field(s)", len(self._header))
        return True

    def _finish(self) -> None:
        self._exhausted = True
        logger.debug("End of data after %d line(s)", self._line_number)

    def read_next(self) -> Optional[Record]:
        """Return the next record, or None when there is no more data.

        Raises CsvFormatError for malformed quoting and ArityError when the
        row and header lengths differ; the offending line is consumed either
        way, so a caller may catch the error and keep reading. An I/O or decode
        error while locating the header is not recoverable: it propagates once
        and later calls raise SessionStateError.
        """
        if self._closed:
            raise SessionStateError("Reader is closed")
        if self._exhausted:
            return None
        if not self._opened:
            self.open()
        if self._header_failed:
            raise SessionStateError("Reader failed while reading the header")
        if self._header is None:
            try:
                found = self._read_header()
            except BaseException:
                # leading lines are partly consumed, a retry would pick the wrong header
                self._header_failed = True
                raise
            if not found:
                self._finish()
                return None
        line = self._next_line()
        if line is None:
            self._finish()
            return None
        values = split_line(line, self._delimiter, self._quote_char)
        return assemble_record(self._header, values, self._skip_empty_values)  # type: ignore[arg-type]

    def read_all(self) -> List[Record]:
        """Read every remaining record into a list."""
        return read_all(self)

    def __iter__(self) -> RecordIterator:
        return RecordIterator(self)

    def __repr__(self) -> str:
        src = str(self._path) if self._path is not None else "<stream>"
        return f"CsvReader({src!r}, delimiter={self._delimiter!r}, gzipped={self._gzipped})"


@contextlib.contextmanager
def open_reader(path: Optional[PathLike] = None, **kwargs) -> Iterator[CsvReader]:
    """Open a CsvReader for the duration of a with-block.

    Example:
        with open_reader("data.csv.gz", gzipped=True) as reader:
            for record in reader:
                ...
    """
    reader = CsvReader(path, **kwargs)
    try:
        reader.open()
        yield reader
    finally:
        reader.close()

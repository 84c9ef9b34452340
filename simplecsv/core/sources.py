#!/usr/bin/env python3
"""
simplecsv.core.sources
----------------------
The record-source contract shared by every reader, the lazy iteration
adapter built on top of it, and an in-memory source.

A source hands out one record per read_next() call and returns None once it
has nothing left. It is opened at most once and closed on scope exit.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Protocol, runtime_checkable

from .errors import SessionStateError
from .record import Record


@runtime_checkable
class RecordSource(Protocol):
    """Anything that can produce "next record or end-of-data" inside an open/close scope."""

    def open(self) -> None: ...

    def read_next(self) -> Optional[Record]: ...

    def close(self) -> None: ...


def read_all(source: RecordSource) -> List[Record]:
    """Collect every remaining record of `source` into a list."""
    out: List[Record] = []
    record = source.read_next()
    while record is not None:
        out.append(record)
        record = source.read_next()
    return out


class RecordIterator(Iterator[Record]):
    """Forward-only, single-pass view over a RecordSource.

    `current` is None before the first advance and once the source is
    exhausted. Closing the iterator closes the source it wraps.
    """

    def __init__(self, source: RecordSource):
        self._source = source
        self.current: Optional[Record] = None

    def advance(self) -> bool:
        self.current = self._source.read_next()
        return self.current is not None

    def reset(self) -> None:
        raise SessionStateError("Reset is not supported: the underlying source cannot be rewound")

    def close(self) -> None:
        self._source.close()

    def __iter__(self) -> "RecordIterator":
        return self

    def __next__(self) -> Record:
        if not self.advance():
            raise StopIteration
        return self.current  # type: ignore[return-value]

    def __enter__(self) -> "RecordIterator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class MemoryReader:
    """RecordSource over records already held in memory.

    Serves the records in order, one per read, with the same session rules as
    the file reader: open once, None at the end, idempotent close.
    """

    def __init__(self, records: Optional[Iterable[Record]] = None):
        self.records: List[Record] = list(records or [])
        self._it: Optional[Iterator[Record]] = None
        self._opened = False
        self._closed = False

    @property
    def opened(self) -> bool:
        return self._opened

    def open(self) -> None:
        if self._opened:
            raise SessionStateError("A reader is already opened")
        self._opened = True
        self._it = iter(self.records)

    def read_next(self) -> Optional[Record]:
        if self._closed:
            raise SessionStateError("Reader is closed")
        if not self._opened:
            self.open()
        return next(self._it, None)  # type: ignore[arg-type]

    def read_all(self) -> List[Record]:
        return read_all(self)

    def close(self) -> None:
        self._closed = True
        self._it = None

    def __iter__(self) -> RecordIterator:
        return RecordIterator(self)

    def __enter__(self) -> "MemoryReader":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

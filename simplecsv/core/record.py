#!/usr/bin/env python3
"""
simplecsv.core.record
---------------------
Record: an ordered mapping of field name to value.

Equality is structural (same keys, equal values, None only equals None).
Records are mutable, so they are not hashable; use record_hash() or
Record.freeze() when a content-derived key is needed.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Type, TypeVar

T = TypeVar("T")


class Record(dict):
    """Ordered field-name -> value mapping produced by the readers."""

    __hash__ = None  # type: ignore[assignment]

    def merge(self, other: Mapping[str, Any], overwrite: bool = True) -> "Record":
        """Copy fields from `other`; existing fields are kept unless overwrite is set."""
        for key, value in other.items():
            if overwrite or key not in self:
                self[key] = value
        return self

    def with_field(self, name: str, value: Any) -> "Record":
        if value is not None:
            self[name] = value
        return self

    def without_field(self, name: str) -> "Record":
        self.pop(name, None)
        return self

    def add_if_not_empty(self, name: str, value: Optional[str]) -> None:
        if value:
            self[name] = value

    def get_str(self, name: str) -> Optional[str]:
        """Return the stripped string value, or None when missing, not text, or blank."""
        value = self.get(name)
        if not isinstance(value, str) or not value.strip():
            return None
        return value.strip()

    def get_as(self, name: str, type_: Type[T], default: Optional[T] = None) -> Optional[T]:
        value = self.get(name)
        return value if isinstance(value, type_) else default

    def clone(self) -> "Record":
        return Record(self)

    def freeze(self) -> frozenset:
        """Hashable snapshot of the fields, usable as a dict key or set member."""
        return frozenset(self.items())

    def __repr__(self) -> str:
        return f"Record({dict.__repr__(self)})"


def records_equal(a: Optional[Mapping[str, Any]], b: Optional[Mapping[str, Any]]) -> bool:
    """Structural equality of two records (or plain mappings), order-insensitive.

    Values compare with Python `==`, so numerically equal values of different
    types match: `Record(x=0)` equals `Record(x=False)` and `1` equals `1.0`.
    Records read from text only hold strings, where this makes no difference.
    """
    if a is b:
        return True
    if a is None or b is None:
        return False
    if len(a) != len(b):
        return False
    for key, value in a.items():
        if key not in b:
            return False
        other = b[key]
        if value is None:
            if other is not None:
                return False
        elif other is None or value != other:
            return False
    return True


def record_hash(record: Mapping[str, Any]) -> int:
    """XOR of key and value hashes; independent of field order. None hashes to 0."""
    h = 0
    for key, value in record.items():
        h ^= hash(key)
        h ^= 0 if value is None else hash(value)
    return h

#!/usr/bin/env python3
"""
simplecsv.core.options_io
-------------------------
Reader options and their YAML load/save helpers.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import DEFAULT_DELIMITER, DEFAULT_ENCODING, DEFAULT_QUOTE_CHAR
from .tokenizer import check_dialect


@dataclass
class ReaderOptions:
    delimiter: str = DEFAULT_DELIMITER
    quote_char: Optional[str] = DEFAULT_QUOTE_CHAR
    gzipped: bool = False
    lines_to_skip: int = 0
    skip_empty_values: bool = False
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        if self.quote_char == "":
            self.quote_char = None
        check_dialect(self.delimiter, self.quote_char)
        if self.lines_to_skip < 0:
            raise ValueError(f"lines_to_skip must be >= 0, got {self.lines_to_skip!r}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def options_from_dict(data: Dict[str, Any]) -> ReaderOptions:
    """Build ReaderOptions from a loosely typed dict; unknown keys are ignored."""
    data = data or {}
    if not isinstance(data, dict):
        raise TypeError("Reader options must be a mapping")
    opts: Dict[str, Any] = {}
    if "delimiter" in data:
        opts["delimiter"] = str(data["delimiter"])
    if "quote_char" in data:
        q = data["quote_char"]
        opts["quote_char"] = None if q in (None, "", False) else str(q)
    if "gzipped" in data:
        opts["gzipped"] = _as_bool(data["gzipped"])
    if "lines_to_skip" in data:
        opts["lines_to_skip"] = int(data["lines_to_skip"] or 0)
    if "skip_empty_values" in data:
        opts["skip_empty_values"] = _as_bool(data["skip_empty_values"])
    if data.get("encoding"):
        opts["encoding"] = str(data["encoding"])
    return ReaderOptions(**opts)


def load_options(src: Any) -> ReaderOptions:
    """Load options from a Path, str path, YAML bytes/text, a dict, or ReaderOptions.

    A str is treated as a path when such a file exists, otherwise as YAML text.
    JSON documents load as well since JSON is valid YAML.
    """
    if isinstance(src, ReaderOptions):
        return src
    if isinstance(src, dict):
        return options_from_dict(src)
    if isinstance(src, Path):
        text = src.read_text(encoding="utf-8")
    elif isinstance(src, (bytes, bytearray)):
        text = bytes(src).decode("utf-8")
    elif isinstance(src, str):
        p = Path(src)
        text = p.read_text(encoding="utf-8") if "\n" not in src and p.is_file() else src
    else:
        raise TypeError("Unsupported options source type")
    if not text.strip():
        return ReaderOptions()
    return options_from_dict(yaml.safe_load(text) or {})


def dump_options(options: ReaderOptions) -> str:
    """Return options as a YAML document."""
    return yaml.safe_dump(options.to_dict(), sort_keys=False, allow_unicode=True)


def save_options(options: ReaderOptions, path: Path) -> None:
    Path(path).write_text(dump_options(options), encoding="utf-8")

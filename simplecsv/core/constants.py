#!/usr/bin/env python3
"""
simplecsv.core.constants
------------------------
Centralized shared constants used across the SimpleCsv reader and explorer.
"""
from __future__ import annotations

from typing import Dict, List, Optional

DEFAULT_DELIMITER: str = ","
DEFAULT_QUOTE_CHAR: str = '"'

# Passing this as quote_char turns quoting off; every field then parses as a simple value
NO_QUOTE: Optional[str] = None

# utf-8-sig reads plain UTF-8 as well and drops a leading byte order mark
DEFAULT_ENCODING: str = "utf-8-sig"

# Delimiters offered in the UI, label -> character
DELIMITER_CHOICES: Dict[str, str] = {
    "Comma (,)": ",",
    "Pipe (|)": "|",
    "Semicolon (;)": ";",
    "Tab": "\t",
}

# File suffixes accepted by the UI uploader
UPLOAD_TYPES: List[str] = ["csv", "txt", "tsv", "psv", "gz"]

GZIP_SUFFIX: str = ".gz"

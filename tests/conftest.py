"""Shared fixtures for the simplecsv test suite.

Puts the repo root on sys.path so `import simplecsv` works without an
install, and writes the sample files (plain and gzipped, comma and pipe
delimited) the reader tests run against.
"""

import gzip
import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


PIPE_CONTENT = "A|B|C\n10|20|30\nXXX|YYY|ZZZ"
COMMA_CONTENT = PIPE_CONTENT.replace("|", ",")

EXPECTED_ROWS = [
    {"A": "10", "B": "20", "C": "30"},
    {"A": "XXX", "B": "YYY", "C": "ZZZ"},
]


def _write(path: Path, content: str, gzipped: bool) -> Path:
    data = content.encode("utf-8")
    if gzipped:
        path.write_bytes(gzip.compress(data))
    else:
        path.write_bytes(data)
    return path


@pytest.fixture
def sample_files(tmp_path):
    """Map of (delimiter, gzipped) -> path of a three-line sample file."""
    return {
        ("|", False): _write(tmp_path / "pipe.txt", PIPE_CONTENT, False),
        ("|", True): _write(tmp_path / "pipe.txt.gz", PIPE_CONTENT, True),
        (",", False): _write(tmp_path / "comma.csv", COMMA_CONTENT, False),
        (",", True): _write(tmp_path / "comma.csv.gz", COMMA_CONTENT, True),
    }


@pytest.fixture
def write_text(tmp_path):
    """Write text to a file under tmp_path and return its path."""
    def _factory(name: str, content: str, gzipped: bool = False) -> Path:
        return _write(tmp_path / name, content, gzipped)
    return _factory

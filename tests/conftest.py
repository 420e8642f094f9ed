"""
Pytest configuration for layout2pdf
"""

import logging
import re
import sys
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid handler leaks between tests."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for tests."""
    return Path(tmp_path)


@pytest.fixture
def sample_layout():
    """Two-page layout exercising styles, spacing, comments and footers."""
    return "\n".join([
        "// Report layout",
        "[page1] 24, blue, center",
        "Quarterly Report",
        "[page1] 12",
        "",
        "First paragraph line.   // trailing comment",
        "[page1] 10, gray, right, bottom",
        "Confidential",
        "Page 1",
        "[/page1]",
        "",
        "[page2]",
        "Second page (draft) \\ notes",
        "[/page2]",
        "",
    ])


@pytest.fixture
def layout_file(temp_dir, sample_layout):
    """Write the sample layout to <temp>/report.txt and return the base path."""
    base = temp_dir / "report"
    Path(f"{base}.txt").write_text(sample_layout, encoding="utf-8")
    return base


def _find_object_offsets(data: bytes) -> dict:
    """Locate every ``N 0 obj`` header that starts a line in a PDF buffer."""
    return {
        int(match.group(1)): match.start()
        for match in re.finditer(rb"(?<=\n)(\d+) 0 obj\n", data)
    }


def _read_xref_offsets(data: bytes) -> list:
    """Offsets listed in the xref table, in object order (excluding entry 0)."""
    xref_start = int(data.rsplit(b"startxref\n", 1)[1].split(b"\n", 1)[0])
    section = data[xref_start:].split(b"trailer\n", 1)[0]
    entries = re.findall(rb"(\d{10}) (\d{5}) ([fn]) \n", section)
    return [int(offset) for offset, _, kind in entries if kind == b"n"]


@pytest.fixture
def object_offsets():
    """Function scanning a PDF buffer for object headers."""
    return _find_object_offsets


@pytest.fixture
def xref_offsets():
    """Function reading the offsets recorded in a PDF xref table."""
    return _read_xref_offsets

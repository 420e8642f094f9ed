"""
Engine module - page geometry, text placement and PDF compilation.
"""

from .geometry import DEFAULT_GEOMETRY, PageGeometry
from .text_alignment import TextAlignmentEngine
from .text_metrics import approximate_text_width
from .layout_engine import (
    PositionedLine,
    layout_bottom,
    layout_page,
    layout_top,
    partition_lines,
)

__all__ = [
    "DEFAULT_GEOMETRY",
    "PageGeometry",
    "PositionedLine",
    "TextAlignmentEngine",
    "approximate_text_width",
    "layout_bottom",
    "layout_page",
    "layout_top",
    "partition_lines",
]

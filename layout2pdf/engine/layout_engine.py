"""
Layout engine - positions the lines of a page on the canvas.

A page is split once into top-flowing and bottom-anchored lines. Top lines
stack downward from the top baseline in source order; bottom lines stack
upward from the bottom baseline in reverse source order, so the last
bottom-anchored line of the source sits closest to the page edge.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..models.document import Line, Page
from ..models.style import StyleState
from .geometry import DEFAULT_GEOMETRY, PageGeometry
from .text_alignment import TextAlignmentEngine
from .text_metrics import approximate_text_width


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PositionedLine:
    """Line with its text origin on the page."""

    line: Line
    x: float
    y: float

    @property
    def text(self) -> str:
        return self.line.text

    @property
    def style(self) -> StyleState:
        return self.line.style


def partition_lines(lines: Sequence[Line]) -> Tuple[List[Line], List[Line]]:
    """Split lines into (top, bottom) keeping source order within each."""
    top: List[Line] = []
    bottom: List[Line] = []
    for line in lines:
        (bottom if line.bottom_anchored else top).append(line)
    return top, bottom


def compute_x(line: Line, geometry: PageGeometry = DEFAULT_GEOMETRY) -> float:
    text_width = approximate_text_width(line.text, line.font_size, geometry.char_width_factor)
    return TextAlignmentEngine.calculate_x(geometry, text_width, line.style.alignment)


def layout_top(
    lines: Sequence[Line],
    start_y: float,
    geometry: PageGeometry = DEFAULT_GEOMETRY,
) -> Tuple[List[PositionedLine], float]:
    """Stack lines downward from ``start_y``.

    Returns:
        Tuple of (positioned lines, y for the next line)
    """
    positioned: List[PositionedLine] = []
    y = start_y
    for line in lines:
        positioned.append(PositionedLine(line, compute_x(line, geometry), y))
        y -= geometry.line_advance(line.font_size)
    return positioned, y


def layout_bottom(
    lines: Sequence[Line],
    start_y: float,
    geometry: PageGeometry = DEFAULT_GEOMETRY,
) -> Tuple[List[PositionedLine], float]:
    """Stack lines upward from ``start_y``, last source line first.

    Returns:
        Tuple of (positioned lines in placement order, y for the next line)
    """
    positioned: List[PositionedLine] = []
    y = start_y
    for line in reversed(lines):
        positioned.append(PositionedLine(line, compute_x(line, geometry), y))
        y += geometry.line_advance(line.font_size)
    return positioned, y


def layout_page(page: Page, geometry: PageGeometry = DEFAULT_GEOMETRY) -> List[PositionedLine]:
    """Position every line of a page.

    Returns:
        Top lines in placement order followed by bottom lines in placement order
    """
    top, bottom = partition_lines(page.lines)
    top_positioned, next_top = layout_top(top, geometry.top_baseline, geometry)
    bottom_positioned, next_bottom = layout_bottom(bottom, geometry.bottom_baseline, geometry)
    if top and bottom and next_bottom > next_top:
        logger.debug(
            f"Top and bottom-anchored lines overlap (top cursor {next_top}, bottom cursor {next_bottom})"
        )
    return top_positioned + bottom_positioned

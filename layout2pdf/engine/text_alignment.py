"""
TextAlignmentEngine - calculating X position for a line on the page.

Supports:
- left: left margin (default)
- center: centered on the page, never left of the left margin
- right: flush with the right margin, never left of the left margin
"""

from __future__ import annotations

from ..models.style import Alignment
from .geometry import PageGeometry


class TextAlignmentEngine:
    """Computes the x coordinate of a line for its alignment."""

    @staticmethod
    def calculate_x(geometry: PageGeometry, text_width: float, alignment: Alignment = Alignment.LEFT) -> float:
        """
        Calculates X position for text based on alignment.

        Args:
            geometry: Page geometry
            text_width: Text width in points
            alignment: Line alignment

        Returns:
            X position of the text origin
        """
        if alignment is Alignment.CENTER:
            x = (geometry.width - text_width) / 2
            return max(geometry.left_margin, x)

        if alignment is Alignment.RIGHT:
            x = geometry.right_edge - text_width
            return max(geometry.left_margin, x)

        return geometry.left_margin

"""Page geometry for the fixed letter-size canvas."""

from __future__ import annotations

from dataclasses import dataclass


PAGE_WIDTH = 612.0  # 8.5" at 72 dpi
PAGE_HEIGHT = 792.0  # 11"


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """Canvas size, margins and baselines in PDF points.

    The y axis grows upward from the bottom edge of the page.
    """

    width: float = PAGE_WIDTH
    height: float = PAGE_HEIGHT
    left_margin: float = 72.0
    right_margin: float = 72.0
    top_baseline: float = 750.0
    bottom_baseline: float = 72.0
    line_gap: float = 4.0
    char_width_factor: float = 0.5

    @property
    def right_edge(self) -> float:
        return self.width - self.right_margin

    @property
    def media_box(self) -> tuple[float, float, float, float]:
        return (0.0, 0.0, self.width, self.height)

    def line_advance(self, font_size: float) -> float:
        """Vertical distance between a line and the next one."""
        return font_size + self.line_gap


DEFAULT_GEOMETRY = PageGeometry()

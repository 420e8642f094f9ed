"""Style state applied to parsed layout lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


DEFAULT_FONT_SIZE = 12


class Alignment(Enum):
    """Horizontal alignment of a line on the page."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Color(NamedTuple):
    """RGB color with channels in the 0-1 range."""

    r: float
    g: float
    b: float


BLACK = Color(0.0, 0.0, 0.0)


@dataclass(frozen=True, slots=True)
class StyleState:
    """Styling context in effect while parsing.

    Every style directive replaces the whole state, so instances are
    immutable and each recorded line keeps its own snapshot.
    """

    font_size: int = DEFAULT_FONT_SIZE
    color: Color = BLACK
    alignment: Alignment = Alignment.LEFT
    bottom_anchored: bool = False

    @classmethod
    def default(cls) -> "StyleState":
        return cls()

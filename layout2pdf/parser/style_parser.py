"""Parsing of style directive parameters.

Parameters are positional and comma-separated::

    [page1] size, color, align, anchor

Every missing or unrecognized position falls back to its default rather than
to the previously active style.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from ..models.style import BLACK, DEFAULT_FONT_SIZE, Alignment, Color, StyleState
from .tokenizer import WHITESPACE


NAMED_COLORS: Dict[str, Color] = {
    "black": BLACK,
    "white": Color(1.0, 1.0, 1.0),
    "red": Color(1.0, 0.0, 0.0),
    "green": Color(0.0, 1.0, 0.0),
    "blue": Color(0.0, 0.0, 1.0),
    "gray": Color(0.5, 0.5, 0.5),
    "grey": Color(0.5, 0.5, 0.5),
}

ALIGNMENTS: Dict[str, Alignment] = {
    "center": Alignment.CENTER,
    "right": Alignment.RIGHT,
}

BOTTOM_ANCHOR = "bottom"

_LEADING_INT = re.compile(r"[+-]?[0-9]+")

# Largest value a C int holds; anything above is treated as unparseable.
MAX_FONT_SIZE = 2**31 - 1


def split_params(params: str) -> List[str]:
    """Split a parameter list on commas and trim each part."""
    if not params:
        return []
    return [part.strip(WHITESPACE) for part in params.split(",")]


def parse_font_size(value: Optional[str]) -> int:
    """Parse a font size the way C ``atoi`` reads leading digits.

    Only ASCII digits count. Non-positive, unparseable or out-of-range
    values give the default size.
    """
    if not value:
        return DEFAULT_FONT_SIZE
    match = _LEADING_INT.match(value.strip(WHITESPACE))
    if not match:
        return DEFAULT_FONT_SIZE
    digits = match.group()
    if len(digits.lstrip("+-0")) > len(str(MAX_FONT_SIZE)):
        return DEFAULT_FONT_SIZE
    size = int(digits)
    if size <= 0 or size > MAX_FONT_SIZE:
        return DEFAULT_FONT_SIZE
    return size


def color_from_name(name: Optional[str]) -> Color:
    """Map a color name (case-insensitive) to RGB, defaulting to black."""
    if not name:
        return BLACK
    return NAMED_COLORS.get(name.strip(WHITESPACE).lower(), BLACK)


def alignment_from_name(name: Optional[str]) -> Alignment:
    """Map an alignment name (case-insensitive), defaulting to left."""
    if not name:
        return Alignment.LEFT
    return ALIGNMENTS.get(name.strip(WHITESPACE).lower(), Alignment.LEFT)


def is_bottom_anchor(keyword: Optional[str]) -> bool:
    return bool(keyword) and keyword.strip(WHITESPACE).lower() == BOTTOM_ANCHOR


def parse_style_params(params: str) -> StyleState:
    """Build a complete StyleState from a directive's parameter list.

    Args:
        params: Text after the closing bracket, already trimmed

    Returns:
        New StyleState; an empty list gives the hard defaults
    """
    parts = split_params(params)
    if not parts:
        return StyleState.default()

    def part(index: int) -> Optional[str]:
        return parts[index] if index < len(parts) else None

    return StyleState(
        font_size=parse_font_size(part(0)),
        color=color_from_name(part(1)),
        alignment=alignment_from_name(part(2)),
        bottom_anchored=is_bottom_anchor(part(3)),
    )

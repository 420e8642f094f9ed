"""
Text width approximation.

No glyph metrics are available for the output font, so every character is
treated as half the font size wide.
"""

from __future__ import annotations


def approximate_text_width(text: str, font_size: float, char_width_factor: float = 0.5) -> float:
    """Fixed-pitch width estimate of ``text`` in points."""
    return font_size * char_width_factor * len(text)

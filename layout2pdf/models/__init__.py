"""
Models module for layout documents.

Immutable value types produced by the layout parser and consumed by the
layout engine and PDF compiler.
"""

from .style import BLACK, DEFAULT_FONT_SIZE, Alignment, Color, StyleState
from .document import Document, Line, Page

__all__ = [
    "Alignment",
    "BLACK",
    "Color",
    "DEFAULT_FONT_SIZE",
    "Document",
    "Line",
    "Page",
    "StyleState",
]

"""
Parser module for the layout text format.

Turns layout source into a Document of pages and styled lines.
"""

from .tokenizer import LayoutToken, TokenKind, classify_line, strip_comment
from .style_parser import (
    NAMED_COLORS,
    alignment_from_name,
    color_from_name,
    parse_font_size,
    parse_style_params,
)
from .layout_parser import (
    ParserContext,
    feed_line,
    feed_token,
    finish,
    parse_file,
    parse_lines,
    parse_text,
)

__all__ = [
    "LayoutToken",
    "NAMED_COLORS",
    "ParserContext",
    "TokenKind",
    "alignment_from_name",
    "classify_line",
    "color_from_name",
    "feed_line",
    "feed_token",
    "finish",
    "parse_file",
    "parse_font_size",
    "parse_lines",
    "parse_style_params",
    "parse_text",
    "strip_comment",
]

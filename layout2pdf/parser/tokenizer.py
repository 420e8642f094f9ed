"""
Line tokenizer for the layout format.

Each raw input line is classified on its own, without any parser state:

- ``BLANK``      empty after trimming (produces a spacing line inside a page)
- ``COMMENT``    empty only because a ``//`` comment was stripped (ignored)
- ``OPEN``       ``[tag] params`` opens a page and/or changes the style
- ``CLOSE``      ``[/tag]`` closes the current page
- ``MALFORMED``  ``[tag`` without a closing bracket (skipped)
- ``TEXT``       anything else
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


COMMENT_MARKER = "//"
DIRECTIVE_OPEN = "["
DIRECTIVE_CLOSE = "]"
CLOSING_SLASH = "/"

# Characters C isspace() accepts; other Unicode spaces are kept as text.
WHITESPACE = " \t\n\v\f\r"


class TokenKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    OPEN = "open"
    CLOSE = "close"
    MALFORMED = "malformed"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class LayoutToken:
    """Classified input line.

    ``text`` holds the tag of an ``OPEN`` directive and the trimmed line
    for every other non-blank kind. ``params`` is the trimmed text after
    ``]`` of an ``OPEN`` directive (empty string when there are none).
    """

    kind: TokenKind
    text: str = ""
    params: str = ""


def strip_comment(raw: str) -> tuple[str, bool]:
    """Remove a trailing ``//`` comment.

    Returns:
        Tuple of (content before the marker, whether a marker was found)
    """
    position = raw.find(COMMENT_MARKER)
    if position == -1:
        return raw, False
    return raw[:position], True


def classify_line(raw: str) -> LayoutToken:
    """Classify one raw input line.

    Args:
        raw: Input line, with or without its line terminator

    Returns:
        LayoutToken describing the line
    """
    content, had_comment = strip_comment(raw)
    line = content.strip(WHITESPACE)

    if not line:
        return LayoutToken(TokenKind.COMMENT if had_comment else TokenKind.BLANK)

    if not line.startswith(DIRECTIVE_OPEN):
        return LayoutToken(TokenKind.TEXT, text=line)

    if line[1:2] == CLOSING_SLASH:
        return LayoutToken(TokenKind.CLOSE, text=line)

    close_position = line.find(DIRECTIVE_CLOSE)
    if close_position == -1:
        return LayoutToken(TokenKind.MALFORMED, text=line)

    return LayoutToken(
        TokenKind.OPEN,
        text=line[1:close_position],
        params=line[close_position + 1:].strip(WHITESPACE),
    )

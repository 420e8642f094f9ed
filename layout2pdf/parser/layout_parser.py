"""
Layout parser - turns layout text into a Document.

Parsing is a single forward pass. All state lives in an immutable
``ParserContext`` that is threaded through ``feed_line``; each call takes
the previous context and one input line and returns the next context, so
every line can be tested in isolation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional, Tuple

from ..exceptions import InputAccessError
from ..models.document import Document, Line, Page
from ..models.style import StyleState
from .style_parser import parse_style_params
from .tokenizer import LayoutToken, TokenKind, classify_line


logger = logging.getLogger(__name__)


class _Chain(NamedTuple):
    """Persistent singly linked list, newest item first."""

    item: Any
    previous: Optional["_Chain"]


def _unwind(chain: Optional[_Chain]) -> tuple:
    items = []
    while chain is not None:
        items.append(chain.item)
        chain = chain.previous
    items.reverse()
    return tuple(items)


@dataclass(frozen=True, slots=True)
class ParserContext:
    """Parser state between two input lines.

    Lines of the open page and finished pages are kept as persistent chains
    so that recording one more item never copies what came before.
    """

    style: StyleState = StyleState()
    in_page: bool = False
    pending_lines: Optional[_Chain] = field(default=None, repr=False)
    closed_pages: Optional[_Chain] = field(default=None, repr=False)
    line_number: int = 0

    @property
    def lines(self) -> Tuple[Line, ...]:
        """Lines recorded so far on the open page."""
        return _unwind(self.pending_lines)

    @property
    def pages(self) -> Tuple[Page, ...]:
        """Pages closed so far."""
        return _unwind(self.closed_pages)

    def record(self, text: str) -> "ParserContext":
        """Append a line carrying the current style to the open page."""
        return replace(self, pending_lines=_Chain(Line(text, self.style), self.pending_lines))

    def close_page(self) -> "ParserContext":
        """Finalize the open page; empty pages are dropped."""
        closed = self.closed_pages
        if self.pending_lines is not None:
            closed = _Chain(Page(self.lines), closed)
        else:
            logger.debug(f"Dropping empty page at line {self.line_number}")
        return replace(self, in_page=False, pending_lines=None, closed_pages=closed)


def _on_blank(context: ParserContext, token: LayoutToken) -> ParserContext:
    if context.in_page:
        return context.record("")
    return context


def _on_ignored(context: ParserContext, token: LayoutToken) -> ParserContext:
    return context


def _on_malformed(context: ParserContext, token: LayoutToken) -> ParserContext:
    logger.debug(f"Skipping malformed directive at line {context.line_number}: {token.text!r}")
    return context


def _on_open(context: ParserContext, token: LayoutToken) -> ParserContext:
    if not context.in_page:
        context = replace(context, in_page=True, pending_lines=None)
    return replace(context, style=parse_style_params(token.params))


def _on_close(context: ParserContext, token: LayoutToken) -> ParserContext:
    if context.in_page:
        return context.close_page()
    return context


def _on_text(context: ParserContext, token: LayoutToken) -> ParserContext:
    if context.in_page:
        return context.record(token.text)
    return context


_HANDLERS: Dict[TokenKind, Callable[[ParserContext, LayoutToken], ParserContext]] = {
    TokenKind.BLANK: _on_blank,
    TokenKind.COMMENT: _on_ignored,
    TokenKind.MALFORMED: _on_malformed,
    TokenKind.OPEN: _on_open,
    TokenKind.CLOSE: _on_close,
    TokenKind.TEXT: _on_text,
}


def feed_token(context: ParserContext, token: LayoutToken) -> ParserContext:
    """Apply one classified line to the parser context."""
    return _HANDLERS[token.kind](context, token)


def feed_line(context: ParserContext, raw: str) -> ParserContext:
    """Classify and apply one raw input line."""
    context = replace(context, line_number=context.line_number + 1)
    return feed_token(context, classify_line(raw))


def finish(context: ParserContext) -> Document:
    """Close a still-open page at end of input and return the Document."""
    if context.in_page:
        context = context.close_page()
    return Document(context.pages)


def parse_lines(lines: Iterable[str]) -> Document:
    """Parse an iterable of input lines.

    Args:
        lines: Raw input lines (line terminators are allowed)

    Returns:
        Document with every non-empty page in source order
    """
    context = ParserContext()
    for raw in lines:
        context = feed_line(context, raw)
    document = finish(context)
    logger.debug(f"Parsed {context.line_number} lines into {document.page_count} page(s)")
    return document


def split_lines(text: str) -> List[str]:
    """Split text on newlines; a final terminator does not add a blank line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_text(text: str) -> Document:
    """Parse layout source held in a string."""
    return parse_lines(split_lines(text))


def parse_file(path: str | Path) -> Document:
    """Read and parse a layout file.

    Args:
        path: Path to the layout text file (UTF-8)

    Returns:
        Parsed Document

    Raises:
        InputAccessError: If the file cannot be opened, read or decoded
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read layout file {path}: {e}")
        raise InputAccessError(path, str(e)) from e
    return parse_text(text)

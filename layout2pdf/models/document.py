"""Document model handed from the layout parser to the PDF compiler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple

from .style import StyleState


@dataclass(frozen=True, slots=True)
class Line:
    """Single line of text with the style that was active when it was read.

    An empty ``text`` is a spacing line: it still takes up vertical space.
    """

    text: str
    style: StyleState = field(default_factory=StyleState)

    @property
    def font_size(self) -> int:
        return self.style.font_size

    @property
    def bottom_anchored(self) -> bool:
        return self.style.bottom_anchored


@dataclass(frozen=True, slots=True)
class Page:
    """Closed page: lines in source order."""

    lines: Tuple[Line, ...] = ()

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True, slots=True)
class Document:
    """Ordered list of closed pages."""

    pages: Tuple[Page, ...] = ()

    def __len__(self) -> int:
        return len(self.pages)

    def __iter__(self) -> Iterator[Page]:
        return iter(self.pages)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def is_empty(self) -> bool:
        return not self.pages

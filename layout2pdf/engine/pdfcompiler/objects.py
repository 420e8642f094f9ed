"""PDF objects and data structures."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

from ...models.style import Color
from .utils import PDF_TEXT_ENCODING, escape_pdf_string, format_pdf_matrix, format_pdf_number, to_pdf_text


logger = logging.getLogger(__name__)


class PdfRef(NamedTuple):
    """Indirect object reference (``N G R``)."""

    obj_num: int
    generation: int = 0

    def __str__(self) -> str:
        return f"{self.obj_num} {self.generation} R"


class PdfName(str):
    """PDF name object, stored without its leading slash (``PdfName("Page")`` is ``/Page``)."""

    __slots__ = ()

    def to_pdf(self) -> str:
        return f"/{self}"


@dataclass
class PdfStream:
    """Represents a PDF content stream (instructions for drawing)."""

    commands: List[str] = field(default_factory=list)

    def begin_text(self) -> None:
        self.commands.append("BT")

    def end_text(self) -> None:
        self.commands.append("ET")

    def add_text(self, font_alias: str, font_size: float, x: float, y: float, text: str, color: Color) -> None:
        """Add one text placement inside a ``BT``/``ET`` block.

        Args:
            font_alias: Font alias (e.g., "/F1")
            font_size: Font size in points
            x: X position of the text origin
            y: Y position of the baseline
            text: Text content
            color: RGB fill color (0-1 scale)
        """
        pdf_text, replaced = to_pdf_text(text)
        if replaced:
            logger.warning(f"Replaced characters outside {PDF_TEXT_ENCODING} in line {text!r}")

        self.commands.append(f"{font_alias} {format_pdf_number(font_size)} Tf")
        self.commands.append(" ".join(format_pdf_number(channel) for channel in color) + " rg")
        self.commands.append(f"{format_pdf_matrix(1, 0, 0, 1, x, y)} Tm")
        self.commands.append(f"({escape_pdf_string(pdf_text)}) Tj")

    def get_content(self) -> str:
        """Get stream content as string, one command per line."""
        if not self.commands:
            return ""
        return "\n".join(self.commands) + "\n"

    def get_bytes(self) -> bytes:
        return self.get_content().encode(PDF_TEXT_ENCODING, errors="replace")


@dataclass
class PdfPage:
    """Represents a single PDF page."""

    page_number: int
    media_box: Tuple[float, float, float, float]
    stream: PdfStream = field(default_factory=PdfStream)
    resources: Dict[str, Any] = field(default_factory=dict)

    def get_page_dict(self, parent: PdfRef, contents: PdfRef) -> Dict[str, Any]:
        """Generate page dictionary for PDF.

        Args:
            parent: Reference to the pages tree
            contents: Reference to this page's content stream

        Returns:
            Page dictionary
        """
        page_dict: Dict[str, Any] = {
            "Type": PdfName("Page"),
            "Parent": parent,
            "MediaBox": list(self.media_box),
        }
        if self.resources:
            page_dict["Resources"] = self.resources
        page_dict["Contents"] = contents
        return page_dict


@dataclass
class PdfDocument:
    """Represents a complete PDF document and its object numbering.

    Objects are numbered catalog, pages tree, font, every page, every
    content stream, then the optional info dictionary.
    """

    pages: List[PdfPage] = field(default_factory=list)
    catalog_obj_num: int = 1
    pages_obj_num: int = 2
    font_obj_num: int = 3
    page_start_obj_num: int = 4
    info_dict: Optional[Dict[str, str]] = None

    def get_page_count(self) -> int:
        """Get total number of pages."""
        return len(self.pages)

    def page_obj_num(self, index: int) -> int:
        return self.page_start_obj_num + index

    def content_obj_num(self, index: int) -> int:
        return self.page_start_obj_num + self.get_page_count() + index

    @property
    def info_obj_num(self) -> Optional[int]:
        if not self.info_dict:
            return None
        return self.page_start_obj_num + 2 * self.get_page_count()

    @property
    def object_count(self) -> int:
        count = self.page_start_obj_num - 1 + 2 * self.get_page_count()
        if self.info_dict:
            count += 1
        return count

    def get_catalog_dict(self) -> Dict[str, Any]:
        """Generate catalog dictionary for PDF."""
        return {
            "Type": PdfName("Catalog"),
            "Pages": PdfRef(self.pages_obj_num),
        }

    def get_pages_tree_dict(self, page_obj_nums: Optional[Sequence[int]] = None) -> Dict[str, Any]:
        """Generate pages tree dictionary for PDF.

        Args:
            page_obj_nums: Object numbers of the pages (defaults to this document's numbering)

        Returns:
            Pages tree dictionary
        """
        if page_obj_nums is None:
            page_obj_nums = [self.page_obj_num(i) for i in range(self.get_page_count())]
        kids = [PdfRef(num) for num in page_obj_nums]
        return {
            "Type": PdfName("Pages"),
            "Kids": kids,
            "Count": len(kids),
        }

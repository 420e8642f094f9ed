"""Main PDF compiler - converts a parsed layout Document to PDF bytes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from ...exceptions import EmptyDocumentError, OutputWriteError
from ...models.document import Document, Page
from ..geometry import DEFAULT_GEOMETRY, PageGeometry
from ..layout_engine import layout_page
from .objects import PdfDocument, PdfPage, PdfStream
from .resources import PdfFont, PdfFontRegistry
from .writer import PdfWriter


logger = logging.getLogger(__name__)


@dataclass
class CompilerOptions:
    """Options controlling PDF serialization."""

    pdf_version: str = "1.4"
    font_name: str = "Helvetica"
    compress_streams: bool = False
    info: Optional[Dict[str, str]] = None

    @classmethod
    def from_dict(cls, options: Dict[str, Any]) -> "CompilerOptions":
        """Build options from a plain dict, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(options) - known
        if unknown:
            raise ValueError(f"Unknown compiler options: {', '.join(sorted(unknown))}")
        return cls(**options)


class PDFCompiler:
    """Main compiler that converts layout documents to PDF."""

    def __init__(
        self,
        options: Optional[CompilerOptions | Dict[str, Any]] = None,
        geometry: Optional[PageGeometry] = None,
    ):
        """Initialize PDF compiler.

        Args:
            options: CompilerOptions or an equivalent dict
            geometry: Page geometry (defaults to the fixed letter canvas)
        """
        if isinstance(options, dict):
            options = CompilerOptions.from_dict(options)
        self.options = options or CompilerOptions()
        self.geometry = geometry or DEFAULT_GEOMETRY

    def compile(self, document: Document) -> bytes:
        """Compile a document to PDF bytes.

        Args:
            document: Parsed layout document

        Returns:
            Complete PDF file content

        Raises:
            EmptyDocumentError: If the document has no pages
        """
        if document is None or document.is_empty:
            raise EmptyDocumentError()

        pdf_document = PdfDocument(info_dict=self.options.info)
        font_registry = PdfFontRegistry()
        font = font_registry.register_font(self.options.font_name, object_num=pdf_document.font_obj_num)
        resources = font_registry.get_resources_dict()

        for number, page in enumerate(document.pages, start=1):
            pdf_page = self._create_page(number, page, font)
            pdf_page.resources = resources
            pdf_document.pages.append(pdf_page)

        writer = PdfWriter(
            pdf_version=self.options.pdf_version,
            compress_streams=self.options.compress_streams,
        )
        data = writer.write(pdf_document, font_registry)

        logger.info(
            f"Compiled {pdf_document.get_page_count()} page(s) into "
            f"{pdf_document.object_count} objects ({len(data)} bytes)"
        )
        return data

    def compile_to_file(self, document: Document, output_path: str | Path) -> Path:
        """Compile a document and write it to ``output_path``.

        The PDF is fully built in memory before the file is opened.

        Raises:
            EmptyDocumentError: If the document has no pages
            OutputWriteError: If the file cannot be written
        """
        output_path = Path(output_path)
        data = self.compile(document)
        try:
            output_path.write_bytes(data)
        except OSError as e:
            logger.error(f"Failed to write PDF file to {output_path}: {e}")
            raise OutputWriteError(output_path, str(e)) from e
        return output_path

    def _create_page(self, number: int, page: Page, font: PdfFont) -> PdfPage:
        """Create PDF page with its content stream from a layout page."""
        pdf_page = PdfPage(
            page_number=number,
            media_box=self.geometry.media_box,
        )
        self._render_stream(pdf_page.stream, page, font)
        return pdf_page

    def _render_stream(self, stream: PdfStream, page: Page, font: PdfFont) -> None:
        stream.begin_text()
        for positioned in layout_page(page, self.geometry):
            style = positioned.style
            stream.add_text(
                font.alias,
                style.font_size,
                positioned.x,
                positioned.y,
                positioned.text,
                style.color,
            )
        stream.end_text()

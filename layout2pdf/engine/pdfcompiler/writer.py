"""PDF writer - serializes objects, the xref table and the trailer.

Everything is written into an in-memory buffer. The byte offset at which
each object begins is recorded as it is written, and the xref table is
produced from those offsets in a second step.
"""

from __future__ import annotations

import io
import logging
import zlib
from typing import Any, Dict, List, Optional

from .objects import PdfDocument, PdfName, PdfRef
from .resources import PdfFontRegistry
from .utils import PDF_TEXT_ENCODING, escape_pdf_string, format_pdf_number

logger = logging.getLogger(__name__)


BINARY_MARKER = b"%\xe2\xe3\xcf\xd3\n"
FREE_ENTRY = b"0000000000 65535 f \n"


class PdfWriter:
    """Writes a PdfDocument into bytes."""

    def __init__(self, pdf_version: str = "1.4", compress_streams: bool = False):
        """Initialize PDF writer.

        Args:
            pdf_version: Version written in the file header
            compress_streams: Whether to FlateDecode content streams when it saves space
        """
        self.pdf_version = pdf_version
        self.compress_streams = compress_streams
        self.buffer = io.BytesIO()
        self.offsets: Dict[int, int] = {}  # obj_num -> byte offset
        self.xref_offset: Optional[int] = None

    def write(self, document: PdfDocument, font_registry: PdfFontRegistry) -> bytes:
        """Serialize a PDF document.

        Args:
            document: PdfDocument to write
            font_registry: Registry holding the shared fonts

        Returns:
            Complete PDF file content

        Raises:
            ValueError: If document is None or object numbering is inconsistent
        """
        if document is None:
            raise ValueError("document cannot be None")
        if font_registry is None:
            raise ValueError("font_registry cannot be None")

        self._write_header()

        self._write_object(document.catalog_obj_num, document.get_catalog_dict())
        self._write_object(document.pages_obj_num, document.get_pages_tree_dict())

        for font in font_registry.get_all_fonts():
            self._write_object(font.object_num, font.get_font_dict())

        pages_ref = PdfRef(document.pages_obj_num)
        for index, page in enumerate(document.pages):
            contents_ref = PdfRef(document.content_obj_num(index))
            self._write_object(document.page_obj_num(index), page.get_page_dict(pages_ref, contents_ref))

        for index, page in enumerate(document.pages):
            self._write_stream(document.content_obj_num(index), page.stream.get_bytes())

        if document.info_dict:
            self._write_object(document.info_obj_num, dict(document.info_dict))

        self.xref_offset = self.buffer.tell()
        self._write_xref()
        self._write_trailer(document.catalog_obj_num, document.info_obj_num)

        return self.buffer.getvalue()

    def get_offset(self, obj_num: int) -> int:
        """Byte offset at which an object begins."""
        return self.offsets[obj_num]

    def _write_header(self) -> None:
        self.buffer.write(f"%PDF-{self.pdf_version}\n".encode("ascii"))
        self.buffer.write(BINARY_MARKER)

    def _begin_object(self, obj_num: Optional[int]) -> None:
        if obj_num is None:
            raise ValueError("object number not assigned")
        if obj_num in self.offsets:
            raise ValueError(f"object {obj_num} written twice")
        self.offsets[obj_num] = self.buffer.tell()
        self.buffer.write(f"{obj_num} 0 obj\n".encode("ascii"))

    def _write_object(self, obj_num: Optional[int], content: Dict[str, Any]) -> None:
        """Write a dictionary object."""
        self._begin_object(obj_num)
        self.buffer.write(self._dict_to_pdf(content).encode(PDF_TEXT_ENCODING, errors="replace"))
        self.buffer.write(b"\nendobj\n")

    def _write_stream(self, obj_num: int, data: bytes) -> None:
        """Write a stream object, compressed when enabled and smaller."""
        stream_dict: Dict[str, Any] = {}
        if self.compress_streams:
            compressed = zlib.compress(data)
            if len(compressed) < len(data):
                stream_dict["Filter"] = PdfName("FlateDecode")
                data = compressed
        stream_dict = {"Length": len(data), **stream_dict}

        self._begin_object(obj_num)
        self.buffer.write(self._dict_to_pdf(stream_dict).encode("ascii"))
        self.buffer.write(b"\nstream\n")
        self.buffer.write(data)
        self.buffer.write(b"\nendstream\nendobj\n")

    def _write_xref(self) -> None:
        """Write xref table covering objects 1..N with no gaps."""
        count = len(self.offsets)
        missing = [num for num in range(1, count + 1) if num not in self.offsets]
        if missing:
            raise ValueError(f"object numbers are not contiguous, missing {missing}")

        self.buffer.write(b"xref\n")
        self.buffer.write(f"0 {count + 1}\n".encode("ascii"))
        self.buffer.write(FREE_ENTRY)
        for obj_num in range(1, count + 1):
            self.buffer.write(f"{self.offsets[obj_num]:010d} 00000 n \n".encode("ascii"))

    def _write_trailer(self, root_obj_num: int, info_obj_num: Optional[int] = None) -> None:
        trailer_dict: Dict[str, Any] = {
            "Size": len(self.offsets) + 1,
            "Root": PdfRef(root_obj_num),
        }
        if info_obj_num is not None:
            trailer_dict["Info"] = PdfRef(info_obj_num)
        self.buffer.write(b"trailer\n")
        self.buffer.write(self._dict_to_pdf(trailer_dict).encode("ascii"))
        self.buffer.write(b"\nstartxref\n")
        self.buffer.write(f"{self.xref_offset}\n".encode("ascii"))
        self.buffer.write(b"%%EOF\n")

    def _dict_to_pdf(self, d: Dict[str, Any]) -> str:
        """Convert dictionary to PDF format."""
        parts = ["<<"]
        for key, value in d.items():
            parts.append(f"/{key.lstrip('/')} {self._value_to_pdf(value)}")
        parts.append(">>")
        return " ".join(parts)

    def _value_to_pdf(self, value: Any) -> str:
        if isinstance(value, dict):
            return self._dict_to_pdf(value)
        if isinstance(value, PdfRef):
            return str(value)
        if isinstance(value, (list, tuple)):
            items: List[str] = [self._value_to_pdf(item) for item in value]
            return f"[{' '.join(items)}]"
        if isinstance(value, PdfName):
            return value.to_pdf()
        if isinstance(value, str):
            return f"({escape_pdf_string(value)})"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return format_pdf_number(value)
        raise TypeError(f"Cannot serialize {type(value).__name__} to PDF")

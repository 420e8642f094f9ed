"""PDF Compiler - serializes positioned layout pages into a PDF file."""

from .compiler import CompilerOptions, PDFCompiler
from .objects import PdfDocument, PdfName, PdfPage, PdfRef, PdfStream
from .resources import PdfFont, PdfFontRegistry
from .writer import PdfWriter

__all__ = [
    "CompilerOptions",
    "PDFCompiler",
    "PdfDocument",
    "PdfFont",
    "PdfFontRegistry",
    "PdfPage",
    "PdfName",
    "PdfRef",
    "PdfStream",
    "PdfWriter",
]

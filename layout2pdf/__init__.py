"""
layout2pdf - convert a small text page-layout description into a PDF.

The pipeline has two stages:
- the layout parser turns text into a Document of pages and styled lines
- the PDF compiler positions those lines on a letter-size canvas and
  serializes catalog, page tree, font, pages and content streams with a
  cross-reference table

Quick Start:
    from layout2pdf import convert_text

    pdf_bytes = convert_text("[page1]\\nHello\\n[/page1]\\n")
"""

from .version import __version__, __version_info__

from .exceptions import (
    EmptyDocumentError,
    InputAccessError,
    Layout2PdfError,
    OutputWriteError,
)
from .models import Alignment, Color, Document, Line, Page, StyleState
from .parser import parse_file, parse_lines, parse_text
from .engine import PageGeometry, PositionedLine, layout_page
from .engine.pdfcompiler import CompilerOptions, PDFCompiler
from .export import dump_layout
from .api import convert_file, convert_text

__author__ = "layout2pdf contributors"

__all__ = [
    # Version
    "__version__",
    "__version_info__",

    # High-level API
    "convert_file",
    "convert_text",

    # Parser
    "parse_file",
    "parse_lines",
    "parse_text",

    # Models
    "Alignment",
    "Color",
    "Document",
    "Line",
    "Page",
    "StyleState",

    # Layout and compilation
    "CompilerOptions",
    "PDFCompiler",
    "PageGeometry",
    "PositionedLine",
    "dump_layout",
    "layout_page",

    # Exceptions
    "EmptyDocumentError",
    "InputAccessError",
    "Layout2PdfError",
    "OutputWriteError",
]


def main():
    """CLI entry point."""
    from .cli import main as cli_main
    return cli_main()

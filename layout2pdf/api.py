"""
High-level API for layout2pdf.

Usage:
    from layout2pdf import convert_text, convert_file

    pdf_bytes = convert_text("[page1] 20, red, center\\nHello\\n[/page1]\\n")
    output = convert_file("report")  # reads report.txt, writes report.pdf
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .engine.geometry import PageGeometry
from .engine.pdfcompiler import CompilerOptions, PDFCompiler
from .parser import parse_file, parse_text


logger = logging.getLogger(__name__)

INPUT_SUFFIX = ".txt"
OUTPUT_SUFFIX = ".pdf"


def input_path_for(base_path: str | Path) -> Path:
    """Layout source path for a base path (``<base>.txt``)."""
    return Path(f"{base_path}{INPUT_SUFFIX}")


def output_path_for(base_path: str | Path) -> Path:
    """Default PDF path for a base path (``<base>.pdf``)."""
    return Path(f"{base_path}{OUTPUT_SUFFIX}")


def convert_text(
    text: str,
    options: Optional[CompilerOptions | Dict[str, Any]] = None,
    geometry: Optional[PageGeometry] = None,
) -> bytes:
    """Convert layout source text to PDF bytes.

    Raises:
        EmptyDocumentError: If the text yields no pages
    """
    document = parse_text(text)
    return PDFCompiler(options, geometry).compile(document)


def convert_file(
    base_path: str | Path,
    output_path: Optional[str | Path] = None,
    options: Optional[CompilerOptions | Dict[str, Any]] = None,
) -> Path:
    """Convert ``<base_path>.txt`` into a PDF file.

    Args:
        base_path: Path without extension
        output_path: Output file (defaults to ``<base_path>.pdf``)
        options: Compiler options

    Returns:
        Path of the written PDF

    Raises:
        InputAccessError: If the layout file cannot be read
        EmptyDocumentError: If the layout yields no pages
        OutputWriteError: If the PDF cannot be written
    """
    source = input_path_for(base_path)
    target = Path(output_path) if output_path else output_path_for(base_path)

    logger.debug(f"Converting {source} -> {target}")
    document = parse_file(source)
    return PDFCompiler(options).compile_to_file(document, target)

"""
Command-line interface for layout2pdf.

Usage:
    layout2pdf report              # reads report.txt, writes report.pdf
    layout2pdf report -o out.pdf --compress
    layout2pdf report --dump-layout
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .api import input_path_for, output_path_for
from .engine.pdfcompiler import CompilerOptions, PDFCompiler
from .exceptions import Layout2PdfError
from .export import layout_tables
from .parser import parse_file
from .utils.logger import LOG_LEVELS, configure_logging
from .version import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="layout2pdf",
        description="Convert a text page-layout description into a PDF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Layout format:
  [page1] 20, red, center     open a page / set size, color, align, anchor
  Some text                   one line in the current style
  [/page1]                    close the page
  // comment                  ignored to end of line
        """,
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Layout path without extension (reads <path>.txt)",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output PDF path (default: <path>.pdf)",
    )
    parser.add_argument(
        "--compress",
        action="store_true",
        help="Compress page content streams",
    )
    parser.add_argument(
        "--title",
        help="Document title stored in the PDF metadata",
    )
    parser.add_argument(
        "--dump-layout",
        action="store_true",
        help="Print positioned lines of every page",
    )
    parser.add_argument(
        "--log-level",
        choices=[level for level in LOG_LEVELS if level != "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def build_options(args: argparse.Namespace) -> CompilerOptions:
    info = {"Title": args.title} if args.title else None
    return CompilerOptions(compress_streams=args.compress, info=info)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point.

    Returns:
        0 on success, 1 on any failure
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.path:
        print("Usage: layout2pdf <filename>", file=sys.stderr)
        return 1

    configure_logging(args.log_level)

    source = input_path_for(args.path)
    target = Path(args.output) if args.output else output_path_for(args.path)

    try:
        document = parse_file(source)
        if args.dump_layout:
            console = Console()
            for table in layout_tables(document):
                console.print(table)
        PDFCompiler(build_options(args)).compile_to_file(document, target)
    except Layout2PdfError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Saved to '{target}'")
    return 0

"""Dump positioned layout lines for debugging."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from rich.table import Table
from rich.text import Text

from ..engine.geometry import DEFAULT_GEOMETRY, PageGeometry
from ..engine.layout_engine import PositionedLine, layout_page
from ..models.document import Document


def dump_positioned_line(positioned: PositionedLine) -> Dict[str, Any]:
    style = positioned.style
    return {
        "text": positioned.text,
        "x": positioned.x,
        "y": positioned.y,
        "font_size": style.font_size,
        "color": list(style.color),
        "alignment": style.alignment.value,
        "bottom_anchored": style.bottom_anchored,
    }


def dump_layout(document: Document, geometry: Optional[PageGeometry] = None) -> Dict[str, Any]:
    """Positioned lines of every page as JSON-ready data.

    Lines are listed in drawing order: top lines, then bottom-anchored lines.
    """
    geometry = geometry or DEFAULT_GEOMETRY
    pages: List[Dict[str, Any]] = []
    for number, page in enumerate(document.pages, start=1):
        pages.append({
            "number": number,
            "lines": [dump_positioned_line(p) for p in layout_page(page, geometry)],
        })
    return {"pages": pages}


def layout_tables(document: Document, geometry: Optional[PageGeometry] = None) -> List[Table]:
    """One rich table per page, for printing to a console."""
    tables = []
    for page_data in dump_layout(document, geometry)["pages"]:
        table = Table(title=f"Page {page_data['number']}")
        table.add_column("x", justify="right", style="cyan")
        table.add_column("y", justify="right", style="cyan")
        table.add_column("size", justify="right")
        table.add_column("color")
        table.add_column("align")
        table.add_column("anchor")
        table.add_column("text", style="magenta")
        for line in page_data["lines"]:
            table.add_row(
                f"{line['x']:g}",
                f"{line['y']:g}",
                str(line["font_size"]),
                " ".join(f"{channel:g}" for channel in line["color"]),
                line["alignment"],
                "bottom" if line["bottom_anchored"] else "top",
                Text(line["text"]),
            )
        tables.append(table)
    return tables

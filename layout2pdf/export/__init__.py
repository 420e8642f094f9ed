"""Export module - debug views of the computed layout."""

from .layout_dump import dump_layout, dump_positioned_line, layout_tables

__all__ = ["dump_layout", "dump_positioned_line", "layout_tables"]

"""Resource management for PDF (fonts)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .objects import PdfName, PdfRef


# The 14 standard Type1 fonts every PDF viewer provides without embedding.
STANDARD_FONTS = frozenset({
    "Helvetica",
    "Helvetica-Bold",
    "Helvetica-Oblique",
    "Helvetica-BoldOblique",
    "Times-Roman",
    "Times-Bold",
    "Times-Italic",
    "Times-BoldItalic",
    "Courier",
    "Courier-Bold",
    "Courier-Oblique",
    "Courier-BoldOblique",
    "Symbol",
    "ZapfDingbats",
})


@dataclass
class PdfFont:
    """Represents a PDF font resource."""

    name: str  # Base font name (e.g., "Helvetica")
    alias: str  # PDF alias (e.g., "/F1")
    object_num: Optional[int] = None

    @property
    def resource_key(self) -> str:
        return self.alias.lstrip("/")

    def get_font_dict(self) -> Dict[str, PdfName]:
        return {
            "Type": PdfName("Font"),
            "Subtype": PdfName("Type1"),
            "BaseFont": PdfName(self.name),
        }


class PdfFontRegistry:
    """Registry for managing PDF fonts shared by every page."""

    def __init__(self):
        self._fonts: Dict[str, PdfFont] = {}
        self._next_alias_num = 1

    def register_font(self, name: str, object_num: Optional[int] = None) -> PdfFont:
        """Register a standard font and return its PdfFont object.

        Args:
            name: Standard Type1 font name (e.g., "Helvetica")
            object_num: Object number the font dictionary is written under

        Returns:
            PdfFont object; registering the same name again returns the same object

        Raises:
            ValueError: If the font is not one of the standard Type1 fonts
        """
        if name not in STANDARD_FONTS:
            raise ValueError(f"Unsupported font {name!r}: only standard Type1 fonts can be used")

        if name not in self._fonts:
            alias = f"/F{self._next_alias_num}"
            self._next_alias_num += 1
            self._fonts[name] = PdfFont(name=name, alias=alias, object_num=object_num)
        elif object_num is not None:
            self._fonts[name].object_num = object_num

        return self._fonts[name]

    def get_all_fonts(self) -> List[PdfFont]:
        return list(self._fonts.values())

    def get_resources_dict(self) -> Dict[str, Any]:
        """Generate the page /Resources dictionary referencing the fonts.

        Raises:
            ValueError: If a font has no object number yet
        """
        fonts: Dict[str, PdfRef] = {}
        for font in self._fonts.values():
            if font.object_num is None:
                raise ValueError(f"Font {font.name} has no object number")
            fonts[font.resource_key] = PdfRef(font.object_num)
        return {"Font": fonts}

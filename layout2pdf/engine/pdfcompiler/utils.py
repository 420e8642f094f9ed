"""Utility functions for PDF generation."""

from typing import Tuple


PDF_TEXT_ENCODING = "latin-1"

_RESERVED = {
    "\\": "\\\\",
    "(": "\\(",
    ")": "\\)",
}


def escape_pdf_string(text: str) -> str:
    """Escape special characters in PDF literal strings.

    Args:
        text: Input string

    Returns:
        Text with every ``(``, ``)`` and ``\\`` preceded by a backslash
    """
    if text is None:
        return ""
    return "".join(_RESERVED.get(char, char) for char in text)


def to_pdf_text(text: str) -> Tuple[str, bool]:
    """Make text encodable in the content stream.

    Returns:
        Tuple of (text with unencodable characters replaced by ``?``,
        whether any replacement happened)
    """
    encoded = text.encode(PDF_TEXT_ENCODING, errors="replace")
    converted = encoded.decode(PDF_TEXT_ENCODING)
    return converted, converted != text


def format_pdf_number(value: float) -> str:
    """Format number for PDF (at most three decimals, no trailing zeros).

    Args:
        value: Numeric value

    Returns:
        Formatted string, e.g. ``296``, ``0.5`` or ``297.75``
    """
    formatted = f"{value:.3f}".rstrip("0").rstrip(".")
    if formatted == "-0":
        return "0"
    return formatted


def format_pdf_matrix(a: float, b: float, c: float, d: float, e: float, f: float) -> str:
    """Format transformation matrix for PDF."""
    return " ".join(format_pdf_number(value) for value in (a, b, c, d, e, f))

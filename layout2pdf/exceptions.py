"""Custom exceptions for layout2pdf."""

from pathlib import Path
from typing import Optional


class Layout2PdfError(Exception):
    """Base exception for layout2pdf errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class InputAccessError(Layout2PdfError):
    """Exception raised when the layout source cannot be read."""

    def __init__(self, path: Path | str, details: Optional[str] = None):
        self.path = Path(path)
        super().__init__(f"Failed to open layout file: {self.path}", details)


class EmptyDocumentError(Layout2PdfError):
    """Exception raised when a document has no pages to compile."""

    def __init__(self, details: Optional[str] = None):
        super().__init__("No pages parsed from layout file", details)


class OutputWriteError(Layout2PdfError):
    """Exception raised when the compiled PDF cannot be written."""

    def __init__(self, path: Path | str, details: Optional[str] = None):
        self.path = Path(path)
        super().__init__(f"Failed to open output PDF: {self.path}", details)

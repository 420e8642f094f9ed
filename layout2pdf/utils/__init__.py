"""Utils module for layout2pdf."""

from .logger import LOG_LEVELS, configure_logging

__all__ = [
    "LOG_LEVELS",
    "configure_logging",
]

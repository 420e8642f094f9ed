"""
Logger for layout2pdf.

Handles logging configuration with the rich library's console handler.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str = "WARNING", console: Optional[Console] = None) -> RichHandler:
    """
    Configure logging for the application.

    Installs a single RichHandler on the root logger, writing to stderr so
    that stdout stays free for command output.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console: Optional rich console to log to

    Returns:
        The installed handler
    """
    if level.upper() not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}")

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()
    root_logger.addHandler(rich_handler)
    return rich_handler

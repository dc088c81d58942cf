"""
Logging setup for pageframe.

Library modules only call ``logging.getLogger(__name__)``; applications
(the CLI, scripts) call ``configure_logging`` once.
"""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", rich: bool = True, log_file: Optional[str] = None) -> None:
    """
    Configure root logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rich: Use a colored rich handler on stderr instead of a plain stream handler
        log_file: Optional path of an additional plain-text log file
    """
    if level.upper() not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}")
    numeric_level = getattr(logging, level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    if rich:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.setLevel(numeric_level)
    root_logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(file_handler)

    # pypdf warns about every recoverable quirk of Chromium output
    logging.getLogger("pypdf").setLevel(max(numeric_level, logging.ERROR))

"""
Logging setup for the vibesmith CLI.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
are attached here when the CLI starts so embedding applications keep control
of their own logging configuration.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime

_NO_COLOR = bool(os.environ.get("NO_COLOR")) or not sys.stderr.isatty()


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "" if _NO_COLOR else "\033[0m"
    DIM = "" if _NO_COLOR else "\033[2m"

    DEBUG = "" if _NO_COLOR else "\033[36m"  # Cyan
    INFO = "" if _NO_COLOR else "\033[32m"  # Green
    WARNING = "" if _NO_COLOR else "\033[33m"  # Yellow
    ERROR = "" if _NO_COLOR else "\033[31m"  # Red
    CRITICAL = "" if _NO_COLOR else "\033[35m"  # Magenta


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.DEBUG,
        logging.INFO: Colors.INFO,
        logging.WARNING: Colors.WARNING,
        logging.ERROR: Colors.ERROR,
        logging.CRITICAL: Colors.CRITICAL,
    }

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        component = record.name.removeprefix("vibesmith.")
        level_color = self.LEVEL_COLORS.get(record.levelno, "")

        line = (
            f"{Colors.DIM}{timestamp}{Colors.RESET} "
            f"{level_color}{record.levelname:<7}{Colors.RESET} "
            f"[{component}] {record.getMessage()}"
        )
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a console handler to the ``vibesmith`` logger.

    Safe to call repeatedly; the previous handler is replaced.
    """
    logger = logging.getLogger("vibesmith")
    logger.setLevel(level if isinstance(level, int) else level.upper())

    for handler in list(logger.handlers):
        if getattr(handler, "_vibesmith_console", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ConsoleFormatter())
    handler._vibesmith_console = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger

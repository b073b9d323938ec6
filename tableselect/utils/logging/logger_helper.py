"""Module: logger_helper.py

Author: Michael Economou
Date: 2026-02-10

logger_helper.py
Helpers for retrieving named loggers in a consistent way.
Functions:
get_logger(name): Returns a logger that propagates to the root handlers.
DevOnlyFilter:
A logging filter that hides dev-only debug messages (drag samples, selection
diffs) from the console, while still allowing them to reach file logs.
"""

import logging

from tableselect.config import SHOW_DEV_ONLY_IN_CONSOLE


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Returns a logger with the given name, delegating output to the root logger.

    Args:
        name (str): Optional name for the logger (defaults to this module)

    Returns:
        logging.Logger: Logger instance without handlers of its own
    """
    logger = logging.getLogger(name or __name__)

    # Root logger owns console/file handlers, see ConfigureLogger
    logger.propagate = True
    if logger.handlers:
        logger.handlers.clear()

    return logger


class DevOnlyFilter(logging.Filter):
    """Drops records logged with extra={"dev_only": True} unless enabled in config."""

    def filter(self, record: logging.LogRecord) -> bool:
        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)

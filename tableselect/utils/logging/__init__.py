"""Logging utilities package.

Logging setup, factory, and helper functions.
"""

from tableselect.utils.logging.logger_factory import get_cached_logger
from tableselect.utils.logging.logger_setup import ConfigureLogger

__all__ = [
    "ConfigureLogger",
    "get_cached_logger",
]

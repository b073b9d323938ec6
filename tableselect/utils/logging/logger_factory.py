"""Module: logger_factory.py

Author: Michael Economou
Date: 2026-02-10

One logger per tableselect module, created on first use.

Every module starts with ``logger = get_cached_logger(__name__)``. Keeping
the instances in one place lets a single call raise or lower the verbosity of
the whole package, e.g. to trace drag samples while debugging a table:

    LoggerFactory.set_global_level(logging.DEBUG)
"""

import logging
import threading

from tableselect.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """Process-wide registry of the package's module loggers."""

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()
    _global_level: int | None = None

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        with cls._lock:
            logger = cls._loggers.get(name)
            if logger is None:
                logger = get_logger(name)
                if cls._global_level is not None:
                    logger.setLevel(cls._global_level)
                cls._loggers[name] = logger
            return logger

    @classmethod
    def set_global_level(cls, level: int) -> None:
        """Apply level to every registered logger and to those registered later."""
        with cls._lock:
            cls._global_level = level
            for logger in cls._loggers.values():
                logger.setLevel(level)

    @classmethod
    def reset(cls) -> None:
        """Drop the global level override and hand level control back to the root logger."""
        with cls._lock:
            cls._global_level = None
            for logger in cls._loggers.values():
                logger.setLevel(logging.NOTSET)

    @classmethod
    def names(cls) -> list[str]:
        return sorted(cls._loggers)


def get_cached_logger(name: str) -> logging.Logger:
    """Logger registered under name (normally the caller's __name__)."""
    return LoggerFactory.get_logger(name)

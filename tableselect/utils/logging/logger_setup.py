"""Module: logger_setup.py

Author: Michael Economou
Date: 2026-02-10

logger_setup.py
ConfigureLogger sets up the root logger for an application embedding
tableselect: INFO and higher to the console (dev-only records filtered out),
and optionally a rotating log file.
"""

import contextlib
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from tableselect.config import (
    LOG_CONSOLE_LEVEL,
    LOG_DATE_FORMAT,
    LOG_DIR,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_FORMAT,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from tableselect.utils.logging.logger_helper import DevOnlyFilter


class ConfigureLogger:
    """
    Configures application-wide logging from the settings in tableselect.config.
    Handlers are only attached once; calling it again is a no-op.
    """

    def __init__(
        self,
        log_name: str = "tableselect",
        log_dir: str = LOG_DIR,
        console_enabled: bool = LOG_TO_CONSOLE,
        file_enabled: bool = LOG_TO_FILE,
    ):
        """
        Initializes and configures the root logger.

        Args:
            log_name (str): Base name for the log file.
            log_dir (str): Directory to store log files.
            console_enabled (bool): Attach a console handler.
            file_enabled (bool): Attach a rotating file handler.
        """
        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # handlers filter levels

        if self.logger.hasHandlers():
            return

        if console_enabled:
            self._setup_console_handler(getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO))

        if file_enabled:
            os.makedirs(log_dir, exist_ok=True)
            self._setup_file_handler(
                os.path.join(log_dir, f"{log_name}.log"),
                getattr(logging, LOG_FILE_LEVEL, logging.INFO),
                LOG_FILE_MAX_BYTES,
                LOG_FILE_BACKUP_COUNT,
            )

    def _setup_console_handler(self, level: int) -> None:
        """Sets up console handler with DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(AttributeError, ValueError):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self.logger.addHandler(console_handler)

    def _setup_file_handler(self, path: str, level: int, max_bytes: int, backup_count: int) -> None:
        """Sets up file handler with rotating file output."""
        file_handler = RotatingFileHandler(
            path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        self.logger.addHandler(file_handler)

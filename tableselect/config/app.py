"""Module: tableselect.config.app

Author: Michael Economou
Date: 2026-02-10

Application-level configuration: package info and logging settings.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "tableselect"
APP_VERSION = "0.3"
APP_AUTHOR = "Michael Economou"

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_DIR = "logs"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_TO_FILE = False
LOG_FILE_LEVEL = "INFO"
LOG_FILE_MAX_BYTES = 5_000_000  # 5MB per file
LOG_FILE_BACKUP_COUNT = 3

# Drag samples and selection changes are logged with extra={"dev_only": True}
SHOW_DEV_ONLY_IN_CONSOLE = False

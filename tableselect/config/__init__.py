"""Module: tableselect.config

Author: Michael Economou
Date: 2026-02-10

Configuration package for tableselect.

- app: package info and logging settings
- columns: column widths, header interaction thresholds, sort icons

All settings are re-exported from this module:
    from tableselect.config import DEFAULT_COLUMN_WIDTH
"""

from tableselect.config.app import *  # noqa: F401, F403
from tableselect.config.columns import *  # noqa: F401, F403

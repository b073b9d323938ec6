"""Module: tableselect.config.columns

Author: Michael Economou
Date: 2026-02-10

Column and header defaults for tables.
"""

# =====================================
# COLUMN DEFAULTS
# =====================================

DEFAULT_COLUMN_WIDTH = 100
DIVIDER_COLUMN_WIDTH = 2

# Column used by a default sort descriptor that was never attached to a column
DEFAULT_SORT_COLUMN_INDEX = 0

# =====================================
# HEADER INTERACTION
# =====================================

# Press/release distance (manhattan, px) above which a header press is a drag
HEADER_CLICK_DRAG_THRESHOLD = 4

SORT_ICON_ASCENDING = "chevron.up"
SORT_ICON_DESCENDING = "chevron.down"

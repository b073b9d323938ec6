"""Module: __init__.py

Author: Michael Economou
Date: 2026-02-13

Table state package.
"""

from tableselect.app.state.table_state import TableConfig, TableState

__all__ = ["TableConfig", "TableState"]

"""Module: exceptions.py

Author: Michael Economou
Date: 2026-02-11

Exceptions raised for programming errors (wrong construction or misuse of
the API). Anomalies caused by user input are absorbed and logged instead.
"""


class TableSelectError(Exception):
    """Base class for tableselect errors."""


class SelectionTypeError(TableSelectError):
    """Operation or initial value does not match the table's selection type."""


class UnknownColumnError(TableSelectError, IndexError):
    """Column index outside the current column list."""

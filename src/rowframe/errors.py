"""Errors raised by rowframe tables.

All the errors share the :class:`TableError` base class,
so callers can catch any failure of a table operation
in a single place. Each error also derives from the
builtin exception that better describes it, so that code
which only knows about ``IndexError`` or ``LookupError``
keeps working.

Errors produced while reading or writing files are not
wrapped and reach the caller unchanged.
"""


class TableError(Exception):
    """Base class for errors raised by table operations."""

    pass


class InvalidInputFormatError(TableError, ValueError):
    """The data provided to build a table has an unsupported shape."""

    pass


class IndexOutOfRangeError(TableError, IndexError):
    """A row was requested at an index the table doesn't have."""

    def __init__(self, index: int, num_rows: int) -> None:
        super().__init__("Index out of range")
        self.index = index
        self.num_rows = num_rows


class ColumnNotFoundError(TableError, LookupError):
    """A column was requested that is not part of the table."""

    def __init__(self, column: str) -> None:
        super().__init__(f"Column does not exist: {column!r}")
        self.column = column


class InvalidAggregationFunctionError(TableError, TypeError):
    """An aggregation was requested with something that can't be invoked."""

    def __init__(self, column: str) -> None:
        super().__init__(f"Invalid aggregation function for column {column!r}")
        self.column = column

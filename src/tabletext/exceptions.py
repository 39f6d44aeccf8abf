"""Exceptions for tabletext."""

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class TableTextError(Exception):
    """
    Base exception for all tabletext errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class SourceError(TableTextError):
    """
    Base exception for tabular source contract violations.

    Raised by TabularSource implementations, never by the renderer.
    The renderer propagates these unchanged to its caller.
    """

    pass


# ---------------------------------------------------------------------------
# Source Exceptions
# ---------------------------------------------------------------------------


class InvalidColumnError(SourceError):
    """
    Raised when a source is queried with an out-of-range column index.

    Attributes:
        column: The requested column index
        column_count: Number of columns the source exposes
    """

    def __init__(self, column: int, column_count: int) -> None:
        self.column = column
        self.column_count = column_count
        super().__init__(
            f"Invalid column {column}: source has {column_count} column(s)"
        )


class InvalidRowError(SourceError):
    """
    Raised when a source is queried with an out-of-range row index.

    Attributes:
        row: The requested row index
        row_count: Number of rows the source exposes
    """

    def __init__(self, row: int, row_count: int) -> None:
        self.row = row
        self.row_count = row_count
        super().__init__(f"Invalid row {row}: source has {row_count} row(s)")

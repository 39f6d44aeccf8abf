"""Tabular source protocol.

This module defines the TabularSource protocol that every data provider must
implement to be rendered by TableRenderer. The protocol uses Python's
typing.Protocol with the @runtime_checkable decorator, enabling duck typing
and isinstance() checks at runtime.
"""

from typing import Protocol, runtime_checkable

from .exceptions import InvalidColumnError, InvalidRowError


@runtime_checkable
class TabularSource(Protocol):
    """
    Protocol for tabular data providers.

    Any record collection (people, books, query results) can implement this
    protocol independently. No shared base class is needed.

    Indices are valid in ``[0, column_count)`` and ``[0, row_count)``.
    Out-of-range access must raise InvalidColumnError / InvalidRowError.
    Negative indices are out of range.

    Example:
        class Inventory:
            def __init__(self, items: list[tuple[str, int]]) -> None:
                self._items = items

            @property
            def row_count(self) -> int:
                return len(self._items)

            @property
            def column_count(self) -> int:
                return 2

            def label(self, column: int) -> str:
                check_column(column, self.column_count)
                return ("Item", "Quantity")[column]

            def cell(self, row: int, column: int) -> str:
                check_row(row, self.row_count)
                check_column(column, self.column_count)
                return str(self._items[row][column])

        assert isinstance(Inventory([]), TabularSource)  # True at runtime
    """

    @property
    def row_count(self) -> int:
        """Number of rows. Stable for the duration of one render."""
        ...

    @property
    def column_count(self) -> int:
        """Number of columns. Stable for the duration of one render."""
        ...

    def label(self, column: int) -> str:
        """
        Header label for a column.

        Raises:
            InvalidColumnError: If column is out of range
        """
        ...

    def cell(self, row: int, column: int) -> str:
        """
        String value of a single cell.

        Raises:
            InvalidRowError: If row is out of range
            InvalidColumnError: If column is out of range
        """
        ...


@runtime_checkable
class DescribedSource(Protocol):
    """Optional capability: a display name used as the table caption."""

    @property
    def description(self) -> str:
        """Human-readable name of the source (e.g., "Department (Engineering)")."""
        ...


def describe(source: object) -> str:
    """Return the source's description, or an empty string if it has none."""
    if isinstance(source, DescribedSource):
        return source.description
    return ""


def check_column(column: int, column_count: int) -> None:
    """Raise InvalidColumnError unless 0 <= column < column_count."""
    if not 0 <= column < column_count:
        raise InvalidColumnError(column, column_count)


def check_row(row: int, row_count: int) -> None:
    """Raise InvalidRowError unless 0 <= row < row_count."""
    if not 0 <= row < row_count:
        raise InvalidRowError(row, row_count)

"""Ready-made TabularSource implementations.

RowSource wraps already-stringified headers and rows (e.g., parsed CSV).
RecordSource exposes a sequence of arbitrary records through Column
accessors, so callers keep their own typed records and never need to
recover them from the table abstraction.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .models import Column
from .protocol import check_column, check_row


class RowSource:
    """Tabular source backed by a header list and a list of string rows.

    Example:
        source = RowSource(["Name", "Age"], [["Eva", "30"], ["Amit", "5000"]])
        TableRenderer().render(source, "Engineering")
    """

    def __init__(
        self,
        headers: Sequence[str],
        rows: Sequence[Sequence[str]],
        description: str = "",
    ) -> None:
        """Initialize the source.

        Args:
            headers: Column header labels
            rows: Rows of cell values, each with one value per header
            description: Optional caption used when no title is given

        Raises:
            ValueError: If a row's length does not match the header count
        """
        self._headers = list(headers)
        self._rows = [list(row) for row in rows]
        self._description = description
        for index, row in enumerate(self._rows):
            if len(row) != len(self._headers):
                raise ValueError(
                    f"Row {index} has {len(row)} value(s), expected {len(self._headers)}"
                )

    @property
    def description(self) -> str:
        return self._description

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def column_count(self) -> int:
        return len(self._headers)

    def label(self, column: int) -> str:
        check_column(column, self.column_count)
        return self._headers[column]

    def cell(self, row: int, column: int) -> str:
        check_row(row, self.row_count)
        check_column(column, self.column_count)
        return self._rows[row][column]


class RecordSource:
    """Tabular source over a sequence of records read through Columns.

    Example:
        source = RecordSource(
            people,
            [Column.attr("Name", "name"), Column.attr("Age", "age")],
            description="Engineering",
        )
    """

    def __init__(
        self,
        records: Sequence[Any],
        columns: Sequence[Column],
        description: str = "",
    ) -> None:
        self._records = list(records)
        self._columns = tuple(columns)
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    @property
    def row_count(self) -> int:
        return len(self._records)

    @property
    def column_count(self) -> int:
        return len(self._columns)

    def label(self, column: int) -> str:
        check_column(column, self.column_count)
        return self._columns[column].label

    def cell(self, row: int, column: int) -> str:
        check_row(row, self.row_count)
        check_column(column, self.column_count)
        return self._columns[column].render(self._records[row])

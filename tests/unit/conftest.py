"""Unit test fixtures."""

import pytest

from tabletext import InvalidColumnError, RowSource


class FaultySource:
    """Source whose cell() fails for one column, as a buggy provider would."""

    def __init__(self, bad_column: int) -> None:
        self.bad_column = bad_column
        self.cell_calls = 0

    @property
    def row_count(self) -> int:
        return 2

    @property
    def column_count(self) -> int:
        return 2

    def label(self, column: int) -> str:
        return ("Name", "Age")[column]

    def cell(self, row: int, column: int) -> str:
        self.cell_calls += 1
        if column == self.bad_column:
            raise InvalidColumnError(column, 1)
        return "x"


@pytest.fixture
def engineering() -> RowSource:
    """Two-column source from the Engineering example."""
    return RowSource(["Name", "Age"], [["Eva", "30"], ["Amit", "5000"]])


@pytest.fixture
def faulty_source() -> FaultySource:
    """Source that raises InvalidColumnError for column 1."""
    return FaultySource(bad_column=1)

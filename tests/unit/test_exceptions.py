"""Tests for exception classes."""

import pytest

from tabletext.exceptions import (
    InvalidColumnError,
    InvalidRowError,
    SourceError,
    TableTextError,
)


class TestInvalidColumnError:
    """Tests for InvalidColumnError."""

    def test_attributes_and_message(self) -> None:
        """Test the error carries index and count."""
        error = InvalidColumnError(3, 2)
        assert error.column == 3
        assert error.column_count == 2
        assert str(error) == "Invalid column 3: source has 2 column(s)"


class TestInvalidRowError:
    """Tests for InvalidRowError."""

    def test_attributes_and_message(self) -> None:
        """Test the error carries index and count."""
        error = InvalidRowError(-1, 4)
        assert error.row == -1
        assert error.row_count == 4
        assert str(error) == "Invalid row -1: source has 4 row(s)"


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        "error",
        [InvalidColumnError(0, 0), InvalidRowError(0, 0)],
    )
    def test_source_errors(self, error: Exception) -> None:
        """Test index errors are SourceErrors and TableTextErrors."""
        assert isinstance(error, SourceError)
        assert isinstance(error, TableTextError)

    def test_catch_all(self) -> None:
        """Test TableTextError catches every library error."""
        with pytest.raises(TableTextError):
            raise InvalidColumnError(1, 0)

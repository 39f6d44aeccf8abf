"""
tabletext: render tabular data as aligned ASCII tables.

Any object exposing row/column counts, header labels and string cells
satisfies the TabularSource protocol and can be rendered:

Example:
    from tabletext import RowSource, TableRenderer

    source = RowSource(["Name", "Age"], [["Eva", "30"], ["Amit", "5000"]])
    print(TableRenderer().render(source, "Engineering"))

    Engineering
    +-------------+
    | Name | Age  |
    +-------------+
    | Eva  | 30   |
    | Amit | 5000 |
    +-------------+
"""

from .exceptions import (
    InvalidColumnError,
    InvalidRowError,
    SourceError,
    TableTextError,
)
from .models import Column, RenderOptions, RenderRequest
from .protocol import (
    DescribedSource,
    TabularSource,
    check_column,
    check_row,
    describe,
)
from .sources import RecordSource, RowSource
from .table import TableRenderer

__all__ = [
    # Protocols
    "TabularSource",
    "DescribedSource",
    "describe",
    "check_column",
    "check_row",
    # Rendering
    "TableRenderer",
    "RenderOptions",
    "RenderRequest",
    # Sources
    "Column",
    "RecordSource",
    "RowSource",
    # Exceptions
    "TableTextError",
    "SourceError",
    "InvalidColumnError",
    "InvalidRowError",
]

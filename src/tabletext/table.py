"""
Table renderer with ASCII borders.

This module provides a TableRenderer class for rendering any TabularSource
as a formatted ASCII table with customizable alignment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .models import RenderOptions
from .protocol import describe

if TYPE_CHECKING:
    from .models import RenderRequest
    from .protocol import TabularSource

logger = logging.getLogger(__name__)


class TableRenderer:
    """Render a tabular source as an ASCII table.

    Example output:
        Engineering
        +-------------+
        | Name | Age  |
        +-------------+
        | Eva  | 30   |
        | Amit | 5000 |
        +-------------+

    The renderer keeps no state between calls. Errors raised by the source
    propagate unchanged and no partial output is returned.
    """

    def __init__(self, options: RenderOptions | None = None) -> None:
        """Initialize the table renderer.

        Args:
            options: Rendering options. Defaults to RenderOptions().
        """
        self._options = options if options is not None else RenderOptions()

    @property
    def options(self) -> RenderOptions:
        return self._options

    def column_widths(self, source: TabularSource) -> list[int]:
        """Calculate column widths (max of label and all cell values).

        Args:
            source: Tabular source to measure

        Returns:
            One width per column
        """
        labels, rows = self._read(source)
        return self._widths(labels, rows)

    def render_lines(self, source: TabularSource, title: str | None = None) -> list[str]:
        """Render a source as a list of text lines.

        Args:
            source: Tabular source to render
            title: Caption line. Defaults to the source's description,
                or an empty string if it has none.

        Returns:
            Title line (unless disabled), separator, header, separator,
            one line per row, closing separator (only when there are rows)

        Raises:
            InvalidColumnError: Propagated from the source
            InvalidRowError: Propagated from the source
        """
        if title is None:
            title = describe(source)

        labels, rows = self._read(source)
        widths = self._widths(labels, rows)
        logger.debug(
            "Rendering table %r: %d row(s) x %d column(s), widths=%s",
            title,
            len(rows),
            len(labels),
            widths,
        )

        # Header labels are always left-aligned
        header_cells = [label.ljust(widths[i]) for i, label in enumerate(labels)]
        header_line = self._line(header_cells)

        # Build separator line
        separator = "+" + "-" * (len(header_line) - 2) + "+"

        # Build output lines
        lines: list[str] = []
        if self._options.show_title:
            lines.append(title)
        lines.append(separator)
        lines.append(header_line)
        lines.append(separator)

        for row in rows:
            cells = [
                self._pad(cell, widths[i], self._options.alignment(i))
                for i, cell in enumerate(row)
            ]
            lines.append(self._line(cells))

        # Without body lines the header separator closes the table
        if rows:
            lines.append(separator)

        return lines

    def render(self, source: TabularSource, title: str | None = None) -> str:
        """Render a source as a newline-joined table string.

        See render_lines() for arguments and errors.
        """
        return "\n".join(self.render_lines(source, title))

    def render_request(self, request: RenderRequest) -> list[str]:
        """Render a RenderRequest as a list of text lines."""
        return self.render_lines(request.source, request.title)

    @staticmethod
    def _read(source: TabularSource) -> tuple[list[str], list[list[str]]]:
        # Full pass over the source before any line is built
        column_count = source.column_count
        labels = [source.label(c) for c in range(column_count)]
        rows = [
            [source.cell(r, c) for c in range(column_count)]
            for r in range(source.row_count)
        ]
        return labels, rows

    @staticmethod
    def _widths(labels: list[str], rows: list[list[str]]) -> list[int]:
        widths = [len(label) for label in labels]
        for row in rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(cell))
        return widths

    @staticmethod
    def _pad(content: str, width: int, align: str) -> str:
        # Never truncates: ljust/rjust/center return content unchanged when
        # it is already at or beyond width
        if align == "r":
            return content.rjust(width)
        if align == "c":
            return content.center(width)
        return content.ljust(width)

    @staticmethod
    def _line(cells: list[str]) -> str:
        return "| " + " | ".join(cells) + " |"

"""Core models for tabletext."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .protocol import TabularSource

ALIGNMENTS = ("l", "r", "c")


@dataclass(frozen=True)
class RenderOptions:
    """
    Rendering configuration for TableRenderer.

    Attributes:
        alignments: Per-column body alignment ('l', 'r', or 'c').
            Columns without an entry are left-aligned. Defaults to
            left-aligned for all columns.
        show_title: Emit the title line above the table
    """

    alignments: tuple[str, ...] | None = None
    show_title: bool = True

    def __post_init__(self) -> None:
        if self.alignments is None:
            return
        for align in self.alignments:
            if align not in ALIGNMENTS:
                raise ValueError(
                    f"Unknown alignment {align!r}: expected one of {', '.join(ALIGNMENTS)}"
                )

    @classmethod
    def from_spec(cls, spec: str, show_title: bool = True) -> "RenderOptions":
        """
        Parse a comma-separated alignment spec.

        Example:
            RenderOptions.from_spec("l,r,r")  # alignments=("l", "r", "r")
        """
        alignments = tuple(part.strip().lower() for part in spec.split(",") if part.strip())
        return cls(alignments=alignments or None, show_title=show_title)

    def alignment(self, column: int) -> str:
        """Alignment for a column index ('l' when unspecified)."""
        if self.alignments is None or column >= len(self.alignments):
            return "l"
        return self.alignments[column]


@dataclass(frozen=True)
class RenderRequest:
    """
    A title plus the source to render.

    Constructed by the caller and consumed once by
    TableRenderer.render_request(). Not retained by the renderer.
    """

    title: str
    source: "TabularSource"


@dataclass(frozen=True)
class Column:
    """
    A named column of a RecordSource.

    Attributes:
        label: Header label
        value: Accessor returning the cell value for a record.
            Non-string values are converted with str().
    """

    label: str
    value: Callable[[Any], Any]

    @classmethod
    def attr(cls, label: str, name: str) -> "Column":
        """Create a column reading attribute `name` from each record."""
        return cls(label=label, value=lambda record: getattr(record, name))

    @classmethod
    def key(cls, label: str, key: str) -> "Column":
        """Create a column reading `record[key]` from each record."""
        return cls(label=label, value=lambda record: record[key])

    def render(self, record: Any) -> str:
        """Cell text for a record."""
        value = self.value(record)
        return value if isinstance(value, str) else str(value)

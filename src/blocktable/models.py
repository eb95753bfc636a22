"""Core models for blocktable."""

from dataclasses import dataclass
from enum import Enum


class Alignment(Enum):
    """Horizontal alignment of cell content within a column."""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class ColumnProfile:
    """
    Mutable per-column accumulator filled in while records are profiled.

    Attributes:
        name: Field name, unique within a table
        max_content_length: Longest display string seen, header included
        all_numeric: False once any non-empty value failed the numeric test
    """

    name: str
    max_content_length: int
    all_numeric: bool = True

    @classmethod
    def for_name(cls, name: str) -> "ColumnProfile":
        """Start a profile whose only observation so far is the header."""
        return cls(name=name, max_content_length=len(name))

    @property
    def header(self) -> str:
        return self.name

    def observe(self, display: str, numeric: bool) -> None:
        """Fold one display string into the profile."""
        self.max_content_length = max(self.max_content_length, len(display))
        if display and not numeric:
            self.all_numeric = False


@dataclass(frozen=True)
class ResolvedColumn:
    """
    A column with its final layout, fixed for every block it appears in.

    Attributes:
        name: Field name
        max_content_length: Longest display string, header included
        width: Rendered width including padding on both sides
        alignment: Alignment of data cells
        padding: Spaces kept on each side of cell content
    """

    name: str
    max_content_length: int
    width: int
    alignment: Alignment
    padding: int = 1

    @property
    def header(self) -> str:
        return self.name


Block = list[ResolvedColumn]
"""An ordered, non-empty group of columns rendered together as one table."""


def block_width(columns: list[ResolvedColumn]) -> int:
    """Rendered width of a block: column widths plus one border per gap and edge."""
    return sum(column.width for column in columns) + len(columns) + 1

"""
Bordered table renderer.

This module provides a TableRenderer class that renders one block of
resolved columns over the buffered records as an ASCII-bordered table.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .models import Alignment, Block, ResolvedColumn
from .records import RecordProtocol, display_string


@dataclass(frozen=True)
class BorderStyle:
    """Glyphs used to draw table borders.

    Each border row has its own left corner, interior junction and right
    corner so box-drawing sets can tell top, middle and bottom apart.
    """

    horizontal: str = "-"
    vertical: str = "|"
    top_left: str = "+"
    top_junction: str = "+"
    top_right: str = "+"
    middle_left: str = "+"
    middle_junction: str = "+"
    middle_right: str = "+"
    bottom_left: str = "+"
    bottom_junction: str = "+"
    bottom_right: str = "+"


ASCII_BORDER = BorderStyle()


class TableRenderer:
    """Render a block of columns as a bordered table.

    Example output:
        +--------+-------+
        |  Name  | Count |
        +--------+-------+
        | item-1 |    10 |
        | item-2 |     5 |
        +--------+-------+
    """

    def __init__(self, border: BorderStyle = ASCII_BORDER) -> None:
        """Initialize the table renderer.

        Args:
            border: Glyph set for borders. Defaults to plain ASCII.
        """
        self._border = border

    def _border_line(self, block: Block, left: str, junction: str, right: str) -> str:
        line = left + "".join(
            self._border.horizontal * column.width + junction for column in block
        )
        # The last junction closes the row.
        return line[: len(line) - len(junction)] + right

    def _row(self, cells: list[str]) -> str:
        bar = self._border.vertical
        return bar + bar.join(cells) + bar

    @staticmethod
    def _header_cell(column: ResolvedColumn) -> str:
        spare = column.width - len(column.header)
        left = spare // 2
        return " " * left + column.header + " " * (spare - left)

    @staticmethod
    def _data_cell(column: ResolvedColumn, value: str) -> str:
        if column.alignment is Alignment.RIGHT:
            content = value.rjust(column.max_content_length)
        else:
            content = value.ljust(column.max_content_length)
        margin = " " * column.padding
        return margin + content + margin

    def render(self, block: Block, records: Sequence[RecordProtocol]) -> str:
        """Render one block over all records.

        Args:
            block: Columns to render, in order
            records: Buffered records; a missing field renders as an empty cell

        Returns:
            Bordered table with trailing whitespace removed
        """
        if not block:
            return ""

        b = self._border
        lines: list[str] = []
        lines.append(self._border_line(block, b.top_left, b.top_junction, b.top_right))
        lines.append(self._row([self._header_cell(column) for column in block]))
        lines.append(
            self._border_line(block, b.middle_left, b.middle_junction, b.middle_right)
        )

        for record in records:
            lines.append(
                self._row(
                    [
                        self._data_cell(column, display_string(record.value(column.name)))
                        for column in block
                    ]
                )
            )

        lines.append(
            self._border_line(block, b.bottom_left, b.bottom_junction, b.bottom_right)
        )

        return "\n".join(lines).rstrip()

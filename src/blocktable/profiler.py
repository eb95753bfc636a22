"""Column profiling: a single pass over every record."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from .models import ColumnProfile
from .records import RecordProtocol, display_string, has_line_break

logger = logging.getLogger(__name__)

# Decimal/real number grammar, independent of the process locale:
# optional sign, digits with optional fraction (or a bare fraction),
# optional exponent.
NUMERIC_PATTERN = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")


def is_numeric(text: str) -> bool:
    """Return True if ``text`` reads as a number, ignoring surrounding whitespace."""
    return NUMERIC_PATTERN.match(text.strip()) is not None


def profile(records: Sequence[RecordProtocol]) -> list[ColumnProfile]:
    """
    Discover columns and measure their content.

    Columns are registered in order of first appearance across all records
    and are never re-sorted. Each column tracks the longest display string
    (header included) and whether every non-empty value was numeric.

    Args:
        records: Buffered records, already adapted to RecordProtocol

    Returns:
        Column profiles in discovery order
    """
    columns: dict[str, ColumnProfile] = {}
    multiline: set[str] = set()

    for record in records:
        for name in record.field_names():
            column = columns.get(name)
            if column is None:
                column = ColumnProfile.for_name(name)
                columns[name] = column
                logger.debug("Discovered column %r", name)

            raw = record.value(name)
            display = display_string(raw)
            column.observe(display, is_numeric(display))

            if name not in multiline and has_line_break(raw):
                multiline.add(name)
                logger.warning(
                    "Column %r contains multi-line values; line breaks are shown as spaces",
                    name,
                )

    return list(columns.values())

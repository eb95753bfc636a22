"""
Block planning.

Splits the ordered column list into blocks that each fit the available
width. The first block takes as many leading columns as fit; every later
block starts with the repeat columns and then takes as many of the
remaining columns as fit. A single pass, left to right, with no
backtracking or reordering.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .exceptions import LayoutError
from .models import Block, ResolvedColumn, block_width

logger = logging.getLogger(__name__)


def _fill(block: Block, remaining: list[ResolvedColumn], available_width: int) -> int:
    """
    Append columns from the front of ``remaining`` while the block still fits.

    Columns already in the block (repeat columns that were never shown) are
    consumed without being added twice.

    Returns:
        Number of columns consumed from ``remaining``
    """
    names = {column.name for column in block}
    consumed = 0
    for column in remaining:
        if column.name in names:
            consumed += 1
            continue
        if block_width([*block, column]) > available_width:
            break
        block.append(column)
        names.add(column.name)
        consumed += 1
    return consumed


def plan(
    columns: Sequence[ResolvedColumn],
    repeat_columns: Sequence[ResolvedColumn],
    available_width: int,
) -> list[Block]:
    """
    Partition columns into blocks that fit ``available_width``.

    Args:
        columns: Resolved columns in discovery order
        repeat_columns: Columns prepended to every block after the first
        available_width: Maximum rendered width of a block

    Returns:
        Blocks in rendering order. Every column appears in at least one
        block and no block is empty. A column too wide for the limit on its
        own is still emitted, alone in its block.

    Raises:
        LayoutError: If planning stops making progress (a bug, not bad input)
    """
    remaining = list(columns)
    if not remaining:
        return []

    first: Block = []
    consumed = _fill(first, remaining, available_width)
    if not first:
        first.append(remaining[0])
        consumed = 1
    blocks = [first]
    remaining = remaining[consumed:]

    repeat: Block = []
    for column in repeat_columns:
        if all(column.name != existing.name for existing in repeat):
            repeat.append(column)

    while remaining:
        block: Block = list(repeat)
        consumed = _fill(block, remaining, available_width)
        if consumed == 0:
            # Nothing fits next to the repeat columns: give the column a block of its own.
            block = [remaining[0]]
            consumed = 1
        if not block or consumed <= 0:
            raise LayoutError(
                f"Block planner made no progress with {len(remaining)} column(s) remaining"
            )
        blocks.append(block)
        remaining = remaining[consumed:]

    logger.debug(
        "Planned %d block(s) for width %d: %s",
        len(blocks),
        available_width,
        [[column.name for column in block] for block in blocks],
    )
    return blocks

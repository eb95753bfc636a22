"""
Table formatting entry points.

Drives the full pipeline: buffer records, profile columns, resolve
layout, pick repeat columns, query the output width once, plan blocks
and render each of them.

Example:
    from blocktable import format_records

    rows = [{"Name": "a", "Id": 1}, {"Name": "bb", "Id": 22}]
    print(format_records(rows, width=40))
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Sequence
from dataclasses import replace
from typing import Any, TextIO

from .config import TableOptions, WidthProvider
from .layout import resolve_all
from .models import ResolvedColumn
from .planner import plan
from .profiler import profile
from .records import as_record
from .renderer import TableRenderer

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "\n\n"


def select_repeat_columns(
    columns: Sequence[ResolvedColumn], names: Iterable[str]
) -> list[ResolvedColumn]:
    """
    Pick the columns to repeat in every block after the first.

    Names that match no column are dropped, duplicates keep their first
    position. Falls back to the first column when nothing valid remains.
    """
    if isinstance(names, str):
        names = (names,)
    by_name = {column.name: column for column in columns}
    selected: list[ResolvedColumn] = []
    for name in names:
        column = by_name.get(name)
        if column is None:
            logger.debug("Ignoring unknown repeat column %r", name)
            continue
        if column not in selected:
            selected.append(column)
    if not selected and columns:
        selected.append(columns[0])
    return selected


def format_records(
    records: Iterable[Any],
    repeat_columns: Iterable[str] | None = None,
    *,
    width: int | None = None,
    options: TableOptions | None = None,
    width_provider: WidthProvider | None = None,
) -> str:
    """
    Render records as one or more bordered tables.

    Args:
        records: Items to render (mappings, dataclasses, named tuples or
            RecordProtocol implementations). Fully buffered before layout.
        repeat_columns: Column names to repeat in each wrapped block.
            Overrides ``options.repeat_columns`` when given.
        width: Fixed output width. Overrides ``options.width`` when given.
        options: Layout options. Defaults to ``TableOptions()``.
        width_provider: Callable returning the available width. Takes
            precedence over ``width`` and ``options``; queried once.

    Returns:
        Rendered text with blocks separated by one blank line, trailing
        whitespace removed. Empty string when there are no records.
    """
    options = options or TableOptions()
    if width is not None:
        options = replace(options, width=width)
    buffered = [as_record(item) for item in records]
    if not buffered:
        return ""

    columns = resolve_all(profile(buffered), options.padding)
    repeat = select_repeat_columns(
        columns,
        options.repeat_columns if repeat_columns is None else repeat_columns,
    )

    if width_provider is None:
        width_provider = options.width_provider()
    available_width = width_provider()
    logger.debug(
        "Laying out %d record(s), %d column(s) in width %d",
        len(buffered),
        len(columns),
        available_width,
    )

    renderer = TableRenderer(options.border)
    blocks = plan(columns, repeat, available_width)
    rendered = [renderer.render(block, buffered) for block in blocks]
    return BLOCK_SEPARATOR.join(rendered).rstrip()


def print_records(
    records: Iterable[Any],
    repeat_columns: Iterable[str] | None = None,
    *,
    file: TextIO | None = None,
    **kwargs: Any,
) -> None:
    """Render records and write them to ``file`` (stdout by default).

    Writes nothing at all when there are no records.
    """
    output = format_records(records, repeat_columns, **kwargs)
    if not output:
        return
    stream = file if file is not None else sys.stdout
    stream.write(output + "\n")

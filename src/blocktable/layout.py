"""Layout resolution: profiled columns to fixed widths and alignments."""

from .models import Alignment, ColumnProfile, ResolvedColumn

DEFAULT_PADDING = 1


def resolve(column: ColumnProfile, padding: int = DEFAULT_PADDING) -> ResolvedColumn:
    """Freeze a profile into its final width and alignment."""
    return ResolvedColumn(
        name=column.name,
        max_content_length=column.max_content_length,
        width=column.max_content_length + 2 * padding,
        alignment=Alignment.RIGHT if column.all_numeric else Alignment.LEFT,
        padding=padding,
    )


def resolve_all(
    columns: list[ColumnProfile], padding: int = DEFAULT_PADDING
) -> list[ResolvedColumn]:
    """Resolve every profile, keeping discovery order."""
    return [resolve(column, padding) for column in columns]

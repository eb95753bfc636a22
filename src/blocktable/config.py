"""Table options and output-width resolution."""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from .exceptions import ValidationError
from .layout import DEFAULT_PADDING
from .renderer import ASCII_BORDER, BorderStyle

WIDTH_ENV_VAR = "BLOCKTABLE_WIDTH"
"""Environment variable overriding the output width."""

PADDING_ENV_VAR = "BLOCKTABLE_PADDING"
"""Environment variable overriding the cell padding."""

REPEAT_ENV_VAR = "BLOCKTABLE_REPEAT"
"""Environment variable listing repeat columns, comma-separated."""

DEFAULT_FALLBACK_WIDTH = 80
"""Width used when no terminal size can be determined."""

WidthProvider = Callable[[], int]


def terminal_width(fallback: int = DEFAULT_FALLBACK_WIDTH) -> int:
    """Current terminal width in columns, or ``fallback`` when unknown.

    Honours ``COLUMNS`` the way :func:`shutil.get_terminal_size` does.
    """
    columns = shutil.get_terminal_size(fallback=(fallback, 24)).columns
    return columns if columns > 0 else fallback


def _parse_int(field_name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(field_name, raw, "must be an integer") from None


def parse_repeat_columns(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated column list, dropping blanks."""
    if not raw:
        return ()
    return tuple(name.strip() for name in raw.split(",") if name.strip())


@dataclass(frozen=True)
class TableOptions:
    """
    Options controlling table layout.

    Attributes:
        repeat_columns: Column names repeated at the start of every block
            after the first. Unknown names are ignored; if none remain the
            first discovered column is repeated.
        width: Fixed output width. ``None`` queries the terminal.
        padding: Spaces on each side of cell content
        fallback_width: Width used when the terminal size is unknown
        border: Border glyphs
    """

    repeat_columns: tuple[str, ...] = ()
    width: int | None = None
    padding: int = DEFAULT_PADDING
    fallback_width: int = DEFAULT_FALLBACK_WIDTH
    border: BorderStyle = ASCII_BORDER

    def __post_init__(self) -> None:
        if self.width is not None and self.width <= 0:
            raise ValidationError("width", self.width, "must be positive")
        if self.padding < 0:
            raise ValidationError("padding", self.padding, "must not be negative")
        if self.fallback_width <= 0:
            raise ValidationError("fallback_width", self.fallback_width, "must be positive")
        # Accept any iterable of names; a lone string is one name.
        names = self.repeat_columns
        if isinstance(names, str):
            names = (names,)
        object.__setattr__(self, "repeat_columns", tuple(names))

    @classmethod
    def from_environment(
        cls,
        repeat_columns: tuple[str, ...] | None = None,
        width: int | None = None,
        padding: int | None = None,
    ) -> TableOptions:
        """Build options from explicit values, then environment variables, then defaults.

        Resolution order for each option: argument → ``BLOCKTABLE_*`` env var →
        default.
        """
        if width is None and os.environ.get(WIDTH_ENV_VAR):
            width = _parse_int("width", os.environ[WIDTH_ENV_VAR])
        if padding is None and os.environ.get(PADDING_ENV_VAR):
            padding = _parse_int("padding", os.environ[PADDING_ENV_VAR])
        if not repeat_columns:
            repeat_columns = parse_repeat_columns(os.environ.get(REPEAT_ENV_VAR))
        return cls(
            repeat_columns=repeat_columns,
            width=width,
            padding=DEFAULT_PADDING if padding is None else padding,
        )

    def width_provider(self) -> WidthProvider:
        """Callable returning the available width for one invocation."""
        if self.width is not None:
            fixed = self.width
            return lambda: fixed
        fallback = self.fallback_width
        return lambda: terminal_width(fallback)

"""Exceptions for blocktable."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class BlockTableError(Exception):
    """
    Base exception for all blocktable errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(BlockTableError):
    """
    Base exception for invalid table options.

    Raised when width, padding or other options cannot be used to lay out
    a table.
    """

    pass


class InputError(BlockTableError):
    """
    Base exception for errors reading records from an input source.
    """

    pass


class LayoutError(BlockTableError):
    """
    Raised when the layout pipeline breaks one of its own invariants.

    This signals a programming fault (for example, the block planner
    producing an empty block while columns remain) rather than bad input.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class ValidationError(ConfigurationError):
    """
    Raised when a configuration value fails validation.

    Attributes:
        field: Name of the option that failed validation
        value: The invalid value
        reason: Human-readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


# ---------------------------------------------------------------------------
# Input Exceptions
# ---------------------------------------------------------------------------


class UnsupportedFormatError(InputError):
    """Raised when an input format name is not recognised."""

    def __init__(self, fmt: str, supported: tuple[str, ...]) -> None:
        self.format = fmt
        self.supported = supported
        super().__init__(
            f"Unsupported input format {fmt!r} (expected one of: {', '.join(supported)})"
        )


class RecordParseError(InputError):
    """
    Raised when input data cannot be turned into records.

    Attributes:
        fmt: Input format being parsed
        detail: What went wrong
    """

    def __init__(self, fmt: str, detail: str) -> None:
        self.format = fmt
        self.detail = detail
        super().__init__(f"Cannot read {fmt} records: {detail}")

"""
blocktable: render records as width-fitted, ASCII-bordered text tables.

Columns are sized to their widest value and right-aligned when every value
is numeric. Tables wider than the output are wrapped into several blocks,
each repeating row-identifying columns at the front.

Example:
    from blocktable import format_records

    rows = [
        {"Name": "alpha", "Id": 1, "Status": "running"},
        {"Name": "beta", "Id": 22, "Status": "stopped"},
    ]
    print(format_records(rows, repeat_columns=["Name"], width=30))
"""

from .config import TableOptions, terminal_width
from .exceptions import (
    BlockTableError,
    ConfigurationError,
    InputError,
    LayoutError,
    RecordParseError,
    UnsupportedFormatError,
    ValidationError,
)
from .formatter import format_records, print_records, select_repeat_columns
from .layout import resolve
from .loaders import load_records
from .models import Alignment, Block, ColumnProfile, ResolvedColumn, block_width
from .planner import plan
from .profiler import is_numeric, profile
from .records import MappingRecord, RecordProtocol, as_record, display_string
from .renderer import ASCII_BORDER, BorderStyle, TableRenderer

try:
    from ._version import __version__  # type: ignore[import-not-found]
except ImportError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Entry points
    "format_records",
    "print_records",
    "load_records",
    "TableOptions",
    "terminal_width",
    # Pipeline stages
    "profile",
    "resolve",
    "plan",
    "select_repeat_columns",
    "TableRenderer",
    "is_numeric",
    # Models
    "Alignment",
    "Block",
    "ColumnProfile",
    "ResolvedColumn",
    "block_width",
    "BorderStyle",
    "ASCII_BORDER",
    # Records
    "RecordProtocol",
    "MappingRecord",
    "as_record",
    "display_string",
    # Exceptions
    "BlockTableError",
    "ConfigurationError",
    "InputError",
    "LayoutError",
    "ValidationError",
    "UnsupportedFormatError",
    "RecordParseError",
]

"""Record protocol and adapters.

Anything that can list its field names and return a value by name can be
rendered. Mappings, dataclass instances and named tuples are wrapped in
:class:`MappingRecord`; custom types may implement :class:`RecordProtocol`
directly.
"""

import dataclasses
import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Protocol, runtime_checkable

TAB_REPLACEMENT = "    "

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@runtime_checkable
class RecordProtocol(Protocol):
    """
    Protocol for a single input item.

    Example:
        class Process:
            def field_names(self) -> Iterable[str]:
                return ("Id", "Name")

            def value(self, name: str) -> Any:
                return {"Id": self.pid, "Name": self.name}.get(name)

        assert isinstance(Process(), RecordProtocol)  # True at runtime
    """

    def field_names(self) -> Iterable[str]:
        """Field names in the record's natural order."""
        ...

    def value(self, name: str) -> Any:
        """Value of ``name``, or ``None`` when the record lacks the field."""
        ...


class MappingRecord:
    """Record view over an ordered key-value mapping."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[Any, Any]) -> None:
        self._data = {str(key): value for key, value in data.items()}

    def field_names(self) -> Iterator[str]:
        return iter(self._data)

    def value(self, name: str) -> Any:
        return self._data.get(name)

    def __repr__(self) -> str:
        return f"MappingRecord({self._data!r})"


def as_record(item: Any) -> RecordProtocol:
    """
    Adapt an input item to :class:`RecordProtocol`.

    Args:
        item: A record, mapping, dataclass instance, named tuple, or plain
            object with instance attributes

    Returns:
        The item itself if it already satisfies the protocol, otherwise a
        :class:`MappingRecord` over its fields

    Raises:
        TypeError: If the item exposes no named fields
    """
    if isinstance(item, RecordProtocol):
        return item
    if isinstance(item, Mapping):
        return MappingRecord(item)
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return MappingRecord(
            {f.name: getattr(item, f.name) for f in dataclasses.fields(item)}
        )
    if isinstance(item, tuple) and hasattr(item, "_asdict"):
        return MappingRecord(item._asdict())
    if hasattr(item, "__dict__") and not isinstance(item, type):
        return MappingRecord(
            {key: value for key, value in vars(item).items() if not key.startswith("_")}
        )
    raise TypeError(f"Cannot use {type(item).__name__} as a record: it has no named fields")


def display_string(value: Any) -> str:
    """
    Convert a field value to the string shown in its cell.

    ``None`` becomes an empty string, tabs become four spaces and line
    breaks become single spaces so every cell stays on one line.
    """
    if value is None:
        return ""
    text = value if isinstance(value, str) else str(value)
    text = text.replace("\t", TAB_REPLACEMENT)
    return _LINE_BREAK.sub(" ", text)


def has_line_break(value: Any) -> bool:
    """True if the value's raw string form spans more than one line."""
    if value is None:
        return False
    return _LINE_BREAK.search(value if isinstance(value, str) else str(value)) is not None

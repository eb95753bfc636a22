"""Read records from JSON, JSON Lines, CSV or YAML text."""

from __future__ import annotations

import csv
import json
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TextIO

import yaml

from .exceptions import RecordParseError, UnsupportedFormatError

logger = logging.getLogger(__name__)

FORMATS = ("json", "jsonl", "csv", "yaml")

_SUFFIXES = {
    ".json": "json",
    ".jsonl": "jsonl",
    ".ndjson": "jsonl",
    ".csv": "csv",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def detect_format(path: str | None, default: str = "json") -> str:
    """Guess the input format from a file name suffix."""
    if not path or path == "-":
        return default
    return _SUFFIXES.get(Path(path).suffix.lower(), default)


def _as_items(fmt: str, document: Any) -> list[Mapping[str, Any]]:
    if document is None:
        return []
    if isinstance(document, Mapping):
        return [document]
    if not isinstance(document, list):
        raise RecordParseError(fmt, f"expected a list of objects, got {type(document).__name__}")
    for index, item in enumerate(document):
        if not isinstance(item, Mapping):
            raise RecordParseError(
                fmt, f"item {index} is {type(item).__name__}, not an object"
            )
    return document


def _load_json(stream: TextIO) -> list[Mapping[str, Any]]:
    text = stream.read()
    if not text.strip():
        return []
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise RecordParseError("json", str(e)) from e
    return _as_items("json", document)


def _load_jsonl(stream: TextIO) -> list[Mapping[str, Any]]:
    items: list[Mapping[str, Any]] = []
    for lineno, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        try:
            item = json.loads(line)
        except json.JSONDecodeError as e:
            raise RecordParseError("jsonl", f"line {lineno}: {e}") from e
        if not isinstance(item, Mapping):
            raise RecordParseError(
                "jsonl", f"line {lineno} is {type(item).__name__}, not an object"
            )
        items.append(item)
    return items


def _load_csv(stream: TextIO) -> list[Mapping[str, Any]]:
    try:
        # Surplus fields land under a None key; they have no header to show under.
        return [
            {key: value for key, value in row.items() if key is not None}
            for row in csv.DictReader(stream)
        ]
    except csv.Error as e:
        raise RecordParseError("csv", str(e)) from e


def _load_yaml(stream: TextIO) -> list[Mapping[str, Any]]:
    try:
        document = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise RecordParseError("yaml", str(e)) from e
    return _as_items("yaml", document)


_LOADERS: dict[str, Callable[[TextIO], list[Mapping[str, Any]]]] = {
    "json": _load_json,
    "jsonl": _load_jsonl,
    "csv": _load_csv,
    "yaml": _load_yaml,
}


def load_records(stream: TextIO, fmt: str = "json") -> list[Mapping[str, Any]]:
    """
    Parse every record from a text stream.

    Args:
        stream: Open text stream
        fmt: One of ``json``, ``jsonl``, ``csv`` or ``yaml``

    Returns:
        Records as mappings, in input order

    Raises:
        UnsupportedFormatError: If ``fmt`` is not a known format
        RecordParseError: If the input is malformed or holds non-object items
    """
    loader = _LOADERS.get(fmt.lower())
    if loader is None:
        raise UnsupportedFormatError(fmt, FORMATS)
    try:
        items = loader(stream)
    except UnicodeDecodeError as e:
        raise RecordParseError(fmt, f"input is not valid text: {e}") from e
    logger.debug("Loaded %d %s record(s)", len(items), fmt)
    return items

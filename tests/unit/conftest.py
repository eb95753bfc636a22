"""Unit test fixtures."""

import pytest

from blocktable.models import Alignment, ResolvedColumn


@pytest.fixture
def process_rows() -> list[dict]:
    """Three-column rows used across formatter and CLI tests."""
    return [
        {"Name": "alpha", "Id": 1, "Status": "running"},
        {"Name": "beta", "Id": 22, "Status": "stopped"},
    ]


@pytest.fixture
def make_column():
    """Factory for resolved columns of a given total width."""

    def _make(
        name: str,
        width: int,
        alignment: Alignment = Alignment.LEFT,
        padding: int = 1,
    ) -> ResolvedColumn:
        return ResolvedColumn(
            name=name,
            max_content_length=width - 2 * padding,
            width=width,
            alignment=alignment,
            padding=padding,
        )

    return _make


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep BLOCKTABLE_* settings from the developer's shell out of tests."""
    for var in ("BLOCKTABLE_WIDTH", "BLOCKTABLE_PADDING", "BLOCKTABLE_REPEAT"):
        monkeypatch.delenv(var, raising=False)

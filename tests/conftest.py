from __future__ import annotations

import pytest


class ChangeRecorder:
    """Collects ``(row, column, value)`` triples passed to a data-change callback."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int, str]] = []

    def __call__(self, row_index: int, column_index: int, value: str) -> None:
        self.calls.append((row_index, column_index, value))


@pytest.fixture
def changes() -> ChangeRecorder:
    return ChangeRecorder()

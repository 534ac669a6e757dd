"""Row data source for the greetings list."""

from __future__ import annotations

from typing import List

DEFAULT_ROW_COUNT = 1000


def greeting_names(count: int = DEFAULT_ROW_COUNT) -> List[str]:
    """Return the ordered row labels "0" .. str(count - 1)."""
    if count < 0:
        raise ValueError(f"Row count must be non-negative, got {count}")
    return [str(index) for index in range(count)]

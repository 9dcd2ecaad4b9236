"""
Record Source Protocol.

Supplies the full collection of a screen. The collection must be
materialized before the query runs; lazy or streaming collections are
not supported.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class RecordSource(Protocol):
    """Abstract interface for data sources."""

    def load(self, screen: str) -> Sequence[Any]:
        """
        Load all records of a screen.

        Args:
            screen: Screen name (e.g. "employees")

        Returns:
            Records in source order, empty if the screen has none
        """
        ...

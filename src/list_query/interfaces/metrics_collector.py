"""
Metrics Collector Protocol.

Tracks stage durations and match counts of list queries. Metrics never
flow into a QueryResult.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class MetricsCollector(Protocol):
    """Abstract interface for metrics collection."""

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        ...

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        ...

    def record_gauge(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        ...

    def get_metrics(self) -> Dict[str, Any]:
        ...

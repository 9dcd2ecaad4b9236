"""
In-Memory Metrics Collector.

Stores raw samples per metric name and summarizes them on demand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from threading import Lock
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class MetricSample:
    """One recorded value."""

    kind: str
    value: float
    tags: Dict[str, str] = field(default_factory=dict)


class InMemoryMetricsCollector:
    """Thread-safe in-memory metrics collector."""

    def __init__(self) -> None:
        self._samples: Dict[str, List[MetricSample]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "count", value, tags)

    def record_gauge(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "gauge", value, tags)

    def samples(
        self, name: str, tags: Optional[Dict[str, str]] = None
    ) -> List[MetricSample]:
        """Raw samples of a metric, optionally restricted to matching tags."""
        with self._lock:
            entries = list(self._samples.get(name, []))
        if not tags:
            return entries
        return [
            s for s in entries if all(s.tags.get(k) == v for k, v in tags.items())
        ]

    def get_metrics(self) -> Dict[str, Any]:
        """Summary per metric: count, total, min, max and last value."""
        with self._lock:
            snapshot = {name: list(entries) for name, entries in self._samples.items()}

        summary: Dict[str, Any] = {}
        for name, entries in snapshot.items():
            if not entries:
                continue
            values = [s.value for s in entries]
            summary[name] = {
                "count": len(values),
                "total": sum(values),
                "min": min(values),
                "max": max(values),
                "last": values[-1],
            }
        return summary

    def clear(self) -> None:
        with self._lock:
            self._samples.clear()

    def _record(
        self,
        name: str,
        kind: str,
        value: float,
        tags: Optional[Dict[str, str]],
    ) -> None:
        sample = MetricSample(kind=kind, value=value, tags=dict(tags or {}))
        with self._lock:
            self._samples.setdefault(name, []).append(sample)

"""
Adapters Package - Infrastructure Implementations.

    - InMemoryRecordSource: Dict-backed RecordSource
    - InMemoryMetricsCollector: Thread-safe in-memory metrics
"""

from list_query.adapters.in_memory_source import InMemoryRecordSource
from list_query.adapters.metrics_collector import InMemoryMetricsCollector

__all__ = [
    "InMemoryRecordSource",
    "InMemoryMetricsCollector",
]

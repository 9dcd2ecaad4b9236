"""
Interfaces Layer - Abstract Protocols for Collaborators.

Protocols:
    - QueryStage: A record stage of the pipeline
    - RecordSource: Supplies the collection of a screen
    - MetricsCollector: Stage timing and count metrics

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: Small, focused interfaces
"""

from list_query.interfaces.metrics_collector import MetricsCollector
from list_query.interfaces.query_stage import QueryStage
from list_query.interfaces.record_source import RecordSource

__all__ = [
    "MetricsCollector",
    "QueryStage",
    "RecordSource",
]

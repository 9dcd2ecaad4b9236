"""
Pipeline Package - Query Orchestration.

Components:
    - ListQueryPipeline: Runs search, filter, sort and pagination for one schema
    - ListQueryService: Resolves a screen, loads its records, runs the pipeline

The pipeline is responsible for:
    - Validating query parameters
    - Executing record stages in sequence
    - Slicing the requested page
    - Recording optional stage metrics

Design Principles:
    - All dependencies injected via constructor
    - Stateless between calls; a query is a pure function of its inputs
"""

from list_query.pipeline.list_query_pipeline import ListQueryPipeline
from list_query.pipeline.list_query_service import ListQueryService

__all__ = [
    "ListQueryPipeline",
    "ListQueryService",
]

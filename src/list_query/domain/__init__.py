"""
Domain Layer - Query Parameters, Results and Field Kinds.

Entities:
    - QueryParams: What the user asked for (search, filters, sort, page)
    - QueryResult: The page to render plus pagination metadata
    - SortSpec / SortOrder: Sort column and direction

Value Objects:
    - FieldKind: Value kind of a record field (string, number, date, boolean)
    - StageTrace: Input/output counts of one pipeline stage

Design Principles:
    - Immutable (frozen Pydantic models)
    - Copy-on-change helpers instead of in-place updates
"""

from list_query.domain.entities import QueryParams, QueryResult, SortOrder, SortSpec
from list_query.domain.value_objects import FieldKind, StageTrace

__all__ = [
    "QueryParams",
    "QueryResult",
    "SortOrder",
    "SortSpec",
    "FieldKind",
    "StageTrace",
]

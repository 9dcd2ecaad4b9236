"""
Stages Package - Concrete Pipeline Stages.

Record stages, applied in order:
    - SearchStage: Free-text substring search
    - FieldFilterStage: Field-equality filters
    - SortStage: Stable single-column sort

Final step:
    - Paginator: Slices the result and computes page totals

Sort Strategies:
    - StringSortStrategy, NumberSortStrategy,
      DateSortStrategy, BooleanSortStrategy

Design Principles:
    - Each stage is independently testable
    - Configuration injected via constructor
    - Stateless; input sequences are never mutated
"""

from list_query.stages.field_filter import FieldFilterStage
from list_query.stages.pagination import Paginator
from list_query.stages.search import SearchStage
from list_query.stages.sort_strategies import (
    BooleanSortStrategy,
    DateSortStrategy,
    NumberSortStrategy,
    SortKeyStrategy,
    StringSortStrategy,
    create_sort_strategies,
)
from list_query.stages.sorting import SortStage

__all__ = [
    "SearchStage",
    "FieldFilterStage",
    "SortStage",
    "Paginator",
    "SortKeyStrategy",
    "StringSortStrategy",
    "NumberSortStrategy",
    "DateSortStrategy",
    "BooleanSortStrategy",
    "create_sort_strategies",
]

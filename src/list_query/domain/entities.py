"""
Core Domain Entities.

This module defines the query a list screen sends to the pipeline and
the result it gets back. Both are immutable; UI state changes produce
new QueryParams via the with_* helpers.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def _missing_(cls, value: object) -> Optional["SortOrder"]:
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class SortSpec(BaseModel):
    """Sort column and direction."""

    field: str = Field(..., description="Sortable field name")
    order: SortOrder = Field(default=SortOrder.ASC)

    model_config = {"frozen": True}

    def toggled(self) -> "SortSpec":
        """Same column, opposite direction."""
        flipped = SortOrder.DESC if self.order is SortOrder.ASC else SortOrder.ASC
        return SortSpec(field=self.field, order=flipped)

    @classmethod
    def next_for(cls, current: Optional["SortSpec"], field: str) -> "SortSpec":
        """
        Sort that results from clicking a column header.

        Clicking the column currently sorted ascending flips it to
        descending; any other click sorts the clicked column ascending.
        """
        if current is not None and current.field == field and current.order is SortOrder.ASC:
            return current.toggled()
        return cls(field=field, order=SortOrder.ASC)


class QueryParams(BaseModel):
    """Input for a list query."""

    search_term: Optional[str] = Field(
        default=None, description="Free-text term, empty means no text filter"
    )
    filters: Dict[str, Any] = Field(
        default_factory=dict, description="Field -> required value or sentinel"
    )
    sort: Optional[SortSpec] = Field(default=None, description="Sort, None keeps order")
    page: int = Field(default=1, description="1-indexed page number")
    page_size: Optional[int] = Field(
        default=None, description="Page size, None uses the configured default"
    )

    model_config = {"frozen": True}

    def with_search(self, term: Optional[str], *, reset_page: bool = False) -> "QueryParams":
        return self._copy({"search_term": term}, reset_page)

    def with_filter(
        self, field: str, value: Any, *, reset_page: bool = False
    ) -> "QueryParams":
        filters = dict(self.filters)
        filters[field] = value
        return self._copy({"filters": filters}, reset_page)

    def without_filter(self, field: str, *, reset_page: bool = False) -> "QueryParams":
        filters = {k: v for k, v in self.filters.items() if k != field}
        return self._copy({"filters": filters}, reset_page)

    def with_sort(self, sort: Optional[SortSpec], *, reset_page: bool = False) -> "QueryParams":
        return self._copy({"sort": sort}, reset_page)

    def with_page(self, page: int) -> "QueryParams":
        return self.model_copy(update={"page": page})

    def _copy(self, update: Dict[str, Any], reset_page: bool) -> "QueryParams":
        if reset_page:
            update["page"] = 1
        return self.model_copy(update=update)


class QueryResult(BaseModel):
    """The page of records to render plus pagination metadata."""

    items: List[Any] = Field(default_factory=list, description="Records on this page")
    total_matched: int = Field(default=0, description="Records passing search and filters")
    total_pages: int = Field(default=0, description="ceil(total_matched / page_size)")
    page: int = Field(default=1)
    page_size: int

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1 and self.total_pages > 0

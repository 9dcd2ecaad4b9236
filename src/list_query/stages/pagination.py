"""
Paginator - Slice a Sorted Sequence into Pages.

Pages are 1-indexed. A page past the end is an empty page rather than
an error or the last page, since some screens keep their page number
when the filters change.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from list_query.config.models import PaginationConfig
from list_query.domain.entities import QueryParams, QueryResult


class Paginator:
    """Builds the QueryResult for one page."""

    def __init__(self, config: PaginationConfig) -> None:
        self.config = config

    def resolve_page_size(self, params: QueryParams) -> int:
        """Requested page size, or the configured default."""
        if params.page_size is None:
            return self.config.default_page_size
        return params.page_size

    def paginate(
        self,
        records: Sequence[Any],
        page: int,
        page_size: Optional[int] = None,
    ) -> QueryResult:
        """
        Slice records to a page.

        Args:
            records: Fully searched, filtered and sorted records
            page: 1-indexed page number (validated >= 1)
            page_size: Positive page size (validated)

        Returns:
            QueryResult with items of the page and totals
        """
        size = page_size if page_size is not None else self.config.default_page_size
        total = len(records)
        total_pages = -(-total // size)

        start = (page - 1) * size
        items = list(records[start:start + size]) if start < total else []

        return QueryResult(
            items=items,
            total_matched=total,
            total_pages=total_pages,
            page=page,
            page_size=size,
        )

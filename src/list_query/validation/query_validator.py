"""
Query Validator - Validate Query Parameters.

Checks a QueryParams against the schema of the screen it targets:
    - page_size positive, and within max_page_size when one is configured
    - page 1-indexed
    - filter fields declared and filterable
    - sort field declared and sortable

Data content never fails validation: empty collections, no matches and
pages past the end are valid queries with an empty result.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from list_query.config.models import ListQueryConfig
from list_query.domain.entities import QueryParams
from list_query.schema.record_schema import RecordSchema

logger = logging.getLogger(__name__)


class InvalidArgument(ValueError):
    """Raised when a caller violates a query precondition."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class QueryValidator:
    """Validates query parameters before the pipeline runs."""

    def __init__(self, config: Optional[ListQueryConfig] = None) -> None:
        self.config = config or ListQueryConfig()

    def validate(self, params: QueryParams, schema: RecordSchema) -> None:
        """
        Validate a query against a schema.

        Args:
            params: Query parameters
            schema: Schema of the queried screen

        Raises:
            InvalidArgument: If any precondition fails
        """
        violations: List[Tuple[str, str]] = []

        violations.extend(self._check_paging(params))
        for name in params.filters:
            violation = self._check_filter_field(schema, name)
            if violation:
                violations.append(violation)
        if params.sort is not None:
            violation = self._check_sort_field(schema, params.sort.field)
            if violation:
                violations.append(violation)

        if violations:
            message = "; ".join(msg for _, msg in violations)
            field = violations[0][0] if len(violations) == 1 else None
            logger.error(f"Query validation failed for '{schema.name}': {message}")
            raise InvalidArgument(message, field=field)

    def validate_filter_field(self, schema: RecordSchema, name: str) -> None:
        """
        Validate a single filter field name (facet lookups).

        Raises:
            InvalidArgument: If the field is unknown or not filterable
        """
        violation = self._check_filter_field(schema, name)
        if violation:
            raise InvalidArgument(violation[1], field=violation[0])

    def _check_paging(self, params: QueryParams) -> List[Tuple[str, str]]:
        errors: List[Tuple[str, str]] = []
        size = params.page_size
        cap = self.config.pagination.max_page_size
        if size is not None:
            if size <= 0:
                errors.append(("page_size", f"page_size must be positive, got {size}"))
            elif cap is not None and size > cap:
                errors.append(("page_size", f"page_size {size} exceeds maximum {cap}"))
        if params.page < 1:
            errors.append(("page", f"page must be >= 1, got {params.page}"))
        return errors

    @staticmethod
    def _check_filter_field(
        schema: RecordSchema, name: str
    ) -> Optional[Tuple[str, str]]:
        key = f"filters.{name}"
        if name not in schema:
            return key, f"Unknown filter field '{name}' for '{schema.name}'"
        if not schema.is_filterable(name):
            return key, f"Field '{name}' of '{schema.name}' is not filterable"
        return None

    @staticmethod
    def _check_sort_field(
        schema: RecordSchema, name: str
    ) -> Optional[Tuple[str, str]]:
        if name not in schema:
            return "sort.field", f"Unknown sort field '{name}' for '{schema.name}'"
        if not schema.is_sortable(name):
            return "sort.field", f"Field '{name}' of '{schema.name}' is not sortable"
        return None

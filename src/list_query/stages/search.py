"""
Search Stage Implementation.

Keeps records where at least one searchable field contains the search
term as a case-insensitive substring:
    - Strings are casefolded
    - Numbers are rendered with the configured format (pay stub amounts)
    - List-valued accessors match if any element matches
    - None never matches
"""

from __future__ import annotations

from numbers import Number
from typing import Any, Iterator, List, Optional, Sequence

from list_query.config.models import SearchConfig
from list_query.domain.entities import QueryParams
from list_query.domain.value_objects import FieldKind
from list_query.schema.record_schema import COLLECTION_TYPES, FieldSpec, RecordSchema


class SearchStage:
    """Free-text search over the schema's searchable fields."""

    def __init__(self, schema: RecordSchema, config: SearchConfig) -> None:
        self.schema = schema
        self.config = config
        self._fields = schema.searchable_fields

    @property
    def name(self) -> str:
        return "search"

    def apply(self, records: Sequence[Any], params: QueryParams) -> List[Any]:
        """
        Apply free-text search.

        Args:
            records: Records to search
            params: Query parameters (search_term)

        Returns:
            Matching records in input order
        """
        needle = self.normalize_term(params.search_term)
        if not needle:
            return list(records)
        return [r for r in records if self.matches(r, needle)]

    def normalize_term(self, term: Optional[str]) -> str:
        """Casefolded search term, empty when there is nothing to match."""
        if not term:
            return ""
        if self.config.trim_term:
            term = term.strip()
        return term.casefold()

    def matches(self, record: Any, needle: str) -> bool:
        return any(
            needle in text
            for spec in self._fields
            for text in self._texts(spec, record)
        )

    def _texts(self, spec: FieldSpec, record: Any) -> Iterator[str]:
        value = spec.read(record)
        if isinstance(value, COLLECTION_TYPES):
            for item in value:
                text = self._render(spec, item)
                if text is not None:
                    yield text
        else:
            text = self._render(spec, value)
            if text is not None:
                yield text

    def _render(self, spec: FieldSpec, value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, str):
            return value.casefold()
        if (
            spec.kind is FieldKind.NUMBER
            and isinstance(value, Number)
            and not isinstance(value, bool)
        ):
            return format(value, self.config.number_format)
        return str(value).casefold()

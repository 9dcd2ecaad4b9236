"""
Field Filter Stage Implementation.

Keeps records whose value equals the requested value for every
constrained filter. Values are compared exactly, without case folding,
since filter fields hold enum-like categories. A collection-valued field
(e.g. the plan types of an enrollment) passes when any element equals
the requested value. A filter value of None or one of the configured
sentinels ("all") leaves the field unconstrained.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Sequence, Tuple

from list_query.config.models import FilterConfig
from list_query.domain.entities import QueryParams
from list_query.schema.record_schema import COLLECTION_TYPES, FieldSpec, RecordSchema


class FieldFilterStage:
    """Conjunction of field-equality filters."""

    def __init__(self, schema: RecordSchema, config: FilterConfig) -> None:
        self.schema = schema
        self.config = config

    @property
    def name(self) -> str:
        return "field_filter"

    def apply(self, records: Sequence[Any], params: QueryParams) -> List[Any]:
        """
        Apply field filters.

        Args:
            records: Records to filter
            params: Query parameters (filters, already validated)

        Returns:
            Records passing every constrained filter, in input order
        """
        constraints = self.constraints(params.filters)
        if not constraints:
            return list(records)
        return [
            r
            for r in records
            if all(self.matches(spec.read(r), wanted) for spec, wanted in constraints)
        ]

    def constraints(self, filters: Mapping[str, Any]) -> List[Tuple[FieldSpec, Any]]:
        """Filters that actually constrain a field, in request order."""
        active: List[Tuple[FieldSpec, Any]] = []
        for name, value in filters.items():
            if self.is_unconstrained(value):
                continue
            spec = self.schema.get_field(name)
            if spec is not None:
                active.append((spec, value))
        return active

    def is_unconstrained(self, value: Any) -> bool:
        if value is None:
            return True
        return isinstance(value, str) and value in self.config.unconstrained_values

    @staticmethod
    def matches(value: Any, wanted: Any) -> bool:
        if isinstance(value, COLLECTION_TYPES):
            return any(item == wanted for item in value)
        return value == wanted

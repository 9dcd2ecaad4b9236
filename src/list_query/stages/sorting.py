"""
Sort Stage Implementation.

Orders records by the requested field using the strategy for that
field's kind. The sort is stable in both directions, so ties keep their
input order. Values the strategy cannot order (missing, unparsable) are
kept apart in input order and placed last unless configured otherwise.
"""

from __future__ import annotations

import logging
from operator import itemgetter
from typing import Any, List, Sequence, Tuple

from list_query.config.models import SortingConfig
from list_query.domain.entities import QueryParams, SortOrder
from list_query.schema.record_schema import RecordSchema
from list_query.stages.sort_strategies import create_sort_strategies

logger = logging.getLogger(__name__)


class SortStage:
    """Stable single-column sort."""

    def __init__(self, schema: RecordSchema, config: SortingConfig) -> None:
        self.schema = schema
        self.config = config
        self.strategies = create_sort_strategies(config)

    @property
    def name(self) -> str:
        return "sort"

    def apply(self, records: Sequence[Any], params: QueryParams) -> List[Any]:
        """
        Apply sorting.

        Args:
            records: Records to sort
            params: Query parameters (sort, already validated)

        Returns:
            New list in sorted order; input order when no sort is given
        """
        if params.sort is None:
            return list(records)

        spec = self.schema.get_field(params.sort.field)
        strategy = self.strategies[spec.kind]
        descending = params.sort.order is SortOrder.DESC

        keyed: List[Tuple[Any, Any]] = []
        unordered: List[Any] = []
        for record in records:
            key = strategy.sort_key(spec.read(record))
            if key is None:
                unordered.append(record)
            else:
                keyed.append((key, record))

        keyed.sort(key=itemgetter(0), reverse=descending)
        ordered = [record for _, record in keyed]

        if unordered:
            logger.debug(
                f"{len(unordered)} records without a '{spec.name}' value to sort by"
            )
        if self.config.missing_last:
            return ordered + unordered
        return unordered + ordered

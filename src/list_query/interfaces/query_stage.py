"""
Query Stage Protocol.

A record stage takes the records left by the previous stage and returns
a new list. Stages are stateless; the schema and config are injected
via the constructor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from list_query.domain.entities import QueryParams


@runtime_checkable
class QueryStage(Protocol):
    """Abstract interface for record stages."""

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        ...

    def apply(self, records: Sequence[Any], params: "QueryParams") -> List[Any]:
        """
        Apply the stage.

        Args:
            records: Records from the previous stage, never mutated
            params: Query parameters

        Returns:
            New list of records for the next stage
        """
        ...

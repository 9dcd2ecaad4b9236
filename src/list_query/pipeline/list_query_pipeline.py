"""
List Query Pipeline - Main Orchestrator.

Turns a collection and a QueryParams into the page a list screen
renders. The pipeline holds no state between calls and never mutates
its input; calling it twice with the same arguments returns equal
results.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Iterable, List, Optional, Tuple

from list_query.config.models import ListQueryConfig
from list_query.domain.entities import QueryParams, QueryResult
from list_query.domain.value_objects import StageTrace
from list_query.interfaces.metrics_collector import MetricsCollector
from list_query.interfaces.query_stage import QueryStage
from list_query.schema.record_schema import COLLECTION_TYPES, RecordSchema
from list_query.stages.field_filter import FieldFilterStage
from list_query.stages.pagination import Paginator
from list_query.stages.search import SearchStage
from list_query.stages.sorting import SortStage
from list_query.validation.query_validator import QueryValidator

logger = logging.getLogger(__name__)


class ListQueryPipeline:
    """Search, filter, sort and paginate records of one schema."""

    def __init__(
        self,
        schema: RecordSchema,
        config: Optional[ListQueryConfig] = None,
        metrics_collector: Optional[MetricsCollector] = None,
        validator: Optional[QueryValidator] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            schema: Record schema of the queried screen
            config: Query configuration (defaults apply if omitted)
            metrics_collector: For stage timings (optional)
            validator: For precondition checks (defaults to QueryValidator)
        """
        self.schema = schema
        self.config = config or ListQueryConfig()
        self.metrics_collector = metrics_collector
        self.validator = validator or QueryValidator(self.config)

        self.sort_stage = SortStage(schema, self.config.sorting)
        self.filter_stage = FieldFilterStage(schema, self.config.filters)
        self.stages: List[QueryStage] = [
            SearchStage(schema, self.config.search),
            self.filter_stage,
            self.sort_stage,
        ]
        self.paginator = Paginator(self.config.pagination)

    def query(
        self,
        collection: Iterable[Any],
        params: Optional[QueryParams] = None,
    ) -> QueryResult:
        """
        Execute the query.

        Args:
            collection: All records of the screen, in source order
            params: Query parameters (defaults: no search, no filters,
                    no sort, first page, default page size)

        Returns:
            QueryResult with the requested page and totals

        Raises:
            InvalidArgument: If params violate a precondition
        """
        params = params or QueryParams()
        self.validator.validate(params, self.schema)

        start_time = time.perf_counter()
        records = list(collection)
        traces: List[StageTrace] = []

        for stage in self.stages:
            trace, records = self._execute_stage(stage, records, params)
            traces.append(trace)

        result = self.paginator.paginate(
            records, params.page, self.paginator.resolve_page_size(params)
        )

        stage_summary = ", ".join(
            f"{t.stage_name} {t.input_count}->{t.output_count} (-{t.removed_count})"
            for t in traces
        )
        logger.debug(
            f"Query on '{self.schema.name}': {stage_summary}; "
            f"page {result.page}/{result.total_pages} "
            f"({len(result.items)} of {result.total_matched})"
        )

        if self.metrics_collector:
            tags = {"schema": self.schema.name}
            self.metrics_collector.record_count(
                "records_matched_total", result.total_matched, tags
            )
            self.metrics_collector.record_timing(
                "query_total_seconds", time.perf_counter() - start_time, tags
            )

        return result

    def filter_options(self, collection: Iterable[Any], field: str) -> List[Any]:
        """
        Options for a filter dropdown.

        Args:
            collection: All records of the screen
            field: Filterable field name

        Returns:
            The default unconstrained sentinel followed by the distinct
            non-None values of the field, in the field's sort order

        Raises:
            InvalidArgument: If the field is unknown or not filterable
        """
        self.validator.validate_filter_field(self.schema, field)
        spec = self.schema.get_field(field)
        strategy = self.sort_stage.strategies[spec.kind]

        distinct: List[Any] = []
        for record in collection:
            value = spec.read(record)
            values = value if isinstance(value, COLLECTION_TYPES) else (value,)
            for item in values:
                if item is not None and item not in distinct:
                    distinct.append(item)

        orderable = [v for v in distinct if strategy.sort_key(v) is not None]
        orderable.sort(key=strategy.sort_key)
        rest = [v for v in distinct if strategy.sort_key(v) is None]
        return [self.config.filters.default_sentinel] + orderable + rest

    def _execute_stage(
        self,
        stage: QueryStage,
        records: List[Any],
        params: QueryParams,
    ) -> Tuple[StageTrace, List[Any]]:
        """Execute a single record stage."""
        stage_start = time.perf_counter()
        output = stage.apply(records, params)
        stage_duration = time.perf_counter() - stage_start

        if self.metrics_collector:
            self.metrics_collector.record_timing(
                "stage_duration_seconds",
                stage_duration,
                {"stage": stage.name, "schema": self.schema.name},
            )

        trace = StageTrace(
            stage_name=stage.name,
            input_count=len(records),
            output_count=len(output),
        )
        return trace, output

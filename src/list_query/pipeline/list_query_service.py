"""
List Query Service - Screen-Level Entry Point.

Resolves a screen name to its schema, loads the screen's records from a
RecordSource and runs the pipeline on them.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from list_query.config.models import ListQueryConfig
from list_query.domain.entities import QueryParams, QueryResult
from list_query.interfaces.metrics_collector import MetricsCollector
from list_query.interfaces.record_source import RecordSource
from list_query.pipeline.list_query_pipeline import ListQueryPipeline
from list_query.registry.screen_registry import ScreenRegistry
from list_query.schema.record_schema import RecordSchema

logger = logging.getLogger(__name__)


class ListQueryService:
    """Queries named screens."""

    def __init__(
        self,
        registry: ScreenRegistry,
        source: RecordSource,
        config: Optional[ListQueryConfig] = None,
        metrics_collector: Optional[MetricsCollector] = None,
    ) -> None:
        """
        Initialize service.

        Args:
            registry: Screen name -> schema
            source: Supplies the records of each screen
            config: Query configuration shared by all screens
            metrics_collector: Passed on to every pipeline (optional)
        """
        self.registry = registry
        self.source = source
        self.config = config or ListQueryConfig()
        self.metrics_collector = metrics_collector

    def query(self, screen: str, params: Optional[QueryParams] = None) -> QueryResult:
        """
        Query a screen.

        Raises:
            InvalidArgument: If the screen is unknown or params are invalid
        """
        pipeline = self.pipeline_for(self.registry.require(screen))
        return pipeline.query(self.source.load(screen), params)

    def filter_options(self, screen: str, field: str) -> List[Any]:
        """Dropdown options of a filter field of a screen."""
        pipeline = self.pipeline_for(self.registry.require(screen))
        return pipeline.filter_options(self.source.load(screen), field)

    def pipeline_for(self, schema: RecordSchema) -> ListQueryPipeline:
        return ListQueryPipeline(
            schema,
            config=self.config,
            metrics_collector=self.metrics_collector,
        )

"""
Screen Registry - Named Record Schemas.

This module provides a thread-safe registry of the list screens the
application knows about, each with the RecordSchema it is queried with.

Usage:
    registry = ScreenRegistry()
    registry.register(EMPLOYEE_SCHEMA, description="Employee directory")
    schema = registry.require("employees")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Dict, List, Optional

from list_query.schema.record_schema import RecordSchema
from list_query.validation.query_validator import InvalidArgument

logger = logging.getLogger(__name__)


@dataclass
class ScreenInfo:
    """Metadata about a registered screen."""

    name: str
    schema: RecordSchema
    description: str = ""
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "description": self.description,
            "tags": self.tags,
            "searchable": [f.name for f in self.schema.searchable_fields],
            "filterable": [f.name for f in self.schema.filterable_fields],
            "sortable": [f.name for f in self.schema.sortable_fields],
        }


class ScreenRegistry:
    """Thread-safe registry of list screens."""

    def __init__(self) -> None:
        self._screens: Dict[str, ScreenInfo] = {}
        self._lock = RLock()

    def register(
        self,
        schema: RecordSchema,
        description: str = "",
        tags: Optional[List[str]] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        Register a screen.

        Args:
            schema: Schema the screen is queried with
            description: Optional description
            tags: Optional tags for categorization
            name: Screen name, defaults to the schema name

        Raises:
            ValueError: If a screen with this name is already registered
        """
        screen = name or schema.name
        with self._lock:
            if screen in self._screens:
                raise ValueError(
                    f"Screen '{screen}' is already registered. Use unregister() first."
                )
            self._screens[screen] = ScreenInfo(
                name=screen,
                schema=schema,
                description=description,
                tags=tags or [],
            )
            logger.info(f"Registered screen: {screen}")

    def unregister(self, name: str) -> bool:
        """
        Unregister a screen.

        Returns:
            True if removed, False if not found
        """
        with self._lock:
            if name not in self._screens:
                logger.warning(f"Cannot unregister: screen '{name}' not found")
                return False
            del self._screens[name]
            logger.info(f"Unregistered screen: {name}")
            return True

    def get(self, name: str) -> Optional[RecordSchema]:
        """Schema of a screen, or None if not registered."""
        with self._lock:
            info = self._screens.get(name)
            return info.schema if info else None

    def require(self, name: str) -> RecordSchema:
        """
        Schema of a screen.

        Raises:
            InvalidArgument: If the screen is not registered
        """
        schema = self.get(name)
        if schema is None:
            raise InvalidArgument(
                f"Unknown screen '{name}'. Registered: {', '.join(self.names()) or 'none'}",
                field="screen",
            )
        return schema

    def list_all(self) -> Dict[str, ScreenInfo]:
        with self._lock:
            return dict(self._screens)

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._screens)

    @property
    def registered_count(self) -> int:
        with self._lock:
            return len(self._screens)

    def clear(self) -> None:
        """Remove all registered screens."""
        with self._lock:
            self._screens.clear()
            logger.info("Cleared all screens from registry")

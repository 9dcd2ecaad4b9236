"""
In-Memory Record Source.

Holds one immutable snapshot per screen. Callers get tuples, so the
pipeline's input cannot be mutated through the source.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


class InMemoryRecordSource:
    """Dict-backed record source."""

    def __init__(self, collections: Optional[Mapping[str, Iterable[Any]]] = None) -> None:
        self._collections: Dict[str, Tuple[Any, ...]] = {}
        for screen, records in (collections or {}).items():
            self.set_records(screen, records)

    def load(self, screen: str) -> Tuple[Any, ...]:
        """Records of a screen, empty for screens without data."""
        return self._collections.get(screen, ())

    def set_records(self, screen: str, records: Iterable[Any]) -> None:
        """Replace the snapshot of a screen."""
        self._collections[screen] = tuple(records)
        logger.debug(f"Loaded {len(self._collections[screen])} records for {screen}")

    @property
    def screens(self) -> List[str]:
        return sorted(self._collections)

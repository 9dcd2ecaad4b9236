"""
Sort Strategies - Field-Kind Specific Sort Keys.

Provides Strategy Pattern implementations, one per FieldKind:
    - StringSortStrategy: Accent- and case-insensitive collation
    - NumberSortStrategy: Numeric order
    - DateSortStrategy: Order by parsed instant, not by raw string
    - BooleanSortStrategy: True before False

Design Notes:
    - The schema picks the strategy, values are never type-sniffed per call
    - A strategy returns None for values it cannot order; the sort stage
      places those apart from the ordered ones
"""

from __future__ import annotations

import logging
import math
import unicodedata
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Optional, Protocol

from dateutil import parser as date_parser

from list_query.config.models import SortingConfig
from list_query.domain.value_objects import FieldKind

logger = logging.getLogger(__name__)

# Fills in components a date string leaves out, so parsing never depends
# on the current date.
_PARSE_DEFAULT = datetime(1970, 1, 1)


class SortKeyStrategy(Protocol):
    """Strategy protocol for field-kind specific sort keys."""

    def sort_key(self, value: Any) -> Optional[Any]:
        """
        Map a field value to a comparable key.

        Args:
            value: Raw field value

        Returns:
            Key comparable with every other key of this strategy,
            or None if the value cannot be ordered
        """
        ...


class StringSortStrategy:
    """Collates strings ignoring accents and case, then by exact text."""

    def sort_key(self, value: Any) -> Optional[Any]:
        if value is None:
            return None
        text = value if isinstance(value, str) else str(value)
        decomposed = unicodedata.normalize("NFKD", text)
        base = "".join(c for c in decomposed if not unicodedata.combining(c))
        return (base.casefold(), decomposed.casefold(), text)


class NumberSortStrategy:
    """Orders numbers, accepting numeric strings."""

    def sort_key(self, value: Any) -> Optional[Any]:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, Decimal):
            return None if value.is_nan() else value
        if isinstance(value, int):
            return value
        try:
            number = float(value)
        except (TypeError, ValueError):
            logger.debug(f"Unorderable number value: {value!r}")
            return None
        return None if math.isnan(number) else number


class DateSortStrategy:
    """
    Orders dates by parsed instant.

    "2024-2-01" sorts before "2024-10-01". Naive values are taken as UTC
    so naive and aware values compare.
    """

    def __init__(self, config: SortingConfig) -> None:
        self.config = config

    def sort_key(self, value: Any) -> Optional[Any]:
        if value is None:
            return None
        if isinstance(value, datetime):
            instant = value
        elif isinstance(value, date):
            instant = datetime(value.year, value.month, value.day)
        elif isinstance(value, str):
            instant = self._parse(value)
            if instant is None:
                return None
        else:
            logger.debug(f"Unorderable date value: {value!r}")
            return None

        if instant.tzinfo is None:
            return instant.replace(tzinfo=timezone.utc)
        return instant.astimezone(timezone.utc)

    def _parse(self, text: str) -> Optional[datetime]:
        try:
            return date_parser.parse(
                text, dayfirst=self.config.dayfirst, default=_PARSE_DEFAULT
            )
        except (ValueError, OverflowError) as e:
            logger.debug(f"Unparsable date {text!r}: {e}")
            return None


class BooleanSortStrategy:
    """Orders True before False in ascending order."""

    def sort_key(self, value: Any) -> Optional[Any]:
        if not isinstance(value, bool):
            return None
        return 0 if value else 1


# =============================================================================
# Strategy Factory
# =============================================================================

def create_sort_strategies(config: SortingConfig) -> Dict[FieldKind, SortKeyStrategy]:
    """
    Factory function to create one strategy per field kind.

    Args:
        config: Sorting config

    Returns:
        Dict mapping FieldKind to SortKeyStrategy
    """
    return {
        FieldKind.STRING: StringSortStrategy(),
        FieldKind.NUMBER: NumberSortStrategy(),
        FieldKind.DATE: DateSortStrategy(config),
        FieldKind.BOOLEAN: BooleanSortStrategy(),
    }

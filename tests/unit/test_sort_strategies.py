"""
Unit Tests for Sort Strategies.

Test Aspects Covered:
    ✅ Business Logic: Ordering per field kind
    ✅ Time Logic: Dates ordered by instant, not by text
    ✅ Edge Cases: Unorderable values map to None
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from list_query.config.models import SortingConfig
from list_query.domain.value_objects import FieldKind
from list_query.stages.sort_strategies import (
    BooleanSortStrategy,
    DateSortStrategy,
    NumberSortStrategy,
    StringSortStrategy,
    create_sort_strategies,
)


class TestStringSortStrategy:
    """Test cases for StringSortStrategy."""

    def test_case_insensitive_order(self) -> None:
        """
        SCENARIO: Mixed-case names
        EXPECTED: Alphabetical regardless of case
        """
        strategy = StringSortStrategy()
        names = ["bob", "Alice", "carol"]

        assert sorted(names, key=strategy.sort_key) == ["Alice", "bob", "carol"]

    def test_accents_sort_with_base_letter(self) -> None:
        """
        SCENARIO: Accented initial letter
        EXPECTED: Sorts next to the unaccented letter, not after z
        """
        strategy = StringSortStrategy()
        names = ["Zoe", "Émile", "Eve", "Adam"]

        assert sorted(names, key=strategy.sort_key) == ["Adam", "Émile", "Eve", "Zoe"]

    def test_none_is_unorderable(self) -> None:
        assert StringSortStrategy().sort_key(None) is None


class TestNumberSortStrategy:
    """Test cases for NumberSortStrategy."""

    def test_numeric_not_lexicographic(self) -> None:
        """
        SCENARIO: 10 vs 9
        EXPECTED: 9 sorts first
        """
        strategy = NumberSortStrategy()

        assert sorted([10, 9, 100], key=strategy.sort_key) == [9, 10, 100]

    def test_numeric_strings_and_decimals(self) -> None:
        strategy = NumberSortStrategy()

        assert strategy.sort_key("12.5") == 12.5
        assert strategy.sort_key(Decimal("3.10")) == Decimal("3.10")

    @pytest.mark.parametrize(
        "value", [None, "n/a", float("nan"), Decimal("NaN"), Decimal("sNaN"), True, object()]
    )
    def test_unorderable_values(self, value: object) -> None:
        assert NumberSortStrategy().sort_key(value) is None


class TestDateSortStrategy:
    """Test cases for DateSortStrategy."""

    def test_unpadded_dates_sort_chronologically(self) -> None:
        """
        SCENARIO: "2024-10-01" vs "2024-2-01"
        EXPECTED: February first, unlike a plain string sort
        """
        strategy = DateSortStrategy(SortingConfig())
        values = ["2024-10-01", "2024-2-01"]

        assert sorted(values) == ["2024-10-01", "2024-2-01"]
        assert sorted(values, key=strategy.sort_key) == ["2024-2-01", "2024-10-01"]

    def test_mixed_value_types_compare(self) -> None:
        """
        SCENARIO: date, naive datetime, aware datetime and ISO string
        EXPECTED: All produce comparable UTC keys
        """
        strategy = DateSortStrategy(SortingConfig())
        plus_two = timezone(timedelta(hours=2))
        values = [
            "2024-01-03T00:00:00Z",
            date(2024, 1, 1),
            datetime(2024, 1, 2, 12, 0),
            datetime(2024, 1, 2, 13, 0, tzinfo=plus_two),  # 11:00 UTC
        ]

        ordered = sorted(values, key=strategy.sort_key)

        assert ordered == [values[1], values[3], values[2], values[0]]

    def test_dayfirst(self) -> None:
        """
        SCENARIO: Ambiguous "01/02/2024" with dayfirst enabled
        EXPECTED: Parsed as 1 February
        """
        strategy = DateSortStrategy(SortingConfig(dayfirst=True))

        key = strategy.sort_key("01/02/2024")

        assert key == datetime(2024, 2, 1, tzinfo=timezone.utc)

    def test_parsing_independent_of_today(self) -> None:
        """
        SCENARIO: Partial date string without a year
        EXPECTED: Missing parts filled from a fixed default
        """
        strategy = DateSortStrategy(SortingConfig())

        assert strategy.sort_key("March 5") == datetime(1970, 3, 5, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", [None, "", "not a date", 12345])
    def test_unorderable_values(self, value: object) -> None:
        assert DateSortStrategy(SortingConfig()).sort_key(value) is None


class TestBooleanSortStrategy:
    """Test cases for BooleanSortStrategy."""

    def test_true_before_false(self) -> None:
        strategy = BooleanSortStrategy()

        assert sorted([False, True, False], key=strategy.sort_key) == [True, False, False]

    def test_non_bool_unorderable(self) -> None:
        assert BooleanSortStrategy().sort_key(1) is None


def test_factory_covers_every_kind() -> None:
    """
    SCENARIO: Strategy factory
    EXPECTED: One strategy per FieldKind
    """
    strategies = create_sort_strategies(SortingConfig())

    assert set(strategies) == set(FieldKind)
    assert isinstance(strategies[FieldKind.DATE], DateSortStrategy)

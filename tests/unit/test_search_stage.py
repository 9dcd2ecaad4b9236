"""
Unit Tests for SearchStage.

Test Aspects Covered:
    ✅ Business Logic: Case-insensitive substring search across fields
    ✅ Edge Cases: Empty term, None values, nested lists, numbers
"""

from __future__ import annotations

from typing import Any, Dict, List

import pytest

from list_query.config.models import SearchConfig
from list_query.domain.entities import QueryParams
from list_query.domain.value_objects import FieldKind
from list_query.schema.record_schema import FieldSpec, RecordSchema, pluck
from list_query.screens import EMPLOYEE_SCHEMA, GOAL_SCHEMA, PAY_STUB_SCHEMA
from list_query.stages.search import SearchStage


@pytest.fixture
def stage() -> SearchStage:
    """Search stage over the employee directory."""
    return SearchStage(EMPLOYEE_SCHEMA, SearchConfig())


class TestSearchStage:
    """Test cases for SearchStage."""

    def test_matches_case_insensitively(
        self, stage: SearchStage, employees: List[Dict[str, Any]]
    ) -> None:
        """
        SCENARIO: Lowercase term against capitalized department
        EXPECTED: Both Engineering employees match
        """
        # Act
        result = stage.apply(employees, QueryParams(search_term="ENG"))

        # Assert
        assert [e["id"] for e in result] == ["e1", "e3"]

    def test_matches_any_searchable_field(
        self, stage: SearchStage, employees: List[Dict[str, Any]]
    ) -> None:
        """
        SCENARIO: Term only found in the title of one employee
        EXPECTED: That employee matches
        """
        result = stage.apply(employees, QueryParams(search_term="specialist"))

        assert [e["id"] for e in result] == ["e4"]

    def test_full_name_built_from_parts(
        self, stage: SearchStage, employees: List[Dict[str, Any]]
    ) -> None:
        """
        SCENARIO: Record has first_name/last_name but no full_name
        EXPECTED: Search spanning both parts still matches
        """
        result = stage.apply(employees, QueryParams(search_term="bob smi"))

        assert [e["id"] for e in result] == ["e2"]

    @pytest.mark.parametrize("term", [None, ""])
    def test_empty_term_keeps_everything(
        self, stage: SearchStage, employees: List[Dict[str, Any]], term: Any
    ) -> None:
        """
        SCENARIO: No search term
        EXPECTED: All records pass in input order
        """
        result = stage.apply(employees, QueryParams(search_term=term))

        assert result == employees
        assert result is not employees

    def test_no_match_returns_empty(
        self, stage: SearchStage, employees: List[Dict[str, Any]]
    ) -> None:
        """
        SCENARIO: Term matches nothing
        EXPECTED: Empty list, no error
        """
        assert stage.apply(employees, QueryParams(search_term="zzz")) == []

    def test_none_field_values_never_match(self, stage: SearchStage) -> None:
        """
        SCENARIO: Searchable fields are missing or None
        EXPECTED: Record does not match the text "none"
        """
        records = [{"id": "x", "title": None, "department": None, "full_name": None}]

        assert stage.apply(records, QueryParams(search_term="none")) == []

    def test_whitespace_kept_by_default(
        self, stage: SearchStage, employees: List[Dict[str, Any]]
    ) -> None:
        """
        SCENARIO: Term with surrounding spaces, trimming disabled
        EXPECTED: Spaces are part of the needle
        """
        result = stage.apply(employees, QueryParams(search_term=" park"))

        assert [e["id"] for e in result] == ["e5"]
        assert stage.apply(employees, QueryParams(search_term="park ")) == []

    def test_trim_term_when_configured(self, employees: List[Dict[str, Any]]) -> None:
        """
        SCENARIO: trim_term enabled
        EXPECTED: Surrounding whitespace ignored
        """
        stage = SearchStage(EMPLOYEE_SCHEMA, SearchConfig(trim_term=True))

        result = stage.apply(employees, QueryParams(search_term="  park  "))

        assert [e["id"] for e in result] == ["e5"]

    def test_searches_nested_lists(self, goals: List[Dict[str, Any]]) -> None:
        """
        SCENARIO: Term appears only in milestone names or progress notes
        EXPECTED: Goals match through their child records
        """
        stage = SearchStage(GOAL_SCHEMA, SearchConfig())

        result = stage.apply(goals, QueryParams(search_term="beta"))

        assert [g["id"] for g in result] == ["g1", "g2"]

    def test_numbers_searched_as_displayed(self) -> None:
        """
        SCENARIO: Pay stub amounts searched with two decimals
        EXPECTED: "2500.00" finds a gross pay of 2500
        """
        stage = SearchStage(PAY_STUB_SCHEMA, SearchConfig())
        stubs = [
            {"id": "p1", "pay_date": "2024-01-31", "gross_pay": 2500, "net_pay": 1980.5},
            {"id": "p2", "pay_date": "2024-02-29", "gross_pay": 2600, "net_pay": 2050.0},
        ]

        assert [s["id"] for s in stage.apply(stubs, QueryParams(search_term="2500.00"))] == ["p1"]
        assert [s["id"] for s in stage.apply(stubs, QueryParams(search_term="1980.50"))] == ["p1"]
        assert [s["id"] for s in stage.apply(stubs, QueryParams(search_term="2024-02"))] == ["p2"]

    def test_schema_without_searchable_fields_matches_nothing(self) -> None:
        """
        SCENARIO: Non-empty term, schema declares no searchable field
        EXPECTED: No record can contain the term
        """
        schema = RecordSchema("plain", [FieldSpec("status", filterable=True)])
        stage = SearchStage(schema, SearchConfig())

        assert stage.apply([{"status": "open"}], QueryParams(search_term="open")) == []

    def test_does_not_mutate_input(
        self, stage: SearchStage, employees: List[Dict[str, Any]]
    ) -> None:
        """
        SCENARIO: Search over a list
        EXPECTED: Input list unchanged
        """
        before = list(employees)

        stage.apply(employees, QueryParams(search_term="eng"))

        assert employees == before

    def test_objects_with_attributes(self) -> None:
        """
        SCENARIO: Records are plain objects instead of mappings
        EXPECTED: Fields read via attributes
        """

        class Doc:
            def __init__(self, name: str, tags: List[Any]) -> None:
                self.name = name
                self.tags = tags

        schema = RecordSchema(
            "docs",
            [
                FieldSpec("name", searchable=True),
                FieldSpec("tag_labels", searchable=True, accessor=pluck("tags", "label")),
                FieldSpec("size", kind=FieldKind.NUMBER, sortable=True),
            ],
        )
        stage = SearchStage(schema, SearchConfig())
        docs = [Doc("Handbook", [{"label": "Policy"}]), Doc("Payslip", [])]

        result = stage.apply(docs, QueryParams(search_term="polic"))

        assert [d.name for d in result] == ["Handbook"]

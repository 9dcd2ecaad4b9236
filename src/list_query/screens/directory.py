"""Employee directory screen."""

from __future__ import annotations

from typing import Any, Optional

from list_query.domain.value_objects import FieldKind
from list_query.schema.record_schema import FieldSpec, RecordSchema, read_attribute


def full_name(employee: Any) -> Optional[str]:
    """full_name if the record has one, else first and last name joined."""
    name = read_attribute(employee, "full_name")
    if name:
        return name
    parts = [read_attribute(employee, "first_name"), read_attribute(employee, "last_name")]
    joined = " ".join(p for p in parts if p)
    return joined or None


EMPLOYEE_SCHEMA = RecordSchema(
    name="employees",
    fields=[
        FieldSpec("full_name", searchable=True, sortable=True, accessor=full_name),
        FieldSpec("title", searchable=True, filterable=True, sortable=True),
        FieldSpec("department", searchable=True, filterable=True, sortable=True),
        FieldSpec("hire_date", kind=FieldKind.DATE, sortable=True),
    ],
)

"""Training catalog screen."""

from __future__ import annotations

from list_query.domain.value_objects import FieldKind
from list_query.schema.record_schema import FieldSpec, RecordSchema

COURSE_SCHEMA = RecordSchema(
    name="courses",
    fields=[
        FieldSpec("title", searchable=True, sortable=True),
        FieldSpec("description", searchable=True),
        FieldSpec("instructor", searchable=True),
        FieldSpec("category", filterable=True),
        FieldSpec("difficulty", filterable=True, sortable=True),
        FieldSpec("status", filterable=True),
        # hours
        FieldSpec("duration", kind=FieldKind.NUMBER, sortable=True),
        FieldSpec("is_published", kind=FieldKind.BOOLEAN, sortable=True),
    ],
)

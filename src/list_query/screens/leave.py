"""Leave management screen."""

from __future__ import annotations

from list_query.domain.value_objects import FieldKind
from list_query.schema.record_schema import FieldSpec, RecordSchema

LEAVE_REQUEST_SCHEMA = RecordSchema(
    name="leave_requests",
    fields=[
        FieldSpec("employee_name", searchable=True, sortable=True),
        FieldSpec("leave_type_name", searchable=True),
        FieldSpec("reason", searchable=True),
        FieldSpec("status", filterable=True),
        FieldSpec("employee_id", filterable=True),
        FieldSpec("start_date", kind=FieldKind.DATE, sortable=True),
        FieldSpec("end_date", kind=FieldKind.DATE, sortable=True),
        FieldSpec("requested_days", kind=FieldKind.NUMBER, sortable=True),
    ],
)

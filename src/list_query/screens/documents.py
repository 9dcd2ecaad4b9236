"""Document management screen."""

from __future__ import annotations

from list_query.domain.value_objects import FieldKind
from list_query.schema.record_schema import FieldSpec, RecordSchema

DOCUMENT_SCHEMA = RecordSchema(
    name="documents",
    fields=[
        FieldSpec("name", searchable=True, sortable=True),
        FieldSpec("category", filterable=True, sortable=True),
        FieldSpec("status", filterable=True),
        FieldSpec("upload_date", kind=FieldKind.DATE, sortable=True),
        FieldSpec("file_size", kind=FieldKind.NUMBER, sortable=True),
    ],
)

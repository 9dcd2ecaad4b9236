"""
Goal tracking screen.

Search also looks into the names of a goal's milestones and the notes
of its progress updates.
"""

from __future__ import annotations

from list_query.domain.value_objects import FieldKind
from list_query.schema.record_schema import FieldSpec, RecordSchema, pluck

GOAL_SCHEMA = RecordSchema(
    name="goals",
    fields=[
        FieldSpec("title", searchable=True, sortable=True),
        FieldSpec("description", searchable=True),
        FieldSpec("milestone_names", searchable=True, accessor=pluck("milestones", "name")),
        FieldSpec(
            "progress_notes",
            searchable=True,
            accessor=pluck("progress_updates", "notes"),
        ),
        FieldSpec("status", filterable=True, sortable=True),
        FieldSpec("priority", filterable=True, sortable=True),
        FieldSpec("category", filterable=True),
        FieldSpec("start_date", kind=FieldKind.DATE, sortable=True),
        FieldSpec("end_date", kind=FieldKind.DATE, sortable=True),
        FieldSpec("created_at", kind=FieldKind.DATE, sortable=True),
    ],
)

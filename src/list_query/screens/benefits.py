"""
Benefits administration screens.

The plan catalog lists plans; the enrollment list shows one row per
employee enrollment, searched and filtered through the plans it selects.
"""

from __future__ import annotations

from list_query.domain.value_objects import FieldKind
from list_query.schema.record_schema import FieldSpec, RecordSchema, pluck

BENEFIT_PLAN_SCHEMA = RecordSchema(
    name="benefit_plans",
    fields=[
        FieldSpec("name", searchable=True, sortable=True),
        FieldSpec("provider", searchable=True, sortable=True),
        FieldSpec("description", searchable=True),
        FieldSpec("plan_type", filterable=True, sortable=True),
        FieldSpec("status", filterable=True),
        FieldSpec("monthly_premium", kind=FieldKind.NUMBER, sortable=True),
    ],
)

BENEFIT_ENROLLMENT_SCHEMA = RecordSchema(
    name="benefit_enrollments",
    fields=[
        FieldSpec("employee_id", searchable=True, sortable=True),
        FieldSpec("plan_names", searchable=True, accessor=pluck("selected_plans", "name")),
        # Matches when any selected plan has the requested type
        FieldSpec("plan_type", filterable=True, accessor=pluck("selected_plans", "type")),
        FieldSpec("status", filterable=True),
        FieldSpec("enrollment_date", kind=FieldKind.DATE, sortable=True),
        FieldSpec("total_monthly_cost", kind=FieldKind.NUMBER, sortable=True),
    ],
)

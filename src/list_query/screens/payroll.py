"""
Payroll screen (pay stubs).

Amounts are searched as they are displayed, with two decimals, so
typing "2500.00" finds a gross pay of 2500.
"""

from __future__ import annotations

from list_query.domain.value_objects import FieldKind
from list_query.schema.record_schema import FieldSpec, RecordSchema

PAY_STUB_SCHEMA = RecordSchema(
    name="pay_stubs",
    fields=[
        FieldSpec("period_start", kind=FieldKind.DATE, searchable=True, sortable=True),
        FieldSpec("period_end", kind=FieldKind.DATE, searchable=True, sortable=True),
        FieldSpec("pay_date", kind=FieldKind.DATE, searchable=True, sortable=True),
        FieldSpec("gross_pay", kind=FieldKind.NUMBER, searchable=True, sortable=True),
        FieldSpec("net_pay", kind=FieldKind.NUMBER, searchable=True, sortable=True),
    ],
)

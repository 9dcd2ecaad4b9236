"""
Schema Package - Record Shape Descriptors.

A RecordSchema declares, once per list screen, which fields of a record
are searchable, filterable and sortable and what kind of value each one
holds. The pipeline is driven entirely by this descriptor.
"""

from list_query.schema.record_schema import (
    COLLECTION_TYPES,
    FieldSpec,
    RecordSchema,
    pluck,
    read_attribute,
)

__all__ = [
    "COLLECTION_TYPES",
    "FieldSpec",
    "RecordSchema",
    "pluck",
    "read_attribute",
]

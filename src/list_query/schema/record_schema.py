"""
Record Schema - Field Roles and Accessors.

Records may be mappings (fixture JSON), Pydantic models, dataclasses or
plain objects. Field values are read through each FieldSpec's accessor;
the default reads a mapping key or an attribute of the same name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from list_query.domain.value_objects import Accessor, FieldKind

# Field values of these types are treated as several values (nested lists)
COLLECTION_TYPES = (list, tuple, set, frozenset)


def read_attribute(record: Any, name: str) -> Any:
    """Read a field from a mapping or an object, None if absent."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def pluck(collection_field: str, item_field: str) -> Accessor:
    """
    Accessor returning item_field of every element of a nested list.

    Used for searching child records, e.g. the milestone names of a goal.
    """

    def _accessor(record: Any) -> List[Any]:
        children = read_attribute(record, collection_field) or []
        return [read_attribute(child, item_field) for child in children]

    _accessor.__name__ = f"pluck_{collection_field}_{item_field}"
    return _accessor


@dataclass(frozen=True)
class FieldSpec:
    """Declares one record field and the roles it plays in a query."""

    name: str
    kind: FieldKind = FieldKind.STRING
    searchable: bool = False
    filterable: bool = False
    sortable: bool = False
    accessor: Optional[Accessor] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Field name must not be empty")
        if not (self.searchable or self.filterable or self.sortable):
            raise ValueError(
                f"Field '{self.name}' must be searchable, filterable or sortable"
            )

    def read(self, record: Any) -> Any:
        if self.accessor is not None:
            return self.accessor(record)
        return read_attribute(record, self.name)


class RecordSchema:
    """
    Field descriptor for one list screen.

    Fields keep their declaration order; searchable fields are tried in
    that order and the first match wins.
    """

    def __init__(
        self,
        name: str,
        fields: Iterable[FieldSpec],
        id_field: str = "id",
    ) -> None:
        """
        Initialize schema.

        Args:
            name: Screen name (e.g. "employees")
            fields: Field declarations
            id_field: Identifier field, used for list keys only

        Raises:
            ValueError: On duplicate field names or an undeclared id field
        """
        self.name = name
        self.id_field = id_field
        self._fields: Dict[str, FieldSpec] = {}

        for spec in fields:
            if spec.name in self._fields:
                raise ValueError(f"Duplicate field '{spec.name}' in schema '{name}'")
            self._fields[spec.name] = spec

        if id_field != "id" and id_field not in self._fields:
            raise ValueError(f"id_field '{id_field}' is not declared in schema '{name}'")

    @property
    def fields(self) -> Tuple[FieldSpec, ...]:
        return tuple(self._fields.values())

    @property
    def searchable_fields(self) -> Tuple[FieldSpec, ...]:
        return tuple(f for f in self._fields.values() if f.searchable)

    @property
    def filterable_fields(self) -> Tuple[FieldSpec, ...]:
        return tuple(f for f in self._fields.values() if f.filterable)

    @property
    def sortable_fields(self) -> Tuple[FieldSpec, ...]:
        return tuple(f for f in self._fields.values() if f.sortable)

    def get_field(self, name: str) -> Optional[FieldSpec]:
        return self._fields.get(name)

    def is_filterable(self, name: str) -> bool:
        spec = self._fields.get(name)
        return spec is not None and spec.filterable

    def is_sortable(self, name: str) -> bool:
        spec = self._fields.get(name)
        return spec is not None and spec.sortable

    def record_id(self, record: Any) -> Any:
        """Identifier of a record."""
        spec = self._fields.get(self.id_field)
        if spec is not None:
            return spec.read(record)
        return read_attribute(record, self.id_field)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return (
            f"RecordSchema(name={self.name!r}, "
            f"searchable={[f.name for f in self.searchable_fields]}, "
            f"filterable={[f.name for f in self.filterable_fields]}, "
            f"sortable={[f.name for f in self.sortable_fields]})"
        )

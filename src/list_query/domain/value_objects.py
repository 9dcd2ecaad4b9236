"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe characteristics of
records and stages but have no conceptual identity.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, Field


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Reads one field value out of a record
Accessor = Callable[[Any], Any]


class FieldKind(str, Enum):
    """Value kind of a record field, selects the sort strategy."""

    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"


class StageTrace(BaseModel):
    """Record counts entering and leaving a single pipeline stage."""

    stage_name: str
    input_count: int = Field(ge=0)
    output_count: int = Field(ge=0)

    model_config = {"frozen": True}

    @property
    def removed_count(self) -> int:
        return self.input_count - self.output_count

"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class PaginationConfig(BaseModel):
    """Page size defaults and limits."""

    default_page_size: int = Field(default=10, ge=1)
    # None means page_size is not capped
    max_page_size: Optional[int] = Field(default=None, ge=1)


class FilterConfig(BaseModel):
    """Configuration for field-equality filters."""

    # Filter values that leave a field unconstrained. None always does.
    unconstrained_values: List[str] = Field(default_factory=lambda: ["all"])

    @field_validator("unconstrained_values")
    @classmethod
    def _at_least_one_sentinel(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("unconstrained_values must not be empty")
        return value

    @property
    def default_sentinel(self) -> str:
        """Sentinel shown as the first option of a filter dropdown."""
        return self.unconstrained_values[0]


class SearchConfig(BaseModel):
    """Configuration for free-text search."""

    trim_term: bool = False
    number_format: str = Field(default=".2f")

    @field_validator("number_format")
    @classmethod
    def _valid_format_spec(cls, value: str) -> str:
        try:
            format(1.5, value)
        except ValueError as e:
            raise ValueError(f"invalid number_format {value!r}: {e}") from e
        return value


class SortingConfig(BaseModel):
    """Configuration for sorting."""

    missing_last: bool = True
    dayfirst: bool = False


class ListQueryConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    filters: FilterConfig = Field(default_factory=FilterConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    sorting: SortingConfig = Field(default_factory=SortingConfig)

    model_config = {"populate_by_name": True}

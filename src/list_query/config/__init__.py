"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of List Query:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - ListQueryConfig: Root configuration object
    - PaginationConfig: Default and maximum page size
    - FilterConfig: Sentinel values meaning "no constraint"
    - SearchConfig: Search term handling
    - SortingConfig: Placement of missing values, date parsing
"""

from list_query.config.loader import ConfigLoader, load_config
from list_query.config.models import (
    FilterConfig,
    ListQueryConfig,
    PaginationConfig,
    SearchConfig,
    SortingConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "ListQueryConfig",
    "PaginationConfig",
    "FilterConfig",
    "SearchConfig",
    "SortingConfig",
]

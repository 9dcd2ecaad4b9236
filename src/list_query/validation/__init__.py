"""
Validation Package - Query Precondition Checks.

    - QueryValidator: Validate query parameters against a record schema
    - InvalidArgument: Raised when a caller violates a precondition

Design Principles:
    - Fail fast, before any record is touched
    - Report every violation of a request at once
"""

from list_query.validation.query_validator import InvalidArgument, QueryValidator

__all__ = [
    "InvalidArgument",
    "QueryValidator",
]

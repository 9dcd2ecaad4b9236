"""
Screens Package - Built-in HR List Screens.

Each module declares the RecordSchema of one screen, listing which
fields the screen searches, filters and sorts on:
    - directory: Employee directory
    - benefits: Benefit plans and enrollments
    - training: Course catalog
    - goals: Goal tracking
    - leave: Leave requests
    - documents: Document management
    - payroll: Pay stubs
"""

from typing import Tuple

from list_query.registry.screen_registry import ScreenRegistry
from list_query.schema.record_schema import RecordSchema
from list_query.screens.benefits import BENEFIT_ENROLLMENT_SCHEMA, BENEFIT_PLAN_SCHEMA
from list_query.screens.directory import EMPLOYEE_SCHEMA
from list_query.screens.documents import DOCUMENT_SCHEMA
from list_query.screens.goals import GOAL_SCHEMA
from list_query.screens.leave import LEAVE_REQUEST_SCHEMA
from list_query.screens.payroll import PAY_STUB_SCHEMA
from list_query.screens.training import COURSE_SCHEMA

ALL_SCHEMAS: Tuple[Tuple[RecordSchema, str], ...] = (
    (EMPLOYEE_SCHEMA, "Employee directory"),
    (BENEFIT_PLAN_SCHEMA, "Benefit plans"),
    (BENEFIT_ENROLLMENT_SCHEMA, "Benefit enrollments"),
    (COURSE_SCHEMA, "Training course catalog"),
    (GOAL_SCHEMA, "Goal tracking"),
    (LEAVE_REQUEST_SCHEMA, "Leave requests"),
    (DOCUMENT_SCHEMA, "Document management"),
    (PAY_STUB_SCHEMA, "Pay stubs"),
)


def create_default_registry() -> ScreenRegistry:
    """Registry with every built-in HR screen."""
    registry = ScreenRegistry()
    for schema, description in ALL_SCHEMAS:
        registry.register(schema, description=description, tags=["hr"])
    return registry


__all__ = [
    "ALL_SCHEMAS",
    "BENEFIT_ENROLLMENT_SCHEMA",
    "BENEFIT_PLAN_SCHEMA",
    "COURSE_SCHEMA",
    "DOCUMENT_SCHEMA",
    "EMPLOYEE_SCHEMA",
    "GOAL_SCHEMA",
    "LEAVE_REQUEST_SCHEMA",
    "PAY_STUB_SCHEMA",
    "create_default_registry",
]

"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pytest

from list_query.adapters.metrics_collector import InMemoryMetricsCollector
from list_query.config.models import ListQueryConfig
from list_query.pipeline.list_query_pipeline import ListQueryPipeline
from list_query.screens import COURSE_SCHEMA, EMPLOYEE_SCHEMA, GOAL_SCHEMA


@pytest.fixture
def project_root() -> Path:
    """Repository root, holding config/default.yaml."""
    return Path(__file__).resolve().parent.parent


@pytest.fixture
def default_config() -> ListQueryConfig:
    """Create default query configuration."""
    return ListQueryConfig()


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def employees() -> List[Dict[str, Any]]:
    """Five employees, two of them in Engineering."""
    return [
        {
            "id": "e1",
            "full_name": "Alice Johnson",
            "title": "Software Engineer",
            "department": "Engineering",
            "hire_date": "2024-10-01",
        },
        {
            # No full_name: built from first and last name
            "id": "e2",
            "first_name": "Bob",
            "last_name": "Smith",
            "title": "Product Manager",
            "department": "Product",
            "hire_date": "2024-2-01",
        },
        {
            "id": "e3",
            "full_name": "Carla Díaz",
            "title": "Platform Lead",
            "department": "Engineering",
            "hire_date": "2021-06-15",
        },
        {
            "id": "e4",
            "full_name": "Dan Brown",
            "title": "HR Specialist",
            "department": "Human Resources",
            "hire_date": "2019-03-20",
        },
        {
            "id": "e5",
            "full_name": "Erin Park",
            "title": "Accountant",
            "department": "Finance",
            "hire_date": None,
        },
    ]


@pytest.fixture
def courses() -> List[Dict[str, Any]]:
    """Ten courses, four of them published."""
    published = {"c02", "c03", "c07", "c09"}
    categories = ["Compliance", "Leadership", "Technical"]
    difficulties = ["Beginner", "Intermediate", "Advanced"]
    return [
        {
            "id": f"c{i:02d}",
            "title": f"Course {i:02d}",
            "description": f"Module {i} of the onboarding track",
            "category": categories[i % 3],
            "difficulty": difficulties[i % 3],
            "status": "published" if f"c{i:02d}" in published else "draft",
            "duration": (i * 7) % 10 + 1,
            "is_published": f"c{i:02d}" in published,
        }
        for i in range(1, 11)
    ]


@pytest.fixture
def goals() -> List[Dict[str, Any]]:
    """Goals with nested milestones and progress updates."""
    return [
        {
            "id": "g1",
            "title": "Ship billing v2",
            "description": "Replace the legacy invoicing flow",
            "status": "IN_PROGRESS",
            "priority": "HIGH",
            "category": "Project Delivery",
            "start_date": "2024-01-10",
            "end_date": "2024-06-30",
            "created_at": "2024-01-05T09:00:00Z",
            "milestones": [{"name": "Design review"}, {"name": "Beta launch"}],
            "progress_updates": [{"notes": "Schema migrated"}],
        },
        {
            "id": "g2",
            "title": "Mentor two juniors",
            "description": "Weekly pairing sessions",
            "status": "NOT_STARTED",
            "priority": "MEDIUM",
            "category": "Professional Development",
            "start_date": "2024-03-01",
            "end_date": "2024-12-31",
            "created_at": "2024-02-20T12:30:00Z",
            "milestones": [],
            "progress_updates": [{"notes": "Kickoff with the beta cohort"}],
        },
        {
            "id": "g3",
            "title": "Run a half marathon",
            "description": "Personal fitness",
            "status": "COMPLETED",
            "priority": "LOW",
            "category": "Personal",
            "start_date": "2023-09-01",
            "end_date": "2024-04-14",
            "created_at": "2023-08-28T07:15:00Z",
            "milestones": [{"name": "10k race"}],
            "progress_updates": [],
        },
    ]


@pytest.fixture
def employee_pipeline(default_config: ListQueryConfig) -> ListQueryPipeline:
    """Pipeline over the employee directory schema."""
    return ListQueryPipeline(EMPLOYEE_SCHEMA, config=default_config)


@pytest.fixture
def course_pipeline(default_config: ListQueryConfig) -> ListQueryPipeline:
    """Pipeline over the course catalog schema."""
    return ListQueryPipeline(COURSE_SCHEMA, config=default_config)


@pytest.fixture
def goal_pipeline(default_config: ListQueryConfig) -> ListQueryPipeline:
    """Pipeline over the goal tracking schema."""
    return ListQueryPipeline(GOAL_SCHEMA, config=default_config)

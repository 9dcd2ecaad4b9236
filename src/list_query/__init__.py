"""
List Query - Search, Filter, Sort and Paginate for HR List Screens.

Every list screen of the HR application (employee directory, benefit
enrollments, training catalog, goals, leave requests, documents, pay
stubs) renders the same thing: a page of records matching a free-text
search and a set of category filters, in a chosen order. This package
provides that as a single pure pipeline, driven by a small schema that
declares which fields are searchable, filterable and sortable.

Architecture:
    - Schema-driven: record shape declared once, no runtime type sniffing
    - Stages: search -> filter -> sort -> paginate
    - Strategy Pattern for field-kind specific ordering
    - Configuration-driven defaults via YAML

Main Components:
    - domain: Query parameters and results
    - schema: RecordSchema and FieldSpec descriptors
    - stages: Concrete pipeline stages and sort strategies
    - pipeline: ListQueryPipeline and ListQueryService
    - registry: Named screen schemas
    - screens: Built-in HR screen schemas
    - config: Configuration models and loaders

Example:
    >>> from list_query.domain import QueryParams
    >>> from list_query.pipeline import ListQueryPipeline
    >>> from list_query.screens import EMPLOYEE_SCHEMA
    >>> pipeline = ListQueryPipeline(EMPLOYEE_SCHEMA)
    >>> result = pipeline.query(employees, QueryParams(search_term="eng"))
    >>> print(f"{result.total_matched} matches on {result.total_pages} pages")

"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for List Query.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import list_query
        >>> list_query.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("list_query").setLevel(level)

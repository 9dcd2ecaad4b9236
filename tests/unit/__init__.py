"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested on its own with small in-memory records.

Test Files:
    - test_search_stage.py, test_field_filter_stage.py, test_sort_stage.py,
      test_paginator.py: Pipeline stages
    - test_sort_strategies.py: Field-kind sort keys
    - test_query_validator.py: Query preconditions
    - test_config_loader.py: Configuration loading/validation
"""

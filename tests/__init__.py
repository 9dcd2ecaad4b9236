"""
Test Suite for List Query.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end query tests

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""

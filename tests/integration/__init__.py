"""
Integration Tests - End-to-End Query Tests.

These tests run whole queries through the pipeline, the service and the
built-in HR screens with in-memory fixture records.

Test Files:
    - test_list_query_pipeline.py: Pipeline scenarios and properties
    - test_list_query_service.py: Screen-level queries via the registry
    - test_hr_screens.py: Field roles of each built-in screen
"""

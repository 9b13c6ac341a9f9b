"""
Integration Tests - End-to-End Validation Tests.

These tests build validators from configuration and evaluate searches
against the real current date.

Test Files:
    - test_flight_search_scenarios.py: Full validation workflow
"""

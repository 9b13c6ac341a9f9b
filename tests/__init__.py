"""
Test Suite for Flight Search.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end tests against the real clock and config
    - fixtures/: Shared test data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest --cov=src/flight_search          # With coverage
"""

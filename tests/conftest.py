"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from flight_search.adapters.console_logger import ConsoleAuditLogger
from flight_search.adapters.metrics_collector import InMemoryMetricsCollector
from flight_search.config.models import FlightSearchConfig
from flight_search.domain.entities import FlightSearchRequest
from flight_search.validation.request_validator import RequestValidator


@pytest.fixture(autouse=True)
def clear_timezone_override(monkeypatch):
    """Keep FLIGHT_SEARCH_TIMEZONE from the environment out of tests."""
    monkeypatch.delenv("FLIGHT_SEARCH_TIMEZONE", raising=False)
    yield


@pytest.fixture
def reference_date() -> date:
    """Standard 'today' for testing."""
    return date(2025, 6, 1)


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def default_config() -> FlightSearchConfig:
    """Create default configuration."""
    return FlightSearchConfig()


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def validator(reference_date: date) -> RequestValidator:
    """Create a validator whose clock is pinned to reference_date."""
    return RequestValidator(clock=lambda: reference_date)


@pytest.fixture
def valid_request() -> FlightSearchRequest:
    """A search that passes every rule on reference_date."""
    return FlightSearchRequest(
        departure_date="08/06/2025",
        departure_airport_code="mel",
        emergency_row_seating=False,
        return_date="15/06/2025",
        destination_airport_code="syd",
        seating_class="economy",
        adult_passenger_count=2,
        child_passenger_count=2,
        infant_passenger_count=2,
    )

"""
Flight Search - Rule-Based Validation of Flight Search Requests.

Validates a flight search (travel dates, passenger mix, seating class,
emergency row eligibility and airport codes) against a fixed set of
business rules and keeps the last search that passed all of them.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Pure rule evaluation separated from stateful storage
    - Dependency Injection for clock, audit logger and metrics
    - Configuration-driven surroundings via YAML

Main Components:
    - domain: FlightSearchRequest, ValidatedSearch, RuleResult
    - validation: parse_travel_date, evaluate, RequestValidator
    - interfaces: Protocols for audit logging and metrics
    - adapters: Console audit logger, in-memory metrics
    - config: Configuration models and loaders

Example:
    >>> from flight_search import FlightSearchRequest, RequestValidator
    >>> validator = RequestValidator()
    >>> validator.validate(FlightSearchRequest(
    ...     departure_date="01/12/2030", departure_airport_code="mel",
    ...     return_date="08/12/2030", destination_airport_code="syd",
    ...     seating_class="economy", adult_passenger_count=1,
    ... ))
    True
"""

import logging

from flight_search.domain.entities import FlightSearchRequest, ValidatedSearch
from flight_search.domain.value_objects import RuleName, RuleResult
from flight_search.factory import create_validator
from flight_search.validation.request_validator import RequestValidator

__version__ = "1.0.0"

__all__ = [
    "FlightSearchRequest",
    "ValidatedSearch",
    "RuleName",
    "RuleResult",
    "RequestValidator",
    "create_validator",
    "configure_logging",
]


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for flight_search.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import flight_search
        >>> flight_search.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("flight_search").setLevel(level)

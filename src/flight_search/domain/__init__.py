"""
Domain Layer - Core Business Entities and Value Objects.

This package contains the core domain model for flight search validation.
All entities here are pure Python with no external dependencies
(except Pydantic for validation).

Entities:
    - FlightSearchRequest: Candidate search as supplied by a caller
    - ValidatedSearch: Snapshot committed after every rule passes

Value Objects:
    - RuleName: Business rules in evaluation order
    - RuleResult: Outcome of a rule evaluation

Design Principles:
    - Immutable (frozen models)
    - Closed rule set: airports and seating classes are constants
    - No infrastructure dependencies
"""

from flight_search.domain.entities import (
    DATE_FORMAT,
    VALID_AIRPORTS,
    VALID_SEATING_CLASSES,
    FlightSearchRequest,
    ValidatedSearch,
)
from flight_search.domain.value_objects import RuleName, RuleResult

__all__ = [
    "DATE_FORMAT",
    "VALID_AIRPORTS",
    "VALID_SEATING_CLASSES",
    "FlightSearchRequest",
    "ValidatedSearch",
    "RuleName",
    "RuleResult",
]

"""
Validation Package - Flight Search Rules.

This package provides:
    - parse_travel_date: Strict DD/MM/YYYY parsing
    - evaluate: Pure, ordered rule evaluation
    - RequestValidator: Validate and commit the last accepted search

Design Principles:
    - Fail fast on the first violated rule
    - Rules are pure and testable in isolation
    - Storage is separate from evaluation
"""

from flight_search.validation.date_parser import parse_travel_date
from flight_search.validation.request_validator import (
    RequestValidator,
    system_clock,
)
from flight_search.validation.rules import RULE_ORDER, evaluate

__all__ = [
    "parse_travel_date",
    "RequestValidator",
    "system_clock",
    "RULE_ORDER",
    "evaluate",
]

"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe the outcome of rule
evaluation but have no conceptual identity.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class RuleName(str, Enum):
    """Business rules, declared in evaluation order."""

    PASSENGER_TOTAL = "passenger_total"
    CHILD_SEATING = "child_seating"
    INFANT_SEATING = "infant_seating"
    CHILDREN_PER_ADULT = "children_per_adult"
    INFANTS_PER_ADULT = "infants_per_adult"
    DEPARTURE_DATE_FORMAT = "departure_date_format"
    DEPARTURE_NOT_PAST = "departure_not_past"
    RETURN_DATE_FORMAT = "return_date_format"
    RETURN_AFTER_DEPARTURE = "return_after_departure"
    SEATING_CLASS = "seating_class"
    EMERGENCY_ROW_CLASS = "emergency_row_class"
    AIRPORT_CODES = "airport_codes"


class RuleResult(BaseModel):
    """Outcome of evaluating a flight search against the rule set."""

    passed: bool
    rule: Optional[RuleName] = None
    reason: str = ""

    model_config = {"frozen": True}

    @classmethod
    def success(cls) -> "RuleResult":
        return cls(passed=True)

    @classmethod
    def failure(cls, rule: RuleName, reason: str) -> "RuleResult":
        return cls(passed=False, rule=rule, reason=reason)

    def __bool__(self) -> bool:
        return self.passed

"""
Search Rules - Pure Evaluation of Flight Search Requests.

Each rule is a stateless check over a FlightSearchRequest and the current
date. A check returns None when the request satisfies it, otherwise a
human-readable rejection reason.

Rules are evaluated in RULE_ORDER and evaluation stops at the first
violation, so later rules may assume earlier ones hold.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Tuple

from flight_search.domain.entities import (
    VALID_AIRPORTS,
    VALID_SEATING_CLASSES,
    FlightSearchRequest,
)
from flight_search.domain.value_objects import RuleName, RuleResult
from flight_search.validation.date_parser import parse_travel_date

MIN_PASSENGERS = 1
MAX_PASSENGERS = 9
MAX_CHILDREN_PER_ADULT = 2
MAX_INFANTS_PER_ADULT = 1

RuleCheck = Callable[[FlightSearchRequest, date], Optional[str]]


def check_passenger_total(request: FlightSearchRequest, today: date) -> Optional[str]:
    total = request.total_passengers
    if total < MIN_PASSENGERS or total > MAX_PASSENGERS:
        return (
            f"total_passengers={total} outside "
            f"[{MIN_PASSENGERS}, {MAX_PASSENGERS}]"
        )
    return None


def check_child_seating(request: FlightSearchRequest, today: date) -> Optional[str]:
    """Children may not sit in emergency rows or first class."""
    if request.child_passenger_count > 0:
        if request.emergency_row_seating:
            return "children cannot use emergency row seating"
        # Exact match; an absent seating class is left to the seating class rule
        if request.seating_class == "first":
            return "children cannot be seated in first class"
    return None


def check_infant_seating(request: FlightSearchRequest, today: date) -> Optional[str]:
    """Infants may not sit in emergency rows or business class."""
    if request.infant_passenger_count > 0:
        if request.emergency_row_seating:
            return "infants cannot use emergency row seating"
        if request.seating_class == "business":
            return "infants cannot be seated in business class"
    return None


def check_children_per_adult(
    request: FlightSearchRequest, today: date
) -> Optional[str]:
    limit = request.adult_passenger_count * MAX_CHILDREN_PER_ADULT
    if request.child_passenger_count > limit:
        return (
            f"children={request.child_passenger_count} exceeds "
            f"{MAX_CHILDREN_PER_ADULT} per adult (max={limit})"
        )
    return None


def check_infants_per_adult(
    request: FlightSearchRequest, today: date
) -> Optional[str]:
    limit = request.adult_passenger_count * MAX_INFANTS_PER_ADULT
    if request.infant_passenger_count > limit:
        return (
            f"infants={request.infant_passenger_count} exceeds "
            f"{MAX_INFANTS_PER_ADULT} per adult (max={limit})"
        )
    return None


def check_departure_date_format(
    request: FlightSearchRequest, today: date
) -> Optional[str]:
    if parse_travel_date(request.departure_date) is None:
        return f"departure_date={request.departure_date!r} is not a valid DD/MM/YYYY date"
    return None


def check_departure_not_past(
    request: FlightSearchRequest, today: date
) -> Optional[str]:
    departure = parse_travel_date(request.departure_date)
    if departure is None:
        return f"departure_date={request.departure_date!r} is not a valid DD/MM/YYYY date"
    if departure < today:
        return f"departure_date {departure.isoformat()} is before {today.isoformat()}"
    return None


def check_return_date_format(
    request: FlightSearchRequest, today: date
) -> Optional[str]:
    if parse_travel_date(request.return_date) is None:
        return f"return_date={request.return_date!r} is not a valid DD/MM/YYYY date"
    return None


def check_return_after_departure(
    request: FlightSearchRequest, today: date
) -> Optional[str]:
    departure = parse_travel_date(request.departure_date)
    returning = parse_travel_date(request.return_date)
    if departure is None or returning is None:
        return "departure_date and return_date must both be valid DD/MM/YYYY dates"
    if returning < departure:
        return (
            f"return_date {returning.isoformat()} is before "
            f"departure_date {departure.isoformat()}"
        )
    return None


def check_seating_class(request: FlightSearchRequest, today: date) -> Optional[str]:
    if request.seating_class is None:
        return "seating_class is missing"
    if request.seating_class.lower() not in VALID_SEATING_CLASSES:
        supported = ", ".join(VALID_SEATING_CLASSES)
        return (
            f"seating_class={request.seating_class!r} not supported. "
            f"Supported: {supported}"
        )
    return None


def check_emergency_row_class(
    request: FlightSearchRequest, today: date
) -> Optional[str]:
    """Emergency rows exist only in economy; compared as supplied."""
    if request.emergency_row_seating and request.seating_class != "economy":
        return (
            f"emergency row seating requires economy, "
            f"got seating_class={request.seating_class!r}"
        )
    return None


def check_airport_codes(request: FlightSearchRequest, today: date) -> Optional[str]:
    departure = request.departure_airport_code
    destination = request.destination_airport_code

    if departure is None or destination is None:
        return "departure and destination airport codes are required"

    for label, code in (("departure", departure), ("destination", destination)):
        if code.lower() not in VALID_AIRPORTS:
            return f"{label}_airport_code={code!r} not in allowed list"

    if departure.lower() == destination.lower():
        return f"departure and destination are both {departure.lower()!r}"

    return None


RULE_ORDER: Tuple[Tuple[RuleName, RuleCheck], ...] = (
    (RuleName.PASSENGER_TOTAL, check_passenger_total),
    (RuleName.CHILD_SEATING, check_child_seating),
    (RuleName.INFANT_SEATING, check_infant_seating),
    (RuleName.CHILDREN_PER_ADULT, check_children_per_adult),
    (RuleName.INFANTS_PER_ADULT, check_infants_per_adult),
    (RuleName.DEPARTURE_DATE_FORMAT, check_departure_date_format),
    (RuleName.DEPARTURE_NOT_PAST, check_departure_not_past),
    (RuleName.RETURN_DATE_FORMAT, check_return_date_format),
    (RuleName.RETURN_AFTER_DEPARTURE, check_return_after_departure),
    (RuleName.SEATING_CLASS, check_seating_class),
    (RuleName.EMERGENCY_ROW_CLASS, check_emergency_row_class),
    (RuleName.AIRPORT_CODES, check_airport_codes),
)


def evaluate(request: FlightSearchRequest, today: date) -> RuleResult:
    """
    Evaluate a request against every rule in order.

    Args:
        request: Candidate flight search
        today: Current date; departures before it are rejected

    Returns:
        RuleResult naming the first violated rule, or a passing result
    """
    for rule, check in RULE_ORDER:
        reason = check(request, today)
        if reason is not None:
            return RuleResult.failure(rule, reason)

    return RuleResult.success()

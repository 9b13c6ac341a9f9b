"""
Request Validator - Validate and Commit Flight Searches.

Wraps the pure rule evaluation with the state a caller reads back:
the last flight search that passed every rule.

Design Notes:
    - Fail-fast: evaluation stops at the first violated rule
    - All-or-nothing commit: a rejected search never touches stored state
    - validate() never raises; every failure is reported as False
    - Evaluate-then-commit runs under an instance lock
"""

from __future__ import annotations

import logging
import time
from datetime import date, datetime
from threading import RLock
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from flight_search.domain.entities import FlightSearchRequest, ValidatedSearch
from flight_search.domain.value_objects import RuleResult
from flight_search.interfaces.audit_logger import AuditLogger
from flight_search.interfaces.metrics_collector import MetricsCollector
from flight_search.validation.rules import evaluate

logger = logging.getLogger(__name__)

Clock = Callable[[], date]


def system_clock(timezone: Optional[str] = None) -> Clock:
    """
    Build a clock returning the current date.

    Args:
        timezone: IANA zone name. None uses the local system date.

    Returns:
        Zero-argument callable returning today's date
    """
    if timezone is None:
        return date.today

    zone = ZoneInfo(timezone)

    def today() -> date:
        return datetime.now(zone).date()

    return today


class RequestValidator:
    """
    Validates flight searches and keeps the last accepted one.

    Before the first accepted search every accessor reports its unset
    value (None for text, False for emergency_row_seating, 0 for counts);
    use has_validated_search to tell that apart from a committed search.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        audit_logger: Optional[AuditLogger] = None,
        metrics_collector: Optional[MetricsCollector] = None,
    ) -> None:
        """
        Initialize request validator.

        Args:
            clock: Returns the current date. Defaults to the system date.
            audit_logger: Optional audit trail for decisions
            metrics_collector: Optional metrics sink
        """
        self._clock = clock or system_clock()
        self._audit_logger = audit_logger
        self._metrics = metrics_collector
        self._lock = RLock()
        self._validated: Optional[ValidatedSearch] = None

    def validate(self, request: FlightSearchRequest) -> bool:
        """
        Validate a flight search and commit it if every rule passes.

        Args:
            request: Candidate flight search

        Returns:
            True if the search was accepted and stored, False otherwise
        """
        with self._lock:
            start = time.perf_counter()
            result = evaluate(request, self._clock())

            if result.passed:
                self._validated = ValidatedSearch.from_request(request)
                logger.debug(
                    f"Flight search committed: "
                    f"{request.departure_airport_code}->"
                    f"{request.destination_airport_code}"
                )
            else:
                logger.debug(
                    f"Flight search rejected by {result.rule.value}: {result.reason}"
                )

            self._report(request, result, time.perf_counter() - start)
            return result.passed

    def run_flight_search(
        self,
        departure_date: Optional[str],
        departure_airport_code: Optional[str],
        emergency_row_seating: bool,
        return_date: Optional[str],
        destination_airport_code: Optional[str],
        seating_class: Optional[str],
        adult_passenger_count: int,
        child_passenger_count: int,
        infant_passenger_count: int,
    ) -> bool:
        """
        Validate a flight search given as individual fields.

        Returns:
            True if the search was accepted and stored, False otherwise
        """
        request = FlightSearchRequest(
            departure_date=departure_date,
            departure_airport_code=departure_airport_code,
            emergency_row_seating=emergency_row_seating,
            return_date=return_date,
            destination_airport_code=destination_airport_code,
            seating_class=seating_class,
            adult_passenger_count=adult_passenger_count,
            child_passenger_count=child_passenger_count,
            infant_passenger_count=infant_passenger_count,
        )
        return self.validate(request)

    def diagnose(self, request: FlightSearchRequest) -> RuleResult:
        """
        Evaluate a flight search without storing it.

        Args:
            request: Candidate flight search

        Returns:
            RuleResult naming the first violated rule, if any
        """
        return evaluate(request, self._clock())

    def _report(
        self,
        request: FlightSearchRequest,
        result: RuleResult,
        duration_seconds: float,
    ) -> None:
        """Forward the decision to the audit logger and metrics collector."""
        if self._audit_logger is not None:
            try:
                if result.passed:
                    self._audit_logger.log_search_accepted(self._validated)
                else:
                    self._audit_logger.log_search_rejected(request, result)
            except Exception:
                logger.exception("Audit logger failed; decision unaffected")

        if self._metrics is not None:
            try:
                if result.passed:
                    self._metrics.record_count("flight_search.accepted", 1)
                else:
                    self._metrics.record_count(
                        "flight_search.rejected", 1, tags={"rule": result.rule.value}
                    )
                self._metrics.record_timing("flight_search.validate", duration_seconds)
            except Exception:
                logger.exception("Metrics collector failed; decision unaffected")

    @property
    def audit_logger(self) -> Optional[AuditLogger]:
        return self._audit_logger

    @property
    def metrics_collector(self) -> Optional[MetricsCollector]:
        return self._metrics

    @property
    def validated_search(self) -> Optional[ValidatedSearch]:
        """The last accepted search, or None if none was accepted yet."""
        with self._lock:
            return self._validated

    @property
    def has_validated_search(self) -> bool:
        return self.validated_search is not None

    @property
    def departure_date(self) -> Optional[str]:
        search = self.validated_search
        return search.departure_date if search is not None else None

    @property
    def departure_airport_code(self) -> Optional[str]:
        search = self.validated_search
        return search.departure_airport_code if search is not None else None

    @property
    def emergency_row_seating(self) -> bool:
        search = self.validated_search
        return search.emergency_row_seating if search is not None else False

    @property
    def return_date(self) -> Optional[str]:
        search = self.validated_search
        return search.return_date if search is not None else None

    @property
    def destination_airport_code(self) -> Optional[str]:
        search = self.validated_search
        return search.destination_airport_code if search is not None else None

    @property
    def seating_class(self) -> Optional[str]:
        search = self.validated_search
        return search.seating_class if search is not None else None

    @property
    def adult_passenger_count(self) -> int:
        search = self.validated_search
        return search.adult_passenger_count if search is not None else 0

    @property
    def child_passenger_count(self) -> int:
        search = self.validated_search
        return search.child_passenger_count if search is not None else 0

    @property
    def infant_passenger_count(self) -> int:
        search = self.validated_search
        return search.infant_passenger_count if search is not None else 0

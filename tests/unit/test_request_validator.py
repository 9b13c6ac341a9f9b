"""
Unit Tests for RequestValidator.

Test Aspects Covered:
    ✅ Business Logic: Accept/reject decisions and committed snapshot
    ✅ State: Unset accessors, all-or-nothing commits, overwrites
    ✅ Error Handling: Failing collaborators never change the decision
    ✅ Integration: Audit logger and metrics collector wiring
"""

from __future__ import annotations

import threading
from datetime import date
from unittest.mock import MagicMock

import pytest

from flight_search.adapters.metrics_collector import InMemoryMetricsCollector
from flight_search.domain.entities import FlightSearchRequest, ValidatedSearch
from flight_search.domain.value_objects import RuleName
from flight_search.validation.request_validator import RequestValidator, system_clock


class TestUnsetState:
    """Test cases for a validator that has not accepted anything."""

    def test_accessors_report_unset_values(self, validator: RequestValidator) -> None:
        """
        SCENARIO: No search validated yet
        EXPECTED: None for text, False for emergency row, 0 for counts
        """
        assert validator.validated_search is None
        assert validator.has_validated_search is False
        assert validator.departure_date is None
        assert validator.departure_airport_code is None
        assert validator.emergency_row_seating is False
        assert validator.return_date is None
        assert validator.destination_airport_code is None
        assert validator.seating_class is None
        assert validator.adult_passenger_count == 0
        assert validator.child_passenger_count == 0
        assert validator.infant_passenger_count == 0


class TestValidate:
    """Test cases for validate()."""

    def test_accepts_and_commits(
        self,
        validator: RequestValidator,
        valid_request: FlightSearchRequest,
    ) -> None:
        """
        SCENARIO: Request passes every rule
        EXPECTED: True, every field stored as supplied
        """
        # Act
        result = validator.validate(valid_request)

        # Assert
        assert result is True
        assert validator.has_validated_search
        assert validator.departure_date == "08/06/2025"
        assert validator.departure_airport_code == "mel"
        assert validator.emergency_row_seating is False
        assert validator.return_date == "15/06/2025"
        assert validator.destination_airport_code == "syd"
        assert validator.seating_class == "economy"
        assert validator.adult_passenger_count == 2
        assert validator.child_passenger_count == 2
        assert validator.infant_passenger_count == 2

    def test_commit_preserves_original_casing(
        self,
        validator: RequestValidator,
        valid_request: FlightSearchRequest,
    ) -> None:
        """
        SCENARIO: Airport codes and seating class in mixed case
        EXPECTED: Stored exactly as supplied, not normalised
        """
        request = valid_request.model_copy(
            update={
                "departure_airport_code": "MEL",
                "destination_airport_code": "Syd",
                "seating_class": "Premium Economy",
            }
        )

        assert validator.validate(request) is True
        assert validator.departure_airport_code == "MEL"
        assert validator.destination_airport_code == "Syd"
        assert validator.seating_class == "Premium Economy"

    def test_rejection_commits_nothing(
        self,
        validator: RequestValidator,
        valid_request: FlightSearchRequest,
    ) -> None:
        """
        SCENARIO: Zero passengers, otherwise valid
        EXPECTED: False and the validator stays unset
        """
        request = valid_request.model_copy(
            update={
                "adult_passenger_count": 0,
                "child_passenger_count": 0,
                "infant_passenger_count": 0,
            }
        )

        assert validator.validate(request) is False
        assert validator.validated_search is None
        assert validator.departure_date is None

    def test_rejection_keeps_previous_snapshot(
        self,
        validator: RequestValidator,
        valid_request: FlightSearchRequest,
    ) -> None:
        """
        SCENARIO: Accepted search followed by a rejected one
        EXPECTED: Snapshot of the accepted search is unchanged
        """
        validator.validate(valid_request)
        before = validator.validated_search

        rejected = valid_request.model_copy(
            update={"departure_airport_code": "xyz", "adult_passenger_count": 5}
        )

        assert validator.validate(rejected) is False
        assert validator.validated_search == before
        assert validator.departure_airport_code == "mel"
        assert validator.adult_passenger_count == 2

    def test_second_acceptance_overwrites_all_fields(
        self,
        validator: RequestValidator,
        valid_request: FlightSearchRequest,
    ) -> None:
        """
        SCENARIO: Two accepted searches in a row
        EXPECTED: Every field reflects the second search
        """
        validator.validate(valid_request)
        second = FlightSearchRequest(
            departure_date="10/07/2025",
            departure_airport_code="del",
            emergency_row_seating=False,
            return_date="20/07/2025",
            destination_airport_code="pvg",
            seating_class="business",
            adult_passenger_count=3,
            child_passenger_count=0,
            infant_passenger_count=0,
        )

        assert validator.validate(second) is True
        assert validator.validated_search == ValidatedSearch.from_request(second)

    def test_never_raises_on_absent_text(self, validator: RequestValidator) -> None:
        """
        SCENARIO: Every text field absent
        EXPECTED: False, no exception
        """
        request = FlightSearchRequest(adult_passenger_count=1)

        assert validator.validate(request) is False

    def test_deterministic(
        self,
        validator: RequestValidator,
        valid_request: FlightSearchRequest,
    ) -> None:
        assert validator.validate(valid_request) is True
        first = validator.validated_search

        assert validator.validate(valid_request) is True
        assert validator.validated_search == first


class TestRunFlightSearch:
    """Test cases for the nine-argument entry point."""

    def test_positional_arguments(self, validator: RequestValidator) -> None:
        """
        SCENARIO: Adult and child, lax to cdg
        EXPECTED: True with the fields stored in order
        """
        result = validator.run_flight_search(
            "20/06/2025", "lax", False, "27/06/2025", "cdg", "economy", 1, 1, 0
        )

        assert result is True
        assert validator.departure_airport_code == "lax"
        assert validator.destination_airport_code == "cdg"
        assert validator.adult_passenger_count == 1
        assert validator.child_passenger_count == 1
        assert validator.infant_passenger_count == 0

    def test_emergency_row_first_class(self, validator: RequestValidator) -> None:
        result = validator.run_flight_search(
            "20/06/2025", "lax", True, "27/06/2025", "cdg", "first", 1, 0, 0
        )

        assert result is False
        assert validator.has_validated_search is False

    def test_emergency_row_economy_adults(self, validator: RequestValidator) -> None:
        result = validator.run_flight_search(
            "20/06/2025", "doh", True, "27/06/2025", "syd", "economy", 2, 0, 0
        )

        assert result is True
        assert validator.emergency_row_seating is True


class TestDiagnose:
    """Test cases for diagnose()."""

    def test_reports_rule_without_committing(
        self,
        validator: RequestValidator,
        valid_request: FlightSearchRequest,
    ) -> None:
        request = valid_request.model_copy(update={"seating_class": "first"})

        result = validator.diagnose(request)

        assert result.rule == RuleName.CHILD_SEATING
        assert validator.validated_search is None

    def test_passing_request_not_committed(
        self,
        validator: RequestValidator,
        valid_request: FlightSearchRequest,
    ) -> None:
        assert validator.diagnose(valid_request).passed
        assert validator.has_validated_search is False


class TestCollaborators:
    """Test cases for audit logger and metrics wiring."""

    def test_audit_logger_receives_decisions(
        self,
        reference_date: date,
        valid_request: FlightSearchRequest,
    ) -> None:
        audit_logger = MagicMock()
        validator = RequestValidator(
            clock=lambda: reference_date, audit_logger=audit_logger
        )

        validator.validate(valid_request)
        validator.validate(valid_request.model_copy(update={"seating_class": "coach"}))

        audit_logger.log_search_accepted.assert_called_once_with(
            ValidatedSearch.from_request(valid_request)
        )
        rejected_call = audit_logger.log_search_rejected.call_args
        assert rejected_call.args[1].rule == RuleName.SEATING_CLASS

    def test_metrics_recorded(
        self,
        reference_date: date,
        valid_request: FlightSearchRequest,
        metrics_collector: InMemoryMetricsCollector,
    ) -> None:
        validator = RequestValidator(
            clock=lambda: reference_date, metrics_collector=metrics_collector
        )

        validator.validate(valid_request)
        validator.validate(valid_request.model_copy(update={"destination_airport_code": "MEL"}))
        validator.validate(valid_request.model_copy(update={"return_date": "01/01/2025"}))

        metrics = metrics_collector.get_metrics()
        assert metrics["flight_search.accepted"]["total"] == 1
        assert metrics["flight_search.rejected"]["total"] == 2
        assert metrics["flight_search.validate"]["count"] == 3
        assert metrics_collector.rejections_by_rule() == {
            "airport_codes": 1,
            "return_after_departure": 1,
        }

    def test_failing_audit_logger_does_not_change_decision(
        self,
        reference_date: date,
        valid_request: FlightSearchRequest,
    ) -> None:
        """
        SCENARIO: Audit logger raises
        EXPECTED: Search still accepted and committed
        """
        audit_logger = MagicMock()
        audit_logger.log_search_accepted.side_effect = RuntimeError("disk full")
        validator = RequestValidator(
            clock=lambda: reference_date, audit_logger=audit_logger
        )

        assert validator.validate(valid_request) is True
        assert validator.has_validated_search

    def test_failing_metrics_does_not_change_decision(
        self,
        reference_date: date,
        valid_request: FlightSearchRequest,
    ) -> None:
        metrics = MagicMock()
        metrics.record_count.side_effect = RuntimeError("unavailable")
        validator = RequestValidator(
            clock=lambda: reference_date, metrics_collector=metrics
        )

        request = valid_request.model_copy(update={"adult_passenger_count": 0})
        assert validator.validate(request) is False


class TestCollaboratorAccess:
    """Test cases for the read-only collaborator properties."""

    def test_exposes_injected_collaborators(
        self,
        reference_date: date,
        metrics_collector: InMemoryMetricsCollector,
    ) -> None:
        audit_logger = MagicMock()
        validator = RequestValidator(
            clock=lambda: reference_date,
            audit_logger=audit_logger,
            metrics_collector=metrics_collector,
        )

        assert validator.audit_logger is audit_logger
        assert validator.metrics_collector is metrics_collector

    def test_defaults_to_none(self, validator: RequestValidator) -> None:
        assert validator.audit_logger is None
        assert validator.metrics_collector is None


class TestConcurrency:
    """Test cases for concurrent validate() calls."""

    def test_snapshot_is_never_mixed(
        self,
        validator: RequestValidator,
        valid_request: FlightSearchRequest,
    ) -> None:
        """
        SCENARIO: Two threads commit different searches repeatedly
        EXPECTED: Final snapshot equals one of them entirely
        """
        other = valid_request.model_copy(
            update={
                "departure_airport_code": "cdg",
                "destination_airport_code": "lax",
                "seating_class": "premium economy",
                "adult_passenger_count": 1,
                "child_passenger_count": 0,
                "infant_passenger_count": 0,
            }
        )

        def worker(request: FlightSearchRequest) -> None:
            for _ in range(200):
                validator.validate(request)

        threads = [
            threading.Thread(target=worker, args=(valid_request,)),
            threading.Thread(target=worker, args=(other,)),
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert validator.validated_search in (
            ValidatedSearch.from_request(valid_request),
            ValidatedSearch.from_request(other),
        )


class TestSystemClock:
    """Test cases for system_clock()."""

    def test_local_clock(self) -> None:
        assert system_clock()() == date.today()

    def test_timezone_clock_returns_date(self) -> None:
        today = system_clock("UTC")()

        assert isinstance(today, date)
        assert abs((today - date.today()).days) <= 1

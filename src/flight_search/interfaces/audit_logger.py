"""
Audit Logger Protocol.

Defines the abstract interface for audit logging. The audit logger
tracks every validation decision for compliance and debugging.

The audit logger is responsible for:
    - Logging accepted searches
    - Logging rejected searches with the violated rule
    - Maintaining correlation across a caller's session

Design Notes:
    - Correlation ID propagation for tracing
    - No side effects on validation decisions
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from flight_search.domain.entities import FlightSearchRequest, ValidatedSearch
    from flight_search.domain.value_objects import RuleResult


@runtime_checkable
class AuditLogger(Protocol):
    """Abstract interface for audit logging."""

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        ...

    def log_search_accepted(self, search: ValidatedSearch) -> None:
        """
        Log that a search passed every rule and was committed.

        Args:
            search: The committed snapshot
        """
        ...

    def log_search_rejected(
        self,
        request: FlightSearchRequest,
        result: RuleResult,
    ) -> None:
        """
        Log that a search was rejected.

        Args:
            request: The rejected candidate
            result: Evaluation result naming the violated rule
        """
        ...

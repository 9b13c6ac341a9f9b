"""
Console Audit Logger.

A simple audit logger that outputs validation decisions to the console.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from flight_search.domain.entities import FlightSearchRequest, ValidatedSearch
from flight_search.domain.value_objects import RuleResult


class ConsoleAuditLogger:
    """Simple console-based audit logger."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, log rejection details. If False, only the rule.
        """
        self._verbose = verbose
        self._correlation_id: Optional[str] = None

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        self._correlation_id = correlation_id

    def log_search_accepted(self, search: ValidatedSearch) -> None:
        """Log that a search was committed."""
        self._log(
            "INFO",
            f"Accepted {search.departure_airport_code}->"
            f"{search.destination_airport_code} "
            f"{search.departure_date}-{search.return_date} "
            f"({search.seating_class})",
        )

    def log_search_rejected(
        self,
        request: FlightSearchRequest,
        result: RuleResult,
    ) -> None:
        """Log that a search was rejected."""
        rule = result.rule.value if result.rule else "unknown"
        if self._verbose:
            self._log("WARN", f"Rejected by {rule}: {result.reason}")
        else:
            self._log("WARN", f"Rejected by {rule}")

    def _log(self, level: str, message: str) -> None:
        """Internal logging method."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        corr_id = self._correlation_id[:8] if self._correlation_id else "--------"
        print(f"[{timestamp}] [{corr_id}] [{level:5}] {message}")

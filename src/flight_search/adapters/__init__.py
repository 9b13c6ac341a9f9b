"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the protocols
defined in the interfaces package.

Loggers:
    - ConsoleAuditLogger: Simple console output

Metrics:
    - InMemoryMetricsCollector: Simple in-memory collection
"""

from flight_search.adapters.console_logger import ConsoleAuditLogger
from flight_search.adapters.metrics_collector import InMemoryMetricsCollector

__all__ = [
    "ConsoleAuditLogger",
    "InMemoryMetricsCollector",
]

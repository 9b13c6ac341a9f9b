"""
Interfaces Package - Protocols for Pluggable Collaborators.

    - AuditLogger: Records validation decisions
    - MetricsCollector: Records counts and timings
"""

from flight_search.interfaces.audit_logger import AuditLogger
from flight_search.interfaces.metrics_collector import MetricsCollector

__all__ = ["AuditLogger", "MetricsCollector"]

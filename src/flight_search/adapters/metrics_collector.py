"""
In-Memory Metrics Collector.

Keeps a running summary per metric name and a tally of rejections
per violated rule. Individual samples are not retained.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from threading import Lock
from typing import Any, Dict, Optional

REJECTED_METRIC = "flight_search.rejected"


@dataclass
class MetricSummary:
    """Running totals for one metric name."""

    count: int = 0
    total: float = 0
    last: float = 0

    def add(self, value: float) -> None:
        self.count += 1
        self.total += value
        self.last = value


class InMemoryMetricsCollector:
    """Thread-safe in-memory metrics collector."""

    def __init__(self) -> None:
        self._summaries: Dict[str, MetricSummary] = {}
        self._rejections: Counter = Counter()
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        with self._lock:
            self._summary(name).add(duration_seconds)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a count; rejections are also tallied by their rule tag."""
        with self._lock:
            self._summary(name).add(value)
            if name == REJECTED_METRIC:
                rule = (tags or {}).get("rule", "unknown")
                self._rejections[rule] += value

    def get_metrics(self) -> Dict[str, Any]:
        """Get a per-metric summary (count, total, last)."""
        with self._lock:
            return {
                name: {"count": s.count, "total": s.total, "last": s.last}
                for name, s in self._summaries.items()
            }

    def rejections_by_rule(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._rejections)

    def clear(self) -> None:
        with self._lock:
            self._summaries.clear()
            self._rejections.clear()

    def _summary(self, name: str) -> MetricSummary:
        if name not in self._summaries:
            self._summaries[name] = MetricSummary()
        return self._summaries[name]

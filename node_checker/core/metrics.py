"""
Node Checker Core - In-process metrics.

In-memory metrics describing the checker's own activity. Nothing is exported;
callers read them through get_registry().get_all().

Metrics:
- node_checker_runs_total: Runs by outcome (complete, identity_mismatch, error)
- node_checker_run_duration_seconds: Wall time of a run
- node_checker_runs_in_flight: Runs currently executing
- node_checker_retry_attempts_total: Collector retries
"""

from __future__ import annotations

from dataclasses import dataclass, field
from threading import Lock
from typing import Any


def _label_key(labels: dict[str, str]) -> str:
    return ",".join(f"{k}={v}" for k, v in sorted(labels.items()))


@dataclass
class Counter:
    """Simple counter metric."""

    name: str
    value: int = 0
    labels: dict[str, int] = field(default_factory=dict)
    _lock: Lock = field(default_factory=Lock, repr=False)

    def inc(self, amount: int = 1, **labels: str) -> None:
        """
        Increment counter.

        Args:
            amount: Amount to increment (default: 1)
            **labels: Optional labels (e.g., outcome="complete")
        """
        with self._lock:
            if labels:
                key = _label_key(labels)
                self.labels[key] = self.labels.get(key, 0) + amount
            else:
                self.value += amount

    def get(self, **labels: str) -> int:
        with self._lock:
            if labels:
                return self.labels.get(_label_key(labels), 0)
            return self.value

    def reset(self) -> None:
        with self._lock:
            self.value = 0
            self.labels.clear()


@dataclass
class Histogram:
    """Duration histogram with a sliding window of observations."""

    name: str
    buckets: list[float] = field(
        default_factory=lambda: [0.1, 0.5, 1.0, 5.0, 10.0, 30.0, 60.0, 300.0]
    )
    observations: list[float] = field(default_factory=list)
    _lock: Lock = field(default_factory=Lock, repr=False)
    max_observations: int = 10000

    def observe(self, value: float) -> None:
        with self._lock:
            self.observations.append(value)
            if len(self.observations) > self.max_observations:
                self.observations = self.observations[-self.max_observations :]

    def get_stats(self) -> dict[str, Any]:
        """
        Get histogram statistics.

        Returns:
            Dict with count, sum, min, max, avg, and bucket counts
        """
        with self._lock:
            if not self.observations:
                return {
                    "count": 0,
                    "sum": 0.0,
                    "min": 0.0,
                    "max": 0.0,
                    "avg": 0.0,
                    "buckets": {str(b): 0 for b in self.buckets},
                }

            count = len(self.observations)
            total = sum(self.observations)
            return {
                "count": count,
                "sum": total,
                "min": min(self.observations),
                "max": max(self.observations),
                "avg": total / count,
                # le = less than or equal
                "buckets": {
                    str(b): sum(1 for v in self.observations if v <= b) for b in self.buckets
                },
            }

    def reset(self) -> None:
        with self._lock:
            self.observations.clear()


@dataclass
class Gauge:
    """Simple gauge metric for current values."""

    name: str
    value: float = 0.0
    _lock: Lock = field(default_factory=Lock, repr=False)

    def inc(self, amount: float = 1.0) -> None:
        with self._lock:
            self.value += amount

    def dec(self, amount: float = 1.0) -> None:
        with self._lock:
            self.value -= amount

    def get(self) -> float:
        with self._lock:
            return self.value

    def reset(self) -> None:
        with self._lock:
            self.value = 0.0


class MetricsRegistry:
    """
    Registry for all metrics.

    Thread-safe in-memory metrics storage.
    """

    def __init__(self) -> None:
        self._counters: dict[str, Counter] = {}
        self._histograms: dict[str, Histogram] = {}
        self._gauges: dict[str, Gauge] = {}
        self._lock = Lock()

    def counter(self, name: str) -> Counter:
        """Get or create a counter metric."""
        with self._lock:
            if name not in self._counters:
                self._counters[name] = Counter(name=name)
            return self._counters[name]

    def histogram(self, name: str) -> Histogram:
        """Get or create a histogram metric."""
        with self._lock:
            if name not in self._histograms:
                self._histograms[name] = Histogram(name=name)
            return self._histograms[name]

    def gauge(self, name: str) -> Gauge:
        """Get or create a gauge metric."""
        with self._lock:
            if name not in self._gauges:
                self._gauges[name] = Gauge(name=name)
            return self._gauges[name]

    def get_all(self) -> dict[str, Any]:
        with self._lock:
            return {
                "counters": {
                    name: {"value": c.value, "labels": dict(c.labels)}
                    for name, c in self._counters.items()
                },
                "histograms": {name: h.get_stats() for name, h in self._histograms.items()},
                "gauges": {name: g.value for name, g in self._gauges.items()},
            }

    def reset(self) -> None:
        """Reset all metrics."""
        with self._lock:
            for counter in self._counters.values():
                counter.reset()
            for histogram in self._histograms.values():
                histogram.reset()
            for gauge in self._gauges.values():
                gauge.reset()


# Global metrics registry
_registry = MetricsRegistry()


def get_registry() -> MetricsRegistry:
    return _registry


def reset_metrics() -> None:
    """Reset all metrics in global registry."""
    _registry.reset()


def track_run(outcome: str, duration: float) -> None:
    """
    Track a finished run.

    Args:
        outcome: "complete", "identity_mismatch" or "error"
        duration: Duration in seconds
    """
    _registry.counter("node_checker_runs_total").inc(outcome=outcome)
    _registry.histogram("node_checker_run_duration_seconds").observe(duration)

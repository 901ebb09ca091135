"""
Tests for in-process metrics.

Tests:
- Counter, Histogram, Gauge primitives
- MetricsRegistry get-or-create and reset
- track_run helper
"""

from __future__ import annotations

from node_checker.core.metrics import (
    Counter,
    Gauge,
    Histogram,
    MetricsRegistry,
    get_registry,
    reset_metrics,
    track_run,
)


class TestCounter:
    """Tests for Counter."""

    def test_inc_without_labels(self):
        counter = Counter(name="c")
        counter.inc()
        counter.inc(2)
        assert counter.get() == 3

    def test_labels_are_independent_of_order(self):
        counter = Counter(name="c")
        counter.inc(outcome="complete", side="target")
        counter.inc(side="target", outcome="complete")
        assert counter.get(outcome="complete", side="target") == 2
        assert counter.get(outcome="error") == 0
        assert counter.get() == 0

    def test_reset(self):
        counter = Counter(name="c")
        counter.inc(outcome="complete")
        counter.reset()
        assert counter.get(outcome="complete") == 0


class TestHistogram:
    """Tests for Histogram."""

    def test_empty_stats(self):
        stats = Histogram(name="h").get_stats()
        assert stats["count"] == 0
        assert stats["avg"] == 0.0

    def test_stats_and_buckets(self):
        histogram = Histogram(name="h", buckets=[1.0, 10.0])
        for value in (0.5, 2.0, 20.0):
            histogram.observe(value)

        stats = histogram.get_stats()
        assert stats["count"] == 3
        assert stats["min"] == 0.5
        assert stats["max"] == 20.0
        assert stats["buckets"] == {"1.0": 1, "10.0": 2}

    def test_sliding_window(self):
        histogram = Histogram(name="h", max_observations=2)
        for value in (1.0, 2.0, 3.0):
            histogram.observe(value)
        assert histogram.observations == [2.0, 3.0]


class TestGauge:
    """Tests for Gauge."""

    def test_inc_dec(self):
        gauge = Gauge(name="g")
        gauge.inc()
        gauge.inc()
        gauge.dec()
        assert gauge.get() == 1.0


class TestRegistry:
    """Tests for MetricsRegistry and module helpers."""

    def test_get_or_create(self):
        registry = MetricsRegistry()
        assert registry.counter("a") is registry.counter("a")
        assert registry.histogram("b") is registry.histogram("b")
        assert registry.gauge("c") is registry.gauge("c")

    def test_get_all(self):
        registry = MetricsRegistry()
        registry.counter("a").inc(outcome="complete")
        registry.gauge("c").inc(2)

        snapshot = registry.get_all()
        assert snapshot["counters"]["a"]["labels"] == {"outcome=complete": 1}
        assert snapshot["gauges"]["c"] == 2.0

    def test_track_run(self):
        track_run("complete", 1.5)
        track_run("identity_mismatch", 0.1)

        registry = get_registry()
        assert registry.counter("node_checker_runs_total").get(outcome="complete") == 1
        assert registry.counter("node_checker_runs_total").get(outcome="identity_mismatch") == 1
        assert registry.histogram("node_checker_run_duration_seconds").get_stats()["count"] == 2

    def test_reset_metrics(self):
        track_run("error", 1.0)
        reset_metrics()
        assert get_registry().counter("node_checker_runs_total").get(outcome="error") == 0

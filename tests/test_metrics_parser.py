"""Tests for metrics parsing and snapshots."""

from __future__ import annotations

import pytest

from node_checker.core.exceptions import MetricsParseError
from node_checker.metrics.parser import parse_metrics
from node_checker.metrics.snapshot import MetricsSnapshot
from tests.fakes import metrics_lines


class TestParseMetrics:
    """Tests for parse_metrics."""

    def test_labelled_gauges(self):
        snapshot = parse_metrics(metrics_lines(synced_version=1234, outbound_peers=7))

        assert snapshot.get_metric_value("aptos_state_sync_version", type="synced") == 1234.0
        assert snapshot.get_metric_value("aptos_connections", direction="outbound") == 7.0
        assert len(snapshot["aptos_connections"]) == 2

    def test_counters_keep_sample_names(self):
        snapshot = parse_metrics(
            [
                "# TYPE requests counter",
                'requests_total{code="200"} 10',
                'requests_total{code="500"} 2',
            ]
        )
        assert "requests_total" in snapshot
        assert sum(s.value for s in snapshot.get_samples("requests_total")) == 12.0

    def test_empty_response(self):
        snapshot = parse_metrics([])
        assert len(snapshot) == 0
        assert snapshot.get_metric_value("anything") is None

    def test_untyped_lines(self):
        snapshot = parse_metrics(["build_info 1", "uptime_seconds 42.5"])
        assert snapshot.get_metric_value("uptime_seconds") == 42.5

    def test_invalid_value(self):
        with pytest.raises(MetricsParseError, match="Invalid metrics text"):
            parse_metrics(["aptos_connections not_a_number"])


class TestMetricsSnapshot:
    """Tests for MetricsSnapshot lookups."""

    def test_missing_labels(self):
        snapshot = parse_metrics(metrics_lines())
        assert snapshot.get_metric_value("aptos_state_sync_version", type="unknown") is None
        assert snapshot.get_samples("missing_metric") == ()

    def test_read_only(self):
        snapshot = parse_metrics(metrics_lines())
        with pytest.raises(TypeError):
            snapshot["new_metric"] = ()  # type: ignore[index]
        sample = snapshot["aptos_connections"][0]
        with pytest.raises(TypeError):
            sample.labels["direction"] = "inbound"  # type: ignore[index]

    def test_samples_are_hashable(self):
        first = parse_metrics(metrics_lines(outbound_peers=3))
        second = parse_metrics(metrics_lines(outbound_peers=3))

        assert set(first["aptos_connections"]) == set(second["aptos_connections"])
        assert len(set(first["aptos_connections"])) == 2

    def test_built_from_mapping_copy(self):
        source: dict = {}
        snapshot = MetricsSnapshot(source)
        source["late"] = ()
        assert "late" not in snapshot

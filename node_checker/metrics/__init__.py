"""
Node Checker Metrics - Parsed metrics snapshots.
"""

from node_checker.metrics.parser import parse_metrics
from node_checker.metrics.snapshot import MetricsSnapshot, Sample

__all__ = ["MetricsSnapshot", "Sample", "parse_metrics"]

"""
Node Checker Collectors - Fetch metrics and system information from nodes.
"""

from node_checker.collectors.base import MetricCollector
from node_checker.collectors.http import HttpMetricCollector

__all__ = ["HttpMetricCollector", "MetricCollector"]

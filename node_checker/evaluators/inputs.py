"""
Evaluator inputs.

Each evaluator family consumes a structurally different input; they are
assembled by the runner at the pipeline stage where their data exists.
"""
from __future__ import annotations

from dataclasses import dataclass

from node_checker.core.types import NodeAddress, NodeInformation, SystemInformation
from node_checker.metrics.snapshot import MetricsSnapshot


@dataclass(frozen=True)
class DirectEvaluatorInput:
    """Baseline identity plus the target address, for evaluators that talk to the target."""

    baseline_node_information: NodeInformation
    target_node_address: NodeAddress


@dataclass(frozen=True)
class MetricsEvaluatorInput:
    """Two snapshots per side, separated by the metrics fetch delay."""

    previous_baseline_metrics: MetricsSnapshot
    previous_target_metrics: MetricsSnapshot
    latest_baseline_metrics: MetricsSnapshot
    latest_target_metrics: MetricsSnapshot


@dataclass(frozen=True)
class SystemInformationEvaluatorInput:
    baseline_system_information: SystemInformation
    target_system_information: SystemInformation

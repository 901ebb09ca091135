"""
Metrics evaluators.

These compare the previous and latest snapshots of each side; a delta is only
ever computed between two snapshots of the same node.
"""
from __future__ import annotations

import math

from node_checker.core.types import EvaluationResult
from node_checker.evaluators.base import Evaluator
from node_checker.evaluators.inputs import MetricsEvaluatorInput
from node_checker.metrics.snapshot import MetricsSnapshot

STATE_SYNC_METRIC = "aptos_state_sync_version"
CONNECTIONS_METRIC = "aptos_connections"


def _synced_version(snapshot: MetricsSnapshot) -> int | None:
    value = snapshot.get_metric_value(STATE_SYNC_METRIC, type="synced")
    if value is None or not math.isfinite(value):
        return None
    return int(value)


class StateSyncVersionEvaluator(Evaluator[MetricsEvaluatorInput]):
    """
    Check that the target is syncing and keeping up with the baseline.

    Produces two findings when the metric is present:
    - progress: the target's synced version grew across the window
    - lag: the target is within `version_delta_tolerance` of the baseline
    """

    name = "state_sync_version"
    category = "state_sync"

    def __init__(self, version_delta_tolerance: int = 5000):
        self.version_delta_tolerance = version_delta_tolerance

    async def evaluate(self, evaluator_input: MetricsEvaluatorInput) -> list[EvaluationResult]:
        previous_target = _synced_version(evaluator_input.previous_target_metrics)
        latest_target = _synced_version(evaluator_input.latest_target_metrics)

        if previous_target is None or latest_target is None:
            return [
                self.build_result(
                    "State sync version missing",
                    0,
                    f"The target does not report {STATE_SYNC_METRIC}{{type=\"synced\"}} "
                    "in both snapshots.",
                )
            ]

        results = [
            self.pass_or_fail(
                latest_target > previous_target,
                "State sync version progress",
                f"The target's synced version went from {previous_target} to {latest_target}.",
            )
        ]

        latest_baseline = _synced_version(evaluator_input.latest_baseline_metrics)
        if latest_baseline is not None:
            lag = latest_baseline - latest_target
            results.append(
                self.pass_or_fail(
                    lag <= self.version_delta_tolerance,
                    "State sync version lag",
                    f"The target is {lag} versions behind the baseline "
                    f"(tolerance {self.version_delta_tolerance}).",
                )
            )
        return results


class NetworkPeersEvaluator(Evaluator[MetricsEvaluatorInput]):
    """Target must hold a minimum number of outbound connections."""

    name = "network_peers"
    category = "network"

    def __init__(self, min_outbound_peers: int = 1):
        self.min_outbound_peers = min_outbound_peers

    async def evaluate(self, evaluator_input: MetricsEvaluatorInput) -> list[EvaluationResult]:
        samples = evaluator_input.latest_target_metrics.get_samples(
            CONNECTIONS_METRIC, direction="outbound"
        )
        outbound = int(sum(s.value for s in samples if math.isfinite(s.value)))
        return [
            self.pass_or_fail(
                outbound >= self.min_outbound_peers,
                "Outbound peers",
                f"The target has {outbound} outbound connections, "
                f"the minimum is {self.min_outbound_peers}.",
            )
        ]

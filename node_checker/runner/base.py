"""
Runner protocol.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from node_checker.collectors.base import MetricCollector
    from node_checker.core.types import EvaluationSummary, NodeAddress


@runtime_checkable
class Runner(Protocol):
    """Evaluates target nodes against the baseline it was built with."""

    async def run(
        self,
        target_node_address: NodeAddress,
        target_metric_collector: MetricCollector,
    ) -> EvaluationSummary:
        """Run every evaluator against the target; raises RunnerError on failure."""
        ...

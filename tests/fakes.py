"""Fakes shared by the test suite."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any

from node_checker.core.exceptions import CollectorError, EvaluatorError
from node_checker.core.types import (
    MAX_SCORE,
    EvaluationResult,
    freeze_system_information,
)
from node_checker.evaluators.base import Evaluator


def metrics_lines(synced_version: int = 100, outbound_peers: int = 3) -> list[str]:
    """Build a small metrics response."""
    return [
        "# HELP aptos_state_sync_version State sync version",
        "# TYPE aptos_state_sync_version gauge",
        f'aptos_state_sync_version{{type="synced"}} {synced_version}',
        f'aptos_state_sync_version{{type="applied_transaction_outputs"}} {synced_version}',
        "# TYPE aptos_connections gauge",
        f'aptos_connections{{direction="outbound",network_id="Public"}} {outbound_peers}',
        'aptos_connections{direction="inbound",network_id="Public"} 1',
    ]


class FakeMetricCollector:
    """
    In-memory collector.

    Metrics rounds are served in order (the last one repeats). Every call is
    appended to `events` as "<side>:<kind>", shared across collectors when the
    same list is passed in.
    """

    def __init__(
        self,
        side: str,
        metrics_rounds: Sequence[list[str]] | None = None,
        system_information: dict[str, Any] | None = None,
        fail_metrics_calls: set[int] | None = None,
        fail_system_information: bool = False,
        events: list[str] | None = None,
    ):
        self.side = side
        self.metrics_rounds = list(metrics_rounds or [metrics_lines(100), metrics_lines(200)])
        self.system_information = system_information or {
            "build_commit_hash": "abc123",
            "cpu_count": "16",
            "memory_total_kb": str(64 * 1024 * 1024),
        }
        self.fail_metrics_calls = fail_metrics_calls or set()
        self.fail_system_information = fail_system_information
        self.events = events if events is not None else []
        self.calls: list[str] = []
        self.metrics_fetch_times: list[float] = []

    async def collect_metrics(self) -> list[str]:
        self.calls.append("metrics")
        self.events.append(f"{self.side}:metrics")
        self.metrics_fetch_times.append(asyncio.get_running_loop().time())
        call_number = self.calls.count("metrics")
        if call_number in self.fail_metrics_calls:
            raise CollectorError(f"http://{self.side}", "connection refused")
        index = min(call_number, len(self.metrics_rounds)) - 1
        return list(self.metrics_rounds[index])

    async def collect_system_information(self):
        self.calls.append("system_information")
        self.events.append(f"{self.side}:system_information")
        if self.fail_system_information:
            raise CollectorError(f"http://{self.side}", "HTTP 503")
        return freeze_system_information(self.system_information)


class StubEvaluator(Evaluator[Any]):
    """Evaluator returning fixed scores, recording every input it receives."""

    category = "stub"

    def __init__(
        self,
        name: str,
        scores: Sequence[int] = (MAX_SCORE,),
        sleep_secs: float = 0.0,
        error: Exception | None = None,
        events: list[str] | None = None,
    ):
        self.name = name
        self.scores = list(scores)
        self.sleep_secs = sleep_secs
        self.error = error
        self.events = events if events is not None else []
        self.inputs: list[Any] = []

    def __repr__(self) -> str:
        return f"StubEvaluator({self.name!r})"

    async def evaluate(self, evaluator_input: Any) -> list[EvaluationResult]:
        self.inputs.append(evaluator_input)
        self.events.append(f"evaluate:{self.name}")
        if self.sleep_secs:
            await asyncio.sleep(self.sleep_secs)
        if self.error is not None:
            raise self.error
        return [
            self.build_result(f"{self.name} #{i}", score, f"{self.name} scored {score}")
            for i, score in enumerate(self.scores)
        ]


def failing_evaluator(name: str) -> StubEvaluator:
    return StubEvaluator(name, error=EvaluatorError(name, "boom"))

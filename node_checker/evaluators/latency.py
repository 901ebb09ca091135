"""
Latency evaluator.
"""
from __future__ import annotations

import asyncio
import time

import httpx
from loguru import logger

from node_checker.core.exceptions import EvaluatorError
from node_checker.core.types import EvaluationResult
from node_checker.evaluators.api import get_api_index
from node_checker.evaluators.base import Evaluator
from node_checker.evaluators.inputs import DirectEvaluatorInput
from node_checker.utils.logger import log_prefix


class LatencyEvaluator(Evaluator[DirectEvaluatorInput]):
    """
    Time several requests to the target's API.

    Failing more than `max_failures` requests is an evaluation failure;
    otherwise the average latency of the successful requests is scored.
    """

    name = "latency"
    category = "latency"

    def __init__(
        self,
        num_samples: int = 5,
        delay_between_samples_ms: int = 20,
        max_failures: int = 2,
        max_latency_ms: int = 1000,
        client: httpx.AsyncClient | None = None,
        timeout_secs: float = 10.0,
    ):
        self.num_samples = num_samples
        self.delay_between_samples_ms = delay_between_samples_ms
        self.max_failures = max_failures
        self.max_latency_ms = max_latency_ms
        self._client = client
        self.timeout_secs = timeout_secs

    async def evaluate(self, evaluator_input: DirectEvaluatorInput) -> list[EvaluationResult]:
        latencies_ms: list[float] = []
        failures = 0

        for i in range(self.num_samples):
            if i > 0 and self.delay_between_samples_ms:
                await asyncio.sleep(self.delay_between_samples_ms / 1000)
            start = time.perf_counter()
            try:
                await get_api_index(
                    evaluator_input.target_node_address, self._client, self.timeout_secs
                )
            except (httpx.HTTPError, ValueError) as e:
                failures += 1
                logger.debug(f"{log_prefix('⚠️')} Latency sample {i + 1} failed: {e}")
                if failures > self.max_failures:
                    raise EvaluatorError(
                        self.name,
                        f"{failures} of {i + 1} requests failed "
                        f"(max failures {self.max_failures})",
                    ) from e
                continue
            latencies_ms.append((time.perf_counter() - start) * 1000)

        if not latencies_ms:
            raise EvaluatorError(self.name, "No successful requests")

        average_ms = sum(latencies_ms) / len(latencies_ms)
        return [
            self.pass_or_fail(
                average_ms <= self.max_latency_ms,
                "Average API latency",
                f"Average latency over {len(latencies_ms)} requests was {average_ms:.0f}ms, "
                f"the maximum is {self.max_latency_ms}ms.",
            )
        ]

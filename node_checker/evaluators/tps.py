"""
TPS evaluator.

Measures committed transactions per second on the target by sampling its
ledger version twice. It spends `duration_secs` waiting, which is why the
runner starts it inside the metrics snapshot window.
"""
from __future__ import annotations

import asyncio

import httpx
from loguru import logger

from node_checker.core.exceptions import EvaluatorError
from node_checker.core.types import MAX_SCORE, EvaluationResult
from node_checker.evaluators.api import get_api_index
from node_checker.evaluators.base import Evaluator
from node_checker.evaluators.inputs import DirectEvaluatorInput


class TpsEvaluator(Evaluator[DirectEvaluatorInput]):
    """Score observed TPS against a minimum."""

    name = "tps"
    category = "performance"

    def __init__(
        self,
        duration_secs: float = 10.0,
        minimum_tps: float = 1.0,
        client: httpx.AsyncClient | None = None,
        timeout_secs: float = 10.0,
    ):
        self.duration_secs = duration_secs
        self.minimum_tps = minimum_tps
        self._client = client
        self.timeout_secs = timeout_secs

    async def _ledger_version(self, evaluator_input: DirectEvaluatorInput) -> int:
        try:
            index = await get_api_index(
                evaluator_input.target_node_address, self._client, self.timeout_secs
            )
            return int(index["ledger_version"])
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            raise EvaluatorError(self.name, f"Could not read ledger version: {e}") from e

    async def evaluate(self, evaluator_input: DirectEvaluatorInput) -> list[EvaluationResult]:
        loop = asyncio.get_running_loop()

        start_version = await self._ledger_version(evaluator_input)
        start = loop.time()
        await asyncio.sleep(self.duration_secs)
        end_version = await self._ledger_version(evaluator_input)
        elapsed = loop.time() - start

        tps = max(end_version - start_version, 0) / elapsed if elapsed > 0 else 0.0
        logger.debug(f"Observed {tps:.2f} TPS over {elapsed:.1f}s")

        if tps >= self.minimum_tps:
            score = MAX_SCORE
        elif self.minimum_tps > 0:
            # Partial credit below the minimum
            score = int(MAX_SCORE * tps / self.minimum_tps)
        else:
            score = 0

        return [
            self.build_result(
                "Transactions per second",
                score,
                f"The target committed {tps:.2f} transactions per second "
                f"over {elapsed:.1f}s, the minimum is {self.minimum_tps}.",
            )
        ]

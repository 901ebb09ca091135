"""
Node identity evaluator.

Confirms the target belongs to the same network as the baseline before any
expensive work is done.
"""
from __future__ import annotations

import httpx
from loguru import logger

from node_checker.core.exceptions import EvaluatorError
from node_checker.core.types import EvaluationResult
from node_checker.evaluators.api import get_api_index
from node_checker.evaluators.base import Evaluator
from node_checker.evaluators.inputs import DirectEvaluatorInput


class NodeIdentityEvaluator(Evaluator[DirectEvaluatorInput]):
    """Compare the target's chain id and role type with the baseline's."""

    name = "node_identity"
    category = "identity"

    def __init__(self, client: httpx.AsyncClient | None = None, timeout_secs: float = 10.0):
        self._client = client
        self.timeout_secs = timeout_secs

    async def evaluate(self, evaluator_input: DirectEvaluatorInput) -> list[EvaluationResult]:
        baseline = evaluator_input.baseline_node_information
        try:
            index = await get_api_index(
                evaluator_input.target_node_address, self._client, self.timeout_secs
            )
            chain_id = int(index["chain_id"])
            role_type = str(index["node_role"])
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            raise EvaluatorError(self.name, f"Could not read target identity: {e}") from e

        logger.debug(f"Target identity: chain_id={chain_id}, role_type={role_type}")

        return [
            self.pass_or_fail(
                chain_id == baseline.chain_id,
                "Chain ID",
                f"The target reports chain ID {chain_id}, "
                f"the baseline is on chain ID {baseline.chain_id}.",
            ),
            self.pass_or_fail(
                role_type == baseline.role_type,
                "Role type",
                f"The target runs as {role_type!r}, "
                f"the baseline runs as {baseline.role_type!r}.",
            ),
        ]

"""
System information evaluators.
"""
from __future__ import annotations

from node_checker.core.types import EvaluationResult, SystemInformation
from node_checker.evaluators.base import Evaluator
from node_checker.evaluators.inputs import SystemInformationEvaluatorInput

BUILD_COMMIT_HASH_KEY = "build_commit_hash"
CPU_COUNT_KEY = "cpu_count"
MEMORY_TOTAL_KEY = "memory_total_kb"


class BuildVersionEvaluator(Evaluator[SystemInformationEvaluatorInput]):
    """Target must run the same build as the baseline."""

    name = "build_version"
    category = "system_information"

    async def evaluate(
        self, evaluator_input: SystemInformationEvaluatorInput
    ) -> list[EvaluationResult]:
        baseline_commit = evaluator_input.baseline_system_information.get(BUILD_COMMIT_HASH_KEY)
        target_commit = evaluator_input.target_system_information.get(BUILD_COMMIT_HASH_KEY)

        if target_commit is None:
            return [
                self.build_result(
                    "Build commit hash missing",
                    0,
                    f"The target did not report {BUILD_COMMIT_HASH_KEY!r}.",
                )
            ]
        if baseline_commit is None:
            # Nothing to compare against
            return []

        return [
            self.pass_or_fail(
                baseline_commit == target_commit,
                "Build commit hash",
                f"The target runs commit {target_commit}, the baseline runs {baseline_commit}.",
            )
        ]


class HardwareEvaluator(Evaluator[SystemInformationEvaluatorInput]):
    """Target must meet minimum CPU and memory requirements."""

    name = "hardware"
    category = "system_information"

    def __init__(self, min_cpu_count: int = 8, min_memory_kb: int = 31 * 1024 * 1024):
        self.min_cpu_count = min_cpu_count
        self.min_memory_kb = min_memory_kb

    def _check(
        self, info: SystemInformation, key: str, minimum: int, headline: str
    ) -> EvaluationResult:
        raw = info.get(key)
        try:
            value = int(raw) if raw is not None else None
        except ValueError:
            value = None

        if value is None:
            return self.build_result(
                f"{headline} unknown", 0, f"The target reported no usable {key!r} ({raw!r})."
            )
        return self.pass_or_fail(
            value >= minimum,
            headline,
            f"The target reports {key}={value}, the minimum is {minimum}.",
        )

    async def evaluate(
        self, evaluator_input: SystemInformationEvaluatorInput
    ) -> list[EvaluationResult]:
        info = evaluator_input.target_system_information
        return [
            self._check(info, CPU_COUNT_KEY, self.min_cpu_count, "CPU count"),
            self._check(info, MEMORY_TOTAL_KEY, self.min_memory_kb, "Memory"),
        ]

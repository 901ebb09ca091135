"""
Blocking runner.

"Blocking" from the caller's point of view: a run pulls metrics once, waits,
pulls them again and only then returns a summary. It keeps no state between
runs beyond its construction-time configuration, so one instance can serve
concurrent runs against different targets.
"""
from __future__ import annotations

import asyncio
import time
from collections.abc import Callable, Iterable
from typing import TypeVar, assert_never

from node_checker.collectors.base import MetricCollector
from node_checker.config.models import RunnerConfig
from node_checker.core.exceptions import (
    LatencyEvaluatorError,
    MetricCollectorError,
    MetricsEvaluatorError,
    NodeIdentityEvaluatorError,
    ParseMetricsError,
    RunnerError,
    RunnerStage,
    SystemInformationEvaluatorError,
    TpsEvaluatorError,
)
from node_checker.core.metrics import get_registry, track_run
from node_checker.core.types import (
    MAX_SCORE,
    EvaluationResult,
    EvaluationSummary,
    NodeAddress,
    NodeInformation,
    SystemInformation,
)
from node_checker.evaluators.base import Evaluator
from node_checker.evaluators.inputs import (
    DirectEvaluatorInput,
    MetricsEvaluatorInput,
    SystemInformationEvaluatorInput,
)
from node_checker.evaluators.types import (
    EvaluatorType,
    LatencyEvaluatorType,
    MetricsEvaluatorType,
    SystemInformationEvaluatorType,
    TpsEvaluatorType,
)
from node_checker.metrics.parser import parse_metrics
from node_checker.metrics.snapshot import MetricsSnapshot
from node_checker.utils.logger import get_run_logger, log_prefix

InputT = TypeVar("InputT")

BASELINE = "baseline"
TARGET = "target"

MetricsParser = Callable[[list[str]], MetricsSnapshot]


class BlockingRunner:
    """
    Evaluate one target node against a fixed baseline node.

    Pipeline:
    1. Node identity check; a non-passing result ends the run early
    2. System information from both nodes
    3. First metrics snapshot from both nodes
    4. TPS evaluator, if configured, inside the snapshot window
    5. Wait out the rest of the window
    6. Second metrics snapshot from both nodes
    7. Remaining evaluators in configured order
    """

    def __init__(
        self,
        baseline_node_information: NodeInformation,
        baseline_metric_collector: MetricCollector,
        node_identity_evaluator: Evaluator[DirectEvaluatorInput],
        evaluators: Iterable[EvaluatorType],
        config: RunnerConfig | None = None,
        parser: MetricsParser = parse_metrics,
    ):
        self.config = config or RunnerConfig()
        self.baseline_node_information = baseline_node_information
        self.baseline_metric_collector = baseline_metric_collector
        self.node_identity_evaluator = node_identity_evaluator
        self.evaluators: tuple[EvaluatorType, ...] = tuple(evaluators)
        self._parser = parser

    def __repr__(self) -> str:
        return (
            f"BlockingRunner(baseline={self.baseline_node_information.node_address.url!r}, "
            f"evaluators={len(self.evaluators)}, "
            f"delay={self.config.metrics_fetch_delay_secs}s)"
        )

    @property
    def tps_evaluator(self) -> Evaluator[DirectEvaluatorInput] | None:
        """The first configured TPS evaluator, if any."""
        for evaluator_type in self.evaluators:
            if isinstance(evaluator_type, TpsEvaluatorType):
                return evaluator_type.evaluator
        return None

    # =========================================================================
    # Stage helpers
    # =========================================================================

    async def _collect_system_information(
        self, side: str, collector: MetricCollector
    ) -> SystemInformation:
        try:
            return await collector.collect_system_information()
        except Exception as e:
            raise MetricCollectorError(side, RunnerStage.SYSTEM_INFORMATION, str(e)) from e

    async def _collect_metrics(self, side: str, collector: MetricCollector) -> list[str]:
        try:
            return await collector.collect_metrics()
        except Exception as e:
            raise MetricCollectorError(side, RunnerStage.METRICS, str(e)) from e

    def _parse_response(self, side: str, lines: list[str]) -> MetricsSnapshot:
        try:
            return self._parser(lines)
        except Exception as e:
            raise ParseMetricsError(side, str(e)) from e

    async def _collect_snapshots(
        self, target_metric_collector: MetricCollector
    ) -> tuple[MetricsSnapshot, MetricsSnapshot]:
        """Fetch then parse one round of metrics, baseline first."""
        baseline_lines = await self._collect_metrics(BASELINE, self.baseline_metric_collector)
        target_lines = await self._collect_metrics(TARGET, target_metric_collector)
        return (
            self._parse_response(BASELINE, baseline_lines),
            self._parse_response(TARGET, target_lines),
        )

    @staticmethod
    async def _evaluate(
        evaluator: Evaluator[InputT],
        evaluator_input: InputT,
        error_type: type[RunnerError],
    ) -> list[EvaluationResult]:
        try:
            return list(await evaluator.evaluate(evaluator_input))
        except Exception as e:
            raise error_type(f"{evaluator!r} failed: {e}", {"evaluator": repr(evaluator)}) from e

    # =========================================================================
    # Run
    # =========================================================================

    async def run(
        self,
        target_node_address: NodeAddress,
        target_metric_collector: MetricCollector,
    ) -> EvaluationSummary:
        """
        Evaluate a target node.

        Args:
            target_node_address: Address of the node to evaluate
            target_metric_collector: Collector for the target node

        Returns:
            The summary of every finding, in execution order. When the node
            identity check does not fully pass, only its findings.

        Raises:
            RunnerError: A stage failed; the subclass names the stage.
        """
        run_logger = get_run_logger(target_node_address.url)
        run_logger.info(f"{log_prefix('🔍')} Running evaluation for {target_node_address.url}")

        in_flight = get_registry().gauge("node_checker_runs_in_flight")
        in_flight.inc()
        start = time.monotonic()
        try:
            summary, outcome = await self._run(target_node_address, target_metric_collector)
        except RunnerError as e:
            track_run("error", time.monotonic() - start)
            run_logger.error(f"{log_prefix('❌')} Evaluation failed at {e.stage.value}: {e}")
            raise
        finally:
            in_flight.dec()

        track_run(outcome, time.monotonic() - start)
        run_logger.info(
            f"{log_prefix('✅')} Evaluation of {target_node_address.url} finished: "
            f"{summary.summary_explanation} ({len(summary.evaluation_results)} results)"
        )
        return summary

    async def _run(
        self,
        target_node_address: NodeAddress,
        target_metric_collector: MetricCollector,
    ) -> tuple[EvaluationSummary, str]:
        log = get_run_logger(target_node_address.url)
        direct_evaluator_input = DirectEvaluatorInput(
            baseline_node_information=self.baseline_node_information,
            target_node_address=target_node_address,
        )

        log.debug("Confirming node identity matches")
        node_identity_evaluations = await self._evaluate(
            self.node_identity_evaluator, direct_evaluator_input, NodeIdentityEvaluatorError
        )

        # Exit early if a node identity evaluation returned a non-passing result
        if any(e.score < MAX_SCORE for e in node_identity_evaluations):
            log.info(
                f"{log_prefix('🚫')} Node identity mismatch for {target_node_address.url}, "
                "skipping remaining evaluators"
            )
            return EvaluationSummary.from_results(node_identity_evaluations), "identity_mismatch"

        log.debug("Collecting system information from baseline node")
        baseline_system_information = await self._collect_system_information(
            BASELINE, self.baseline_metric_collector
        )
        log.debug(f"Baseline system information: {dict(baseline_system_information)}")

        log.debug("Collecting system information from target node")
        target_system_information = await self._collect_system_information(
            TARGET, target_metric_collector
        )
        log.debug(f"Target system information: {dict(target_system_information)}")

        log.debug("Collecting first round of metrics")
        first_baseline_metrics, first_target_metrics = await self._collect_snapshots(
            target_metric_collector
        )

        evaluation_results = list(node_identity_evaluations)

        # The window is anchored before the TPS evaluator starts so its runtime
        # counts against the delay. A TPS run longer than the delay is not
        # compensated; the second snapshot is simply taken right after it.
        loop = asyncio.get_running_loop()
        metrics_fetch_deadline = loop.time() + self.config.metrics_fetch_delay_secs

        tps_evaluator = self.tps_evaluator
        if tps_evaluator is not None:
            log.debug("Starting TPS evaluator")
            evaluation_results.extend(
                await self._evaluate(tps_evaluator, direct_evaluator_input, TpsEvaluatorError)
            )
            log.debug("TPS evaluator done")

        remaining = metrics_fetch_deadline - loop.time()
        if remaining > 0:
            log.debug(f"{log_prefix('⏱️')} Waiting {remaining:.1f}s before second round")
            await asyncio.sleep(remaining)

        log.debug("Collecting second round of metrics")
        second_baseline_metrics, second_target_metrics = await self._collect_snapshots(
            target_metric_collector
        )

        metrics_evaluator_input = MetricsEvaluatorInput(
            previous_baseline_metrics=first_baseline_metrics,
            previous_target_metrics=first_target_metrics,
            latest_baseline_metrics=second_baseline_metrics,
            latest_target_metrics=second_target_metrics,
        )
        system_information_evaluator_input = SystemInformationEvaluatorInput(
            baseline_system_information=baseline_system_information,
            target_system_information=target_system_information,
        )

        for evaluator_type in self.evaluators:
            match evaluator_type:
                case MetricsEvaluatorType(evaluator=evaluator):
                    results = await self._evaluate(
                        evaluator, metrics_evaluator_input, MetricsEvaluatorError
                    )
                case SystemInformationEvaluatorType(evaluator=evaluator):
                    results = await self._evaluate(
                        evaluator,
                        system_information_evaluator_input,
                        SystemInformationEvaluatorError,
                    )
                case TpsEvaluatorType():
                    # Already ran inside the metrics fetch window
                    results = []
                case LatencyEvaluatorType(evaluator=evaluator):
                    results = await self._evaluate(
                        evaluator, direct_evaluator_input, LatencyEvaluatorError
                    )
                case _:
                    assert_never(evaluator_type)
            evaluation_results.extend(results)

        return EvaluationSummary.from_results(evaluation_results), "complete"

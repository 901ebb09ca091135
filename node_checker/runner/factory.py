"""
Build a runner from configuration.
"""
from __future__ import annotations

import httpx

from node_checker.collectors.http import HttpMetricCollector
from node_checker.config.models import CheckerConfig, CollectorConfig, EvaluatorsConfig
from node_checker.core.types import NodeAddress, NodeInformation
from node_checker.evaluators.latency import LatencyEvaluator
from node_checker.evaluators.metrics import NetworkPeersEvaluator, StateSyncVersionEvaluator
from node_checker.evaluators.node_identity import NodeIdentityEvaluator
from node_checker.evaluators.system_information import BuildVersionEvaluator, HardwareEvaluator
from node_checker.evaluators.tps import TpsEvaluator
from node_checker.evaluators.types import (
    EvaluatorType,
    LatencyEvaluatorType,
    MetricsEvaluatorType,
    SystemInformationEvaluatorType,
    TpsEvaluatorType,
)
from node_checker.runner.blocking import BlockingRunner


def build_evaluators(
    config: EvaluatorsConfig,
    client: httpx.AsyncClient | None = None,
    timeout_secs: float = 10.0,
) -> list[EvaluatorType]:
    """
    Instantiate the enabled evaluators.

    Args:
        config: Evaluator selection and thresholds
        client: Optional shared HTTP client for evaluators that call the target
        timeout_secs: Request timeout for those evaluators

    Returns:
        Evaluator variants in execution order.
    """
    evaluators: list[EvaluatorType] = []

    if config.state_sync_version.enabled:
        evaluators.append(
            MetricsEvaluatorType(
                StateSyncVersionEvaluator(
                    version_delta_tolerance=config.state_sync_version.version_delta_tolerance
                )
            )
        )
    if config.network_peers.enabled:
        evaluators.append(
            MetricsEvaluatorType(
                NetworkPeersEvaluator(min_outbound_peers=config.network_peers.min_outbound_peers)
            )
        )
    if config.build_version.enabled:
        evaluators.append(SystemInformationEvaluatorType(BuildVersionEvaluator()))
    if config.hardware.enabled:
        evaluators.append(
            SystemInformationEvaluatorType(
                HardwareEvaluator(
                    min_cpu_count=config.hardware.min_cpu_count,
                    min_memory_kb=config.hardware.min_memory_kb,
                )
            )
        )
    if config.tps.enabled:
        evaluators.append(
            TpsEvaluatorType(
                TpsEvaluator(
                    duration_secs=config.tps.duration_secs,
                    minimum_tps=config.tps.minimum_tps,
                    client=client,
                    timeout_secs=timeout_secs,
                )
            )
        )
    if config.latency.enabled:
        evaluators.append(
            LatencyEvaluatorType(
                LatencyEvaluator(
                    num_samples=config.latency.num_samples,
                    delay_between_samples_ms=config.latency.delay_between_samples_ms,
                    max_failures=config.latency.max_failures,
                    max_latency_ms=config.latency.max_latency_ms,
                    client=client,
                    timeout_secs=timeout_secs,
                )
            )
        )
    return evaluators


def build_collector(
    node_address: NodeAddress,
    config: CollectorConfig,
    client: httpx.AsyncClient | None = None,
) -> HttpMetricCollector:
    return HttpMetricCollector(
        node_address,
        timeout_secs=config.timeout_secs,
        retry_attempts=config.retry_attempts,
        client=client,
    )


def build_runner(config: CheckerConfig, client: httpx.AsyncClient | None = None) -> BlockingRunner:
    """
    Wire a BlockingRunner from configuration.

    Args:
        config: Complete checker configuration
        client: Optional shared HTTP client used by collectors and evaluators

    Returns:
        Runner bound to the configured baseline node.
    """
    baseline_address = config.baseline.node_address.to_node_address()
    baseline = NodeInformation(
        node_address=baseline_address,
        chain_id=config.baseline.chain_id,
        role_type=config.baseline.role_type,
    )
    timeout_secs = config.collector.timeout_secs

    return BlockingRunner(
        baseline_node_information=baseline,
        baseline_metric_collector=build_collector(baseline_address, config.collector, client),
        node_identity_evaluator=NodeIdentityEvaluator(client=client, timeout_secs=timeout_secs),
        evaluators=build_evaluators(config.evaluators, client, timeout_secs),
        config=config.runner,
    )

"""
Node Checker Evaluators - Pluggable health checks.
"""

from node_checker.evaluators.base import Evaluator
from node_checker.evaluators.inputs import (
    DirectEvaluatorInput,
    MetricsEvaluatorInput,
    SystemInformationEvaluatorInput,
)
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

__all__ = [
    "BuildVersionEvaluator",
    "DirectEvaluatorInput",
    "Evaluator",
    "EvaluatorType",
    "HardwareEvaluator",
    "LatencyEvaluator",
    "LatencyEvaluatorType",
    "MetricsEvaluatorInput",
    "MetricsEvaluatorType",
    "NetworkPeersEvaluator",
    "NodeIdentityEvaluator",
    "StateSyncVersionEvaluator",
    "SystemInformationEvaluatorInput",
    "SystemInformationEvaluatorType",
    "TpsEvaluator",
    "TpsEvaluatorType",
]

"""
Node Checker Core - Shared types, exceptions and in-process metrics.
"""

from node_checker.core.exceptions import (
    CollectorError,
    ConfigError,
    EvaluatorError,
    LatencyEvaluatorError,
    MetricCollectorError,
    MetricsEvaluatorError,
    MetricsParseError,
    NodeCheckerError,
    NodeIdentityEvaluatorError,
    ParseMetricsError,
    RunnerError,
    RunnerStage,
    SystemInformationEvaluatorError,
    TpsEvaluatorError,
)
from node_checker.core.types import (
    MAX_SCORE,
    EvaluationResult,
    EvaluationSummary,
    NodeAddress,
    NodeInformation,
    SystemInformation,
)

__all__ = [
    "MAX_SCORE",
    "CollectorError",
    "ConfigError",
    "EvaluationResult",
    "EvaluationSummary",
    "EvaluatorError",
    "LatencyEvaluatorError",
    "MetricCollectorError",
    "MetricsEvaluatorError",
    "MetricsParseError",
    "NodeAddress",
    "NodeCheckerError",
    "NodeIdentityEvaluatorError",
    "NodeInformation",
    "ParseMetricsError",
    "RunnerError",
    "RunnerStage",
    "SystemInformation",
    "SystemInformationEvaluatorError",
    "TpsEvaluatorError",
]

"""
Core Exceptions - Unified error hierarchy for Node Checker.

Collaborators (collectors, parser, evaluators) raise the errors in the first
section. The runner re-raises them as a RunnerError subclass naming the
stage that failed.
"""

from __future__ import annotations

from enum import StrEnum


class NodeCheckerError(Exception):
    """Base exception for all Node Checker errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | {self.details}"
        return self.message


# =============================================================================
# Collaborator Errors
# =============================================================================

class CollectorError(NodeCheckerError):
    """Fetching metrics or system information from a node failed."""

    def __init__(self, url: str, reason: str):
        super().__init__(
            f"Failed to collect from '{url}': {reason}",
            {"url": url, "reason": reason}
        )
        self.url = url
        self.reason = reason


class MetricsParseError(NodeCheckerError):
    """Raw metrics text could not be parsed into a snapshot."""
    pass


class EvaluatorError(NodeCheckerError):
    """An evaluator could not run (distinct from producing a low score)."""

    def __init__(self, evaluator_name: str, reason: str):
        super().__init__(
            f"Evaluator '{evaluator_name}' failed: {reason}",
            {"evaluator": evaluator_name, "reason": reason}
        )
        self.evaluator_name = evaluator_name
        self.reason = reason


# =============================================================================
# Runner Errors
# =============================================================================

class RunnerStage(StrEnum):
    """Pipeline stage a runner failure originated from."""

    NODE_IDENTITY = "node_identity"
    SYSTEM_INFORMATION = "system_information"
    METRICS = "metrics"
    PARSE_METRICS = "parse_metrics"
    TPS = "tps"
    METRICS_EVALUATION = "metrics_evaluation"
    SYSTEM_INFORMATION_EVALUATION = "system_information_evaluation"
    LATENCY = "latency"


class RunnerError(NodeCheckerError):
    """A run aborted. No partial summary is produced."""

    stage: RunnerStage

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, {**(details or {}), "stage": self.stage.value})


class NodeIdentityEvaluatorError(RunnerError):
    """The node identity evaluator failed to execute."""

    stage = RunnerStage.NODE_IDENTITY


class MetricCollectorError(RunnerError):
    """Fetching metrics or system information failed, on either side."""

    stage = RunnerStage.METRICS

    def __init__(self, side: str, stage: RunnerStage, reason: str):
        self.stage = stage
        self.side = side
        super().__init__(
            f"Failed to collect {stage.value} from {side} node: {reason}",
            {"side": side}
        )


class ParseMetricsError(RunnerError):
    """Raw metrics could not be parsed into a snapshot."""

    stage = RunnerStage.PARSE_METRICS

    def __init__(self, side: str, reason: str):
        self.side = side
        super().__init__(
            f"Failed to parse metrics response from {side} node: {reason}",
            {"side": side}
        )


class TpsEvaluatorError(RunnerError):
    """The TPS evaluator failed to execute."""

    stage = RunnerStage.TPS


class MetricsEvaluatorError(RunnerError):
    """A metrics evaluator failed to execute."""

    stage = RunnerStage.METRICS_EVALUATION


class SystemInformationEvaluatorError(RunnerError):
    """A system information evaluator failed to execute."""

    stage = RunnerStage.SYSTEM_INFORMATION_EVALUATION


class LatencyEvaluatorError(RunnerError):
    """The latency evaluator failed to execute."""

    stage = RunnerStage.LATENCY


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigError(NodeCheckerError):
    """Configuration file is missing or invalid."""
    pass

"""
Evaluator variants.

The set of variants is closed: the runner matches on it exhaustively, and
each variant fixes which input its evaluator receives.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from node_checker.evaluators.base import Evaluator
from node_checker.evaluators.inputs import (
    DirectEvaluatorInput,
    MetricsEvaluatorInput,
    SystemInformationEvaluatorInput,
)


@dataclass(frozen=True)
class MetricsEvaluatorType:
    evaluator: Evaluator[MetricsEvaluatorInput]


@dataclass(frozen=True)
class SystemInformationEvaluatorType:
    evaluator: Evaluator[SystemInformationEvaluatorInput]


@dataclass(frozen=True)
class TpsEvaluatorType:
    """Runs inside the metrics snapshot window, at most once per run."""

    evaluator: Evaluator[DirectEvaluatorInput]


@dataclass(frozen=True)
class LatencyEvaluatorType:
    evaluator: Evaluator[DirectEvaluatorInput]


EvaluatorType: TypeAlias = (
    MetricsEvaluatorType
    | SystemInformationEvaluatorType
    | TpsEvaluatorType
    | LatencyEvaluatorType
)

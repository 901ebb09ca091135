"""
Node Checker Core - Shared types.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

MAX_SCORE = 100

# Structured system information as reported by a node, held verbatim.
SystemInformation = Mapping[str, str]


def freeze_system_information(info: Mapping[str, Any]) -> SystemInformation:
    """Return a read-only copy of a system information payload."""
    return MappingProxyType({str(k): str(v) for k, v in info.items()})


@dataclass(frozen=True)
class NodeAddress:
    """Resolvable address of a node under evaluation."""

    url: str
    api_port: int = 8080
    metrics_port: int = 9101

    @property
    def api_url(self) -> str:
        return f"{self.url.rstrip('/')}:{self.api_port}"

    @property
    def metrics_url(self) -> str:
        return f"{self.url.rstrip('/')}:{self.metrics_port}/metrics"

    @property
    def system_information_url(self) -> str:
        return f"{self.url.rstrip('/')}:{self.metrics_port}/system_information"


@dataclass(frozen=True)
class NodeInformation:
    """Identity fingerprint of the baseline node."""

    node_address: NodeAddress
    chain_id: int
    role_type: str


@dataclass(frozen=True)
class EvaluationResult:
    """
    One scored finding produced by an evaluator.

    Attributes:
        headline: Short summary of the finding
        score: Score in [0, 100], 100 meaning fully healthy
        explanation: Human readable explanation
        category: Broad area (e.g. "identity", "metrics")
        evaluator_name: Name of the evaluator that produced it
        links: Optional documentation links
    """

    headline: str
    score: int
    explanation: str
    category: str
    evaluator_name: str
    links: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not 0 <= self.score <= MAX_SCORE:
            raise ValueError(f"score must be within [0, {MAX_SCORE}], got: {self.score}")

    @property
    def passed(self) -> bool:
        return self.score == MAX_SCORE

    def to_dict(self) -> dict[str, Any]:
        return {
            "headline": self.headline,
            "score": self.score,
            "explanation": self.explanation,
            "category": self.category,
            "evaluator_name": self.evaluator_name,
            "links": list(self.links),
        }


def _explain_score(score: int) -> str:
    if score > 95:
        return f"{score}: Awesome!"
    if score > 80:
        return f"{score}: Good!"
    if score > 50:
        return f"{score}: Getting there!"
    return f"{score}: Improvement necessary"


@dataclass(frozen=True)
class EvaluationSummary:
    """Ordered aggregation of all findings of one run."""

    evaluation_results: tuple[EvaluationResult, ...] = field(default_factory=tuple)
    summary_score: int = MAX_SCORE
    summary_explanation: str = _explain_score(MAX_SCORE)

    @classmethod
    def from_results(cls, results: Iterable[EvaluationResult]) -> EvaluationSummary:
        """Build the summary, keeping results in execution order."""
        ordered = tuple(results)
        if ordered:
            score = sum(r.score for r in ordered) // len(ordered)
        else:
            score = MAX_SCORE
        return cls(
            evaluation_results=ordered,
            summary_score=score,
            summary_explanation=_explain_score(score),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "evaluation_results": [r.to_dict() for r in self.evaluation_results],
            "summary_score": self.summary_score,
            "summary_explanation": self.summary_explanation,
        }

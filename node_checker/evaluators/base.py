"""
Base Evaluator - Abstract base class for all evaluators.

An evaluator scores one aspect of node health from one input shape. A low
score is a normal result; EvaluatorError is reserved for failing to evaluate.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from node_checker.core.types import MAX_SCORE, EvaluationResult

InputT = TypeVar("InputT")


class Evaluator(ABC, Generic[InputT]):
    """
    Abstract base class for evaluators.

    Subclasses set `name` and `category` and implement evaluate().
    """

    name: ClassVar[str]
    category: ClassVar[str]

    @abstractmethod
    async def evaluate(self, evaluator_input: InputT) -> list[EvaluationResult]:
        """Return zero or more findings, in a stable order."""

    def build_result(
        self,
        headline: str,
        score: int,
        explanation: str,
        links: tuple[str, ...] = (),
    ) -> EvaluationResult:
        return EvaluationResult(
            headline=headline,
            score=score,
            explanation=explanation,
            category=self.category,
            evaluator_name=self.name,
            links=links,
        )

    def pass_or_fail(self, passed: bool, headline: str, explanation: str) -> EvaluationResult:
        return self.build_result(headline, MAX_SCORE if passed else 0, explanation)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

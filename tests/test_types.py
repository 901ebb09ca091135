"""
Tests for core types and the exception hierarchy.
"""

from __future__ import annotations

import dataclasses

import pytest

from node_checker.core.exceptions import (
    CollectorError,
    LatencyEvaluatorError,
    MetricCollectorError,
    MetricsEvaluatorError,
    NodeCheckerError,
    NodeIdentityEvaluatorError,
    ParseMetricsError,
    RunnerError,
    RunnerStage,
    SystemInformationEvaluatorError,
    TpsEvaluatorError,
)
from node_checker.core.types import EvaluationResult, EvaluationSummary, NodeAddress


def result(score: int, headline: str = "finding") -> EvaluationResult:
    return EvaluationResult(
        headline=headline,
        score=score,
        explanation="explanation",
        category="test",
        evaluator_name="test",
    )


class TestNodeAddress:
    """Tests for NodeAddress urls."""

    def test_urls(self):
        address = NodeAddress(url="http://node.local/", api_port=8081, metrics_port=9102)
        assert address.api_url == "http://node.local:8081"
        assert address.metrics_url == "http://node.local:9102/metrics"
        assert address.system_information_url == "http://node.local:9102/system_information"


class TestEvaluationResult:
    """Tests for EvaluationResult."""

    @pytest.mark.parametrize("score", [-1, 101])
    def test_score_out_of_range(self, score):
        with pytest.raises(ValueError, match="score must be within"):
            result(score)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            result(100).score = 0  # type: ignore[misc]

    def test_passed(self):
        assert result(100).passed
        assert not result(99).passed

    def test_to_dict(self):
        data = result(42).to_dict()
        assert data["score"] == 42
        assert data["links"] == []


class TestEvaluationSummary:
    """Tests for EvaluationSummary."""

    def test_keeps_order(self):
        results = [result(100, "first"), result(0, "second"), result(50, "third")]
        summary = EvaluationSummary.from_results(results)

        assert [r.headline for r in summary.evaluation_results] == ["first", "second", "third"]
        assert summary.summary_score == 50

    def test_score_rounds_down(self):
        summary = EvaluationSummary.from_results([result(100), result(100), result(0)])
        assert summary.summary_score == 66
        assert summary.summary_explanation == "66: Getting there!"

    @pytest.mark.parametrize(
        ("score", "explanation"),
        [
            (100, "100: Awesome!"),
            (90, "90: Good!"),
            (51, "51: Getting there!"),
            (50, "50: Improvement necessary"),
        ],
    )
    def test_explanations(self, score, explanation):
        assert EvaluationSummary.from_results([result(score)]).summary_explanation == explanation

    def test_empty(self):
        summary = EvaluationSummary.from_results([])
        assert summary.evaluation_results == ()
        assert summary.summary_score == 100

    def test_to_dict(self):
        data = EvaluationSummary.from_results([result(0)]).to_dict()
        assert data["summary_score"] == 0
        assert len(data["evaluation_results"]) == 1


class TestExceptions:
    """Tests for the error hierarchy."""

    @pytest.mark.parametrize(
        ("error_type", "stage"),
        [
            (NodeIdentityEvaluatorError, RunnerStage.NODE_IDENTITY),
            (TpsEvaluatorError, RunnerStage.TPS),
            (MetricsEvaluatorError, RunnerStage.METRICS_EVALUATION),
            (SystemInformationEvaluatorError, RunnerStage.SYSTEM_INFORMATION_EVALUATION),
            (LatencyEvaluatorError, RunnerStage.LATENCY),
        ],
    )
    def test_evaluator_stages(self, error_type, stage):
        error = error_type("failed", {"evaluator": "x"})
        assert isinstance(error, RunnerError)
        assert error.stage is stage
        assert error.details == {"evaluator": "x", "stage": stage.value}

    def test_metric_collector_error_stage(self):
        error = MetricCollectorError("target", RunnerStage.SYSTEM_INFORMATION, "HTTP 503")
        assert error.stage is RunnerStage.SYSTEM_INFORMATION
        assert error.side == "target"
        assert "system_information from target node" in str(error)

    def test_parse_metrics_error(self):
        error = ParseMetricsError("baseline", "bad line")
        assert error.stage is RunnerStage.PARSE_METRICS
        assert error.details["side"] == "baseline"

    def test_str_includes_details(self):
        error = CollectorError("http://node.local", "HTTP 500")
        assert isinstance(error, NodeCheckerError)
        assert str(error).startswith("Failed to collect from 'http://node.local': HTTP 500 | ")
        assert str(NodeCheckerError("plain")) == "plain"


class TestPackage:
    """Tests for package metadata."""

    def test_version(self):
        import node_checker

        assert isinstance(node_checker.__version__, str)
        assert node_checker.__version__

    def test_readme_declared_and_present(self):
        import tomllib
        from pathlib import Path

        root = Path(__file__).resolve().parent.parent
        with (root / "pyproject.toml").open("rb") as f:
            project = tomllib.load(f)["project"]

        assert project["readme"] == "README.md"
        assert (root / "README.md").is_file()

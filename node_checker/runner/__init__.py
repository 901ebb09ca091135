"""
Node Checker Runner - Orchestrates evaluation of a target node.
"""

from node_checker.runner.base import Runner
from node_checker.runner.blocking import BlockingRunner
from node_checker.runner.factory import build_collector, build_evaluators, build_runner

__all__ = ["BlockingRunner", "Runner", "build_collector", "build_evaluators", "build_runner"]

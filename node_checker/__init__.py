"""
Node Checker - Baseline vs target node health evaluation.

Compares a target node against a trusted baseline node by running a fixed
pipeline of evaluators over node identity, system information and two
time-separated metrics snapshots.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("node-checker")
except PackageNotFoundError:
    # Package not installed, fallback to pyproject.toml
    __version__ = "0.1.0"

__author__ = "Node Checker Contributors"

"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from node_checker.core.metrics import reset_metrics
from node_checker.core.types import NodeAddress, NodeInformation


@pytest.fixture(autouse=True)
def clean_metrics():
    """Reset in-process metrics around each test."""
    reset_metrics()
    yield
    reset_metrics()


@pytest.fixture
def baseline_information() -> NodeInformation:
    return NodeInformation(
        node_address=NodeAddress(url="http://baseline.local"),
        chain_id=4,
        role_type="full_node",
    )


@pytest.fixture
def target_address() -> NodeAddress:
    return NodeAddress(url="http://target.local")


@pytest.fixture
def events() -> list[str]:
    return []

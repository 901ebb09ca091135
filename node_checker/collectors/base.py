"""
Collector protocol.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from node_checker.core.types import SystemInformation


@runtime_checkable
class MetricCollector(Protocol):
    """
    Source of raw metrics and system information for one node.

    Implementations raise CollectorError on failure.
    """

    async def collect_metrics(self) -> list[str]:
        """Fetch the raw, line-oriented metrics text."""
        ...

    async def collect_system_information(self) -> SystemInformation:
        """Fetch structured system information."""
        ...

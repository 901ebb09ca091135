"""
HTTP metric collector.

Scrapes a node's metrics port: GET /metrics for the text exposition format
and GET /system_information for a flat JSON object.
"""
from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from node_checker.core.exceptions import CollectorError
from node_checker.core.resilience import retry
from node_checker.core.types import NodeAddress, SystemInformation, freeze_system_information
from node_checker.utils.logger import log_prefix


class HttpMetricCollector:
    """
    Collect from a node over HTTP.

    Transport errors are retried; HTTP status errors and malformed bodies are
    not. Every failure surfaces as CollectorError.
    """

    def __init__(
        self,
        node_address: NodeAddress,
        timeout_secs: float = 10.0,
        retry_attempts: int = 3,
        client: httpx.AsyncClient | None = None,
    ):
        self.node_address = node_address
        self.timeout_secs = timeout_secs
        self.retry_attempts = retry_attempts
        self._client = client

    def __repr__(self) -> str:
        return f"HttpMetricCollector({self.node_address.url!r})"

    async def _get(self, url: str) -> httpx.Response:
        @retry(max_attempts=self.retry_attempts, exceptions=(httpx.TransportError,))
        async def fetch() -> httpx.Response:
            if self._client is not None:
                return await self._client.get(url, timeout=self.timeout_secs)
            async with httpx.AsyncClient(timeout=self.timeout_secs) as client:
                return await client.get(url)

        logger.debug(f"{log_prefix('🌐')} GET {url}")
        try:
            response = await fetch()
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CollectorError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise CollectorError(url, f"{type(e).__name__}: {e}") from e
        return response

    async def collect_metrics(self) -> list[str]:
        response = await self._get(self.node_address.metrics_url)
        return response.text.splitlines()

    async def collect_system_information(self) -> SystemInformation:
        url = self.node_address.system_information_url
        response = await self._get(url)
        try:
            data: Any = response.json()
        except ValueError as e:
            raise CollectorError(url, f"Invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise CollectorError(url, f"Expected a JSON object, got {type(data).__name__}")
        return freeze_system_information(data)

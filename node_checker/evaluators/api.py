"""
Shared access to a node's REST API index (GET /v1).
"""
from __future__ import annotations

from typing import Any

import httpx

from node_checker.core.types import NodeAddress

API_INDEX_PATH = "/v1"


async def get_api_index(
    node_address: NodeAddress,
    client: httpx.AsyncClient | None = None,
    timeout_secs: float = 10.0,
) -> dict[str, Any]:
    """
    Fetch the API index of a node.

    Raises:
        httpx.HTTPError: On transport failure or non-2xx status.
        ValueError: If the body is not a JSON object.
    """
    url = f"{node_address.api_url}{API_INDEX_PATH}"
    if client is not None:
        response = await client.get(url, timeout=timeout_secs)
    else:
        async with httpx.AsyncClient(timeout=timeout_secs) as owned_client:
            response = await owned_client.get(url)
    response.raise_for_status()

    data = response.json()
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object from {url}, got {type(data).__name__}")
    return data

"""
Node Checker Core - Resilience patterns.

Retry with exponential backoff for collaborator I/O. The runner itself never
retries; collectors opt in by decorating their fetch methods.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable  # noqa: TC003
from functools import wraps
from typing import Any, TypeVar

from loguru import logger

from node_checker.core.metrics import get_registry
from node_checker.utils.logger import log_prefix

T = TypeVar("T")


def retry(
    max_attempts: int = 3,
    initial_delay: float = 0.5,
    max_delay: float = 5.0,
    exponential_base: float = 2.0,
    exceptions: tuple[type[Exception], ...] = (Exception,),
) -> Callable:
    """
    Retry decorator with exponential backoff.

    Args:
        max_attempts: Maximum attempts, first call included (default: 3)
        initial_delay: Initial delay in seconds (default: 0.5)
        max_delay: Maximum delay in seconds (default: 5.0)
        exponential_base: Base for exponential backoff (default: 2.0)
        exceptions: Exception types to retry (default: all exceptions)

    Returns:
        Decorated function

    Example:
        @retry(max_attempts=3, exceptions=(httpx.TransportError,))
        async def fetch(...):
            ...
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            for attempt in range(1, max_attempts + 1):
                try:
                    return await func(*args, **kwargs)
                except exceptions as e:
                    if attempt >= max_attempts:
                        logger.error(
                            f"{log_prefix('❌')} Retry exhausted after {max_attempts} attempts: "
                            f"{func.__name__}"
                        )
                        raise

                    get_registry().counter("node_checker_retry_attempts_total").inc(
                        function=func.__name__, attempt=str(attempt)
                    )

                    delay = min(initial_delay * (exponential_base ** (attempt - 1)), max_delay)
                    error_msg = str(e)[:80] + "..." if len(str(e)) > 80 else str(e)
                    logger.warning(
                        f"{log_prefix('🔄')} Retry {attempt}/{max_attempts} for {func.__name__} "
                        f"after {delay:.1f}s: {error_msg}"
                    )
                    await asyncio.sleep(delay)

            raise RuntimeError("Retry logic error")

        return wrapper

    return decorator

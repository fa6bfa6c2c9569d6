"""Time budget for data store calls."""

import asyncio
from typing import Awaitable, TypeVar

import structlog

from backbench_admin.core.metrics import record_store_failure
from backbench_admin.domain.exceptions import StoreTimeoutException

logger = structlog.get_logger(__name__)

T = TypeVar("T")


async def run_with_timeout(
    awaitable: Awaitable[T],
    operation: str,
    timeout: float,
) -> T:
    """
    Await a store call, cancelling it once ``timeout`` seconds pass.

    Raises:
        StoreTimeoutException: If the budget is exhausted
    """
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError:
        record_store_failure(operation, "timeout")
        logger.warning("store_budget_exceeded", operation=operation, timeout=timeout)
        raise StoreTimeoutException(operation, timeout)

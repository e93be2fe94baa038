"""
Fail-fast supervisor for the ingestion driver.

Store failures are not recoverable inside the persistence layer. The
supervisor logs the failing statement and terminates the process; the
process manager restarts it and the scanner resumes from the cursor.
"""

import asyncio
from collections.abc import Callable, Coroutine
from functools import wraps
from typing import Any, TypeVar

from loguru import logger

from chain_store.utils.exceptions import StoreError, is_fatal

T = TypeVar("T")

# Exit status used when the store fails
STORE_FAILURE_EXIT_CODE = 1


async def run_fail_fast(coro: Coroutine[Any, Any, T]) -> T:
    """
    Await a coroutine, terminating the process on a store failure.

    Args:
        coro: Ingestion coroutine

    Returns:
        Result of the coroutine

    Raises:
        SystemExit: With STORE_FAILURE_EXIT_CODE if a StoreError escapes
    """
    try:
        return await coro
    except Exception as e:
        if not is_fatal(e):
            raise
        statement = e.statement if isinstance(e, StoreError) else getattr(e, "statement", None)
        logger.critical(f"database error:\nsql: {statement},\nerror: {e}")
        raise SystemExit(STORE_FAILURE_EXIT_CODE) from e


def fail_fast(func: Callable[..., Coroutine[Any, Any, T]]) -> Callable[..., Coroutine[Any, Any, T]]:
    """
    Decorator applying run_fail_fast to an async function.

    Usage:
        @fail_fast
        async def ingest_range(store: ChainStore, start: int, end: int):
            ...
    """
    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        return await run_fail_fast(func(*args, **kwargs))

    return wrapper


def run(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run an ingestion entry point under the fail-fast policy.

    This is the recommended way to start the ingestion driver from a
    synchronous ``main``.
    """
    return asyncio.run(run_fail_fast(coro))

r"""Contains the asynchronous entry points for retry execution."""

from __future__ import annotations

__all__ = ["execute_async", "run_async"]

from typing import TYPE_CHECKING, Any

from aretry.core.config import resolve_config
from aretry.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.callbacks import ErrorCallback, ErrorInfo, RetryAction
    from aretry.core.config import RetryConfig
    from aretry.retry.state import RetryOutcome


async def execute_async(
    retry_count: int | None,
    interval_ms: int | None,
    operation: Callable[[], Awaitable[Any]],
    callback: ErrorCallback | Callable[[ErrorInfo], RetryAction | None] | None = None,
    *,
    config: RetryConfig | None = None,
) -> None:
    r"""Await a coroutine function with retries and a constant delay
    between attempts.

    This is the asynchronous counterpart of ``execute``. Attempts are
    awaited one after the other, never concurrently, and the callback
    is invoked synchronously.

    Args:
        retry_count: Number of retries after the first attempt. Must be
            >= 0. If None, the value from ``config`` is used.
        interval_ms: Delay in milliseconds between attempts. Must be
            >= 0. If None, the value from ``config`` is used.
        operation: Zero-argument coroutine function to await.
        callback: Optional error callback.
        config: An optional RetryConfig object.

    Raises:
        RetryError: If no callback is registered and every attempt
            failed.
        TypeError: If ``operation`` or ``callback`` is invalid.
        ValueError: If ``retry_count`` or ``interval_ms`` is negative.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import execute_async
        >>> async def ping():
        ...     return "pong"
        ...
        >>> asyncio.run(execute_async(3, 100, ping))

        ```
    """
    outcome = await run_async(retry_count, interval_ms, operation, callback, config=config)
    outcome.raise_for_errors()


async def run_async(
    retry_count: int | None,
    interval_ms: int | None,
    operation: Callable[[], Awaitable[Any]],
    callback: ErrorCallback | Callable[[ErrorInfo], RetryAction | None] | None = None,
    *,
    config: RetryConfig | None = None,
) -> RetryOutcome:
    r"""Await a coroutine function with retries and return the outcome
    instead of raising.

    Args:
        retry_count: Number of retries after the first attempt.
        interval_ms: Delay in milliseconds between attempts.
        operation: Zero-argument coroutine function to await.
        callback: Optional error callback.
        config: An optional RetryConfig object.

    Returns:
        The outcome of the execution.
    """
    resolved = resolve_config(
        config, retry_count=retry_count, interval_ms=interval_ms, callback=callback
    )
    return await AsyncRetryExecutor(resolved).run(operation)

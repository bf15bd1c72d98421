r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that awaits a
coroutine function with a constant delay between attempts. Attempts
remain strictly sequential.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import logging
from typing import TYPE_CHECKING, Any

from aretry.core.validation import validate_awaitable, validate_operation
from aretry.retry.executor_core import build_outcome, evaluate_failure
from aretry.retry.manager import CallbackManager
from aretry.retry.state import RetryState
from aretry.utils.sleep import async_sleep_interval

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.core.config import RetryConfig
    from aretry.retry.state import RetryOutcome

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes a coroutine function with automatic retry logic.

    This is the asynchronous counterpart of ``RetryExecutor``. The delay
    uses ``asyncio.sleep()``, allowing other tasks to run during the
    wait. The error callback is invoked synchronously.

    Attributes:
        config: Retry configuration containing the retry count, the
            interval, and the optional error callback.
        callbacks: Manager for invoking the error callback.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.core import RetryConfig
        >>> from aretry.retry import AsyncRetryExecutor
        >>> async def fetch():
        ...     return "done"
        ...
        >>> executor = AsyncRetryExecutor(RetryConfig(retry_count=2, interval_ms=0))
        >>> outcome = asyncio.run(executor.run(fetch))
        >>> outcome.attempts, outcome.result
        (1, 'done')

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config
        self.callbacks: CallbackManager = CallbackManager(config.callback)

    async def run(self, operation: Callable[[], Awaitable[Any]]) -> RetryOutcome:
        """Run the retry loop and return its outcome.

        Args:
            operation: Zero-argument coroutine function to await.

        Returns:
            The outcome of the execution.

        Raises:
            TypeError: If ``operation`` is not callable, or if calling it
                does not return an awaitable. The latter is raised
                immediately and is never retried.
        """
        validate_operation(operation)
        retry_count = self.config.retry_count
        attempts_made = 0
        errors: list[Exception] = []

        for attempt in range(retry_count + 1):
            result, error = await self._attempt(operation)
            if error is None:
                return build_outcome(
                    RetryState.SUCCEEDED, attempt + 1, errors, self.callbacks, result=result
                )

            errors.append(error)
            logger.debug(f"Attempt {attempt + 1}/{retry_count + 1} failed: {error!r}")

            stop, should_sleep = evaluate_failure(self.callbacks, attempts_made, retry_count, error)
            if stop:
                return build_outcome(
                    RetryState.STOPPED_BY_CALLBACK, attempt + 1, errors, self.callbacks
                )
            if should_sleep:
                await async_sleep_interval(self.config.interval_ms)
            attempts_made += 1

        return build_outcome(RetryState.EXHAUSTED, retry_count + 1, errors, self.callbacks)

    async def execute(self, operation: Callable[[], Awaitable[Any]]) -> None:
        """Execute the coroutine function with automatic retry logic.

        Args:
            operation: Zero-argument coroutine function to await.

        Raises:
            RetryError: If no error callback is registered and every
                attempt failed.
            TypeError: If ``operation`` is not callable or does not
                return an awaitable.
        """
        outcome = await self.run(operation)
        outcome.raise_for_errors()

    async def _attempt(
        self, operation: Callable[[], Awaitable[Any]]
    ) -> tuple[Any, Exception | None]:
        """Run one attempt and capture its failure.

        Returns:
            Tuple of (result, error). ``error`` is None on success.

        Raises:
            TypeError: If the operation did not return an awaitable.
        """
        try:
            pending = operation()
        except Exception as exc:
            return (None, exc)
        validate_awaitable(pending)
        try:
            return (await pending, None)
        except Exception as exc:
            return (None, exc)

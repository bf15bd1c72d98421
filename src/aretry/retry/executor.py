r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs an operation
with a constant delay between attempts and reports or aggregates the
failures.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
from typing import TYPE_CHECKING, Any

from aretry.core.validation import validate_operation
from aretry.retry.executor_core import build_outcome, evaluate_failure
from aretry.retry.manager import CallbackManager
from aretry.retry.state import RetryState
from aretry.utils.sleep import sleep_interval

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.core.config import RetryConfig
    from aretry.retry.state import RetryOutcome

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes an operation with automatic retry logic.

    The operation is invoked up to ``retry_count + 1`` times. The loop
    stops as soon as one attempt succeeds, the retry budget is
    exhausted, or the error callback requests a stop.

    Attributes:
        config: Retry configuration containing the retry count, the
            interval, and the optional error callback.
        callbacks: Manager for invoking the error callback.

    Example:
        ```pycon
        >>> from aretry.core import RetryConfig
        >>> from aretry.retry import RetryExecutor
        >>> executor = RetryExecutor(RetryConfig(retry_count=2, interval_ms=0))
        >>> outcome = executor.run(lambda: "done")
        >>> outcome.state, outcome.attempts, outcome.result
        (<RetryState.SUCCEEDED: 'succeeded'>, 1, 'done')

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config
        self.callbacks: CallbackManager = CallbackManager(config.callback)

    def run(self, operation: Callable[[], Any]) -> RetryOutcome:
        """Run the retry loop and return its outcome.

        Failures of the operation are captured, never raised. Exceptions
        raised by the error callback propagate unchanged.

        Args:
            operation: Zero-argument callable to invoke.

        Returns:
            The outcome of the execution.

        Raises:
            TypeError: If ``operation`` is not callable.
        """
        validate_operation(operation)
        retry_count = self.config.retry_count
        attempts_made = 0
        errors: list[Exception] = []

        for attempt in range(retry_count + 1):
            try:
                result = operation()
            except Exception as exc:
                errors.append(exc)
                logger.debug(f"Attempt {attempt + 1}/{retry_count + 1} failed: {exc!r}")

                stop, should_sleep = evaluate_failure(
                    self.callbacks, attempts_made, retry_count, exc
                )
                if stop:
                    return build_outcome(
                        RetryState.STOPPED_BY_CALLBACK, attempt + 1, errors, self.callbacks
                    )
                if should_sleep:
                    sleep_interval(self.config.interval_ms)
                attempts_made += 1
            else:
                return build_outcome(
                    RetryState.SUCCEEDED, attempt + 1, errors, self.callbacks, result=result
                )

        return build_outcome(RetryState.EXHAUSTED, retry_count + 1, errors, self.callbacks)

    def execute(self, operation: Callable[[], Any]) -> None:
        """Execute the operation with automatic retry logic.

        Args:
            operation: Zero-argument callable to invoke.

        Raises:
            RetryError: If no error callback is registered and every
                attempt failed. It carries all failures in attempt order.
            TypeError: If ``operation`` is not callable.
        """
        self.run(operation).raise_for_errors()

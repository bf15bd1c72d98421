r"""Contains the synchronous entry points for retry execution."""

from __future__ import annotations

__all__ = ["execute", "run"]

from typing import TYPE_CHECKING, Any

from aretry.core.config import resolve_config
from aretry.retry.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.callbacks import ErrorCallback, ErrorInfo, RetryAction
    from aretry.core.config import RetryConfig
    from aretry.retry.state import RetryOutcome


def execute(
    retry_count: int | None,
    interval_ms: int | None,
    operation: Callable[[], Any],
    callback: ErrorCallback | Callable[[ErrorInfo], RetryAction | None] | None = None,
    *,
    config: RetryConfig | None = None,
) -> None:
    r"""Run an operation with retries and a constant delay between
    attempts.

    The operation is attempted at most ``retry_count + 1`` times. The
    first successful attempt ends the execution. Without a callback,
    the failures of an execution that never succeeds are raised together
    as one ``RetryError``. With a callback, every failure after the
    first is reported to it instead and nothing is raised; the callback
    can stop the retries early.

    Args:
        retry_count: Number of retries after the first attempt. Must be
            >= 0. If None, the value from ``config`` is used.
        interval_ms: Delay in milliseconds between attempts. Must be
            >= 0. If None, the value from ``config`` is used.
        operation: Zero-argument callable to invoke.
        callback: Optional error callback. Either an ``ErrorCallback``
            instance or a callable accepting an ``ErrorInfo``.
        config: An optional RetryConfig object. If None, default
            RetryConfig values are used.

    Raises:
        RetryError: If no callback is registered and every attempt
            failed. It carries all failures in attempt order.
        TypeError: If ``operation`` or ``callback`` is invalid.
        ValueError: If ``retry_count`` or ``interval_ms`` is negative.

    Example:
        ```pycon
        >>> from aretry import RetryError, execute
        >>> calls = []
        >>> execute(3, 0, lambda: calls.append(True))
        >>> len(calls)
        1
        >>> try:
        ...     execute(2, 0, lambda: 1 / 0)
        ... except RetryError as exc:
        ...     print(len(exc.errors))
        ...
        3

        ```
    """
    run(retry_count, interval_ms, operation, callback, config=config).raise_for_errors()


def run(
    retry_count: int | None,
    interval_ms: int | None,
    operation: Callable[[], Any],
    callback: ErrorCallback | Callable[[ErrorInfo], RetryAction | None] | None = None,
    *,
    config: RetryConfig | None = None,
) -> RetryOutcome:
    r"""Run an operation with retries and return the outcome instead of
    raising.

    Args:
        retry_count: Number of retries after the first attempt.
        interval_ms: Delay in milliseconds between attempts.
        operation: Zero-argument callable to invoke.
        callback: Optional error callback.
        config: An optional RetryConfig object.

    Returns:
        The outcome, with the final state, the number of attempts, the
        captured failures and the result of the successful attempt.

    Example:
        ```pycon
        >>> from aretry import run
        >>> outcome = run(2, 0, lambda: 1 / 0)
        >>> outcome.state, outcome.attempts
        (<RetryState.EXHAUSTED: 'exhausted'>, 3)

        ```
    """
    resolved = resolve_config(
        config, retry_count=retry_count, interval_ms=interval_ms, callback=callback
    )
    return RetryExecutor(resolved).run(operation)

r"""Shared core logic for retry executors.

This module provides helper functions used by both the synchronous and
asynchronous retry executors. These functions encapsulate the
bookkeeping of a failed attempt and the construction of the final
outcome, so both loops behave identically.
"""

from __future__ import annotations

__all__ = ["build_outcome", "evaluate_failure"]

import logging
from typing import TYPE_CHECKING, Any

from aretry.retry.state import RetryOutcome, RetryState

if TYPE_CHECKING:
    from collections.abc import Sequence

    from aretry.retry.manager import CallbackManager

logger: logging.Logger = logging.getLogger(__name__)


def evaluate_failure(
    callbacks: CallbackManager,
    attempts_made: int,
    retry_count: int,
    error: Exception,
) -> tuple[bool, bool]:
    """Decide what happens after a failed attempt.

    The failure of the initial attempt (``attempts_made == 0``) is never
    reported to the callback and is never followed by a delay. Later
    failures are reported to the callback, if any, with
    ``attempts_made`` as the attempt number, and are followed by a delay
    unless the callback asked to stop or the retry budget is used up.

    Args:
        callbacks: The callback manager of the execution.
        attempts_made: The attempt counter before this failure is counted.
        retry_count: The configured number of retries.
        error: The exception raised by the failed attempt.

    Returns:
        Tuple of (stop, should_sleep).
    """
    if attempts_made == 0:
        return (False, False)
    if callbacks.on_error(attempts_made, error):
        return (True, False)
    return (False, attempts_made < retry_count)


def build_outcome(
    state: RetryState,
    attempts: int,
    errors: Sequence[Exception],
    callbacks: CallbackManager,
    result: Any = None,
) -> RetryOutcome:
    """Create the outcome of a finished retry loop.

    Args:
        state: The final state of the loop.
        attempts: The number of operation invocations.
        errors: The failures captured so far.
        callbacks: The callback manager of the execution.
        result: The value returned by the successful attempt, if any.

    Returns:
        The immutable outcome of the execution.
    """
    if state is RetryState.EXHAUSTED:
        logger.debug(f"Operation failed on all {attempts} attempts")
    elif state is RetryState.SUCCEEDED and errors:
        logger.debug(f"Operation succeeded on attempt {attempts} after {len(errors)} failures")
    return RetryOutcome(
        state=state,
        attempts=attempts,
        errors=tuple(errors),
        result=result,
        callback_registered=callbacks.has_callback,
    )

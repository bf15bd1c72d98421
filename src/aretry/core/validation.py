r"""Parameter validation utilities for retry execution.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before being used by the retry
executors.
"""

from __future__ import annotations

__all__ = ["validate_awaitable", "validate_operation", "validate_retry_params"]

import inspect
from typing import Any


def validate_retry_params(retry_count: int, interval_ms: int) -> None:
    """Validate retry parameters.

    Args:
        retry_count: Number of retries after the first attempt.
            Must be an integer >= 0. A value of 0 means no retries
            (only the initial attempt).
        interval_ms: Delay in milliseconds between attempts.
            Must be an integer >= 0.

    Raises:
        TypeError: If ``retry_count`` or ``interval_ms`` is not an integer.
        ValueError: If ``retry_count`` or ``interval_ms`` is negative.

    Example:
        ```pycon
        >>> from aretry.core import validate_retry_params
        >>> validate_retry_params(retry_count=3, interval_ms=100)
        >>> validate_retry_params(retry_count=0, interval_ms=0)
        >>> validate_retry_params(retry_count=-1, interval_ms=100)
        Traceback (most recent call last):
        ...
        ValueError: retry_count must be >= 0, got -1

        ```
    """
    _check_int("retry_count", retry_count)
    _check_int("interval_ms", interval_ms)
    if retry_count < 0:
        msg = f"retry_count must be >= 0, got {retry_count}"
        raise ValueError(msg)
    if interval_ms < 0:
        msg = f"interval_ms must be >= 0, got {interval_ms}"
        raise ValueError(msg)


def validate_operation(operation: Any) -> None:
    """Validate that the operation can be called.

    Args:
        operation: The operation to retry.

    Raises:
        TypeError: If ``operation`` is not callable.

    Example:
        ```pycon
        >>> from aretry.core import validate_operation
        >>> validate_operation(print)
        >>> validate_operation(42)
        Traceback (most recent call last):
        ...
        TypeError: operation must be callable, got int

        ```
    """
    if not callable(operation):
        msg = f"operation must be callable, got {type(operation).__name__}"
        raise TypeError(msg)


def _check_int(name: str, value: Any) -> None:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an int, got {type(value).__name__}"
        raise TypeError(msg)


def validate_awaitable(value: Any) -> None:
    """Validate that an async operation returned something to await.

    Args:
        value: The value returned by calling the operation.

    Raises:
        TypeError: If ``value`` is not awaitable, which happens when a
            plain function is passed where a coroutine function is
            expected.

    Example:
        ```pycon
        >>> from aretry.core import validate_awaitable
        >>> validate_awaitable(None)
        Traceback (most recent call last):
        ...
        TypeError: operation must return an awaitable, got NoneType

        ```
    """
    if not inspect.isawaitable(value):
        msg = f"operation must return an awaitable, got {type(value).__name__}"
        raise TypeError(msg)

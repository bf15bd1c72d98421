r"""Callback types and data structures for error observation.

This module provides the error callback support for the aretry library.
An error callback is invoked synchronously each time a retried
attempt fails, and can stop the retry loop early either by calling
``ErrorInfo.request_stop()`` or by returning ``RetryAction.STOP``.

Note that the failure of the very first attempt is never reported to
the callback; the first reported failure has ``attempt_number == 1``.

Example:
    ```pycon
    >>> from aretry import execute
    >>> from aretry.callbacks import ErrorInfo, RetryAction
    >>> def stop_on_type_error(info: ErrorInfo) -> RetryAction:
    ...     if isinstance(info.cause, TypeError):
    ...         return RetryAction.STOP
    ...     return RetryAction.CONTINUE
    ...
    >>> execute(3, 100, lambda: 1 / 0, stop_on_type_error)  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "ErrorCallback",
    "ErrorInfo",
    "FunctionCallback",
    "RetryAction",
    "as_error_callback",
    "invoke_error_callback",
]

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class RetryAction(Enum):
    """Action an error callback can return to steer the retry loop."""

    CONTINUE = "continue"
    STOP = "stop"


class ErrorInfo:
    """Information passed to an error callback.

    The attempt number and the cause are read-only. The only state a
    callback can change is the stop flag, through ``request_stop()``.

    Args:
        attempt_number: The attempt counter at the moment of the failure.
            The first reported failure is 1 and each following one adds 1.
        cause: The exception raised by the failed attempt.

    Example:
        ```pycon
        >>> from aretry.callbacks import ErrorInfo
        >>> info = ErrorInfo(attempt_number=1, cause=ValueError("bad"))
        >>> info
        ErrorInfo(attempt_number=1, cause=ValueError('bad'))
        >>> info.attempt_number = 5  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        AttributeError: can't set attribute

        ```
    """

    __slots__ = ("_attempt_number", "_cause", "_stop_requested")

    def __init__(self, attempt_number: int, cause: Exception) -> None:
        self._attempt_number = attempt_number
        self._cause = cause
        self._stop_requested = False

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(attempt_number={self._attempt_number}, "
            f"cause={self._cause!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorInfo):
            return NotImplemented
        return (
            self._attempt_number == other._attempt_number
            and self._cause is other._cause
            and self._stop_requested == other._stop_requested
        )

    __hash__ = None

    @property
    def attempt_number(self) -> int:
        """The attempt counter at the moment of the failure."""
        return self._attempt_number

    @property
    def cause(self) -> Exception:
        """The exception raised by the failed attempt."""
        return self._cause

    @property
    def stop_requested(self) -> bool:
        """Whether the callback asked to stop retrying."""
        return self._stop_requested

    def request_stop(self) -> None:
        """Request that no further attempts be made.

        Calling this more than once has no additional effect.
        """
        self._stop_requested = True


class ErrorCallback(ABC):
    """Abstract base class for error callbacks.

    Subclasses implement ``invoke``, which receives the ``ErrorInfo``
    of every reported failure.

    Example:
        ```pycon
        >>> from aretry.callbacks import ErrorCallback, ErrorInfo
        >>> class StopAfterTwo(ErrorCallback):
        ...     def invoke(self, info: ErrorInfo) -> None:
        ...         if info.attempt_number >= 2:
        ...             info.request_stop()
        ...
        >>> callback = StopAfterTwo()
        >>> info = ErrorInfo(attempt_number=2, cause=RuntimeError("boom"))
        >>> callback.invoke(info)
        >>> info.stop_requested
        True

        ```
    """

    @abstractmethod
    def invoke(self, info: ErrorInfo) -> RetryAction | None:
        """Handle a failed attempt.

        Args:
            info: The information about the failed attempt. Call
                ``info.request_stop()`` to stop retrying.

        Returns:
            ``RetryAction.STOP`` to stop retrying, or
            ``RetryAction.CONTINUE``/``None`` to keep going.
        """


class FunctionCallback(ErrorCallback):
    """Error callback that delegates to a plain function.

    Args:
        func: The function to call with the ``ErrorInfo``.
    """

    def __init__(self, func: Callable[[ErrorInfo], RetryAction | None]) -> None:
        self.func = func

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(func={self.func!r})"

    def invoke(self, info: ErrorInfo) -> RetryAction | None:
        return self.func(info)


def as_error_callback(
    callback: ErrorCallback | Callable[[ErrorInfo], RetryAction | None] | None,
) -> ErrorCallback | None:
    """Normalize a callback argument to an ``ErrorCallback``.

    Args:
        callback: ``None``, an ``ErrorCallback`` instance, or a callable
            accepting an ``ErrorInfo``.

    Returns:
        The ``ErrorCallback`` to use, or ``None`` if no callback was given.

    Raises:
        TypeError: If ``callback`` is neither ``None``, an
            ``ErrorCallback`` nor callable.

    Example:
        ```pycon
        >>> from aretry.callbacks import as_error_callback
        >>> as_error_callback(None) is None
        True
        >>> as_error_callback(print)
        FunctionCallback(func=<built-in function print>)

        ```
    """
    if callback is None or isinstance(callback, ErrorCallback):
        return callback
    if callable(callback):
        return FunctionCallback(callback)
    msg = f"callback must be an ErrorCallback or a callable, got {type(callback).__name__}"
    raise TypeError(msg)


def invoke_error_callback(callback: ErrorCallback, attempt_number: int, cause: Exception) -> bool:
    """Invoke an error callback and report whether it requested a stop.

    Any exception raised by the callback propagates unchanged.

    Args:
        callback: The callback to invoke.
        attempt_number: The attempt counter for the failed attempt.
        cause: The exception raised by the failed attempt.

    Returns:
        ``True`` if the callback called ``request_stop()`` or returned
        ``RetryAction.STOP``, otherwise ``False``.
    """
    info = ErrorInfo(attempt_number=attempt_number, cause=cause)
    action = callback.invoke(info)
    stop = info.stop_requested or action is RetryAction.STOP
    if stop:
        logger.debug(f"Error callback requested stop at attempt {attempt_number}")
    return stop

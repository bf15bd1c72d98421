r"""Callback manager for reporting failed attempts.

This module provides the CallbackManager class that handles invocation
of the optional user-defined error callback during the retry loop.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING

from aretry.callbacks import as_error_callback, invoke_error_callback

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.callbacks import ErrorCallback, ErrorInfo, RetryAction


class CallbackManager:
    """Manages the error callback invocations of a retry execution.

    Attributes:
        callback: The normalized error callback, or ``None`` if the
            caller did not register one.
    """

    def __init__(
        self, callback: ErrorCallback | Callable[[ErrorInfo], RetryAction | None] | None
    ) -> None:
        """Initialize callback manager.

        Args:
            callback: The error callback, a plain callable, or ``None``.

        Raises:
            TypeError: If ``callback`` is not a valid callback.
        """
        self.callback: ErrorCallback | None = as_error_callback(callback)

    @property
    def has_callback(self) -> bool:
        return self.callback is not None

    def on_error(self, attempt_number: int, cause: Exception) -> bool:
        """Report a failed attempt to the callback.

        Args:
            attempt_number: The attempt counter for the failed attempt.
            cause: The exception raised by the failed attempt.

        Returns:
            ``True`` if the callback requested to stop retrying,
            ``False`` otherwise or if no callback is registered.
        """
        if self.callback is None:
            return False
        return invoke_error_callback(self.callback, attempt_number, cause)

r"""Shared helpers for the aretry test suite."""

from __future__ import annotations

__all__ = ["AsyncCountingOperation", "CountingOperation", "RecordingCallback"]

from typing import TYPE_CHECKING, Any

from aretry.callbacks import ErrorCallback, RetryAction

if TYPE_CHECKING:
    from aretry.callbacks import ErrorInfo


class CountingOperation:
    """Operation that fails a fixed number of times before succeeding.

    Args:
        failures: Number of leading calls that raise. ``None`` means the
            operation always fails.
        result: The value returned once the operation succeeds.
    """

    def __init__(self, failures: int | None = None, result: Any = None) -> None:
        self.failures = failures
        self.result = result
        self.calls = 0
        self.raised: list[Exception] = []

    def _attempt(self) -> Any:
        self.calls += 1
        if self.failures is None or self.calls <= self.failures:
            exc = RuntimeError(f"failure {self.calls}")
            self.raised.append(exc)
            raise exc
        return self.result

    def __call__(self) -> Any:
        return self._attempt()


class AsyncCountingOperation(CountingOperation):
    """Coroutine function counterpart of ``CountingOperation``."""

    async def __call__(self) -> Any:
        return self._attempt()


class RecordingCallback(ErrorCallback):
    """Error callback that records every ``ErrorInfo`` it receives.

    Args:
        stop_at: Number of the invocation on which to request a stop,
            or ``None`` to never stop.
        use_return: Whether to stop by returning ``RetryAction.STOP``
            instead of calling ``request_stop()``.
    """

    def __init__(self, stop_at: int | None = None, use_return: bool = False) -> None:
        self.stop_at = stop_at
        self.use_return = use_return
        self.infos: list[ErrorInfo] = []

    @property
    def attempt_numbers(self) -> list[int]:
        return [info.attempt_number for info in self.infos]

    def invoke(self, info: ErrorInfo) -> RetryAction | None:
        self.infos.append(info)
        if self.stop_at is not None and len(self.infos) == self.stop_at:
            if self.use_return:
                return RetryAction.STOP
            info.request_stop()
        return None

r"""Run states and the result type of one retry execution."""

from __future__ import annotations

__all__ = ["RetryOutcome", "RetryState"]

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from aretry.exceptions import RetryError


class RetryState(Enum):
    """States of the retry loop.

    ``RUNNING`` is the state while attempts are in progress. It is never
    the state of a returned ``RetryOutcome``, which always holds one of
    the three final states.
    """

    RUNNING = "running"
    SUCCEEDED = "succeeded"
    STOPPED_BY_CALLBACK = "stopped_by_callback"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class RetryOutcome:
    """Result of one retry execution.

    Attributes:
        state: The final state of the retry loop.
        attempts: The number of times the operation was invoked.
        errors: The failures captured across all failed attempts,
            in attempt order.
        result: The value returned by the successful attempt, or
            ``None`` if no attempt succeeded.
        callback_registered: Whether an error callback handled the
            failures of this execution.

    Example:
        ```pycon
        >>> from aretry.retry import RetryOutcome, RetryState
        >>> outcome = RetryOutcome(state=RetryState.SUCCEEDED, attempts=1, result=42)
        >>> outcome.succeeded
        True
        >>> outcome.raise_for_errors()

        ```
    """

    state: RetryState
    attempts: int
    errors: tuple[Exception, ...] = field(default_factory=tuple)
    result: Any = None
    callback_registered: bool = False

    @property
    def succeeded(self) -> bool:
        return self.state is RetryState.SUCCEEDED

    def raise_for_errors(self) -> None:
        """Raise the composite error if this execution must surface one.

        The error is raised only when no callback was registered, no
        attempt succeeded, and at least one attempt failed.

        Raises:
            RetryError: Carrying every captured failure in attempt order.
        """
        if self.succeeded or self.callback_registered or not self.errors:
            return
        raise RetryError(self.errors) from self.errors[-1]

r"""Define the exception raised when all retry attempts fail."""

from __future__ import annotations

__all__ = ["RetryError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class RetryError(Exception):
    """Composite error carrying every failure of one retry execution.

    The failures are stored in the order the attempts occurred. The
    last failure is also chained as ``__cause__`` when the error is
    raised by the executor.

    Args:
        errors: The failures captured across all failed attempts.
            Must not be empty.

    Raises:
        ValueError: If ``errors`` is empty.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryError
        >>> error = RetryError([ValueError("first"), RuntimeError("second")])
        >>> len(error)
        2
        >>> error.last_error
        RuntimeError('second')
        >>> str(error)
        "operation failed after 2 attempts: RuntimeError('second')"

        ```
    """

    def __init__(self, errors: Sequence[Exception]) -> None:
        if not errors:
            msg = "RetryError requires at least one captured error"
            raise ValueError(msg)
        self.errors: tuple[Exception, ...] = tuple(errors)
        super().__init__(
            f"operation failed after {len(self.errors)} attempts: {self.errors[-1]!r}"
        )

    def __len__(self) -> int:
        return len(self.errors)

    @property
    def size(self) -> int:
        """The number of failed attempts."""
        return len(self.errors)

    @property
    def last_error(self) -> Exception:
        """The failure captured on the final attempt."""
        return self.errors[-1]

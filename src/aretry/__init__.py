r"""aretry - Generic retry execution with a constant delay.

This package runs an operation until it succeeds, its retry budget is
exhausted, or an error callback asks to stop. Without a callback, all
the failures of an unsuccessful execution are raised together as one
``RetryError``. With a callback, failures are reported to it and
nothing is raised.

Key Features:
    - Constant delay between attempts, in milliseconds
    - Composite error carrying every failure in attempt order
    - Error callbacks that can stop the retries early
    - Result type (``RetryOutcome``) for callers that prefer not to catch
    - Async support with ``asyncio``

Example:
    ```pycon
    >>> from aretry import ErrorInfo, execute
    >>> seen = []
    >>> def on_error(info: ErrorInfo) -> None:
    ...     seen.append(info.attempt_number)
    ...
    >>> execute(3, 0, lambda: 1 / 0, on_error)
    >>> seen
    [1, 2, 3]

    ```
"""

from __future__ import annotations

__all__ = [
    "ErrorCallback",
    "ErrorInfo",
    "RetryAction",
    "RetryConfig",
    "RetryError",
    "RetryOutcome",
    "RetryState",
    "__version__",
    "execute",
    "execute_async",
    "run",
    "run_async",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.callbacks import ErrorCallback, ErrorInfo, RetryAction
from aretry.core.config import RetryConfig
from aretry.exceptions import RetryError
from aretry.execute import execute, run
from aretry.execute_async import execute_async, run_async
from aretry.retry.state import RetryOutcome, RetryState

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"

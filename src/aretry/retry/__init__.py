r"""Retry package implementing the retry execution loop.

Public API:
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
    - CallbackManager: Manager for error callback invocations
    - RetryOutcome: Result of one retry execution
    - RetryState: Final state of the retry loop
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "CallbackManager",
    "RetryExecutor",
    "RetryOutcome",
    "RetryState",
]

from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.retry.manager import CallbackManager
from aretry.retry.state import RetryOutcome, RetryState

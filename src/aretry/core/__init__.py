r"""Core configuration and validation shared by sync and async retry
execution."""

from __future__ import annotations

__all__ = [
    "DEFAULT_INTERVAL_MS",
    "DEFAULT_RETRY_COUNT",
    "RetryConfig",
    "resolve_config",
    "validate_awaitable",
    "validate_operation",
    "validate_retry_params",
]

from aretry.core.config import (
    DEFAULT_INTERVAL_MS,
    DEFAULT_RETRY_COUNT,
    RetryConfig,
    resolve_config,
)
from aretry.core.validation import (
    validate_awaitable,
    validate_operation,
    validate_retry_params,
)

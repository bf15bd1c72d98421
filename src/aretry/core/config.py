r"""Configuration dataclass and defaults for retry execution.

This module provides configuration constants and a dataclass-based
configuration object shared by the ``execute`` functions and the
retry executors.
"""

from __future__ import annotations

__all__ = ["DEFAULT_INTERVAL_MS", "DEFAULT_RETRY_COUNT", "RetryConfig", "resolve_config"]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from aretry.core.validation import validate_retry_params

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.callbacks import ErrorCallback, ErrorInfo, RetryAction


# Default number of retries after the first attempt
# Total attempts = retry_count + 1 (initial attempt)
DEFAULT_RETRY_COUNT = 3

# Default delay in milliseconds between attempts
DEFAULT_INTERVAL_MS = 0


@dataclass
class RetryConfig:
    """Configuration for retry execution.

    Args:
        retry_count: Number of retries after the first attempt. Must be >= 0.
        interval_ms: Constant delay in milliseconds between attempts.
            Must be >= 0.
        callback: Optional error callback. When set, failures are reported
            to it instead of being raised as a ``RetryError``.

    Example:
        ```pycon
        >>> from aretry.core.config import RetryConfig
        >>> config = RetryConfig()  # Use defaults
        >>> config.retry_count
        3
        >>> config = RetryConfig(retry_count=5, interval_ms=100)
        >>> merged = config.merge(retry_count=10)  # Override specific parameters
        >>> merged.retry_count, merged.interval_ms
        (10, 100)
        >>> config.retry_count  # Original unchanged
        5

        ```
    """

    retry_count: int = DEFAULT_RETRY_COUNT
    interval_ms: int = DEFAULT_INTERVAL_MS
    callback: ErrorCallback | Callable[[ErrorInfo], RetryAction | None] | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            TypeError: If a count or interval is not an integer.
            ValueError: If a count or interval is negative.
        """
        validate_retry_params(retry_count=self.retry_count, interval_ms=self.interval_ms)

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RetryConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the retry configuration parameters.

        Example:
            ```pycon
            >>> from aretry.core.config import RetryConfig
            >>> RetryConfig(retry_count=2, interval_ms=50).to_dict()
            {'retry_count': 2, 'interval_ms': 50, 'callback': None}

            ```
        """
        return {
            "retry_count": self.retry_count,
            "interval_ms": self.interval_ms,
            "callback": self.callback,
        }


def resolve_config(config: RetryConfig | None = None, **overrides: Any) -> RetryConfig:
    """Resolve the configuration used by one execution.

    Args:
        config: An optional base configuration. If None, default
            RetryConfig values are used.
        **overrides: Keyword arguments for parameters to override.
            Only non-None values are applied.

    Returns:
        The validated configuration.

    Raises:
        TypeError: If a count or interval is not an integer.
        ValueError: If a count or interval is negative.

    Example:
        ```pycon
        >>> from aretry.core.config import RetryConfig, resolve_config
        >>> resolve_config(retry_count=1).to_dict()
        {'retry_count': 1, 'interval_ms': 0, 'callback': None}
        >>> resolve_config(RetryConfig(interval_ms=200), retry_count=None).interval_ms
        200

        ```
    """
    if config is None:
        config = RetryConfig()
    return config.merge(**overrides)

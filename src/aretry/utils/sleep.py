r"""Sleep helpers for the constant delay between retry attempts."""

from __future__ import annotations

__all__ = ["async_sleep_interval", "sleep_interval"]

import asyncio
import logging
import time

logger: logging.Logger = logging.getLogger(__name__)


def sleep_interval(interval_ms: int) -> None:
    """Block the calling thread for ``interval_ms`` milliseconds.

    An interruption of the sleep is logged and ignored, which only
    shortens the wait.

    Args:
        interval_ms: The delay in milliseconds. A value of 0 returns
            immediately without sleeping.

    Example:
        ```pycon
        >>> from aretry.utils.sleep import sleep_interval
        >>> sleep_interval(0)
        >>> sleep_interval(10)

        ```
    """
    if interval_ms <= 0:
        return
    logger.debug(f"Waiting {interval_ms}ms before retry")
    try:
        time.sleep(interval_ms / 1000)
    except InterruptedError:
        logger.debug(f"Sleep of {interval_ms}ms was interrupted, continuing")


async def async_sleep_interval(interval_ms: int) -> None:
    """Asynchronously wait for ``interval_ms`` milliseconds.

    Args:
        interval_ms: The delay in milliseconds. A value of 0 returns
            immediately without sleeping.
    """
    if interval_ms <= 0:
        return
    logger.debug(f"Waiting {interval_ms}ms before retry")
    await asyncio.sleep(interval_ms / 1000)

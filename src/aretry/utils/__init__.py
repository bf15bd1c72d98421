r"""Utility functions for retry execution."""

from __future__ import annotations

__all__ = ["async_sleep_interval", "sleep_interval"]

from aretry.utils.sleep import async_sleep_interval, sleep_interval

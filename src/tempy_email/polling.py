# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Polling with a deadline and exponential backoff.

``poll_until`` calls a probe repeatedly until it produces a result, the
deadline passes, or the probe raises. The loop is single threaded: the probe
is called, the elapsed time is checked against the deadline, and only then
does the loop sleep before the next call.

Probe results are tagged so that falsy values are never confused with
"nothing yet":

- ``NOT_FOUND`` or ``None``: keep polling.
- ``Found(value)``: stop and return ``value`` (``value`` may be ``None``).
- anything else: stop and return it as is (``0``, ``False`` and ``""``
  included).

Example:
    Waiting for a counter to move::

        async def probe():
            count = await fetch_count()
            return count if count > 0 else NOT_FOUND

        count = await poll_until(probe, PollConfig(timeout_ms=10_000))
"""

from __future__ import annotations

import asyncio
import inspect
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

from .errors import PollingTimeoutError
from .logger import get_logger

T = TypeVar("T")

BACKOFF_FACTOR = 1.5
DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_INTERVAL_MS = 1_000
DEFAULT_MAX_INTERVAL_MS = 5_000

logger = get_logger(__name__)


class _NotFound:
    """Sentinel type for "no result yet"."""

    _instance: _NotFound | None = None

    def __new__(cls) -> _NotFound:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = _NotFound()


@dataclass(frozen=True)
class Found(Generic[T]):
    """A probe result that ends polling with ``value``."""

    value: T


Probe = Callable[[], Union[Any, Awaitable[Any]]]


@dataclass(frozen=True)
class PollConfig:
    """Timing settings for a single ``poll_until`` call.

    All durations are in milliseconds and must not be negative.
    """

    timeout_ms: float = DEFAULT_TIMEOUT_MS
    """Time allowed from the first probe until the deadline."""

    interval_ms: float = DEFAULT_INTERVAL_MS
    """Delay before the second probe."""

    max_interval_ms: float = DEFAULT_MAX_INTERVAL_MS
    """Ceiling for the delay when backoff is enabled."""

    backoff: bool = True
    """Grow the delay by 1.5x after every empty probe."""

    def __post_init__(self) -> None:
        for name in ("timeout_ms", "interval_ms", "max_interval_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

    def first_interval(self) -> float:
        if self.backoff:
            return min(self.interval_ms, self.max_interval_ms)
        return self.interval_ms

    def next_interval(self, current: float) -> float:
        if self.backoff:
            return min(current * BACKOFF_FACTOR, self.max_interval_ms)
        return current


def _now_ms() -> float:
    return time.monotonic() * 1000


def _unwrap(result: Any) -> Found[Any] | None:
    if result is None or result is NOT_FOUND:
        return None
    if isinstance(result, Found):
        return result
    return Found(result)


async def wait(ms: float) -> None:
    """Suspend the current task for ``ms`` milliseconds.

    Zero and negative durations only yield control to the event loop.
    """
    await asyncio.sleep(max(ms, 0) / 1000)


async def poll_until(probe: Probe, config: PollConfig | None = None) -> Any:
    """Call ``probe`` until it returns a result or the deadline passes.

    The first probe runs immediately. After every empty probe the elapsed
    time is compared with ``config.timeout_ms``; if the deadline has not been
    reached the loop sleeps for the current interval (never past the
    deadline) and probes again.

    Args:
        probe: Zero-argument callable or coroutine function returning a
            probe result (see module docstring).
        config: Timing settings. Defaults to ``PollConfig()``.

    Returns:
        The value carried by the first non-empty probe result.

    Raises:
        PollingTimeoutError: If the deadline passes with no result.
        Exception: Whatever the probe raised, unchanged and without retry.
    """
    config = config or PollConfig()
    interval = config.first_interval()
    started = _now_ms()
    attempt = 0

    while True:
        attempt += 1
        result = probe()
        if inspect.isawaitable(result):
            result = await result

        found = _unwrap(result)
        if found is not None:
            logger.debug(f"Probe succeeded on attempt {attempt}")
            return found.value

        elapsed = _now_ms() - started
        if elapsed >= config.timeout_ms:
            logger.warning(
                f"Polling gave up after {attempt} attempts ({elapsed:.0f}ms elapsed)"
            )
            raise PollingTimeoutError(config.timeout_ms)

        delay = min(interval, config.timeout_ms - elapsed)
        logger.debug(f"Attempt {attempt} empty, next probe in {delay:.0f}ms")
        await wait(delay)
        interval = config.next_interval(interval)


__all__ = [
    "BACKOFF_FACTOR",
    "Found",
    "NOT_FOUND",
    "PollConfig",
    "poll_until",
    "wait",
]

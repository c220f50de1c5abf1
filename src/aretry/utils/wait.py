r"""Waiting primitives racing a delay against a cancellation signal.

This module provides the blocking and asynchronous waits used between
attempts. Each wait ends as soon as either the delay elapses or the
cancellation signal is set, whichever comes first.
"""

from __future__ import annotations

__all__ = ["async_wait_or_cancel", "wait_or_cancel"]

import asyncio
import time
from typing import TYPE_CHECKING

from aretry.config import MAX_WAIT_SLICE

if TYPE_CHECKING:
    import threading


def wait_or_cancel(cancel: threading.Event | None, delay: float) -> bool:
    """Block for ``delay`` seconds or until ``cancel`` is set.

    Negative delays are clamped to zero. Without a cancellation signal
    this is a plain ``time.sleep``. Delays longer than ``MAX_WAIT_SLICE``
    (including ``math.inf``) are waited in consecutive slices, so that no
    single blocking call exceeds the platform timeout limits.

    Args:
        cancel: The cancellation signal, or ``None`` if the wait cannot
            be cancelled.
        delay: The number of seconds to wait.

    Returns:
        ``True`` if the wait was interrupted by cancellation, otherwise
            ``False``.

    Example:
        ```pycon
        >>> import threading
        >>> from aretry.utils.wait import wait_or_cancel
        >>> event = threading.Event()
        >>> wait_or_cancel(event, 0.01)
        False
        >>> event.set()
        >>> wait_or_cancel(event, 10.0)
        True

        ```
    """
    remaining = max(delay, 0.0)
    while True:
        timeout = min(remaining, MAX_WAIT_SLICE)
        if cancel is None:
            time.sleep(timeout)
        elif cancel.wait(timeout=timeout):
            return True
        remaining -= timeout
        if remaining <= 0:
            return False


async def async_wait_or_cancel(cancel: asyncio.Event | None, delay: float) -> bool:
    """Wait asynchronously for ``delay`` seconds or until ``cancel`` is
    set.

    Negative delays are clamped to zero. Without a cancellation signal
    this is a plain ``asyncio.sleep``.

    Args:
        cancel: The cancellation signal, or ``None`` if the wait cannot
            be cancelled.
        delay: The number of seconds to wait.

    Returns:
        ``True`` if the wait was interrupted by cancellation, otherwise
            ``False``.
    """
    delay = max(delay, 0.0)
    if cancel is None:
        await asyncio.sleep(delay)
        return False
    if cancel.is_set():
        return True
    try:
        await asyncio.wait_for(cancel.wait(), timeout=delay)
    except asyncio.TimeoutError:
        return False
    return True

r"""Helpers creating cancellation signals with a deadline.

The attempt generators only observe a cancellation signal; creating and
setting it is up to the caller. This module covers the common case of
a signal that fires after a fixed timeout.

Example:
    ```pycon
    >>> from aretry import ConstantBackoff, attempt
    >>> from aretry.cancellation import cancel_after
    >>> with cancel_after(0.15) as cancel:
    ...     pairs = list(attempt(cancel, ConstantBackoff(delay=0.1)))
    ...
    >>> len(pairs)
    2

    ```
"""

from __future__ import annotations

__all__ = ["cancel_after", "cancel_after_async"]

import asyncio
import logging
import threading
from contextlib import asynccontextmanager, contextmanager
from typing import TYPE_CHECKING

from aretry.utils.validation import check_non_negative

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator

logger: logging.Logger = logging.getLogger(__name__)


@contextmanager
def cancel_after(timeout: float) -> Iterator[threading.Event]:
    """Create a cancellation signal that is set after ``timeout``
    seconds.

    The signal is set from a daemon timer thread. Leaving the context
    stops the timer; the signal keeps whatever state it had.

    Args:
        timeout: The number of seconds before the signal is set.

    Yields:
        The cancellation signal.

    Raises:
        ValueError: If ``timeout`` is negative.
    """
    check_non_negative("timeout", timeout)
    cancel = threading.Event()
    timer = threading.Timer(timeout, cancel.set)
    timer.daemon = True
    timer.start()
    logger.debug(f"Cancellation scheduled in {timeout:.2f}s")
    try:
        yield cancel
    finally:
        timer.cancel()


@asynccontextmanager
async def cancel_after_async(timeout: float) -> AsyncIterator[asyncio.Event]:
    """Create an asyncio cancellation signal that is set after
    ``timeout`` seconds.

    The signal is set by a callback scheduled on the running event loop.
    Leaving the context cancels the callback.

    Args:
        timeout: The number of seconds before the signal is set.

    Yields:
        The cancellation signal.

    Raises:
        ValueError: If ``timeout`` is negative.
    """
    check_non_negative("timeout", timeout)
    cancel = asyncio.Event()
    handle = asyncio.get_running_loop().call_later(timeout, cancel.set)
    logger.debug(f"Cancellation scheduled in {timeout:.2f}s")
    try:
        yield cancel
    finally:
        handle.cancel()

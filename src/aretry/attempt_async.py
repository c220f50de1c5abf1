r"""Asynchronous cancellable sequence of attempts driven by a backoff
strategy.

This module provides ``attempt_async``, the async generator counterpart
of ``aretry.attempt.attempt``.
"""

from __future__ import annotations

__all__ = ["attempt_async"]

import logging
from itertools import count
from typing import TYPE_CHECKING

from aretry.attempt import AttemptPair
from aretry.utils.wait import async_wait_or_cancel

if TYPE_CHECKING:
    import asyncio
    from collections.abc import AsyncIterator

    from aretry.backoff.base import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


async def attempt_async(
    cancel: asyncio.Event | None, backoff: BaseBackoffStrategy
) -> AsyncIterator[AttemptPair]:
    """Iterate asynchronously over attempts spaced by a backoff
    strategy.

    This behaves like ``attempt`` but waits with the event loop instead
    of blocking the thread. The wait races the delay against
    ``cancel.wait()``.

    Args:
        cancel: The cancellation signal observed by the sequence, or
            ``None`` if the sequence cannot be cancelled.
        backoff: The backoff strategy computing the delay of each attempt.

    Yields:
        The attempt pairs, with indices starting at 0 and increasing by 1.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import ExponentialBackoff, attempt_async
        >>> async def main():
        ...     async for index, delay in attempt_async(None, ExponentialBackoff(0.01)):
        ...         if delay > 0.05:
        ...             return index
        ...
        >>> asyncio.run(main())
        3

        ```
    """
    for index in count():
        if cancel is not None and cancel.is_set():
            logger.debug(f"Cancelled before attempt {index}")
            return
        delay = backoff.calculate(index)
        yield AttemptPair(index, delay)

        if delay == 0:
            logger.debug(f"Zero delay at attempt {index}, stopping")
            return
        logger.debug(f"Waiting {delay:.2f}s before attempt {index + 1}")
        if await async_wait_or_cancel(cancel, delay):
            logger.debug(f"Cancelled while waiting before attempt {index + 1}")
            return

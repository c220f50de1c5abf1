r"""Cancellable sequence of attempts driven by a backoff strategy.

This module provides the ``attempt`` generator, which pairs each attempt
number with the delay computed by a backoff strategy and waits that long
between attempts. The caller runs the operation, inspects the outcome
and decides when to stop.
"""

from __future__ import annotations

__all__ = ["AttemptPair", "attempt"]

import logging
from itertools import count
from typing import TYPE_CHECKING, NamedTuple

from aretry.utils.wait import wait_or_cancel

if TYPE_CHECKING:
    import threading
    from collections.abc import Iterator

    from aretry.backoff.base import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


class AttemptPair(NamedTuple):
    """One step of an attempt sequence.

    Attributes:
        index: The attempt number (0-indexed).
        delay: The delay in seconds computed by the backoff strategy for
            this attempt, waited after the pair is consumed.
    """

    index: int
    delay: float


def attempt(
    cancel: threading.Event | None, backoff: BaseBackoffStrategy
) -> Iterator[AttemptPair]:
    """Iterate over attempts spaced by a backoff strategy.

    Each step yields the attempt number and the delay computed by
    ``backoff``, then blocks for that delay before the next step. The
    sequence is unbounded and ends only when:

    - ``cancel`` is set, either before a step or while waiting,
    - the consumer stops iterating, in which case no wait happens,
    - the backoff strategy returns a zero delay, which is yielded once.

    The wait races the delay against ``cancel``, so a cancellation is
    observed immediately rather than at the end of the delay. Negative
    delays (e.g. from ``JitterBackoff``) are yielded unchanged and
    waited as zero.

    Args:
        cancel: The cancellation signal observed by the sequence. It is
            never set by the sequence itself. ``None`` means the sequence
            cannot be cancelled.
        backoff: The backoff strategy computing the delay of each attempt.

    Yields:
        The attempt pairs, with indices starting at 0 and increasing by 1.

    Example:
        ```pycon
        >>> import threading
        >>> from aretry import ConstantBackoff, attempt
        >>> cancel = threading.Event()
        >>> for index, delay in attempt(cancel, ConstantBackoff(delay=0.001)):
        ...     if index >= 2:
        ...         break
        ...
        >>> list(attempt(cancel, ConstantBackoff(delay=0.0)))
        [AttemptPair(index=0, delay=0.0)]

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
        if wait_or_cancel(cancel, delay):
            logger.debug(f"Cancelled while waiting before attempt {index + 1}")
            return

r"""aretry - Cancellable attempt sequences driven by backoff strategies.

This package provides a minimal retry-scheduling primitive. Given a
backoff strategy, it produces a lazily-evaluated sequence of
``(attempt, delay)`` pairs and waits ``delay`` between them. There is no
retry loop: the caller runs the operation, decides what counts as a
failure and when to stop.

Key Features:
    - Backoff strategies: Constant, Linear, Exponential and exponential Decay
    - Jitter decorator to randomize any backoff strategy
    - Sync (``threading.Event``) and async (``asyncio.Event``) cancellation
    - Waits that end as soon as cancellation fires
    - Deadline helpers to create cancellation signals with a timeout

Example:
    ```pycon
    >>> import threading
    >>> from aretry import LinearBackoff, attempt
    >>> cancel = threading.Event()
    >>> for index, delay in attempt(cancel, LinearBackoff(base_delay=0.01)):
    ...     if index == 2:  # e.g. the operation succeeded
    ...         break
    ...     if delay > 2.0:  # give up once the delay gets too long
    ...         break
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "AttemptPair",
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "DecayBackoff",
    "ExponentialBackoff",
    "JitterBackoff",
    "LinearBackoff",
    "__version__",
    "attempt",
    "attempt_async",
    "cancel_after",
    "cancel_after_async",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.attempt import AttemptPair, attempt
from aretry.attempt_async import attempt_async
from aretry.backoff import (
    BaseBackoffStrategy,
    ConstantBackoff,
    DecayBackoff,
    ExponentialBackoff,
    JitterBackoff,
    LinearBackoff,
)
from aretry.cancellation import cancel_after, cancel_after_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"

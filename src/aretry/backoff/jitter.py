r"""Jitter decorator for backoff strategies."""

from __future__ import annotations

__all__ = ["JitterBackoff"]

import random

from aretry.backoff.base import BaseBackoffStrategy
from aretry.utils.validation import check_positive


class JitterBackoff(BaseBackoffStrategy):
    """Backoff strategy that adds random jitter to another strategy.

    Calculates delay as: backoff.calculate(attempt) + U[0, spread) - spread / 2,
    i.e. the wrapped delay shifted by a centered random offset in
    ``[-spread / 2, spread / 2)``. A fresh offset is drawn on every call.

    The result can be negative when the wrapped delay is smaller than
    ``spread / 2``. The attempt generators yield such a value unchanged
    and wait zero seconds for it.

    Args:
        spread: The width of the jitter window in seconds. Must be positive.
        backoff: The backoff strategy to apply jitter to.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff, JitterBackoff
        >>> backoff = JitterBackoff(spread=0.5, backoff=ConstantBackoff(delay=1.0))
        >>> 0.75 <= backoff.calculate(0) < 1.25
        True

        ```
    """

    def __init__(self, spread: float, backoff: BaseBackoffStrategy) -> None:
        check_positive("spread", spread)
        self.spread = spread
        self.backoff = backoff

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(spread={self.spread}, backoff={self.backoff!r})"

    def calculate(self, attempt: int) -> float:
        """Calculate jittered backoff delay.

        Args:
            attempt: The current attempt number (0-indexed).

        Returns:
            The wrapped strategy's delay plus a random offset in
                ``[-spread / 2, spread / 2)``.
        """
        jitter = random.random() * self.spread  # noqa: S311
        return self.backoff.calculate(attempt) + jitter - self.spread / 2

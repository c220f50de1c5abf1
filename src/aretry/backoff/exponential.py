r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import math

from aretry.backoff.base import BaseBackoffStrategy
from aretry.config import DEFAULT_EXPONENTIAL_BASE_DELAY
from aretry.utils.validation import check_non_negative


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (2 ** attempt).

    The delay grows without bound. Callers are expected to stop
    iterating once the delay or the attempt number exceeds their own
    threshold. When the delay no longer fits in a float, ``math.inf``
    is returned.

    Args:
        base_delay: The base delay factor (default: 0.3). The actual delay
            is calculated as base_delay * (2 ** attempt).

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.3)
        >>> backoff.calculate(0)
        0.3
        >>> backoff.calculate(1)
        0.6
        >>> backoff.calculate(2)
        1.2
        >>> backoff.calculate(5000)
        inf

        ```
    """

    def __init__(self, base_delay: float = DEFAULT_EXPONENTIAL_BASE_DELAY) -> None:
        check_non_negative("base_delay", base_delay)
        self.base_delay = base_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_delay={self.base_delay})"

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The current attempt number (0-indexed).

        Returns:
            The calculated delay: base_delay * (2 ** attempt), or
                ``math.inf`` if it overflows.
        """
        try:
            return math.ldexp(self.base_delay, attempt)
        except OverflowError:
            return math.inf

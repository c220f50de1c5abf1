r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.config import DEFAULT_DELAY
from aretry.utils.validation import check_non_negative


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed backoff strategy.

    Returns the same delay for every attempt, regardless of the attempt number.
    A zero delay ends an attempt sequence after its first pair.

    Args:
        delay: The fixed delay in seconds to use for all attempts (default: 1.0).

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=2.5)
        >>> backoff.calculate(0)
        2.5
        >>> backoff.calculate(10)
        2.5

        ```
    """

    def __init__(self, delay: float = DEFAULT_DELAY) -> None:
        check_non_negative("delay", delay)
        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        """Calculate constant backoff delay.

        Args:
            attempt: The current attempt number (0-indexed, unused).

        Returns:
            The fixed delay value.
        """
        return self.delay

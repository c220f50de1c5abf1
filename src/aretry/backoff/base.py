r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before the next
    attempt based on the attempt number. Implementations must be pure:
    calling ``calculate`` twice with the same attempt returns the same
    delay, with the exception of randomized decorators such as
    ``JitterBackoff``.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the backoff delay for a given attempt.

        Args:
            attempt: The current attempt number (0-indexed). For example,
                attempt=0 is the first attempt, attempt=1 is the second
                attempt, etc.

        Returns:
            The calculated delay in seconds before the next attempt.
        """

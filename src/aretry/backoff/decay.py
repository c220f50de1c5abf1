r"""Exponential decay backoff strategy."""

from __future__ import annotations

__all__ = ["DecayBackoff"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.config import NANOSECONDS_PER_SECOND
from aretry.utils.validation import check_non_negative


class DecayBackoff(BaseBackoffStrategy):
    """Exponential decay backoff strategy.

    The delay starts at ``initial_delay`` and halves every
    ``half_life`` attempts: delay = initial_delay / 2 ** (attempt // half_life).

    The halving is done on whole nanoseconds, so the delay is
    piecewise-constant and eventually reaches exactly zero, which ends
    an attempt sequence.

    Args:
        initial_delay: The delay in seconds of the first ``half_life``
            attempts.
        half_life: The number of attempts after which the delay halves.
            Must be a positive integer.

    Raises:
        ValueError: If ``initial_delay`` is negative or ``half_life`` is
            lower than 1.

    Example:
        ```pycon
        >>> from aretry.backoff import DecayBackoff
        >>> backoff = DecayBackoff(initial_delay=10.0, half_life=2)
        >>> [backoff.calculate(i) for i in range(6)]
        [10.0, 10.0, 5.0, 5.0, 2.5, 2.5]

        ```
    """

    def __init__(self, initial_delay: float, half_life: int) -> None:
        check_non_negative("initial_delay", initial_delay)
        if not isinstance(half_life, int) or half_life < 1:
            msg = f"half_life must be a positive integer, got {half_life}"
            raise ValueError(msg)

        self.initial_delay = initial_delay
        self.half_life = half_life
        self._initial_ns = round(initial_delay * NANOSECONDS_PER_SECOND)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_delay={self.initial_delay}, "
            f"half_life={self.half_life})"
        )

    def calculate(self, attempt: int) -> float:
        """Calculate decayed backoff delay.

        Args:
            attempt: The current attempt number (0-indexed).

        Returns:
            The initial delay halved ``attempt // half_life`` times, with
                nanosecond resolution.
        """
        return (self._initial_ns >> (attempt // self.half_life)) / NANOSECONDS_PER_SECOND

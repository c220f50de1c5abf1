r"""Linear backoff strategy."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.config import DEFAULT_LINEAR_BASE_DELAY
from aretry.utils.validation import check_non_negative


class LinearBackoff(BaseBackoffStrategy):
    """Linear backoff strategy.

    Calculates delay as: base_delay * (attempt + 1).

    The first attempt already carries one unit of delay, so the delays
    are evenly spaced multiples of ``base_delay`` starting at
    ``base_delay`` itself.

    Args:
        base_delay: The base delay in seconds (default: 1.0).

    Example:
        ```pycon
        >>> from aretry.backoff import LinearBackoff
        >>> backoff = LinearBackoff(base_delay=1.0)
        >>> backoff.calculate(0)  # 1.0 * 1
        1.0
        >>> backoff.calculate(1)  # 1.0 * 2
        2.0
        >>> backoff.calculate(2)  # 1.0 * 3
        3.0

        ```
    """

    def __init__(self, base_delay: float = DEFAULT_LINEAR_BASE_DELAY) -> None:
        check_non_negative("base_delay", base_delay)
        self.base_delay = base_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_delay={self.base_delay})"

    def calculate(self, attempt: int) -> float:
        """Calculate linear backoff delay.

        Args:
            attempt: The current attempt number (0-indexed).

        Returns:
            The calculated delay: base_delay * (attempt + 1).
        """
        return self.base_delay * (attempt + 1)

r"""Parameter validation utilities.

This module provides validation functions used when constructing
backoff strategies and cancellation helpers, so that invalid
configuration is rejected early instead of producing meaningless
delays.
"""

from __future__ import annotations

__all__ = ["check_non_negative", "check_positive"]


def check_non_negative(name: str, value: float) -> None:
    """Check that a numeric parameter is non-negative.

    Args:
        name: The parameter name, used in the error message.
        value: The value to check.

    Raises:
        ValueError: If the value is negative.

    Example:
        ```pycon
        >>> from aretry.utils.validation import check_non_negative
        >>> check_non_negative("delay", 0.0)
        >>> check_non_negative("delay", -1.0)
        Traceback (most recent call last):
        ...
        ValueError: delay must be non-negative, got -1.0

        ```
    """
    if value < 0:
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)


def check_positive(name: str, value: float) -> None:
    """Check that a numeric parameter is strictly positive.

    Args:
        name: The parameter name, used in the error message.
        value: The value to check.

    Raises:
        ValueError: If the value is zero or negative.

    Example:
        ```pycon
        >>> from aretry.utils.validation import check_positive
        >>> check_positive("spread", 0.5)
        >>> check_positive("spread", 0)
        Traceback (most recent call last):
        ...
        ValueError: spread must be positive, got 0

        ```
    """
    if value <= 0:
        msg = f"{name} must be positive, got {value}"
        raise ValueError(msg)

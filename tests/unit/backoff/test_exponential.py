r"""Unit tests for ExponentialBackoff strategy."""

from __future__ import annotations

import math

import pytest

from aretry.backoff.exponential import ExponentialBackoff


def test_exponential_backoff_basic() -> None:
    """Test basic exponential backoff calculation."""
    backoff = ExponentialBackoff(base_delay=0.3)
    assert backoff.calculate(0) == 0.3  # 0.3 * 2^0
    assert backoff.calculate(1) == 0.6  # 0.3 * 2^1
    assert backoff.calculate(2) == 1.2  # 0.3 * 2^2
    assert backoff.calculate(3) == 2.4  # 0.3 * 2^3


@pytest.mark.parametrize("attempt", range(20))
def test_exponential_backoff_formula(attempt: int) -> None:
    """Test that delay is base_delay * 2^attempt."""
    assert ExponentialBackoff(base_delay=3.0).calculate(attempt) == 3.0 * 2**attempt


def test_exponential_backoff_default_values() -> None:
    """Test exponential backoff with default values."""
    backoff = ExponentialBackoff()
    assert backoff.base_delay == 0.3
    assert backoff.calculate(0) == 0.3


def test_exponential_backoff_zero_base_delay() -> None:
    """Test exponential backoff with zero base_delay."""
    backoff = ExponentialBackoff(base_delay=0.0)
    assert backoff.calculate(0) == 0.0
    assert backoff.calculate(5000) == 0.0


def test_exponential_backoff_overflow() -> None:
    """Test that a delay too large for a float is infinite instead of
    raising."""
    backoff = ExponentialBackoff(base_delay=1.0)
    assert backoff.calculate(1023) == 2.0**1023
    assert backoff.calculate(1024) == math.inf
    assert backoff.calculate(100_000) == math.inf


def test_exponential_backoff_invalid_base_delay() -> None:
    """Test that negative base_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"base_delay must be non-negative"):
        ExponentialBackoff(base_delay=-1.0)

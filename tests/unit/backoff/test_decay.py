r"""Unit tests for DecayBackoff strategy."""

from __future__ import annotations

import pytest

from aretry.backoff.decay import DecayBackoff


def test_decay_backoff_sequence() -> None:
    """Test that the delay halves every half_life attempts."""
    backoff = DecayBackoff(initial_delay=10.0, half_life=2)
    assert [backoff.calculate(i) for i in range(10)] == [
        10.0,
        10.0,
        5.0,
        5.0,
        2.5,
        2.5,
        1.25,
        1.25,
        0.625,
        0.625,
    ]


def test_decay_backoff_half_life_one() -> None:
    """Test that a half_life of 1 halves on every attempt."""
    backoff = DecayBackoff(initial_delay=8.0, half_life=1)
    assert [backoff.calculate(i) for i in range(5)] == [8.0, 4.0, 2.0, 1.0, 0.5]


@pytest.mark.parametrize("attempt", range(7))
def test_decay_backoff_constant_within_half_life(attempt: int) -> None:
    """Test that the first half_life attempts keep the initial delay."""
    assert DecayBackoff(initial_delay=0.5, half_life=7).calculate(attempt) == 0.5


def test_decay_backoff_reaches_zero() -> None:
    """Test that the delay becomes exactly zero once every nanosecond is
    halved away."""
    backoff = DecayBackoff(initial_delay=0.5, half_life=7)
    # 0.5s is 500_000_000ns, which needs 29 halvings to reach zero
    assert backoff.calculate(28 * 7) == 1e-9
    assert backoff.calculate(29 * 7) == 0.0
    assert backoff.calculate(10_000) == 0.0


def test_decay_backoff_truncates_odd_nanoseconds() -> None:
    """Test that halving floors to whole nanoseconds."""
    backoff = DecayBackoff(initial_delay=3e-9, half_life=1)
    assert backoff.calculate(0) == 3e-9
    assert backoff.calculate(1) == 1e-9
    assert backoff.calculate(2) == 0.0


def test_decay_backoff_zero_initial_delay() -> None:
    """Test that a zero initial delay gives zero for every attempt."""
    backoff = DecayBackoff(initial_delay=0.0, half_life=3)
    assert backoff.calculate(0) == 0.0
    assert backoff.calculate(10) == 0.0


def test_decay_backoff_attributes() -> None:
    backoff = DecayBackoff(initial_delay=1.5, half_life=4)
    assert backoff.initial_delay == 1.5
    assert backoff.half_life == 4
    assert repr(backoff) == "DecayBackoff(initial_delay=1.5, half_life=4)"


def test_decay_backoff_invalid_initial_delay() -> None:
    """Test that negative initial_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"initial_delay must be non-negative"):
        DecayBackoff(initial_delay=-1.0, half_life=2)


@pytest.mark.parametrize("half_life", [0, -1, 2.0, 1.5])
def test_decay_backoff_invalid_half_life(half_life: float) -> None:
    """Test that a non-positive or non-integer half_life raises
    ValueError."""
    with pytest.raises(ValueError, match=r"half_life must be a positive integer"):
        DecayBackoff(initial_delay=1.0, half_life=half_life)

r"""Backoff strategies for attempt delays.

This package provides the backoff strategies used to compute the delay
between attempts: constant, linear, exponential and exponential decay
patterns, plus a jitter decorator that randomizes any of them.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "DecayBackoff",
    "ExponentialBackoff",
    "JitterBackoff",
    "LinearBackoff",
]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.backoff.constant import ConstantBackoff
from aretry.backoff.decay import DecayBackoff
from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.jitter import JitterBackoff
from aretry.backoff.linear import LinearBackoff

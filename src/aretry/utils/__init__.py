r"""Utility functions shared by the backoff strategies and the attempt
generators.

This package provides parameter validation helpers and the waiting
primitives that race a delay against a cancellation signal.
"""

from __future__ import annotations

__all__ = [
    "async_wait_or_cancel",
    "check_non_negative",
    "check_positive",
    "wait_or_cancel",
]

from aretry.utils.validation import check_non_negative, check_positive
from aretry.utils.wait import async_wait_or_cancel, wait_or_cancel

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from aretry.backoff import BaseBackoffStrategy

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_cancel() -> Mock:
    """Create a mock cancellation signal that never fires.

    ``is_set`` returns False and ``wait`` returns False, i.e. every wait
    runs to completion. Override ``side_effect`` or ``return_value`` to
    simulate a cancellation.
    """
    return Mock(is_set=Mock(return_value=False), wait=Mock(return_value=False))


@pytest.fixture
def mock_backoff() -> Mock:
    """Create a mock backoff strategy returning 1.0 for every
    attempt."""
    return Mock(spec=BaseBackoffStrategy, calculate=Mock(return_value=1.0))

r"""Default values for backoff strategies.

This module gathers the configuration constants used as defaults by the
backoff strategies in ``aretry.backoff``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_EXPONENTIAL_BASE_DELAY",
    "DEFAULT_LINEAR_BASE_DELAY",
    "MAX_WAIT_SLICE",
    "NANOSECONDS_PER_SECOND",
]

# Default delay in seconds for ConstantBackoff
DEFAULT_DELAY = 1.0

# Default base delay for LinearBackoff
# Wait time = base_delay * (attempt + 1)
DEFAULT_LINEAR_BASE_DELAY = 1.0

# Default base delay for ExponentialBackoff
# Wait time = base_delay * (2 ** attempt)
# With 0.3: 1st attempt waits 0.3s, 2nd waits 0.6s, 3rd waits 1.2s
DEFAULT_EXPONENTIAL_BASE_DELAY = 0.3

# Resolution used by DecayBackoff when halving delays
NANOSECONDS_PER_SECOND = 1_000_000_000

# Longest single blocking wait in seconds, one day
# Longer delays (up to math.inf) are waited in consecutive slices
MAX_WAIT_SLICE = 86_400.0

"""Module-level constants for SkyChart.

All constants are declared with Final type annotation for immutability
and IDE support.
"""
from __future__ import annotations

from typing import Final

import numpy as np

# =============================================================================
# Section 1: Module Exports
# =============================================================================
__all__ = [
    # Coordinates
    'COORDINATE_DTYPE',
    'COORDINATE_SIZE_BYTES',
    # Query engine defaults
    'DEFAULT_CHANNEL_CAPACITY',
    'DEFAULT_CHUNK_SIZE',
    'DEFAULT_POLL_INTERVAL_SECONDS',
    'DEFAULT_SCAN_WORKERS',
    # Store
    'INITIAL_STORE_CAPACITY',
]

# =============================================================================
# Section 2: Coordinate Constants
# =============================================================================
COORDINATE_DTYPE: Final = np.dtype(np.float32)
COORDINATE_SIZE_BYTES: Final[int] = COORDINATE_DTYPE.itemsize  # 4

# =============================================================================
# Section 3: Query Engine Constants
# =============================================================================
DEFAULT_CHANNEL_CAPACITY: Final[int] = 100
DEFAULT_CHUNK_SIZE: Final[int] = 1024  # rows per scan task
DEFAULT_POLL_INTERVAL_SECONDS: Final[float] = 0.05
DEFAULT_SCAN_WORKERS: Final[int] = 4

# =============================================================================
# Section 4: Store Constants
# =============================================================================
INITIAL_STORE_CAPACITY: Final[int] = 16

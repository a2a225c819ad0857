"""SkyChart package initialization.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from ._version import __version__
from .constellation import (
    Constellation,
    ConstellationBuilder,
    QueryStream,
    VecConstellation,
    squared_radius,
)
from .core.exceptions import (
    ConstellationNotFoundError,
    InvalidSizeError,
    ScanError,
    SkyChartError,
)
from .core.models import CollectionStats, ScanOptions, SupportedSize
from .sky import Sky

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "__version__",
    "Sky",
    "Constellation",
    "ConstellationBuilder",
    "VecConstellation",
    "QueryStream",
    "squared_radius",
    "SupportedSize",
    "ScanOptions",
    "CollectionStats",
    "SkyChartError",
    "InvalidSizeError",
    "ConstellationNotFoundError",
    "ScanError",
)

"""Point stores and the streaming query engine.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# Local imports (core first, then alphabetical)
from .builder import ConstellationBuilder
from .locks import RWLock
from .points import make_point, make_points, squared_distances, squared_radius
from .query import QueryStream, start_scan
from .store import Constellation, VecConstellation

__all__ = (
    "Constellation",
    "ConstellationBuilder",
    "QueryStream",
    "RWLock",
    "VecConstellation",
    "make_point",
    "make_points",
    "squared_distances",
    "squared_radius",
    "start_scan",
)

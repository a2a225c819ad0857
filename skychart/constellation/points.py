"""Point construction and distance primitives.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from collections.abc import Iterable

# Third-party (alphabetical)
import numpy as np

# Local imports (core first, then alphabetical)
from ..core.constants import COORDINATE_DTYPE
from ..core.exceptions import InvalidSizeError
from ..core.types import PointArray, VectorLike

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("make_point", "make_points", "squared_distances", "squared_radius")


# =============================================================================
# Section 12: Functions
# =============================================================================
def make_point(values: VectorLike, dimensions: int) -> PointArray:
    """Build an immutable point of exactly ``dimensions`` coordinates.

    Raises:
        InvalidSizeError: If ``values`` is not a flat sequence of that length.
    """
    point = np.array(values, dtype=COORDINATE_DTYPE)
    if point.ndim != 1 or point.shape[0] != dimensions:
        raise InvalidSizeError(point.size, (dimensions,))
    point.flags.writeable = False
    return point


def make_points(batch: Iterable[VectorLike], dimensions: int) -> PointArray:
    """Build an ``(n, dimensions)`` block of points.

    The whole batch is validated before anything is returned.
    """
    rows = batch if isinstance(batch, np.ndarray) else list(batch)
    if len(rows) == 0:
        return np.empty((0, dimensions), dtype=COORDINATE_DTYPE)
    try:
        block = np.array(rows, dtype=COORDINATE_DTYPE)
    except ValueError:
        # Ragged input
        bad = next((len(row) for row in rows if len(row) != dimensions), None)
        if bad is None:
            raise
        raise InvalidSizeError(bad, (dimensions,)) from None
    if block.ndim != 2 or block.shape[1] != dimensions:
        length = block.shape[1] if block.ndim == 2 else block.size
        raise InvalidSizeError(length, (dimensions,))
    return block


def squared_distances(points: PointArray, query: PointArray) -> PointArray:
    """Squared Euclidean distance from ``query`` to each row of ``points``."""
    delta = points - query
    return np.einsum("ij,ij->i", delta, delta)


def squared_radius(radius: float) -> float:
    """Convert a linear radius into the squared threshold queries expect."""
    if radius < 0:
        raise ValueError("radius must be non-negative")
    return float(radius) * float(radius)

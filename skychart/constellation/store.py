"""Point store abstractions.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from functools import lru_cache
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

# Third-party (alphabetical)
import numpy as np

# Local imports (core first, then alphabetical)
from ..core.constants import COORDINATE_DTYPE, COORDINATE_SIZE_BYTES, INITIAL_STORE_CAPACITY
from .locks import RWLock
from .points import make_point, make_points
from .query import QueryStream, start_scan

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..core.models import ScanOptions
    from ..core.types import PointArray, VectorLike

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("Constellation", "VecConstellation")


# =============================================================================
# Section 8: Protocols
# =============================================================================
@runtime_checkable
class Constellation(Protocol):
    """Protocol for point stores."""

    def add_points(self, points: Iterable[VectorLike]) -> None:
        """Append a batch of points."""
        ...

    def find(self, point: VectorLike, radius_squared: float, *, options: ScanOptions | None = None) -> QueryStream:
        """Stream every stored point within ``radius_squared`` (squared distance) of ``point``."""
        ...

    def count(self) -> int:
        """Number of stored points."""
        ...

    def dimensions(self) -> int:
        """Coordinates per point."""
        ...

    def memory_size(self) -> int:
        """Approximate bytes used by the stored points."""
        ...


# =============================================================================
# Section 11: Classes
# =============================================================================
class VecConstellation:
    """Append-only, lock-guarded block of fixed-length points.

    Each instance is specialized to one dimensionality via
    ``VecConstellation.with_dimensions(n)``; the base class itself cannot be
    instantiated. Points are kept in a contiguous float32 buffer that grows
    by doubling. Rows below ``count()`` are never written again, so a
    snapshot of them stays valid after the read lock is released.
    """

    DIMENSIONS: ClassVar[int] = 0

    def __init__(self) -> None:
        if self.DIMENSIONS <= 0:
            raise TypeError("Use VecConstellation.with_dimensions(n) to build a specialized store")
        self._lock = RWLock()
        self._buffer: PointArray = np.empty((INITIAL_STORE_CAPACITY, self.DIMENSIONS), dtype=COORDINATE_DTYPE)
        self._count = 0

    @classmethod
    @lru_cache(maxsize=None)
    def with_dimensions(cls, dimensions: int) -> type[VecConstellation]:
        """Return the store class specialized to ``dimensions`` coordinates."""
        if dimensions <= 0:
            raise ValueError("dimensions must be positive")
        return type(f"VecConstellation{dimensions}", (cls,), {"DIMENSIONS": dimensions})

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self.count()})"

    def add_points(self, points: Iterable[VectorLike]) -> None:
        """Append a batch of points.

        The batch is validated before the write lock is taken, so a bad batch
        leaves the store untouched.

        Raises:
            InvalidSizeError: If any point has the wrong length.
        """
        block = make_points(points, self.DIMENSIONS)
        if len(block) == 0:
            return
        with self._lock.write():
            needed = self._count + len(block)
            if needed > len(self._buffer):
                self._grow(needed)
            self._buffer[self._count : needed] = block
            self._count = needed

    def find(self, point: VectorLike, radius_squared: float, *, options: ScanOptions | None = None) -> QueryStream:
        """Stream every stored point within a squared distance of ``point``.

        Args:
            point: Query point of this store's dimensionality.
            radius_squared: Threshold on the **squared** Euclidean distance.
            options: Channel and worker pool sizing.

        Raises:
            InvalidSizeError: If ``point`` has the wrong length.
        """
        query_point = make_point(point, self.DIMENSIONS)
        return start_scan(self, query_point, radius_squared, options)

    def snapshot(self) -> PointArray:
        """Read-only view of the stored points, taken under the read lock."""
        with self._lock.read():
            view = self._buffer[: self._count]
        view.flags.writeable = False
        return view

    def count(self) -> int:
        with self._lock.read():
            return self._count

    def dimensions(self) -> int:
        return self.DIMENSIONS

    def memory_size(self) -> int:
        return self.DIMENSIONS * COORDINATE_SIZE_BYTES * self.count()

    def _grow(self, needed: int) -> None:
        capacity = max(len(self._buffer) * 2, needed)
        buffer = np.empty((capacity, self.DIMENSIONS), dtype=COORDINATE_DTYPE)
        buffer[: self._count] = self._buffer[: self._count]
        self._buffer = buffer

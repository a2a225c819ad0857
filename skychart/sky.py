"""Named collections of point stores.

A ``Sky`` maps collection names to point stores, one mapping per supported
dimensionality. The length of each incoming vector selects the mapping, so
the same name can hold independent collections of different sizes.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import threading
from typing import TYPE_CHECKING, Self

# Local imports (core first, then alphabetical)
from .constellation.builder import ConstellationBuilder
from .constellation.points import make_point, make_points
from .core.exceptions import ConstellationNotFoundError
from .core.models import CollectionStats, SupportedSize
from .infra.instrumentation import Metrics
from .infra.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .constellation.query import QueryStream
    from .constellation.store import VecConstellation
    from .core.models import ScanOptions
    from .core.settings import SkyChartSettings
    from .core.types import VectorLike

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("Sky",)

_logger = get_logger("sky")


# =============================================================================
# Section 11: Classes
# =============================================================================
class Sky:
    """Registry of named constellations across all supported sizes.

    Collections are created on the first successful ``add`` and never
    removed. Queries never create collections.

    Example:
        >>> sky = Sky()
        >>> sky.add("hello", [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
        >>> list(sky.query("hello", 0.0, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]))
        [(0.0, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])]
    """

    def __init__(self, *, options: ScanOptions | None = None) -> None:
        self._options = options
        self._lock = threading.Lock()
        self._partitions: dict[SupportedSize, dict[str, VecConstellation]] = {size: {} for size in SupportedSize}

    @classmethod
    def from_settings(cls, settings: SkyChartSettings) -> Self:
        """Build a sky whose queries use the scan options from ``settings``."""
        return cls(options=settings.scan_options())

    def add(self, name: str, values: VectorLike) -> None:
        """Append one point to the collection ``name``.

        Coordinates are stored as float32, so values read back from a query
        are the nearest float32, not the exact Python floats passed in.

        Raises:
            InvalidSizeError: If ``len(values)`` is not a supported size.
        """
        size = SupportedSize.from_length(len(values))
        point = make_point(values, size.value)
        self._get_or_create(name, size).add_points([point])
        Metrics.record_insert(name, size.value, 1)

    def extend(self, name: str, vectors: Sequence[VectorLike]) -> None:
        """Append a batch of points that all share one supported size.

        Nothing is created or appended unless the whole batch is valid.

        Raises:
            InvalidSizeError: If the batch uses an unsupported length, or if a
                later vector differs from the first one's length. In the
                latter case ``valid_sizes`` holds only the batch's length.
        """
        if len(vectors) == 0:
            return
        size = SupportedSize.from_length(len(vectors[0]))
        block = make_points(vectors, size.value)
        self._get_or_create(name, size).add_points(block)
        Metrics.record_insert(name, size.value, len(block))

    def query(self, name: str, radius_squared: float, values: VectorLike) -> QueryStream:
        """Stream every point in ``name`` within ``radius_squared`` of ``values``.

        The threshold is a **squared** Euclidean distance: to search within a
        radius ``r`` pass ``r * r``. Matches arrive as
        ``(squared_distance, coordinates)`` in no particular order. Both the
        query point and the returned coordinates are rounded to float32.

        Raises:
            InvalidSizeError: If ``len(values)`` is not a supported size.
            ConstellationNotFoundError: If ``name`` has no collection of that size.
        """
        size = SupportedSize.from_length(len(values))
        return self.get(name, size).find(values, radius_squared, options=self._options)

    def get(self, name: str, dimensions: int) -> VecConstellation:
        """Return the collection ``name`` holding points of ``dimensions`` coordinates.

        Raises:
            InvalidSizeError: If ``dimensions`` is not a supported size.
            ConstellationNotFoundError: If no such collection exists.
        """
        size = SupportedSize.from_length(dimensions)
        constellation = self._partitions[size].get(name)
        if constellation is None:
            raise ConstellationNotFoundError(name, size.value)
        return constellation

    def names(self, dimensions: int | None = None) -> list[str]:
        """Sorted collection names, optionally limited to one size."""
        with self._lock:
            if dimensions is not None:
                return sorted(self._partitions[SupportedSize.from_length(dimensions)])
            return sorted({name for partition in self._partitions.values() for name in partition})

    def stats(self) -> list[CollectionStats]:
        """Per-collection counts and footprints, ordered by size then name."""
        with self._lock:
            entries = [
                (size, name, constellation)
                for size, partition in self._partitions.items()
                for name, constellation in partition.items()
            ]
        return [
            CollectionStats(
                name=name,
                dimensions=size.value,
                count=constellation.count(),
                memory_size=constellation.memory_size(),
            )
            for size, name, constellation in sorted(entries, key=lambda entry: (entry[0], entry[1]))
        ]

    def memory_size(self) -> int:
        """Approximate bytes used by every stored point."""
        return sum(entry.memory_size for entry in self.stats())

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        name, dimensions = key
        try:
            size = SupportedSize(dimensions)
        except ValueError:
            return False
        return name in self._partitions[size]

    def __len__(self) -> int:
        return sum(len(partition) for partition in self._partitions.values())

    def _get_or_create(self, name: str, size: SupportedSize) -> VecConstellation:
        partition = self._partitions[size]
        constellation = partition.get(name)
        if constellation is not None:
            return constellation
        with self._lock:
            constellation = partition.get(name)
            if constellation is None:
                constellation = ConstellationBuilder(size).build()
                partition[name] = constellation
                _logger.info("Created constellation {name} ({dimensions}-d)", name=name, dimensions=size.value)
        return constellation

"""Core domain models for SkyChart.

``SupportedSize`` is the closed catalog of point lengths the system accepts.
Every member maps to exactly one dimension-specialized point store.
"""
from __future__ import annotations

import os
from enum import IntEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    COORDINATE_SIZE_BYTES,
    DEFAULT_CHANNEL_CAPACITY,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_POLL_INTERVAL_SECONDS,
    DEFAULT_SCAN_WORKERS,
)
from .exceptions import InvalidSizeError

__all__ = [
    'SupportedSize',
    'CollectionStats',
    'ScanOptions',
]


# =============================================================================
# Enums
# =============================================================================
class SupportedSize(IntEnum):
    """Catalog of supported dimensionalities.

    The value of each member is the number of coordinates per point.
    Adding a member requires a matching case in ``ConstellationBuilder``.
    """

    D2 = 2
    D6 = 6
    D16 = 16
    D32 = 32
    D64 = 64
    D128 = 128

    @classmethod
    def choices(cls) -> tuple[int, ...]:
        """Return the supported lengths in ascending order."""
        return tuple(member.value for member in cls)

    @classmethod
    def from_length(cls, length: int) -> Self:
        """Resolve the catalog entry for a vector length.

        Raises:
            InvalidSizeError: If ``length`` is not in the catalog.
        """
        try:
            return cls(length)
        except ValueError:
            raise InvalidSizeError(length, cls.choices()) from None

    @property
    def point_size_bytes(self) -> int:
        """Footprint of one point of this size."""
        return self.value * COORDINATE_SIZE_BYTES


# =============================================================================
# Models
# =============================================================================
class CollectionStats(BaseModel):
    """Snapshot of one named constellation in a sky."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description='Collection name')
    dimensions: int = Field(..., gt=0, description='Coordinates per point')
    count: int = Field(..., ge=0, description='Points stored at snapshot time')
    memory_size: int = Field(..., ge=0, description='Approximate bytes used by the points')


class ScanOptions(BaseModel):
    """Tuning knobs for one background scan.

    ``channel_capacity`` bounds the number of matches buffered between the
    scan and its consumer; producers block once it is full.
    """

    model_config = ConfigDict(frozen=True)

    channel_capacity: int = Field(default=DEFAULT_CHANNEL_CAPACITY, gt=0)
    scan_workers: int = Field(default_factory=lambda: min(DEFAULT_SCAN_WORKERS, os.cpu_count() or 1), gt=0)
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
    poll_interval: float = Field(default=DEFAULT_POLL_INTERVAL_SECONDS, gt=0)

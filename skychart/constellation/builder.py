"""Factory for dimension-specialized point stores.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from typing import Self

# Third-party (alphabetical)
from typing_extensions import assert_never

# Local imports (core first, then alphabetical)
from ..core.models import SupportedSize
from .store import VecConstellation

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("ConstellationBuilder",)


# =============================================================================
# Section 11: Classes
# =============================================================================
class ConstellationBuilder:
    """Build the store type that matches one catalog entry."""

    def __init__(self, size: SupportedSize) -> None:
        self.size = size

    @classmethod
    def from_length(cls, length: int) -> Self:
        """Builder for vectors of ``length`` coordinates.

        Raises:
            InvalidSizeError: If ``length`` is not in the catalog.
        """
        return cls(SupportedSize.from_length(length))

    def build(self) -> VecConstellation:
        """Return a new, empty store for this builder's size."""
        match self.size:
            case SupportedSize.D2:
                return VecConstellation.with_dimensions(2)()
            case SupportedSize.D6:
                return VecConstellation.with_dimensions(6)()
            case SupportedSize.D16:
                return VecConstellation.with_dimensions(16)()
            case SupportedSize.D32:
                return VecConstellation.with_dimensions(32)()
            case SupportedSize.D64:
                return VecConstellation.with_dimensions(64)()
            case SupportedSize.D128:
                return VecConstellation.with_dimensions(128)()
            case _:
                assert_never(self.size)

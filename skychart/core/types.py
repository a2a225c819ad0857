"""Type aliases and type variables for SkyChart.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from collections.abc import Sequence
from typing import Literal

# Third-party (alphabetical)
import numpy as np
import numpy.typing as npt
from typing_extensions import TypeAliasType

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "Coordinates",
    "Distance",
    "Match",
    "PointArray",
    "VectorLike",
    "ErrorCategory",
    "RecoveryStrategy",
)

# =============================================================================
# Section 3: Type Aliases
# =============================================================================
type Distance = float
type Coordinates = list[float]

Match = TypeAliasType("Match", tuple[Distance, Coordinates])
VectorLike = TypeAliasType("VectorLike", Sequence[float])
PointArray = TypeAliasType("PointArray", npt.NDArray[np.float32])

ErrorCategory = TypeAliasType(
    "ErrorCategory",
    Literal["transient", "recoverable", "fatal"],
)
RecoveryStrategy = TypeAliasType(
    "RecoveryStrategy",
    Literal["retry", "fallback", "skip", "abort"],
)

"""Configuration loading for SkyChart.

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

# Local imports (core first, then alphabetical)
from ..core.settings import SkyChartSettings

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("load_settings",)


# =============================================================================
# Section 12: Functions
# =============================================================================
@lru_cache(maxsize=1)
def load_settings() -> SkyChartSettings:
    """Load settings from the environment (and ``.env`` when present).

    The result is cached; call ``load_settings.cache_clear()`` to reload.
    """
    return SkyChartSettings()

"""Settings configuration.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from typing import Final, Literal

# Third-party (alphabetical)
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Local imports (core first, then alphabetical)
from .constants import (
    DEFAULT_CHANNEL_CAPACITY,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_POLL_INTERVAL_SECONDS,
    DEFAULT_SCAN_WORKERS,
)
from .models import ScanOptions

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("SkyChartSettings", "ENV_PREFIX")

# =============================================================================
# Section 3: Constants
# =============================================================================
ENV_PREFIX: Final[str] = "SKYCHART_"


# =============================================================================
# Section 11: Classes
# =============================================================================
class SkyChartSettings(BaseSettings):
    """Runtime settings for callers that wrap a sky.

    The core classes never read the environment; a caller loads these
    settings and passes the derived ``ScanOptions`` in.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        extra="ignore",
        validate_default=True,
    )

    environment: str = "development"
    channel_capacity: int = Field(default=DEFAULT_CHANNEL_CAPACITY, gt=0)
    scan_workers: int = Field(default=DEFAULT_SCAN_WORKERS, gt=0)
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
    poll_interval: float = Field(default=DEFAULT_POLL_INTERVAL_SECONDS, gt=0)
    send_to_logfire: bool | Literal["if-token-present"] = "if-token-present"

    def scan_options(self) -> ScanOptions:
        """Query engine options derived from these settings."""
        return ScanOptions(
            channel_capacity=self.channel_capacity,
            scan_workers=self.scan_workers,
            chunk_size=self.chunk_size,
            poll_interval=self.poll_interval,
        )

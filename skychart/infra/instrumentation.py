"""Centralized instrumentation for SkyChart.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from typing import TYPE_CHECKING

# Third-party (alphabetical)
import logfire

# Local imports (core first, then alphabetical)
from .config import load_settings

if TYPE_CHECKING:
    from ..core.settings import SkyChartSettings

__all__ = ("configure_instrumentation", "Metrics")


class Metrics:
    """Centralized metrics recording.

    Provides methods for recording store and query events consistently
    across the package.
    """

    @staticmethod
    def record_insert(name: str, dimensions: int, points: int) -> None:
        """Record points appended to a constellation."""
        logfire.debug("insert", name=name, dimensions=dimensions, points=points)

    @staticmethod
    def record_query_complete(dimensions: int, scanned: int, matched: int, duration_ms: float, cancelled: bool) -> None:
        """Record the end of a background scan."""
        logfire.info(
            "query_complete",
            dimensions=dimensions,
            scanned=scanned,
            matched=matched,
            duration_ms=duration_ms,
            cancelled=cancelled,
        )


def configure_instrumentation(*, service_name: str = "skychart", settings: SkyChartSettings | None = None) -> None:
    """Configure global instrumentation settings.

    This function should be called once at application startup.

    Args:
        service_name: Name of the service for tracing.
        settings: Settings to use; loaded from the environment when omitted.
    """
    settings = settings or load_settings()
    logfire.configure(
        service_name=service_name,
        environment=settings.environment,
        send_to_logfire=settings.send_to_logfire,
    )

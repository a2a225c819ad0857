"""Exception hierarchy for SkyChart.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .types import ErrorCategory, RecoveryStrategy

__all__ = (
    'SkyChartError',
    'ConstellationError',
    'InvalidSizeError',
    'ConstellationNotFoundError',
    'QueryError',
    'ScanError',
    'classify_error',
)


class SkyChartError(Exception):
    """Base exception for all SkyChart errors.

    All exceptions in the package inherit from this class, enabling
    catch-all handling at application boundaries.

    Attributes:
        context: Additional context for debugging.
        recoverable: Whether the error can potentially be recovered.
    """

    def __init__(self, message: str, *, context: dict[str, Any] | None = None, recoverable: bool = True) -> None:
        self.context = context or {}
        self.recoverable = recoverable
        super().__init__(message)


# =============================================================================
# Constellation Exceptions
# =============================================================================
class ConstellationError(SkyChartError):
    """Base exception for point store and registry errors."""


class InvalidSizeError(ConstellationError):
    """Raised when a vector length is not in the supported catalog.

    Attributes:
        length: Length of the rejected vector.
        valid_sizes: Lengths that would have been accepted.
    """

    def __init__(self, length: int, valid_sizes: Iterable[int]) -> None:
        self.length = length
        self.valid_sizes = tuple(valid_sizes)
        choices = ', '.join(str(size) for size in self.valid_sizes)
        super().__init__(
            f'A vector with length {length} is not valid. Valid sizes: {choices}',
            context={'length': length, 'valid_sizes': self.valid_sizes},
            recoverable=False,
        )


class ConstellationNotFoundError(ConstellationError):
    """Raised when no constellation exists for a name and vector length."""

    def __init__(self, name: str, length: int) -> None:
        self.name = name
        self.length = length
        super().__init__(
            f'A constellation with the name {name} and size {length} does not exist.',
            context={'name': name, 'length': length},
            recoverable=False,
        )


# =============================================================================
# Query Exceptions
# =============================================================================
class QueryError(SkyChartError):
    """Base exception for query engine errors."""


class ScanError(QueryError):
    """Raised on the consumer side when a background scan fails."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        self.cause = cause
        ctx: dict[str, Any] = {}
        if cause is not None:
            ctx['cause_type'] = type(cause).__name__
        super().__init__(f'Scan failed: {message}', context=ctx)


def classify_error(exc: Exception) -> tuple[ErrorCategory, RecoveryStrategy]:
    """Classify errors into recovery categories and strategies."""
    if isinstance(exc, InvalidSizeError):
        return 'fatal', 'abort'
    if isinstance(exc, ConstellationNotFoundError):
        return 'fatal', 'skip'
    if isinstance(exc, SkyChartError):
        return ('recoverable', 'retry') if exc.recoverable else ('fatal', 'abort')
    return 'transient', 'retry'

"""Shared test fixtures and helpers for SkyChart tests.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

import os
from typing import TYPE_CHECKING, Any, TypeVar

import logfire
import pytest

from skychart import ScanOptions, Sky, VecConstellation

# Keep instrumentation local during tests.
logfire.configure(send_to_logfire=False, console=False)

# Re-export dirty_equals for convenience
if TYPE_CHECKING:
    from collections.abc import Iterator

    T = TypeVar("T")

    def IsInstance(arg: type[T]) -> T: ...
    def IsFloat(*args: Any, **kwargs: Any) -> float: ...
    def IsInt(*args: Any, **kwargs: Any) -> int: ...
    def IsList(*args: Any, **kwargs: Any) -> list[Any]: ...
else:
    from dirty_equals import IsFloat, IsInstance, IsInt, IsList


__all__ = (
    "IsFloat",
    "IsInt",
    "IsInstance",
    "IsList",
    "TestEnv",
)


class TestEnv:
    """Helper for managing environment variables in tests."""

    __test__ = False  # Prevent pytest from collecting this class

    def __init__(self) -> None:
        self.envars: dict[str, str | None] = {}

    def set(self, name: str, value: str) -> None:
        """Set an environment variable, saving the original value."""
        self.envars[name] = os.getenv(name)
        os.environ[name] = value

    def remove(self, name: str) -> None:
        """Remove an environment variable, saving the original value."""
        self.envars[name] = os.environ.pop(name, None)

    def reset(self) -> None:
        """Reset all modified environment variables to original values."""
        for name, value in self.envars.items():
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value


@pytest.fixture
def env() -> Iterator[TestEnv]:
    """Fixture for managing environment variables in tests."""
    test_env = TestEnv()
    yield test_env
    test_env.reset()


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def scan_options() -> ScanOptions:
    """Small channel and blocks so tests exercise backpressure and fan-out."""
    return ScanOptions(channel_capacity=4, scan_workers=3, chunk_size=8, poll_interval=0.01)


@pytest.fixture
def sky(scan_options: ScanOptions) -> Sky:
    """Empty sky using the test scan options."""
    return Sky(options=scan_options)


@pytest.fixture
def line_store() -> VecConstellation:
    """1-d store holding the points 0.0 .. 99.0."""
    store = VecConstellation.with_dimensions(1)()
    store.add_points([[float(i)] for i in range(100)])
    return store

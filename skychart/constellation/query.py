"""Streaming radius queries over a point store.

A query runs on a background coordinator thread. The coordinator takes a
snapshot of the store under its read lock, splits it into row blocks and fans
them out to a worker pool. Workers push every match into a bounded channel;
the caller pulls matches from a ``QueryStream`` as they arrive.

Radius thresholds are compared against **squared** Euclidean distance. Pass
``r * r`` (see ``squared_radius``), not ``r``.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import asyncio
import itertools
import queue
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Protocol, Self

# Third-party (alphabetical)
import logfire
import numpy as np

# Local imports (core first, then alphabetical)
from ..core.exceptions import ScanError
from ..core.models import ScanOptions
from ..infra.instrumentation import Metrics
from ..infra.logging import get_logger
from .points import squared_distances

if TYPE_CHECKING:
    from types import TracebackType

    from ..core.types import Match, PointArray

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("QueryStream", "SupportsSnapshot", "start_scan")

# =============================================================================
# Section 3: Constants
# =============================================================================
_END: Final = object()
_query_ids = itertools.count(1)
_logger = get_logger("constellation.query")


# =============================================================================
# Section 8: Protocols
# =============================================================================
class SupportsSnapshot(Protocol):
    """Anything a scan can read points from."""

    def dimensions(self) -> int: ...

    def snapshot(self) -> PointArray: ...


# =============================================================================
# Section 9: Dataclasses
# =============================================================================
@dataclass(frozen=True, slots=True)
class _Failure:
    """Error raised inside a scan, forwarded to the consumer."""

    error: BaseException


# =============================================================================
# Section 11: Classes
# =============================================================================
class _Channel:
    """Bounded hand-off between a scan and its consumer.

    Senders block while the buffer is full, waking every ``poll_interval``
    to check whether the consumer has gone away.
    """

    def __init__(self, capacity: int, poll_interval: float) -> None:
        self._queue: queue.Queue[Any] = queue.Queue(maxsize=capacity)
        self._poll_interval = poll_interval
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def send(self, item: Any) -> bool:
        """Put ``item`` on the channel. Returns False once the consumer is gone."""
        while not self._cancelled.is_set():
            try:
                self._queue.put(item, timeout=self._poll_interval)
            except queue.Full:
                continue
            return True
        return False

    def close(self) -> None:
        """Signal end-of-stream to the consumer."""
        self.send(_END)

    def receive(self) -> Any:
        return self._queue.get()

    def cancel(self) -> None:
        """Detach the consumer and unblock any waiting senders and receivers."""
        self._cancelled.set()
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                break
        try:
            self._queue.put_nowait(_END)
        except queue.Full:
            pass  # a pending item already wakes the receiver


class QueryStream:
    """Lazily consumed stream of ``(squared_distance, coordinates)`` matches.

    Matches arrive in scan order, not sorted by distance. The stream can be
    consumed once, with ``for`` or ``async for``. Closing it (explicitly, by
    leaving a ``with`` block, or by dropping the last reference) stops the
    background scan.
    """

    def __init__(self, channel: _Channel, thread: threading.Thread) -> None:
        self._channel = channel
        self._thread = thread
        self._finished = False

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Match:
        if self._finished:
            raise StopIteration
        item = self._channel.receive()
        if item is _END:
            self._finished = True
            raise StopIteration
        if isinstance(item, _Failure):
            self.close()
            raise ScanError(str(item.error), cause=item.error) from item.error
        return item

    def __aiter__(self) -> Self:
        return self

    async def __anext__(self) -> Match:
        item = await asyncio.to_thread(next, self, _END)
        if item is _END:
            raise StopAsyncIteration
        return item

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        channel = getattr(self, "_channel", None)
        if channel is not None and not getattr(self, "_finished", True):
            channel.cancel()

    def close(self) -> None:
        """Stop consuming; the scan stops at its next send."""
        self._finished = True
        self._channel.cancel()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the background scan to exit.

        Returns:
            True if the scan thread has terminated.
        """
        self._thread.join(timeout)
        return not self._thread.is_alive()

    @property
    def done(self) -> bool:
        """Whether the background scan has terminated."""
        return not self._thread.is_alive()


# =============================================================================
# Section 12: Functions
# =============================================================================
def start_scan(
    source: SupportsSnapshot,
    query_point: PointArray,
    radius_squared: float,
    options: ScanOptions | None = None,
) -> QueryStream:
    """Start a background scan and return its result stream immediately.

    Args:
        source: Store to scan; its snapshot is taken under its read lock.
        query_point: Point with the same dimensionality as ``source``.
        radius_squared: Threshold on the **squared** distance.
        options: Channel and worker pool sizing.

    Returns:
        Stream of matches with their squared distance.
    """
    options = options or ScanOptions()
    channel = _Channel(options.channel_capacity, options.poll_interval)
    thread = threading.Thread(
        target=_run_scan,
        args=(source, query_point, float(radius_squared), channel, options),
        name=f"skychart-query-{next(_query_ids)}",
        daemon=True,
    )
    thread.start()
    return QueryStream(channel, thread)


def _run_scan(
    source: SupportsSnapshot,
    query_point: PointArray,
    radius_squared: float,
    channel: _Channel,
    options: ScanOptions,
) -> None:
    """Coordinator body. Always closes the channel before returning."""
    dimensions = 0
    started = time.perf_counter()
    scanned = 0
    matched = 0
    try:
        dimensions = source.dimensions()
        with logfire.span("constellation.scan", dimensions=dimensions, radius_squared=radius_squared):
            points = source.snapshot()
            scanned = len(points)
            matched = _fan_out(points, query_point, radius_squared, channel, options)
    except Exception as exc:
        _logger.exception("Scan of {dimensions}-d constellation failed", dimensions=dimensions)
        channel.send(_Failure(exc))
    finally:
        channel.close()
        Metrics.record_query_complete(
            dimensions=dimensions,
            scanned=scanned,
            matched=matched,
            duration_ms=(time.perf_counter() - started) * 1000,
            cancelled=channel.cancelled,
        )


def _fan_out(
    points: PointArray,
    query_point: PointArray,
    radius_squared: float,
    channel: _Channel,
    options: ScanOptions,
) -> int:
    if len(points) == 0:
        return 0
    starts = range(0, len(points), options.chunk_size)
    workers = min(options.scan_workers, len(starts))
    matched = 0
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="skychart-scan") as pool:
        futures = [
            pool.submit(_scan_block, points[start : start + options.chunk_size], query_point, radius_squared, channel)
            for start in starts
        ]
        try:
            for future in as_completed(futures):
                matched += future.result()
        except BaseException:
            pool.shutdown(wait=False, cancel_futures=True)
            raise
    return matched


def _scan_block(block: PointArray, query_point: PointArray, radius_squared: float, channel: _Channel) -> int:
    """Send every row of ``block`` within the radius. Returns the number sent."""
    if channel.cancelled:
        return 0
    distances = squared_distances(block, query_point)
    sent = 0
    for index in np.flatnonzero(distances <= radius_squared):
        if not channel.send((float(distances[index]), block[index].tolist())):
            break
        sent += 1
    return sent

"""Tests for the reader/writer lock.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

import threading
import time

import pytest

from skychart.constellation.locks import RWLock

__all__ = ()


class TestRWLock:
    """Tests for RWLock exclusion rules."""

    def test_concurrent_readers(self) -> None:
        """Several readers hold the lock at once."""
        lock = RWLock()
        inside = threading.Barrier(3, timeout=5)

        def reader() -> None:
            with lock.read():
                inside.wait()

        threads = [threading.Thread(target=reader) for _ in range(3)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=5)

        assert not inside.broken
        assert lock.readers == 0

    def test_writer_excludes_readers(self) -> None:
        """A reader waits for an active writer."""
        lock = RWLock()
        events: list[str] = []
        lock.acquire_write()

        def reader() -> None:
            with lock.read():
                events.append("read")

        thread = threading.Thread(target=reader)
        thread.start()
        time.sleep(0.05)
        events.append("write-done")
        lock.release_write()
        thread.join(timeout=5)

        assert events == ["write-done", "read"]

    def test_writer_waits_for_readers(self) -> None:
        """A writer waits until every reader has left."""
        lock = RWLock()
        events: list[str] = []
        lock.acquire_read()

        def writer() -> None:
            with lock.write():
                events.append("write")

        thread = threading.Thread(target=writer)
        thread.start()
        time.sleep(0.05)
        events.append("read-done")
        lock.release_read()
        thread.join(timeout=5)

        assert events == ["read-done", "write"]
        assert not lock.writing

    def test_waiting_writer_blocks_new_readers(self) -> None:
        """Readers arriving after a waiting writer queue behind it."""
        lock = RWLock()
        events: list[str] = []
        lock.acquire_read()

        def writer() -> None:
            with lock.write():
                events.append("write")

        def late_reader() -> None:
            with lock.read():
                events.append("late-read")

        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        time.sleep(0.05)
        reader_thread = threading.Thread(target=late_reader)
        reader_thread.start()
        time.sleep(0.05)
        lock.release_read()
        writer_thread.join(timeout=5)
        reader_thread.join(timeout=5)

        assert events == ["write", "late-read"]

    def test_unbalanced_release(self) -> None:
        """Releasing a lock that is not held is an error."""
        lock = RWLock()

        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()

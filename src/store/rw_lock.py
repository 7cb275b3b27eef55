"""Non-blocking reader/writer lock.

Row storage is usually driven from a single cooperative event loop, where
waiting on a lock held by another pending operation on the same thread would
deadlock. Every acquisition here is a try-acquire: it succeeds immediately or
reports contention.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

from core.errors import StoreLockContentionError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


class NonBlockingRWLock:
    """Reader/writer lock with fail-fast acquisition.

    Any number of readers may hold the lock together. A writer excludes
    readers and other writers. The internal mutex only guards the counters
    and is held for a few instructions, so the lock is also safe to share
    between OS threads.
    """

    def __init__(self) -> None:
        self._state_lock = threading.Lock()
        self._readers = 0
        self._writer = False

    @property
    def is_locked(self) -> bool:
        with self._state_lock:
            return self._writer or self._readers > 0

    def try_acquire_read(self) -> bool:
        """Take a shared hold if no writer holds the lock."""
        with self._state_lock:
            if self._writer:
                return False
            self._readers += 1
            return True

    def try_acquire_write(self) -> bool:
        """Take the exclusive hold if nobody holds the lock."""
        with self._state_lock:
            if self._writer or self._readers > 0:
                return False
            self._writer = True
            return True

    def release_read(self) -> None:
        with self._state_lock:
            if self._readers == 0:
                raise RuntimeError("release_read called without a shared hold")
            self._readers -= 1

    def release_write(self) -> None:
        with self._state_lock:
            if not self._writer:
                raise RuntimeError("release_write called without the exclusive hold")
            self._writer = False

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Hold the lock shared for the duration of the block.

        Raises:
            StoreLockContentionError: If a writer currently holds the lock.
        """
        if not self.try_acquire_read():
            _LOGGER.debug("lock_contention", mode="read")
            raise StoreLockContentionError(
                "Row storage is locked for writing by another operation. "
                "Retry the read once the pending write has finished."
            )
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Hold the lock exclusively for the duration of the block.

        Raises:
            StoreLockContentionError: If any reader or writer holds the lock.
        """
        if not self.try_acquire_write():
            _LOGGER.debug("lock_contention", mode="write")
            raise StoreLockContentionError(
                "Row storage is locked by another operation. "
                "Retry the write once the pending operation has finished."
            )
        try:
            yield
        finally:
            self.release_write()

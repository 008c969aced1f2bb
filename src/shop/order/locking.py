"""Per-order serialization of replace-all updates and deletes."""

import threading
from contextlib import contextmanager


class KeyedLock:
    """A lock per key, created on first use and dropped once nobody holds or waits on it.

    The API routes are `async def` and run `process()` on the event loop, so a
    single served process already handles one request at a time and never
    contends here. The lock matters for callers that run the order service from
    several threads.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}
        self._waiters: dict[str, int] = {}

    @contextmanager
    def hold(self, key):
        key = str(key)
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
            self._waiters[key] = self._waiters.get(key, 0) + 1

        lock.acquire()
        try:
            yield
        finally:
            lock.release()
            with self._guard:
                self._waiters[key] -= 1
                if not self._waiters[key]:
                    del self._waiters[key]
                    del self._locks[key]

    def __len__(self):
        return len(self._locks)


order_locks = KeyedLock()

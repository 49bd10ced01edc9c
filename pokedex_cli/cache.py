"""A small thread-safe byte cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class _Entry:
    created_at: float
    val: bytes


class Cache:
    """Key/value store that drops entries once they are ``interval`` seconds old.

    A background daemon thread wakes every ``interval`` seconds and removes
    every entry whose age has reached the interval.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError(f"cache interval must be positive, got {interval!r}")
        self._interval = float(interval)
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, replacing any earlier entry."""
        with self._lock:
            self._entries[key] = _Entry(created_at=time.monotonic(), val=bytes(val))

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or ``None`` if there is none."""
        with self._lock:
            entry = self._entries.get(key)
        return entry.val if entry is not None else None

    def close(self) -> None:
        """Stop the background reaper. Stored entries are kept."""
        self._stopped.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stopped.wait(self._interval):
            self._reap()

    def _reap(self) -> None:
        with self._lock:
            now = time.monotonic()
            expired = [
                key
                for key, entry in self._entries.items()
                if now - entry.created_at >= self._interval
            ]
            for key in expired:
                del self._entries[key]
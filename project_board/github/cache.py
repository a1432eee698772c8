"""In-memory TTL cache shared by the REST and GraphQL request paths"""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from project_board.config import CACHE_TTL_MS


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class CacheEntry:
    data: Any
    timestamp: int  # epoch millis


class TTLCache:
    """
    Time-boxed key/value store.

    Entries are evicted lazily: a lookup that finds an entry older than the TTL
    deletes it and reports a miss. There is no capacity bound and no
    background sweeper, so memory is reclaimed only on lookup or clear().
    """

    def __init__(self, ttl_ms: int = CACHE_TTL_MS, clock: Optional[Callable[[], int]] = None):
        self.ttl_ms = ttl_ms
        self._clock = clock or now_ms
        self._entries = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None if absent or expired"""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            if self._clock() - entry.timestamp > self.ttl_ms:
                del self._entries[key]
                return None

            return entry.data

    def put(self, key: str, data: Any) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(data=data, timestamp=self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

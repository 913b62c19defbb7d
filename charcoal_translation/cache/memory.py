"""In-memory cache pool.

Thread-safe pool suitable for a single process. Per-key locks serialize
concurrent misses so an index is computed once per key. Values are deep
copied on the way in and out, so callers never share the stored object.
"""

import copy
import threading
from typing import Any, Dict

from charcoal_translation.cache.pool import CacheItem, CachePool
from charcoal_translation.core.logging import get_module_logger

logger = get_module_logger()


class MemoryCachePool(CachePool):
    """In-memory implementation of CachePool."""

    def __init__(self) -> None:
        self._store: Dict[str, Any] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._mutex = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get_item(self, key: str) -> CacheItem:
        with self._mutex:
            if key in self._store:
                self._hits += 1
                return CacheItem(self, key, copy.deepcopy(self._store[key]), hit=True)
            self._misses += 1
        return CacheItem(self, key)

    def save(self, item: CacheItem) -> None:
        value = copy.deepcopy(item.get())
        with self._mutex:
            self._store[item.key] = value
        item.release()
        logger.debug("cache_item_saved", key=item.key)

    def peek(self, key: str):
        with self._mutex:
            if key in self._store:
                return True, copy.deepcopy(self._store[key])
        return False, None

    def acquire(self, key: str) -> None:
        with self._mutex:
            lock = self._locks.setdefault(key, threading.Lock())
        lock.acquire()

    def release(self, key: str) -> None:
        with self._mutex:
            lock = self._locks.get(key)
        if lock is not None and lock.locked():
            lock.release()

    def delete(self, key: str) -> None:
        with self._mutex:
            self._store.pop(key, None)

    def clear(self) -> None:
        with self._mutex:
            self._store.clear()
            self._hits = 0
            self._misses = 0
        logger.info("cache_cleared")

    def get_stats(self) -> Dict[str, Any]:
        with self._mutex:
            return {
                "backend": "memory",
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
            }

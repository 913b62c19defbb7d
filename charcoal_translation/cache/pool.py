"""Cache pool abstract base class.

A pool hands out items by key. Repositories follow a get / lock / compute /
set / save sequence so concurrent misses on the same key can be serialized by
the pool implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class CacheItem:
    """A single cache slot returned by :meth:`CachePool.get_item`.

    Attributes:
        key: Cache key of the slot.
    """

    def __init__(self, pool: "CachePool", key: str, value: Any = None, hit: bool = False):
        self.key = key
        self._pool = pool
        self._value = value
        self._hit = hit
        self._locked = False

    def get(self) -> Any:
        """Return the stored value, or None on a miss."""
        return self._value if self._hit else None

    def is_hit(self) -> bool:
        return self._hit

    def is_miss(self) -> bool:
        return not self._hit

    def set(self, value: Any) -> "CacheItem":
        """Assign the value to be stored on the next :meth:`CachePool.save`."""
        self._value = value
        self._hit = True
        return self

    def lock(self) -> None:
        """Acquire the pool's lock for this key.

        If another caller populated the slot while this one was waiting, the
        item is refreshed and becomes a hit.
        """
        if self._locked:
            return
        self._pool.acquire(self.key)
        self._locked = True
        found, value = self._pool.peek(self.key)
        if found:
            self._value = value
            self._hit = True

    def release(self) -> None:
        """Release the key lock, if held. Safe to call more than once."""
        if self._locked:
            self._locked = False
            self._pool.release(self.key)

    @property
    def locked(self) -> bool:
        return self._locked


class CachePool(ABC):
    """Abstract base class for cache pool implementations."""

    @abstractmethod
    def get_item(self, key: str) -> CacheItem:
        """Fetch the cache slot for a key.

        Args:
            key: Cache key (e.g. ``languages/index/en,fr``).

        Returns:
            CacheItem, a hit when a value is stored under the key.
        """
        pass

    @abstractmethod
    def save(self, item: CacheItem) -> None:
        """Persist the item's value and release its lock.

        Args:
            item: CacheItem previously returned by :meth:`get_item`.
        """
        pass

    @abstractmethod
    def peek(self, key: str) -> "tuple[bool, Any]":
        """Return ``(found, value)`` without creating an item."""
        pass

    @abstractmethod
    def acquire(self, key: str) -> None:
        """Block until the lock for ``key`` is held."""
        pass

    @abstractmethod
    def release(self, key: str) -> None:
        """Release the lock for ``key``."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a stored value, if any."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear all cached entries."""
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with cache statistics (implementation-specific).
        """
        pass


def cached(pool: Optional[CachePool], key: str, compute) -> Any:
    """Return the value stored under ``key``, computing it on a miss.

    On a miss the slot is locked, ``compute()`` is called, and the result is
    stored before the lock is released. Without a pool, ``compute()`` runs
    directly.

    Args:
        pool: Cache pool, or None to bypass caching.
        key: Cache key.
        compute: Zero-argument callable producing the value.

    Returns:
        The cached or freshly computed value.
    """
    if pool is None:
        return compute()

    item = pool.get_item(key)
    if item.is_hit():
        return item.get()

    item.lock()
    try:
        if item.is_hit():
            return item.get()
        item.set(compute())
        pool.save(item)
        return item.get()
    finally:
        item.release()

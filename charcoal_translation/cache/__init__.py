"""Cache pool used in front of the language and resource repositories.

Usage:

    from charcoal_translation.cache import MemoryCachePool, cached

    pool = MemoryCachePool()
    index = cached(pool, "languages/index/all", compute_index)
"""

from charcoal_translation.cache.factory import create_cache_pool
from charcoal_translation.cache.keys import (
    ALL_IDENTS,
    LANGUAGES_INDEX,
    TRANSLATION_RESOURCES,
    CacheKeyBuilder,
    canonical_ident,
)
from charcoal_translation.cache.memory import MemoryCachePool
from charcoal_translation.cache.pool import CacheItem, CachePool, cached

__all__ = [
    "ALL_IDENTS",
    "LANGUAGES_INDEX",
    "TRANSLATION_RESOURCES",
    "CacheItem",
    "CacheKeyBuilder",
    "CachePool",
    "MemoryCachePool",
    "cached",
    "canonical_ident",
    "create_cache_pool",
]

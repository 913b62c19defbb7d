"""Cache pool factory."""

from typing import Optional

from charcoal_translation.cache.memory import MemoryCachePool
from charcoal_translation.cache.pool import CachePool
from charcoal_translation.core.config import CacheSettings
from charcoal_translation.core.errors import InvalidArgumentError
from charcoal_translation.core.logging import get_module_logger

logger = get_module_logger()

BACKENDS = {
    "memory": MemoryCachePool,
}


def create_cache_pool(settings: Optional[CacheSettings] = None) -> Optional[CachePool]:
    """Create the cache pool described by the settings.

    Args:
        settings: CacheSettings; defaults are loaded from the environment.

    Returns:
        A CachePool, or None when caching is disabled.

    Raises:
        InvalidArgumentError: If the configured backend is unknown.
    """
    settings = settings or CacheSettings()

    if not settings.ENABLED:
        logger.info("cache_pool_disabled")
        return None

    backend = BACKENDS.get(settings.BACKEND)
    if backend is None:
        raise InvalidArgumentError(
            f"Invalid cache backend: \"{settings.BACKEND}\". "
            f"Supported backends are: {', '.join(BACKENDS)}."
        )

    pool = backend()
    logger.info("initialized_cache_pool", backend=settings.BACKEND)
    return pool

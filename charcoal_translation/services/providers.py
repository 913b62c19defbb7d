"""
Factory functions for dependency injection.

Application-scoped providers are cached with ``lru_cache``; the language
manager and the objects hanging off it are built per request.
"""

from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends, Header

from charcoal_translation.cache.factory import create_cache_pool
from charcoal_translation.cache.pool import CachePool
from charcoal_translation.core.config import Settings
from charcoal_translation.core.logging import get_module_logger
from charcoal_translation.language.locale import LocaleApplier
from charcoal_translation.language.manager import LanguageManager
from charcoal_translation.language.repository import DEFAULT_INDEX_PATH, LanguageRepository
from charcoal_translation.translation.catalog import Catalog
from charcoal_translation.translation.translator import Translator

logger = get_module_logger()


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    Application code should use the DI type alias for testability:
        from charcoal_translation.services import SettingsDep

        @router.get("/languages")
        def list_languages(settings: SettingsDep):
            return settings.locales.LANGUAGES

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_cache_pool() -> Optional[CachePool]:
    """
    Get the application-scoped cache pool shared by the repositories.

    Returns:
        CachePool, or None when caching is disabled.
    """
    return create_cache_pool(get_settings().cache)


@lru_cache
def get_language_repository() -> LanguageRepository:
    """
    Get the application-scoped language index repository.

    Uses ``LOCALES_REPOSITORIES`` when set, else the bundled language index.
    """
    settings = get_settings()
    paths = settings.locales.REPOSITORIES or [DEFAULT_INDEX_PATH]
    return LanguageRepository(paths, base_path=settings.BASE_PATH, cache=get_cache_pool())


def get_language_manager(
    accept_language: Annotated[Optional[str], Header()] = None,
) -> LanguageManager:
    """
    Build a language manager for the current request.

    When ``LOCALES_AUTO_DETECT`` is on, the current language is taken from
    the ``Accept-Language`` header if it matches an available language.

    Usage:
        @router.get("/hello")
        def hello(manager: LanguageManagerDep):
            return {"message": manager.translate("greeting")}
    """
    settings = get_settings()
    manager = LanguageManager(
        repository=get_language_repository(),
        base_path=settings.BASE_PATH,
        cache=get_cache_pool(),
        locale_applier=LocaleApplier(),
    ).setup(settings.locales, settings.translations)

    if manager.auto_detect and accept_language:
        detected = manager.detect_language(accept_language)
        if detected:
            manager.set_current_language(detected)
            logger.debug("browser_language_detected", language=detected)

    return manager


def get_catalog(
    manager: Annotated[LanguageManager, Depends(get_language_manager)],
) -> Catalog:
    return manager.catalog()


def get_translator(
    manager: Annotated[LanguageManager, Depends(get_language_manager)],
) -> Translator:
    return manager.translator()

"""Dependency injection providers and FastAPI type aliases."""

from charcoal_translation.services.dependencies import (
    CachePoolDep,
    CatalogDep,
    LanguageManagerDep,
    LanguageRepositoryDep,
    SettingsDep,
    TranslatorDep,
)
from charcoal_translation.services.providers import (
    get_cache_pool,
    get_catalog,
    get_language_manager,
    get_language_repository,
    get_settings,
    get_translator,
)

__all__ = [
    "CachePoolDep",
    "CatalogDep",
    "LanguageManagerDep",
    "LanguageRepositoryDep",
    "SettingsDep",
    "TranslatorDep",
    "get_cache_pool",
    "get_catalog",
    "get_language_manager",
    "get_language_repository",
    "get_settings",
    "get_translator",
]

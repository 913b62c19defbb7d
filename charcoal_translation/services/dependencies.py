"""
Type aliases for FastAPI dependency injection.
"""

from typing import Annotated, Optional

from fastapi import Depends

from charcoal_translation.cache.pool import CachePool
from charcoal_translation.core.config import Settings
from charcoal_translation.language.manager import LanguageManager
from charcoal_translation.language.repository import LanguageRepository
from charcoal_translation.services.providers import (
    get_cache_pool,
    get_catalog,
    get_language_manager,
    get_language_repository,
    get_settings,
    get_translator,
)
from charcoal_translation.translation.catalog import Catalog
from charcoal_translation.translation.translator import Translator

SettingsDep = Annotated[Settings, Depends(get_settings)]

CachePoolDep = Annotated[Optional[CachePool], Depends(get_cache_pool)]

LanguageRepositoryDep = Annotated[LanguageRepository, Depends(get_language_repository)]

# Request scoped; honours Accept-Language when LOCALES_AUTO_DETECT is on
LanguageManagerDep = Annotated[LanguageManager, Depends(get_language_manager)]

CatalogDep = Annotated[Catalog, Depends(get_catalog)]

TranslatorDep = Annotated[Translator, Depends(get_translator)]

__all__ = [
    "SettingsDep",
    "CachePoolDep",
    "LanguageRepositoryDep",
    "LanguageManagerDep",
    "CatalogDep",
    "TranslatorDep",
]

"""Translation layer configuration settings - main aggregator.

Settings are loaded from the environment (and an optional ``.env`` file)
using Pydantic BaseSettings, organized by concern:

- **Locales**: available languages, default/current language, language index paths
- **Translations**: resource paths and inline messages
- **Cache**: cache pool backend used by the language and resource repositories
- **Extraction**: defaults for the catalog extraction script
"""

from typing import Any, Dict, List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LANGUAGES: Dict[str, Dict[str, Any]] = {
    "en": {"name": "English"},
    "fr": {"name": "Français"},
}


class TranslationSettingsBase(BaseSettings):
    """Base class for all translation layer settings sections.

    Ensures consistent configuration behavior (env file loading, case
    sensitivity, unknown keys ignored).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class LocalesSettings(TranslationSettingsBase):
    """Language configuration.

    Environment Variables:
        LOCALES_LANGUAGES: JSON object of ``ident => language data``
        LOCALES_DEFAULT_LANGUAGE: Default (fallback) language ident
        LOCALES_CURRENT_LANGUAGE: Current language ident
        LOCALES_FALLBACK_LANGUAGES: JSON list of fallback language idents
        LOCALES_REPOSITORIES: JSON list of language index files
        LOCALES_AUTO_DETECT: Detect the language from Accept-Language headers

    Example:
        ```python
        from charcoal_translation.services import get_settings

        settings = get_settings()

        default = settings.locales.DEFAULT_LANGUAGE
        ```
    """

    model_config = SettingsConfigDict(env_prefix="LOCALES_")

    LANGUAGES: Dict[str, Any] = Field(
        default_factory=lambda: {k: dict(v) for k, v in DEFAULT_LANGUAGES.items()},
        description="Available languages, keyed by language ident",
    )
    DEFAULT_LANGUAGE: str = Field(
        default="",
        description="Default language ident (first available language when empty)",
    )
    CURRENT_LANGUAGE: str = Field(
        default="",
        description="Current language ident (default language when empty)",
    )
    FALLBACK_LANGUAGES: List[str] = Field(
        default_factory=lambda: ["en"],
        description="Languages searched by the translator when a message is missing",
    )
    REPOSITORIES: List[str] = Field(
        default_factory=list,
        description="Language index JSON files (the bundled index when empty)",
    )
    AUTO_DETECT: bool = Field(
        default=False,
        description="Resolve the current language from the Accept-Language header",
    )


class TranslationsSettings(TranslationSettingsBase):
    """Translation resources configuration.

    Environment Variables:
        TRANSLATIONS_PATHS: JSON list of files or directories holding resources
        TRANSLATIONS_MESSAGES: JSON object of ``ident => {lang => text}``
    """

    model_config = SettingsConfigDict(env_prefix="TRANSLATIONS_")

    PATHS: List[str] = Field(
        default_factory=list,
        description="Resource files or directories, relative to BASE_PATH",
    )
    MESSAGES: Dict[str, Dict[str, str]] = Field(
        default_factory=dict,
        description="Inline catalog entries",
    )


class CacheSettings(TranslationSettingsBase):
    """Cache pool configuration.

    Environment Variables:
        CACHE_ENABLED: Put the repositories behind a cache pool (default: True)
        CACHE_BACKEND: Cache backend; only 'memory' is provided
    """

    model_config = SettingsConfigDict(env_prefix="CACHE_")

    ENABLED: bool = Field(default=True, description="Enable the cache pool")
    BACKEND: str = Field(default="memory", description="Cache pool backend")


class ExtractionSettings(TranslationSettingsBase):
    """Defaults for the catalog extraction script.

    Environment Variables:
        EXTRACTION_INCLUDED_PATHS: JSON list of glob patterns to scan
        EXTRACTION_EXCLUDED_PATHS: JSON list of glob patterns to skip
        EXTRACTION_OUTPUT_PATH: CSV catalog path, relative to BASE_PATH
        EXTRACTION_MAX_DEPTH: Directory depth limit (negative for no limit)
        EXTRACTION_MERGE_STRATEGY: pick, merge, ours or theirs
    """

    model_config = SettingsConfigDict(env_prefix="EXTRACTION_")

    INCLUDED_PATHS: List[str] = Field(
        default_factory=lambda: ["templates/*.mustache", "src/*.php"]
    )
    EXCLUDED_PATHS: List[str] = Field(default_factory=list)
    OUTPUT_PATH: str = Field(default="translations/messages.csv")
    MAX_DEPTH: int = Field(default=4)
    MERGE_STRATEGY: str = Field(default="merge")


class Settings(BaseSettings):
    """Translation layer configuration settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        BASE_PATH: Directory relative paths are resolved against

    Example:
        ```python
        from charcoal_translation.services import get_settings

        settings = get_settings()

        languages = settings.locales.LANGUAGES
        if settings.cache.ENABLED:
            # Configure cache pool...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    BASE_PATH: str = "."

    locales: LocalesSettings
    translations: TranslationsSettings
    cache: CacheSettings
    extraction: ExtractionSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "locales": LocalesSettings,
            "translations": TranslationsSettings,
            "cache": CacheSettings,
            "extraction": ExtractionSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

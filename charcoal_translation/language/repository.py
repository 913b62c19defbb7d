"""Language index repository.

Loads language metadata from JSON files on a search path. Files are merged in
registration order (later files extend and override earlier ones) and the
result is cached per requested subset of languages.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from charcoal_translation.cache.keys import (
    ALL_IDENTS,
    LANGUAGES_INDEX,
    CacheKeyBuilder,
    canonical_ident,
)
from charcoal_translation.cache.pool import CachePool, cached
from charcoal_translation.core.errors import InvalidArgumentError, ResourceParseError
from charcoal_translation.core.loader import PathLike, SearchPathLoader
from charcoal_translation.core.logging import get_module_logger
from charcoal_translation.language.models import LanguageRecord, resolve_language_ident

logger = get_module_logger()

DEFAULT_INDEX_PATH = Path(__file__).parent / "data" / "languages.json"


def merge_recursive(base: Dict[str, Any], data: Mapping[str, Any]) -> Dict[str, Any]:
    """Deep-merge ``data`` into a copy of ``base``.

    Nested mappings are merged key by key; any other value replaces the one
    in ``base``.

    Example:
        >>> merge_recursive({"fr": {"locale": "fr-FR"}}, {"fr": {"name": "Français"}})
        {'fr': {'locale': 'fr-FR', 'name': 'Français'}}
    """
    merged = dict(base)
    for key, value in data.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge_recursive(merged[key], value)
        elif isinstance(value, Mapping):
            merged[key] = merge_recursive({}, value)
        else:
            merged[key] = value
    return merged


class LanguageRepository(SearchPathLoader):
    """Load language metadata from JSON index files.

    Args:
        paths: JSON index files, loaded in order.
        base_path: Directory relative paths are resolved against.
        cache: Optional cache pool; without one every load reads the files.
        ident: Default subset of languages to load (``all`` when omitted).
    """

    def __init__(
        self,
        paths: Optional[Iterable[PathLike]] = None,
        base_path: PathLike = ".",
        cache: Optional[CachePool] = None,
        ident: Optional[Union[str, Iterable[str]]] = None,
    ):
        super().__init__(paths=paths, base_path=base_path, ident=ident)
        self.cache = cache
        self._keys = CacheKeyBuilder(namespace=LANGUAGES_INDEX)

    def load(
        self, ident: Optional[Union[str, Iterable[str]]] = None
    ) -> Optional[Dict[str, Dict[str, Any]]]:
        """Load the language index, limited to a subset of languages.

        Args:
            ident: Language idents, a canonical ident string, or None to use
                the repository's ident. The repository's own ident is left
                unchanged.

        Returns:
            Mapping of ``ident => language data``, or None when no paths are
            configured.

        Raises:
            ResourceParseError: If an index file is not valid JSON.
        """
        ident = canonical_ident(ident) if ident is not None else self.ident()

        if not self._paths:
            logger.debug("language_index_no_paths", ident=ident)
            return None

        key = self._keys.build(ident)
        return cached(self.cache, key, lambda: self._filter(self.load_index(), ident))

    def load_index(self) -> Dict[str, Dict[str, Any]]:
        """Merge every index file on the search path."""
        languages: Dict[str, Any] = {}
        for path in self._paths:
            data = self.load_file(path)
            if isinstance(data, Mapping):
                if "languages" in data:
                    data = data["languages"]
                elif "data" in data:
                    data = data["data"]
                languages = merge_recursive(languages, data)

        logger.debug(
            "language_index_loaded",
            path_count=len(self._paths),
            language_count=len(languages),
        )
        return languages

    def load_file(self, path: Path) -> Any:
        """Parse one JSON index file; missing files yield None.

        Raises:
            ResourceParseError: If the file cannot be decoded.
        """
        if not path.is_file():
            logger.debug("language_index_file_missing", path=str(path))
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            logger.error("language_index_parse_failed", path=str(path), error=e.msg)
            raise ResourceParseError(
                path, f"{e.msg} (line {e.lineno}, column {e.colno})"
            ) from e
        except UnicodeDecodeError as e:
            logger.error("language_index_parse_failed", path=str(path), error=str(e))
            raise ResourceParseError(path, f"Malformed UTF-8 characters: {e.reason}") from e

    def make(self, langs: Iterable[Any]) -> List[LanguageRecord]:
        """Build language records for the given languages.

        Languages missing from the index are built from their ident alone.

        Args:
            langs: Language idents (or references).

        Returns:
            List of LanguageRecord in the requested order.

        Raises:
            InvalidArgumentError: If ``langs`` is empty.
        """
        idents = [resolve_language_ident(lang) for lang in langs]
        if not idents:
            raise InvalidArgumentError("Must define at least one language")

        index = self.load(idents) or {}
        return [LanguageRecord.from_dict(index.get(ident), ident=ident) for ident in idents]

    @staticmethod
    def _filter(index: Dict[str, Any], ident: str) -> Dict[str, Any]:
        if ident == ALL_IDENTS:
            return index
        subset = ident.split(",")
        return {lang: index[lang] for lang in subset if lang in index}

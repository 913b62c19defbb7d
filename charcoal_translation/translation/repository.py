"""Translation resource repository.

Discovers resource files on a search path, tags monolingual files with the
language encoded in their path (``fr/messages.json`` or ``messages.fr.json``)
and parses them into Resources. Loads are cached per requested subset of
languages.
"""

import os
import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

from charcoal_translation.cache.keys import (
    ALL_IDENTS,
    TRANSLATION_RESOURCES,
    CacheKeyBuilder,
    canonical_ident,
)
from charcoal_translation.cache.pool import CachePool, cached
from charcoal_translation.core.loader import PathLike, SearchPathLoader
from charcoal_translation.core.logging import get_module_logger
from charcoal_translation.language.resolver import LanguageResolver
from charcoal_translation.translation.catalog import Catalog
from charcoal_translation.translation.resource import Resource, load_resource

logger = get_module_logger()

SUPPORTED_FORMATS = ("ini", "csv", "json", "php", "yaml", "yml")

# RFC 5646 subset: ISO 639 language, optional ISO 3166-1 country or UN M.49 region.
RFC5646 = r"(?P<language>[a-z]{2,3})(?:[-_](?P<country>[A-Z]{2}|[0-9]{3}))?"

SEGMENT_TAG = re.compile(r"(?:^|/)(?P<tag>" + RFC5646 + r")/")
DOTTED_TAG = re.compile(r"\.(?P<tag>" + RFC5646 + r")\.")


def is_supported(path: Path) -> bool:
    return path.suffix.lstrip(".").lower() in SUPPORTED_FORMATS


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def language_tag(relative_path: str) -> Optional[re.Match]:
    """Find the language tag encoded in a resource path.

    Example:
        >>> language_tag("messages.fr_CA.json").group("tag")
        'fr_CA'
        >>> language_tag("fr/messages.json").group("language")
        'fr'
    """
    relative_path = relative_path.replace(os.sep, "/")
    return SEGMENT_TAG.search(relative_path) or DOTTED_TAG.search(relative_path)


class ResourceRepository(SearchPathLoader):
    """Load translation resources from files and directories.

    Files are kept when their extension is supported and they exist.
    Directories are expanded recursively, skipping dot files and dot
    directories.

    Args:
        paths: Files or directories to load resources from.
        base_path: Directory relative paths are resolved against.
        cache: Optional cache pool.
        ident: Languages to load (``all`` when omitted).
    """

    def __init__(
        self,
        paths: Optional[Iterable[PathLike]] = None,
        base_path: PathLike = ".",
        cache: Optional[CachePool] = None,
        ident: Optional[Union[str, Iterable[str]]] = None,
    ):
        self.cache = cache
        self._keys = CacheKeyBuilder(namespace=TRANSLATION_RESOURCES)
        super().__init__(paths=paths, base_path=base_path, ident=ident)

    def add_path(self, path: PathLike) -> "ResourceRepository":
        self._paths.extend(self.expand_path(self.resolve_path(path)))
        return self

    def prepend_path(self, path: PathLike) -> "ResourceRepository":
        self._paths[:0] = self.expand_path(self.resolve_path(path))
        return self

    def expand_path(self, path: Path) -> List[Path]:
        """Return the resource files a path stands for.

        A supported, existing file is returned as is. A directory yields its
        supported files, recursively and in sorted order.
        """
        if path.is_file():
            return [path] if is_supported(path) else []

        if not path.is_dir():
            logger.debug("resource_path_missing", path=str(path))
            return []

        files = []
        for root, dirs, filenames in os.walk(path):
            dirs[:] = sorted(d for d in dirs if not is_hidden(d))
            for filename in sorted(filenames):
                file = Path(root) / filename
                if not is_hidden(filename) and is_supported(file):
                    files.append(file)
        return files

    def languages(self, ident: Optional[str] = None) -> Optional[List[str]]:
        """Target languages, or None to accept every language."""
        ident = ident or self.ident()
        return None if ident == ALL_IDENTS else ident.split(",")

    def load(
        self, ident: Optional[Union[str, Iterable[str]]] = None
    ) -> Optional[List[Resource]]:
        """Load the resources for a subset of languages.

        Args:
            ident: Language idents, a canonical ident string, or None to use
                the repository's ident. The repository's own ident is left
                unchanged.

        Returns:
            List of non-empty Resources, or None when no paths are configured.

        Raises:
            ResourceParseError: If a resource file is malformed.
        """
        ident = canonical_ident(ident) if ident is not None else self.ident()

        if not self._paths:
            logger.debug("resource_repository_no_paths", ident=ident)
            return None

        key = self._keys.build(ident)
        return cached(self.cache, key, lambda: self.load_from_paths(ident))

    def load_from_paths(self, ident: Optional[str] = None) -> List[Resource]:
        languages = self.languages(ident)
        resources = []
        for file in self._paths:
            if not file.is_file():
                logger.debug("resource_file_missing", path=str(file))
                continue

            try:
                relative = str(file.resolve().relative_to(self.base_path.resolve()))
            except ValueError:
                relative = f"{file.parent.name}/{file.name}"

            source_language = None
            match = language_tag(relative)
            if match:
                source_language = match.group("tag")
                if languages is not None and match.group("language") not in languages:
                    logger.debug(
                        "resource_skipped_language",
                        path=str(file),
                        language=match.group("language"),
                    )
                    continue

            resource = load_resource(file, source_language)
            if resource is not None and len(resource):
                resources.append(resource)

        logger.info(
            "translation_resources_loaded",
            ident=ident or self.ident(),
            file_count=len(self._paths),
            resource_count=len(resources),
        )
        return resources

    def load_catalog(self, resolver: Optional[LanguageResolver] = None) -> Catalog:
        """Build a Catalog from the loaded resources."""
        catalog = Catalog(resolver=resolver)
        catalog.add_resources(self.load() or [])
        return catalog

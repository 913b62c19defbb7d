"""Search-path handling shared by the language and resource repositories."""

import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

from charcoal_translation.cache.keys import canonical_ident
from charcoal_translation.core.errors import InvalidArgumentError, describe_type

PathLike = Union[str, os.PathLike]


class SearchPathLoader:
    """Ordered list of search paths plus the ident used for cache keys.

    Relative paths are resolved against ``base_path``. Paths are kept in
    registration order; whether a path exists is only checked when loading.

    Attributes:
        base_path: Directory relative paths are resolved against.
    """

    def __init__(
        self,
        paths: Optional[Iterable[PathLike]] = None,
        base_path: PathLike = ".",
        ident: Optional[Union[str, Iterable[str]]] = None,
    ):
        self.base_path = Path(base_path)
        self._paths: List[Path] = []
        self._ident = canonical_ident(ident)
        if paths:
            self.add_paths(paths)

    def ident(self) -> str:
        """Return the canonical ident (sorted idents joined by commas, or ``all``)."""
        return self._ident

    def set_ident(self, ident: Optional[Union[str, Iterable[str]]]) -> "SearchPathLoader":
        self._ident = canonical_ident(ident)
        return self

    def paths(self) -> List[Path]:
        return list(self._paths)

    def add_path(self, path: PathLike) -> "SearchPathLoader":
        self._paths.append(self.resolve_path(path))
        return self

    def prepend_path(self, path: PathLike) -> "SearchPathLoader":
        self._paths.insert(0, self.resolve_path(path))
        return self

    def add_paths(self, paths: Iterable[PathLike]) -> "SearchPathLoader":
        if isinstance(paths, (str, os.PathLike)):
            paths = [paths]
        for path in paths:
            self.add_path(path)
        return self

    def set_paths(self, paths: Iterable[PathLike]) -> "SearchPathLoader":
        self._paths = []
        return self.add_paths(paths)

    def resolve_path(self, path: PathLike) -> Path:
        """Resolve a search path against the base path.

        Raises:
            InvalidArgumentError: If ``path`` is not a string or path object.
        """
        if not isinstance(path, (str, os.PathLike)):
            raise InvalidArgumentError(
                f"Path must be a string or path object, received {describe_type(path)}"
            )
        resolved = Path(path).expanduser()
        if not resolved.is_absolute():
            resolved = self.base_path / resolved
        return resolved

"""Cache key builder for repository loads."""

from typing import Iterable, Optional, Union

from charcoal_translation.core.errors import InvalidArgumentError, describe_type

ALL_IDENTS = "all"

LANGUAGES_INDEX = "languages/index"
TRANSLATION_RESOURCES = "translations/resources"


def canonical_ident(idents: Optional[Union[str, Iterable[str]]]) -> str:
    """Canonicalize a set of language idents into a cache identifier.

    Args:
        idents: A string (used as is), an iterable of idents, or None.

    Returns:
        Sorted, comma-joined idents, or ``"all"`` when none are given.

    Raises:
        InvalidArgumentError: If ``idents`` is neither a string nor iterable.

    Example:
        >>> canonical_ident(["fr", "en"])
        'en,fr'
        >>> canonical_ident([])
        'all'
    """
    if idents is None:
        return ALL_IDENTS
    if isinstance(idents, str):
        return idents or ALL_IDENTS
    try:
        values = sorted(str(ident) for ident in idents)
    except TypeError as e:
        raise InvalidArgumentError(
            f"Identifier must be a string or a list of strings, received {describe_type(idents)}"
        ) from e
    return ",".join(values) if values else ALL_IDENTS


class CacheKeyBuilder:
    """Build namespaced cache keys.

    Example:
        >>> builder = CacheKeyBuilder(namespace=LANGUAGES_INDEX)
        >>> builder.build(["fr", "en"])
        'languages/index/en,fr'
    """

    def __init__(self, namespace: str):
        self.namespace = namespace

    def build(self, idents: Optional[Union[str, Iterable[str]]] = None) -> str:
        return f"{self.namespace}/{canonical_ident(idents)}"

"""Language metadata models.

Defines the language record built from the language index and the single
normalizer used wherever a language parameter is accepted.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from charcoal_translation.core.errors import InvalidArgumentError, describe_type

# Special subtags from IANA / W3C.
NOT_CODED = "mis"
UNDETERMINED = "und"
NOT_APPLICABLE = "zxx"

SPECIAL_IDENTS = (NOT_CODED, UNDETERMINED, NOT_APPLICABLE)


class Direction(str, Enum):
    """Text direction of a language."""

    LTR = "ltr"
    RTL = "rtl"

    @classmethod
    def from_value(cls, value: Any) -> "Direction":
        """Convert a string (case-insensitive) to a Direction.

        Raises:
            InvalidArgumentError: If the value is not ``ltr`` or ``rtl``.
        """
        if isinstance(value, Direction):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as e:
            raise InvalidArgumentError(
                f'Direction must be "ltr" or "rtl", received "{value}"'
            ) from e


@dataclass
class LanguageRecord:
    """A language available to the translation layer.

    Attributes:
        ident: Language ident (ISO 639 code or a special subtag).
        name: Display name, a plain string or a ``{lang: name}`` mapping.
        direction: Text direction.
        locale: OS locale tag; defaults to ``ident``.
        active: Inactive languages are not registered by the manager.
        extra: Any other keys found in the index data.
    """

    ident: str
    name: Any = None
    direction: Direction = Direction.LTR
    locale: Optional[str] = None
    active: bool = True
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.ident, str) or not self.ident:
            raise InvalidArgumentError("Language ident must be a non-empty string")
        self.direction = Direction.from_value(self.direction)
        if not self.locale:
            self.locale = self.ident

    @classmethod
    def from_dict(
        cls, data: Optional[Mapping[str, Any]], ident: Optional[str] = None
    ) -> "LanguageRecord":
        """Build a record from index data.

        Args:
            data: Language data (``name``, ``locale``, ``direction``, ...).
            ident: Ident to use when ``data`` has no ``ident`` key.

        Returns:
            LanguageRecord
        """
        data = dict(data or {})
        ident = data.pop("ident", None) or ident
        known = {}
        for key in ("name", "direction", "locale", "active"):
            if key in data:
                known[key] = data.pop(key)
        if known.get("direction") is None:
            known.pop("direction", None)
        return cls(ident=ident, extra=data, **known)

    @property
    def code(self) -> str:
        """Language part of the locale (e.g. "fr" from "fr-CA")."""
        return self.locale.replace("_", "-").split("-")[0]

    @property
    def is_special(self) -> bool:
        return self.ident in SPECIAL_IDENTS

    def display_name(self, lang: Optional[str] = None) -> str:
        if isinstance(self.name, Mapping):
            if lang and self.name.get(lang):
                return str(self.name[lang])
            for value in self.name.values():
                if value:
                    return str(value)
            return self.ident
        return str(self.name) if self.name else self.ident

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.extra)
        data.update(
            {
                "ident": self.ident,
                "name": self.name,
                "direction": self.direction.value,
                "locale": self.locale,
                "active": self.active,
            }
        )
        return data

    def __str__(self) -> str:
        return self.ident


LanguageRef = Union[str, LanguageRecord, Mapping[str, Any]]


def resolve_language_ident(lang: LanguageRef) -> str:
    """Normalize a language reference to its ident.

    Args:
        lang: An ident, a LanguageRecord or a mapping with an ``ident`` key.

    Returns:
        The language ident.

    Raises:
        InvalidArgumentError: If the reference cannot be resolved.
    """
    if isinstance(lang, str):
        return lang
    if isinstance(lang, LanguageRecord):
        return lang.ident
    if isinstance(lang, Mapping) and isinstance(lang.get("ident"), str):
        return lang["ident"]
    raise InvalidArgumentError(
        f"Language must be a string, a language record or a mapping with an ident, "
        f"received {describe_type(lang)}"
    )

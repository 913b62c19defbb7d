"""Translation resources and the file parsers that produce them.

A Resource is one file's worth of messages. A monolingual resource (tagged
with a ``source_language``) maps ``ident => text``; a multilingual resource
maps ``ident => {lang: text}``.
"""

import configparser
import csv
import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Optional

import yaml

from charcoal_translation.core.errors import InvalidArgumentError, ResourceParseError
from charcoal_translation.core.logging import get_module_logger

logger = get_module_logger()

INI_ROOT_SECTION = "__root__"


class Resource(Mapping):
    """Read-only mapping of messages loaded from one file.

    Attributes:
        source_language: Language of every message, or None when each message
            is a ``{lang: text}`` mapping.
        path: File the messages were loaded from, if any.
    """

    def __init__(
        self,
        messages: Optional[Dict[str, Any]] = None,
        source_language: Optional[str] = None,
        path: Optional[Path] = None,
    ):
        self._messages = dict(messages or {})
        self.source_language = source_language or None
        self.path = path

    def __getitem__(self, ident: str) -> Any:
        return self._messages[ident]

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return (
            f"Resource({len(self)} messages, source_language={self.source_language!r}, "
            f"path={str(self.path) if self.path else None!r})"
        )


def flatten(data: Mapping, prefix: str = "") -> Dict[str, str]:
    """Flatten nested mappings into dotted keys.

    Example:
        >>> flatten({"menu": {"home": "Home"}})
        {'menu.home': 'Home'}
    """
    flat: Dict[str, str] = {}
    for key, value in data.items():
        name = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten(value, name))
        elif value is not None:
            flat[name] = str(value)
    return flat


def parse_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ResourceParseError(path, f"{e.msg} (line {e.lineno}, column {e.colno})") from e
    except UnicodeDecodeError as e:
        raise ResourceParseError(path, f"Malformed UTF-8 characters: {e.reason}") from e


def parse_yaml(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ResourceParseError(path, str(e)) from e


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) > 1 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def parse_ini(path: Path) -> Dict[str, Any]:
    """Parse an INI file; keys outside any section stay at the top level."""
    parser = configparser.ConfigParser(
        interpolation=None, default_section="__defaults__", strict=False
    )
    parser.optionxform = str
    try:
        with open(path, "r", encoding="utf-8") as f:
            parser.read_string(f"[{INI_ROOT_SECTION}]\n" + f.read(), source=str(path))
    except configparser.Error as e:
        raise ResourceParseError(path, str(e).splitlines()[0]) from e

    data: Dict[str, Any] = {}
    for section in parser.sections():
        values = {key: _unquote(value) for key, value in parser.items(section)}
        if section == INI_ROOT_SECTION:
            data.update(values)
        elif values:
            data[section] = values
    return data


def parse_csv(path: Path) -> Dict[str, Dict[str, str]]:
    """Parse a CSV catalog.

    The header is ``source, <lang...>, context``. Each row yields
    ``{source: {lang: text}}``; empty cells fall back to the source text and
    rows with fewer than ``2 + len(languages)`` columns are discarded.
    """
    messages: Dict[str, Dict[str, str]] = {}
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            reader = csv.reader(f)
            header = next(reader, None)
            if not header or len(header) < 2:
                return messages

            languages = header[1:-1]
            width = len(languages) + 2

            for row in reader:
                if len(row) < width or not row[0]:
                    continue
                source = row[0]
                messages[source] = {
                    lang: row[i + 1] or source for i, lang in enumerate(languages)
                }
    except csv.Error as e:
        raise ResourceParseError(path, str(e)) from e
    except UnicodeDecodeError as e:
        raise ResourceParseError(path, f"Malformed UTF-8 characters: {e.reason}") from e
    return messages


PARSERS: Dict[str, Callable[[Path], Any]] = {
    "json": parse_json,
    "csv": parse_csv,
    "ini": parse_ini,
    "yaml": parse_yaml,
    "yml": parse_yaml,
}


def _monolingual(data: Mapping, source_language: str) -> Dict[str, str]:
    # Multilingual rows (CSV) keep only the tagged language.
    flat: Dict[str, str] = {}
    for ident, value in data.items():
        if isinstance(value, Mapping) and source_language in value:
            if value[source_language] is not None:
                flat[str(ident)] = str(value[source_language])
        elif isinstance(value, Mapping):
            flat.update(flatten(value, str(ident)))
        elif value is not None:
            flat[str(ident)] = str(value)
    return flat


def load_resource(path: Path, source_language: Optional[str] = None) -> Optional[Resource]:
    """Parse a resource file.

    Args:
        path: File to parse; the parser is picked from the extension.
        source_language: Language tag of a monolingual file.

    Returns:
        Resource, or None when the format cannot be loaded (``php``).

    Raises:
        InvalidArgumentError: If the file does not exist or its extension is
            not supported.
        ResourceParseError: If the file is malformed.
    """
    path = Path(path)
    if not path.is_file():
        raise InvalidArgumentError(f'Translation file "{path}" does not exist')

    ext = path.suffix.lstrip(".").lower()
    if ext == "php":
        logger.warning("resource_format_unsupported", path=str(path), format=ext)
        return None

    parser = PARSERS.get(ext)
    if parser is None:
        raise InvalidArgumentError(f'Unsupported translation file format "{ext}"')

    data = parser(path)
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ResourceParseError(path, "Expected a mapping of messages")

    if source_language:
        messages: Dict[str, Any] = _monolingual(data, source_language)
    else:
        messages = {str(k): v for k, v in data.items() if v is not None}

    return Resource(messages, source_language=source_language, path=path)


def supported_formats() -> List[str]:
    return sorted(list(PARSERS) + ["php"])

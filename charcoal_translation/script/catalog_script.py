"""Translation catalog extraction.

Scans source files for translatable strings, merges them with an existing CSV
catalog and writes the catalog back:

- mustache templates: ``{{#_t}}Message{{/_t}}``
- php and python sources: ``_t("Message")``, ``trans('Message')``,
  ``translate("Message")``

Entries are marked ``new`` (found only in the sources), ``obsolete`` (found
only in the CSV) or ``updated`` (found in both).
"""

import csv
import re
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from charcoal_translation.core.config import ExtractionSettings
from charcoal_translation.core.errors import InvalidArgumentError, describe_type
from charcoal_translation.core.loader import PathLike
from charcoal_translation.core.logging import get_module_logger
from charcoal_translation.core.operations import OperationResult, OperationStatus

logger = get_module_logger()

MERGE_STRATEGY_PICK = "pick"
MERGE_STRATEGY_MERGE = "merge"
MERGE_STRATEGY_OURS = "ours"
MERGE_STRATEGY_THEIRS = "theirs"

MERGE_STRATEGIES = (
    MERGE_STRATEGY_PICK,
    MERGE_STRATEGY_MERGE,
    MERGE_STRATEGY_OURS,
    MERGE_STRATEGY_THEIRS,
)

STATUS_NEW = "new"
STATUS_OBSOLETE = "obsolete"
STATUS_UPDATED = "updated"

OUTPUT_FORMATS = ("csv",)

DEFAULT_INCLUDED_PATHS = ("templates/*.mustache", "src/*.php")

MUSTACHE_PATTERN = re.compile(r"\{\{#\s*_t\s*\}\}(?P<entry>.+?)\{\{/\s*_t\s*\}\}", re.S)
FUNCTION_PATTERN = re.compile(
    r"\b(?P<function>_t|trans|translate)\(\s*([\"'])(?P<entry>.+?)\2\s*\)", re.S
)

SOURCE_PARSERS = {
    "mustache": MUSTACHE_PATTERN,
    "php": FUNCTION_PATTERN,
    "py": FUNCTION_PATTERN,
}

Confirm = Callable[[str], bool]


@dataclass
class ExtractedMessage:
    """A catalog row.

    Attributes:
        translations: ``{lang: text}``
        context: Files the message was found in (relative to the base path).
        status: new, obsolete or updated.
    """

    translations: Dict[str, str] = field(default_factory=dict)
    context: List[str] = field(default_factory=list)
    status: str = STATUS_NEW


Messages = Dict[str, ExtractedMessage]


def _decline(message: str) -> bool:
    return False


class CatalogScript:
    """Extract translatable strings into a CSV catalog.

    Args:
        base_path: Directory patterns and the output path are relative to.
        included_paths: Glob patterns of source files to scan.
        excluded_paths: Glob patterns of source files to skip.
        output_path: CSV catalog to read and write.
        source_language: Language of the strings in the sources; always the
            first catalog language.
        languages: Catalog languages.
        max_depth: Subdirectory levels searched below each pattern's
            directory; negative for no limit.
        merge_strategy: How languages found in the existing CSV are merged.
        dry_run: Do not write the catalog.
        interactive: Ask before extracting and before discarding languages.
        confirm: Callback asking the user a yes/no question.
    """

    def __init__(
        self,
        base_path: PathLike = ".",
        included_paths: Optional[Iterable[str]] = None,
        excluded_paths: Optional[Iterable[str]] = None,
        output_path: str = "translations/messages.csv",
        source_language: Optional[str] = None,
        languages: Optional[Iterable[str]] = None,
        max_depth: Optional[int] = 4,
        merge_strategy: str = MERGE_STRATEGY_MERGE,
        dry_run: bool = False,
        interactive: bool = False,
        confirm: Optional[Confirm] = None,
    ):
        self.base_path = Path(base_path)
        self.included_paths = list(
            included_paths if included_paths is not None else DEFAULT_INCLUDED_PATHS
        )
        self.excluded_paths = list(excluded_paths or [])
        self.dry_run = dry_run
        self.interactive = interactive
        self.confirm = confirm or _decline
        self.source_language = source_language or None
        self._languages: List[str] = []
        self.set_output_path(output_path)
        self.set_max_depth(max_depth)
        self.set_merge_strategy(merge_strategy)
        self.set_languages(languages or [])

    @classmethod
    def from_settings(
        cls, settings: ExtractionSettings, base_path: PathLike = ".", **overrides
    ) -> "CatalogScript":
        options = {
            "base_path": base_path,
            "included_paths": settings.INCLUDED_PATHS,
            "excluded_paths": settings.EXCLUDED_PATHS,
            "output_path": settings.OUTPUT_PATH,
            "max_depth": settings.MAX_DEPTH,
            "merge_strategy": settings.MERGE_STRATEGY,
        }
        options.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**options)

    # Options

    def set_max_depth(self, depth: Optional[int]) -> "CatalogScript":
        """Set the depth limit; None or a negative value means no limit.

        Raises:
            InvalidArgumentError: If ``depth`` is not an integer.
        """
        if depth is None:
            self.max_depth = -1
            return self
        if not isinstance(depth, int) or isinstance(depth, bool):
            raise InvalidArgumentError("The depth must be an integer")
        self.max_depth = -1 if depth < 0 else depth
        return self

    def set_output_path(self, path: str) -> "CatalogScript":
        ext = Path(path).suffix.lstrip(".").lower()
        if ext not in OUTPUT_FORMATS:
            raise InvalidArgumentError(
                f'Unsupported output format "{ext}". Must be one of: {", ".join(OUTPUT_FORMATS)}'
            )
        self.output_path = path
        return self

    def output_file(self) -> Path:
        return self.base_path / self.output_path

    def set_merge_strategy(self, strategy: str) -> "CatalogScript":
        if strategy not in MERGE_STRATEGIES:
            raise InvalidArgumentError(
                f'Invalid merge strategy "{strategy}". Must be one of: {", ".join(MERGE_STRATEGIES)}'
            )
        self.merge_strategy = strategy
        return self

    def languages(self) -> List[str]:
        return list(self._languages)

    def set_languages(self, languages: Iterable[str]) -> "CatalogScript":
        """Replace the catalog languages; the source language comes first."""
        if isinstance(languages, str):
            languages = [lang.strip() for lang in languages.split(",") if lang.strip()]
        self.clear_languages()
        if self.source_language:
            self.add_language(self.source_language)
        for lang in languages:
            self.add_language(lang)
        return self

    def add_language(self, lang: str) -> "CatalogScript":
        if not isinstance(lang, str) or not lang:
            raise InvalidArgumentError(
                f"Language must be a non-empty string, received {describe_type(lang)}"
            )
        if lang not in self._languages:
            self._languages.append(lang)
        return self

    def has_language(self, lang: str) -> bool:
        return lang in self._languages

    def clear_languages(self) -> "CatalogScript":
        self._languages = []
        return self

    # Sources

    def source_files(self) -> List[Path]:
        """Files matched by the included patterns and not by the excluded ones."""
        included: List[Path] = []
        for pattern in self.included_paths:
            for file in self.glob_recursive(pattern):
                if file not in included:
                    included.append(file)

        excluded = set()
        for pattern in self.excluded_paths:
            excluded.update(self.glob_recursive(pattern))

        return [file for file in included if file not in excluded]

    def glob_recursive(self, pattern: str) -> List[Path]:
        """Match ``pattern`` in its directory and up to ``max_depth`` levels below."""
        directory, _, name = pattern.replace("\\", "/").rpartition("/")
        roots = sorted(self.base_path.glob(directory)) if directory else [self.base_path]

        files: List[Path] = []
        for root in roots:
            if root.is_dir():
                files.extend(self._walk(root, name, 0))
        return files

    def _walk(self, directory: Path, name: str, depth: int) -> List[Path]:
        files = sorted(p for p in directory.glob(name) if p.is_file())
        if self.max_depth < 0 or depth < self.max_depth:
            for sub in sorted(p for p in directory.iterdir() if p.is_dir()):
                files.extend(self._walk(sub, name, depth + 1))
        return files

    def context_for(self, file: Path) -> str:
        try:
            return file.relative_to(self.base_path).as_posix()
        except ValueError:
            return file.as_posix()

    @staticmethod
    def source_parser(file: Path) -> re.Pattern:
        """Return the pattern used to find messages in a source file.

        Raises:
            InvalidArgumentError: If the file type is not supported.
        """
        ext = file.suffix.lstrip(".").lower()
        pattern = SOURCE_PARSERS.get(ext)
        if pattern is None:
            raise InvalidArgumentError(
                f'Unsupported source type "{ext}". Must be one of: {", ".join(SOURCE_PARSERS)}'
            )
        return pattern

    def extract_entries(self, file: Path, messages: Messages) -> bool:
        """Add the messages found in ``file`` to ``messages``.

        Returns:
            True if at least one message was found.

        Raises:
            InvalidArgumentError: If ``file`` is not valid UTF-8.
        """
        pattern = self.source_parser(file)
        try:
            content = Path(file).read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.error("catalog_source_unreadable", path=str(file), error=e.reason)
            raise InvalidArgumentError(
                f'Source file "{file}" is not valid UTF-8: {e.reason}'
            ) from e
        context = self.context_for(Path(file))

        found = False
        for match in pattern.finditer(content):
            found = True
            ident = match.group("entry")
            message = messages.get(ident)
            if message is None:
                messages[ident] = ExtractedMessage(context=[context], status=STATUS_NEW)
                continue
            message.context.append(context)
            if message.status == STATUS_OBSOLETE:
                message.status = STATUS_UPDATED
        return found

    # CSV

    def csv_header_row(self) -> List[str]:
        return ["source", *self._languages, "context"]

    def parse_csv_row(
        self, row: List[str], languages: Optional[List[str]] = None
    ) -> Optional[Tuple[str, ExtractedMessage]]:
        """Parse a catalog row into ``(ident, message)``.

        Rows narrower than ``2 + len(languages)`` columns yield None. Parsed
        messages are ``obsolete`` until found again in the sources.
        """
        if languages is None:
            languages = self._languages

        if len(row) < len(languages) + 2:
            return None

        translations = {lang: row[i + 1] for i, lang in enumerate(languages)}
        context = [item for item in row[-1].split(",") if item]
        return row[0], ExtractedMessage(translations, context, STATUS_OBSOLETE)

    def from_csv(self, messages: Optional[Messages] = None) -> Messages:
        """Read the existing catalog, merging its languages per strategy."""
        messages = {} if messages is None else messages
        output_file = self.output_file()
        if not output_file.is_file():
            return messages

        with open(output_file, "r", encoding="utf-8", newline="") as f:
            reader = csv.reader(f)
            header = next(reader, None)
            if not header:
                return messages

            languages = header[1:-1]
            for lang in languages:
                if self.merge_strategy == MERGE_STRATEGY_PICK:
                    if not self.has_language(lang) and self.confirm(
                        f'Include this language "{lang}"?'
                    ):
                        self.add_language(lang)
                elif self.merge_strategy in (MERGE_STRATEGY_MERGE, MERGE_STRATEGY_THEIRS):
                    self.add_language(lang)

            for row in reader:
                entry = self.parse_csv_row(row, languages)
                if entry is not None:
                    messages[entry[0]] = entry[1]

        return messages

    def to_csv(self, messages: Messages) -> Path:
        """Write the catalog; the context column is deduplicated."""
        output_file = self.output_file()
        output_file.parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(self.csv_header_row())
            for ident, message in messages.items():
                row = [ident]
                row.extend(message.translations.get(lang, "") for lang in self._languages)
                row.append(",".join(dict.fromkeys(message.context)))
                writer.writerow(row)

        logger.info("catalog_written", path=str(output_file), message_count=len(messages))
        return output_file

    # Run

    def run(self) -> OperationResult:
        """Extract messages and update the catalog.

        Returns:
            OperationResult with ``files``, ``counts``, ``messages`` and
            ``output_path`` in ``data`` on success.
        """
        log = logger.bind(output_path=self.output_path, merge_strategy=self.merge_strategy)
        try:
            if self.merge_strategy == MERGE_STRATEGY_THEIRS:
                if self.interactive and self._languages:
                    if not self.confirm(
                        f"The selected merge strategy for languages [{self.merge_strategy}] "
                        f"ignores the current set: {', '.join(self._languages)}. Continue?"
                    ):
                        log.info("catalog_extraction_cancelled")
                        return OperationResult.cancelled("Canceled Extraction")
                self.clear_languages()

            files = self.source_files()
            if not files:
                log.warning("catalog_no_source_files", included_paths=self.included_paths)
                return OperationResult.error(
                    OperationStatus.NOT_FOUND, "No files found.", error_code="no_source_files"
                )

            if self.interactive and not self.confirm(
                f"Discovered {len(files)} source file(s). Extract translatable strings?"
            ):
                log.info("catalog_extraction_cancelled")
                return OperationResult.cancelled("Canceled Extraction")

            messages = self.from_csv()
            for file in files:
                self.extract_entries(file, messages)

            if not self.dry_run:
                self.to_csv(messages)
        except InvalidArgumentError as e:
            log.error("catalog_extraction_failed", error=str(e))
            return OperationResult.invalid_input(str(e), error_code="invalid_argument")
        except UnicodeDecodeError as e:
            log.error("catalog_extraction_failed", path=str(self.output_file()), error=e.reason)
            return OperationResult.invalid_input(
                f'Catalog "{self.output_file()}" is not valid UTF-8: {e.reason}',
                error_code="file_unreadable",
            )
        except OSError as e:
            log.error("catalog_extraction_failed", path=e.filename, error=e.strerror)
            return OperationResult.invalid_input(
                f'Cannot access "{e.filename}": {e.strerror}', error_code="file_unreadable"
            )

        counts = Counter(message.status for message in messages.values())
        total = len(messages)
        log.info(
            "catalog_extraction_completed",
            file_count=len(files),
            message_count=total,
            dry_run=self.dry_run,
        )
        if self.dry_run:
            summary = f"{total} message{'s were' if total != 1 else ' was'} successfully extracted"
        else:
            summary = "Translation file was successfully updated"

        return OperationResult.success(
            data={
                "files": files,
                "counts": dict(counts),
                "messages": messages,
                "output_path": str(self.output_file()),
                "languages": self.languages(),
            },
            message=summary,
        )

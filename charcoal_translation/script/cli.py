"""Command line entry point.

Examples:
  # Extract messages from the default paths into translations/messages.csv
  charcoal-translation extract --source-language en --languages fr,es

  # Preview without writing, keeping only our languages
  charcoal-translation extract --dry-run --merge-strategy ours
"""

import argparse
import sys
from typing import List, Optional

from charcoal_translation.core.config import Settings
from charcoal_translation.core.errors import InvalidArgumentError
from charcoal_translation.core.logging import get_module_logger
from charcoal_translation.core.operations import OperationStatus
from charcoal_translation.script.catalog_script import MERGE_STRATEGIES, CatalogScript

logger = get_module_logger()


def confirm(message: str) -> bool:
    """Ask a yes/no question on the terminal."""
    try:
        answer = input(f"{message} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="charcoal-translation",
        description="Manage translation catalogs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1] if __doc__ else None,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    p_extract = subparsers.add_parser(
        "extract", help="Extract translatable strings into a CSV catalog"
    )
    p_extract.add_argument("--base-path", default=None, help="Project root (default: BASE_PATH)")
    p_extract.add_argument(
        "--path", dest="included_paths", action="append", default=None,
        help="Glob pattern of source files to scan (repeatable)",
    )
    p_extract.add_argument(
        "--exclude", dest="excluded_paths", action="append", default=None,
        help="Glob pattern of source files to skip (repeatable)",
    )
    p_extract.add_argument("--output", dest="output_path", default=None, help="CSV catalog path")
    p_extract.add_argument("--source-language", default=None, help="Language of the source strings")
    p_extract.add_argument("--languages", default="", help="Comma-separated catalog languages")
    p_extract.add_argument("--max-depth", type=int, default=None, help="Directory depth (-1 for no limit)")
    p_extract.add_argument(
        "--merge-strategy", choices=MERGE_STRATEGIES, default=None,
        help="How languages found in the existing catalog are merged",
    )
    p_extract.add_argument("--dry-run", action="store_true", help="Do not write the catalog")
    p_extract.add_argument("-i", "--interactive", action="store_true", help="Ask before extracting")

    return parser


def cmd_extract(args: argparse.Namespace, settings: Settings) -> int:
    source_language = args.source_language or settings.locales.DEFAULT_LANGUAGE or None
    try:
        script = CatalogScript.from_settings(
            settings.extraction,
            base_path=args.base_path or settings.BASE_PATH,
            included_paths=args.included_paths,
            excluded_paths=args.excluded_paths,
            output_path=args.output_path,
            source_language=source_language,
            languages=args.languages,
            max_depth=args.max_depth,
            merge_strategy=args.merge_strategy,
            dry_run=args.dry_run,
            interactive=args.interactive,
            confirm=confirm,
        )
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    result = script.run()
    if result.status == OperationStatus.CANCELLED:
        print(result.message)
        return 0
    if not result.is_success:
        print(f"Error: {result.message}", file=sys.stderr)
        return 1

    if args.dry_run:
        for ident, message in result.data["messages"].items():
            print(f"[{message.status}] {ident}")
    print(f"{result.message}.")
    return 0


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "extract": cmd_extract,
    }

    handler = commands[args.command]
    logger.debug("cli_command_started", command=args.command)
    return handler(args, settings or Settings())


if __name__ == "__main__":
    sys.exit(main())

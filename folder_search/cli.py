# File: folder_search/cli.py

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from folder_search.core.config.settings import settings
from folder_search.core.log_setup import configure_logging
from folder_search.features.file_search.domain.errors import InvalidPatternError, RootNotFoundError
from folder_search.features.file_search.domain.models import SearchOptions
from folder_search.features.file_search.service.api import FileSearchService

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.
    """
    parser = argparse.ArgumentParser(
        description="List files under a directory filtered by name, depth and visibility."
    )
    parser.add_argument("root", help="Directory to search.")
    parser.add_argument(
        "-p",
        "--pattern",
        dest="pattern",
        default=settings.DEFAULT_PATTERN,
        help="Glob ('*' and '?') or, with --regex, a regular expression.",
    )
    parser.add_argument(
        "-r",
        "--regex",
        dest="use_regex",
        action="store_true",
        default=settings.DEFAULT_USE_REGEX,
        help="Treat the pattern as a regular expression (substring search).",
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        dest="max_depth",
        type=int,
        default=settings.DEFAULT_MAX_DEPTH,
        help="-1 for unlimited, 0 for the root only, n for n levels below the root.",
    )
    parser.add_argument(
        "--case-sensitive",
        dest="ignore_case",
        action="store_false",
        default=settings.DEFAULT_IGNORE_CASE,
        help="Match the pattern case-sensitively.",
    )
    parser.add_argument(
        "--include-hidden",
        dest="include_hidden",
        action="store_true",
        default=settings.DEFAULT_INCLUDE_HIDDEN,
        help="Include hidden files and descend into hidden directories.",
    )
    parser.add_argument(
        "--details",
        dest="details",
        action="store_true",
        help="Print size and modification time next to each path.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        dest="verbose",
        action="store_true",
        help="Verbose logging.",
    )
    return parser.parse_args(argv)


def build_options(args: argparse.Namespace) -> SearchOptions:
    return SearchOptions(
        max_depth=args.max_depth,
        pattern=args.pattern,
        use_regex=args.use_regex,
        ignore_case=args.ignore_case,
        include_hidden=args.include_hidden,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the CLI.
    """
    args = parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        options = build_options(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    service = FileSearchService()
    root = Path(args.root).expanduser()
    logger.debug(f"Searching {root} with {options}")

    try:
        if args.details:
            for record in service.get_file_records(root, options):
                print(f"{record.path}\t{record.size_bytes}\t{record.modified_at.isoformat(timespec='seconds')}")
        else:
            # Stream paths as they are found
            for path in service.enumerate_files(root, options):
                print(path)
    except (RootNotFoundError, InvalidPatternError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command-line interface for sol-metadata."""

import argparse
import logging
import sys
from pathlib import Path

from sol_metadata.records import Metadata


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def show(args: argparse.Namespace) -> int:
    """Execute the show command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if every file loaded, 1 otherwise)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    failures = 0
    metadata = Metadata(logger=logger)
    try:
        for path in args.files:
            if not metadata.load(path):
                failures += 1
                continue

            if args.json:
                print(metadata.to_schema().model_dump_json())
            else:
                print(f"{path}:")
                print(f"  Package: {metadata.package_name or '-'}")
                print(f"  Component: {metadata.component or '-'}")
    finally:
        metadata.unref()

    if failures:
        logger.warning(f"{failures} of {len(args.files)} files could not be loaded")
        return 1
    return 0


def check(args: argparse.Namespace) -> int:
    """Execute the check command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if every file is well-formed, 1 otherwise)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    failures = 0
    metadata = Metadata(logger=logger)
    try:
        for path in args.files:
            if metadata.load(path):
                logger.info(f"OK: {path}")
            else:
                failures += 1
    finally:
        metadata.unref()

    return 1 if failures else 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="sol-metadata",
        description="Read package name and component from PISI/SOL metadata.xml files",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    show_parser = subparsers.add_parser(
        "show",
        help="Print package name and component for metadata.xml files",
        description="Parse each metadata.xml file and print its package name and component.",
    )
    show_parser.add_argument(
        "files",
        type=Path,
        nargs="+",
        help="Paths to metadata.xml files",
    )
    show_parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per file",
    )
    show_parser.set_defaults(func=show)

    check_parser = subparsers.add_parser(
        "check",
        help="Check that metadata.xml files are well-formed",
        description="Parse each metadata.xml file and report whether it is well-formed XML.",
    )
    check_parser.add_argument(
        "files",
        type=Path,
        nargs="+",
        help="Paths to metadata.xml files",
    )
    check_parser.set_defaults(func=check)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

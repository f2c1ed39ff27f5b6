#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Main CLI entry point for the image dupchecker.
"""

import argparse
import contextlib
import logging
import sys
from pathlib import Path

from .config import DEFAULT_DB_NAME, DEFAULT_HASH_SIZE, DEFAULT_WORKERS, IMAGE_EXT, RunConfig
from .database.manager import DedupIndex
from .commands.run import RunCommand
from .commands.migrate import cmd_migrate
from .commands.stats import cmd_show_stats
from .errors import StorageFatalError
from .jsonio import enable_json_logging, error, success


def setup_logging(verbose: bool):
    """Configure logging for the CLI tool."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    logging.debug("Verbose logging enabled (DEBUG level).")


def _int_at_least(minimum: int):
    """argparse type for integers with a lower bound."""
    def parse(value: str) -> int:
        try:
            number = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
        if number < minimum:
            raise argparse.ArgumentTypeError(f"must be at least {minimum}, got {number}")
        return number
    return parse


def create_parser():
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description="Perceptual-hash image deduplicator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  # Index a tree and move the unique images to ./curated
  %(prog)s run --source /mnt/photos --dest ./curated --workers 4

  # Index only, keep corrupt files where they are
  %(prog)s --db photos.db run --source /mnt/photos --keep-corrupt

  # Move survivors of an earlier run
  %(prog)s migrate --dest ./curated

  # Index statistics
  %(prog)s stats --detailed --json
        """
    )

    # Global options
    parser.add_argument("--db", default=DEFAULT_DB_NAME,
                        help=f"SQLite index path (default: {DEFAULT_DB_NAME})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose (DEBUG) output")
    parser.add_argument("--json", action="store_true",
                        help="Output results as JSON instead of human-readable text")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    _add_run_parser(subparsers)
    _add_migrate_parser(subparsers)
    _add_stats_parser(subparsers)

    return parser


def _add_run_parser(subparsers):
    """Add run command parser."""
    run_parser = subparsers.add_parser("run", help="Index a directory tree and migrate survivors")
    run_parser.add_argument("--source", required=True,
                            help="Root directory to scan")
    run_parser.add_argument("--dest",
                            help="Destination for unique images (omit to skip migration)")
    run_parser.add_argument("--workers", type=_int_at_least(1), default=DEFAULT_WORKERS,
                            help=f"Number of worker threads (default: {DEFAULT_WORKERS})")
    run_parser.add_argument("--hash-size", type=_int_at_least(2), default=DEFAULT_HASH_SIZE,
                            help=f"Average-hash grid size (default: {DEFAULT_HASH_SIZE})")
    run_parser.add_argument("--ext", action="append", dest="extensions",
                            help="File extension to include; repeatable "
                                 f"(default: {', '.join(sorted(IMAGE_EXT))})")
    run_parser.add_argument("--keep-corrupt", action="store_true",
                            help="Report corrupt images instead of deleting them")
    run_parser.add_argument("--no-progress", action="store_true",
                            help="Disable the progress bar")


def _add_migrate_parser(subparsers):
    """Add migrate command parser."""
    migrate_parser = subparsers.add_parser("migrate", help="Move indexed files to a destination")
    migrate_parser.add_argument("--dest", required=True,
                                help="Destination directory")


def _add_stats_parser(subparsers):
    """Add stats command parser."""
    stats_parser = subparsers.add_parser("stats", help="Show index statistics")
    stats_parser.add_argument("--detailed", action="store_true",
                              help="Check which indexed paths still exist")


def _exit_code(summary) -> int:
    return 130 if summary.interrupted else 0


def _run(args) -> int:
    config = RunConfig(
        root=Path(args.source),
        db_path=Path(args.db),
        destination=Path(args.dest) if args.dest else None,
        extensions=args.extensions or IMAGE_EXT,
        workers=args.workers,
        hash_size=args.hash_size,
        delete_corrupt=not args.keep_corrupt,
        show_progress=not args.no_progress,
    )
    command = RunCommand(config)
    try:
        if args.json:
            # Keep stdout clean for the JSON payload
            with contextlib.redirect_stdout(sys.stderr):
                summary = command.execute()
            return success("run", summary.to_dict(), code=_exit_code(summary))
        summary = command.execute()
    finally:
        command.close()
    return _exit_code(summary)


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.json:
        enable_json_logging()
    else:
        setup_logging(args.verbose)

    logging.debug("Parsed arguments: %s", args)
    logging.info("Using index: %s", args.db)

    try:
        if args.command == "run":
            logging.info("Starting run command.")
            return _run(args)

        with DedupIndex(Path(args.db)) as index:
            index.ensure_schema()
            if args.command == "migrate":
                return cmd_migrate(index, Path(args.dest), args.json)
            if args.command == "stats":
                cmd_show_stats(index, args.detailed, args.json)
                return 0

    except StorageFatalError as e:
        if args.json:
            return error(args.command, str(e), code=1)
        logging.error("Index unavailable: %s", e)
        return 1
    except KeyboardInterrupt:
        if args.json:
            return error(args.command, "Operation interrupted by user", code=130)
        logging.warning("Operation interrupted by user.")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())

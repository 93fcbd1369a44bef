"""Backup CLI — command-line interface for the file copier."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import CopyConfig, load_config, validate_config
from .errors import CopyError, UsageError

logger = logging.getLogger(__name__)

PROG = "backup-utility"


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage="%(prog)s [options] [--] source_file destination_file",
        description="Copy a file to another path, byte for byte.",
    )

    # Global logging verbosity flags
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging output",
    )
    verbosity.add_argument(
        "--quiet", "-q", action="store_true",
        help="Suppress all output except warnings and errors",
    )

    parser.add_argument(
        "--buffer-size", type=int, default=None, metavar="BYTES",
        help="Transfer buffer capacity in bytes (default: 1024)",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to a YAML file with copy settings",
    )
    parser.add_argument(
        "--remove-partial", action="store_true", default=None,
        help="Delete a partially written destination if the copy fails",
    )

    # Count is checked in main() so the usage error maps to exit code 1
    parser.add_argument(
        "paths", nargs="*", metavar="path",
        help="source_file followed by destination_file; put -- before paths that start with -",
    )

    return parser


def split_paths(paths: list[str]) -> tuple[str, str]:
    """Return (source, destination) from the positional arguments.

    Raises:
        UsageError: If there are not exactly two paths.
    """
    if len(paths) != 2:
        raise UsageError(
            f"expected a source and a destination file, got {len(paths)} argument(s)"
        )
    return paths[0], paths[1]


def resolve_config(args: argparse.Namespace) -> CopyConfig:
    """Combine the optional config file with command-line overrides.

    Raises:
        FileNotFoundError: If --config names a missing file.
        ValueError: If the config file is malformed.
    """
    if args.config is not None:
        config = load_config(Path(args.config))
        logger.debug("Loaded config from %s", args.config)
    else:
        config = CopyConfig()

    if args.buffer_size is not None:
        config.buffer_size = args.buffer_size
    if args.remove_partial is not None:
        config.remove_partial = args.remove_partial

    return config


def cmd_copy(source: str, destination: str, config: CopyConfig) -> int:
    """Copy source to destination.

    Returns exit code (0 = success).
    """
    from .copier import FileCopier

    copier = FileCopier(
        source,
        destination,
        buffer_size=config.buffer_size,
        remove_partial=config.remove_partial,
    )
    try:
        result = copier.copy()
    except CopyError as e:
        logger.error("%s", e)
        if e.bytes_copied:
            logger.error("  %d bytes were written before the failure", e.bytes_copied)
        return 1

    logger.debug("Buffer size %d, %d reads", result.buffer_size, result.reads)
    print(f"Backup successful from {source} to {destination}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # --help exits 0; every argparse error is a usage failure
        return 0 if e.code == 0 else 1

    # Configure root logger based on verbosity flags
    if getattr(args, "verbose", False):
        log_level = logging.DEBUG
    elif getattr(args, "quiet", False):
        log_level = logging.WARNING
    else:
        log_level = logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
    )

    try:
        source, destination = split_paths(args.paths)
    except UsageError as e:
        print(parser.format_usage().rstrip(), file=sys.stderr)
        print(f"{PROG}: error: {e}", file=sys.stderr)
        return 1

    try:
        config = resolve_config(args)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return 1

    errors = validate_config(config)
    if errors:
        for err in errors:
            logger.error("Config error: %s", err)
        return 1

    try:
        return cmd_copy(source, destination, config)
    except Exception as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""Command-line interface argument parsing."""

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from mediaorg import __version__
from mediaorg.config.settings import (
    BACKUP_COMPRESSIONS,
    DEFAULT_BACKUP_COMPRESSION,
    DEFAULT_SETTINGS_FILE,
)
from mediaorg.config.options import OPTION_FIELDS


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser exiting with status 1 on usage errors."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments of ``mediaorg``.

    Attributes:
        file: File to process in single-file mode.
        batch: If True, process every candidate under INPUT_DIR.
        options: Raw ``KEY=VALUE`` options.
        settings_file: Settings file to load when present.
        progress: If True, show a progress bar in batch mode.
    """

    file: Optional[Path] = None
    batch: bool = False
    options: List[str] = field(default_factory=list)
    settings_file: Path = DEFAULT_SETTINGS_FILE
    progress: bool = True

    @property
    def single_file(self) -> bool:
        """Check if running in single-file mode."""
        return self.file is not None


def create_parser() -> ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = ArgumentParser(
        prog='mediaorg',
        description="""
        Renames photos and videos after their capture date, camera serial
        number and content checksum, and places them into a YEAR/MONTH tree.
        """
    )

    target_group = parser.add_mutually_exclusive_group(required=True)

    target_group.add_argument(
        '-f', '--file',
        help='process a single file'
    )

    target_group.add_argument(
        '-b', '--batch',
        action='store_true',
        help='process every photo and video found under INPUT_DIR'
    )

    parser.add_argument(
        '-o', '--option',
        action='append',
        default=[],
        metavar='KEY=VALUE',
        help=f"set a configuration value ({', '.join(OPTION_FIELDS)})"
    )

    parser.add_argument(
        '--settings',
        default=str(DEFAULT_SETTINGS_FILE),
        help=f"settings file loaded when present (default: {DEFAULT_SETTINGS_FILE})"
    )

    parser.add_argument(
        '--no-progress',
        action='store_true',
        help="disable the batch progress bar"
    )

    parser.add_argument(
        '--version',
        action='version',
        version=__version__
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        file=Path(namespace.file) if namespace.file else None,
        batch=namespace.batch,
        options=list(namespace.option),
        settings_file=Path(namespace.settings),
        progress=not namespace.no_progress,
    )


def create_backup_parser() -> ArgumentParser:
    """Create the argument parser for ``mediaorg-backup``."""
    parser = ArgumentParser(
        prog='mediaorg-backup',
        description="Archives a directory into a tarball and writes its SHA-1 checksum."
    )

    parser.add_argument('source', help='directory to back up')

    parser.add_argument(
        '-d', '--dest',
        default='.',
        help='directory receiving the archive (default: current directory)'
    )

    parser.add_argument(
        '-c', '--compression',
        choices=sorted(BACKUP_COMPRESSIONS),
        default=DEFAULT_BACKUP_COMPRESSION,
        help=f"archive compression (default: {DEFAULT_BACKUP_COMPRESSION})"
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help="only log the archive that would be created"
    )

    parser.add_argument(
        '-o', '--option',
        action='append',
        default=[],
        metavar='KEY=VALUE',
        help="set a logging value (LOG_LEVEL, LOG_FILE_PATH, DISABLE_COLOR_OUTPUT)"
    )

    parser.add_argument(
        '--version',
        action='version',
        version=__version__
    )

    return parser

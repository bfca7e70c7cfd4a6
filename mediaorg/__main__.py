"""Entry point for the mediaorg package.

This module provides the command-line entry point for the media organization tool.
Run with: python -m mediaorg
"""

import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from mediaorg.config import (
    OrganizerConfig,
    parse_arguments,
    args_to_cli_args,
    build_config,
)
from mediaorg.exceptions import ConfigurationError, MetadataError
from mediaorg.metadata import has_exiftool
from mediaorg.pipeline import PipelineOrchestrator, reorganize_file
from mediaorg.ui import ConsoleUI, display_placement_tree, display_statistics
from mediaorg.utils.log import setup_logging


def display_configuration(config: OrganizerConfig, console: ConsoleUI) -> None:
    """
    Display the current configuration to the user.

    Args:
        config: Organizer configuration.
        console: Console UI instance.
    """
    mode_styles = {
        "dry": "[yellow]DRY RUN[/yellow]",
        "move": "[red]MOVE[/red]",
        "copy": "[green]COPY[/green]",
    }

    console.print_panel(
        f"[bold]Configuration[/bold]\n"
        f"Input: [cyan]{config.input_dir}[/cyan]\n"
        f"Output: [cyan]{config.output_dir}[/cyan]\n"
        f"Mode: {mode_styles[config.mode.value]}\n"
        f"Naming: {config.naming_scheme} ({config.prefix_dt_pattern})\n"
        f"Workers: {config.jobs}",
        title="Media Organizer",
    )


def run_single_file(file: Path, config: OrganizerConfig) -> int:
    """
    Reorganize one file.

    Args:
        file: File to process.
        config: Organizer configuration.

    Returns:
        Exit code (0 for success, 1 on failure).
    """
    if not file.is_file():
        logger.error(f"File {file} does not exist")
        return 1

    try:
        reorganize_file(file, config)
    except (MetadataError, OSError) as e:
        logger.error(f"Error processing {file}: {e}")
        return 1
    return 0


def run_batch(config: OrganizerConfig, console: ConsoleUI, show_progress: bool = True) -> int:
    """
    Reorganize every candidate under the input directory.

    Args:
        config: Organizer configuration.
        console: Console UI instance.
        show_progress: Show the progress bar.

    Returns:
        Exit code (0 when every file succeeded, 1 otherwise).
    """
    if not config.input_dir.is_dir():
        logger.error(f"Input directory {config.input_dir} does not exist")
        return 1

    display_configuration(config, console)

    if not has_exiftool():
        console.print_warning("exiftool not found on PATH: photos cannot be dated and will fail")
        logger.warning("exiftool not found on PATH")

    if config.is_dry_run:
        console.print_warning("DRY RUN: no file or directory will be created, moved or copied")

    orchestrator = PipelineOrchestrator(config, show_progress=show_progress)
    stats = orchestrator.process()
    if config.is_dry_run:
        display_placement_tree(orchestrator.results, console, title=str(config.output_dir))
    display_statistics(stats, console, config.is_dry_run)
    return 0 if stats.ok else 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the media organization tool.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    # Parse command-line arguments (usage errors exit with status 1)
    cli_args = args_to_cli_args(parse_arguments(argv))

    try:
        config = build_config(cli_args.options, cli_args.settings_file)
    except ConfigurationError as e:
        setup_logging()
        logger.error(f"Configuration error: {e}")
        return 1

    setup_logging(config.log_level, config.log_file, colorize=not config.disable_color)
    logger.debug(f"Configuration: {config}")

    try:
        if cli_args.single_file:
            return run_single_file(cli_args.file, config)

        quiet = config.log_level == "OFF"
        console = ConsoleUI(no_color=config.disable_color, quiet=quiet)
        return run_batch(config, console, show_progress=cli_args.progress and not quiet)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

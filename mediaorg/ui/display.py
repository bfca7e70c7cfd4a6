"""Display functions for organization output."""

from typing import Dict, List

from rich.tree import Tree

from mediaorg.models.media import FileResult, PlacementDecision
from mediaorg.pipeline.orchestrator import ProcessingStats
from mediaorg.ui.console import ConsoleUI

DECISION_STYLES = {
    PlacementDecision.PROCEED: "green",
    PlacementDecision.RENAME_DUE_TO_CONFLICT: "yellow",
    PlacementDecision.SKIP_IDENTICAL_EXISTS: "dim",
}


def format_file_count(count: int) -> str:
    """
    Format file count with proper pluralization.

    Args:
        count: Number of files.

    Returns:
        Formatted string like "5 files" or "1 file".
    """
    return f"{count} file{'s' if count != 1 else ''}"


def generate_tree_structure(results: List[FileResult]) -> Dict[str, List[FileResult]]:
    """
    Group successful results by destination ``YYYY/MM`` directory.

    Args:
        results: Per-file results of a batch.

    Returns:
        Mapping of ``YYYY/MM`` to results, keys and values sorted.
    """
    tree: Dict[str, List[FileResult]] = {}
    for result in results:
        if not result.success or result.placement is None:
            continue
        directory = result.placement.destination.directory
        key = f"{directory.parent.name}/{directory.name}"
        tree.setdefault(key, []).append(result)

    return {
        key: sorted(tree[key], key=lambda r: r.placement.destination.filename)
        for key in sorted(tree)
    }


def display_placement_tree(results: List[FileResult], console: ConsoleUI, title: str = "Output") -> None:
    """Print destinations as a year/month tree, colored by decision."""
    structure = generate_tree_structure(results)
    if not structure:
        return

    root = Tree(f"[bold]{title}[/bold]")
    years: Dict[str, Tree] = {}
    for key, entries in structure.items():
        year, month = key.split("/")
        if year not in years:
            years[year] = root.add(f"[bold blue]{year}[/bold blue]")
        month_node = years[year].add(f"[blue]{month}[/blue] ({format_file_count(len(entries))})")
        for entry in entries:
            style = DECISION_STYLES[entry.placement.decision]
            month_node.add(f"[{style}]{entry.placement.destination.filename}[/{style}]")
    console.console.print(root)


def display_statistics(stats: ProcessingStats, console: ConsoleUI, dry_run: bool = False) -> None:
    """
    Display batch processing statistics.

    Args:
        stats: Statistics of the batch.
        console: Console UI instance.
        dry_run: Whether this was a dry run.
    """
    if not stats.total:
        console.print_warning("No media files to organize.")
        return

    mode_text = " (DRY RUN)" if dry_run else ""
    console.print_rows(
        f"Summary{mode_text}",
        ["Outcome", "Count"],
        [
            ("Placed", str(stats.placed)),
            ("Renamed (conflict)", str(stats.renamed)),
            ("Skipped (identical)", str(stats.skipped)),
            ("Failed", f"[red]{stats.failed}[/red]" if stats.failed else "0"),
            ("[bold]Total[/bold]", str(stats.total)),
        ],
    )

    if stats.ok:
        console.print_success(f"{format_file_count(stats.total)} processed")
    else:
        console.print_error(f"{format_file_count(stats.failed)} failed")

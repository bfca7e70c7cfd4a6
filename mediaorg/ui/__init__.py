"""User interface components."""

from mediaorg.ui.console import ConsoleUI
from mediaorg.ui.display import (
    format_file_count,
    generate_tree_structure,
    display_placement_tree,
    display_statistics,
)

__all__ = [
    "ConsoleUI",
    "format_file_count",
    "generate_tree_structure",
    "display_placement_tree",
    "display_statistics",
]

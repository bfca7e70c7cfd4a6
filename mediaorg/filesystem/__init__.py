"""Filesystem operations for media organization."""

from mediaorg.filesystem.discovery import (
    matches_any,
    classify_file,
    is_organized,
    get_files,
)
from mediaorg.filesystem.naming import (
    build_destination_dir,
    parent_segment,
    build_target_name,
    build_destination,
)
from mediaorg.filesystem.placement import (
    decide_placement,
    find_alternate_destination,
    transfer_file,
    place_file,
)

__all__ = [
    "matches_any",
    "classify_file",
    "is_organized",
    "get_files",
    "build_destination_dir",
    "parent_segment",
    "build_target_name",
    "build_destination",
    "decide_placement",
    "find_alternate_destination",
    "transfer_file",
    "place_file",
]

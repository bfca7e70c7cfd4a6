"""Data models for media organization."""

from mediaorg.models.media import (
    Mode,
    MediaKind,
    PlacementDecision,
    MediaFile,
    ResolvedTimestamp,
    TargetName,
    DestinationPath,
    PlacementResult,
    FileResult,
    split_filename,
)

__all__ = [
    "Mode",
    "MediaKind",
    "PlacementDecision",
    "MediaFile",
    "ResolvedTimestamp",
    "TargetName",
    "DestinationPath",
    "PlacementResult",
    "FileResult",
    "split_filename",
]

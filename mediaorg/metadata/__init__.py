"""Metadata extraction and capture timestamp resolution."""

from mediaorg.metadata.exiftool import has_exiftool, read_tags
from mediaorg.metadata.resolver import (
    parse_exif_date,
    normalize_serial,
    resolve_timestamp,
    resolve_metadata,
)

__all__ = [
    "has_exiftool",
    "read_tags",
    "parse_exif_date",
    "normalize_serial",
    "resolve_timestamp",
    "resolve_metadata",
]

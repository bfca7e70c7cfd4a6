"""Destination directory and filename derivation."""

from pathlib import Path
from typing import Optional

from mediaorg.config.options import OrganizerConfig
from mediaorg.models.media import DestinationPath, MediaFile, ResolvedTimestamp, TargetName
from mediaorg.utils.hash import short_checksum


def build_destination_dir(output_root: Path, resolved: ResolvedTimestamp) -> Path:
    """Return ``<output_root>/<YYYY>/<MM>``."""
    return output_root / f'{resolved.year:04d}' / f'{resolved.month:02d}'


def parent_segment(source: Path, input_root: Path) -> Optional[str]:
    """
    Name of the file's immediate parent directory.

    Returns None when the parent is the processing root itself.
    """
    parent = source.parent
    if parent.resolve() == input_root.resolve():
        return None
    return parent.name or None


def build_target_name(
    media: MediaFile,
    resolved: ResolvedTimestamp,
    digest: str,
    scheme: str = 'checksum',
    input_root: Optional[Path] = None,
) -> TargetName:
    """
    Compose the destination filename of a file.

    ``checksum`` scheme: ``<prefix>[-<serial>]-<short checksum>-<stem>.<ext>``.
    ``parent`` scheme: ``[<parent>-]<prefix>[-<serial>]-<stem>.<ext>``.

    Args:
        media: Source file with its metadata.
        resolved: Resolved capture timestamp.
        digest: Full content digest of the source.
        scheme: 'checksum' or 'parent'.
        input_root: Processing root, used by the parent scheme.

    Returns:
        TargetName ready to render.
    """
    if scheme == 'parent':
        return TargetName(
            prefix=resolved.prefix,
            stem=media.stem,
            extension=media.extension,
            serial=media.serial_number,
            parent=parent_segment(media.path, input_root or media.path.parent),
        )
    return TargetName(
        prefix=resolved.prefix,
        stem=media.stem,
        extension=media.extension,
        serial=media.serial_number,
        short_checksum=short_checksum(digest),
    )


def build_destination(
    media: MediaFile,
    resolved: ResolvedTimestamp,
    digest: str,
    config: OrganizerConfig,
) -> DestinationPath:
    """Derive the full destination of a file from the configuration."""
    return DestinationPath(
        directory=build_destination_dir(config.output_dir, resolved),
        name=build_target_name(media, resolved, digest, config.naming_scheme, config.input_dir),
    )

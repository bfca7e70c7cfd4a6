"""Single file reorganization: resolve, name, place."""

import time
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

from mediaorg.config.options import OrganizerConfig
from mediaorg.exceptions import ConfigurationError, MetadataError
from mediaorg.filesystem.discovery import classify_file
from mediaorg.filesystem.naming import build_destination
from mediaorg.filesystem.placement import place_file
from mediaorg.metadata.resolver import resolve_metadata
from mediaorg.models.media import FileResult, MediaFile, MediaKind, PlacementResult
from mediaorg.utils.hash import checksum_sha1


def create_media_from_file(
    file_path: Path,
    config: OrganizerConfig,
    kind: Optional[MediaKind] = None,
) -> MediaFile:
    """
    Create a MediaFile from a file path.

    Args:
        file_path: Path to the file.
        config: Organizer configuration, used to classify the file.
        kind: Known kind (from discovery), classified from patterns when None.

    Returns:
        MediaFile with its modification time set. Files matching no
        pattern are treated as photos.
    """
    if kind is None:
        kind = classify_file(file_path, config) or MediaKind.PHOTO
    return MediaFile.from_path(file_path, kind)


def reorganize_file(
    file_path: Path,
    config: OrganizerConfig,
    kind: Optional[MediaKind] = None,
    read_tags_fn: Optional[Callable] = None,
    clock: Callable[[], float] = time.time,
) -> PlacementResult:
    """
    Reorganize one file.

    Steps run strictly in order: metadata query, checksum, existence
    check, filesystem action.

    Args:
        file_path: Path to the file.
        config: Organizer configuration.
        kind: Known kind of the file.
        read_tags_fn: Metadata reader override.
        clock: Time source for collision renames.

    Returns:
        PlacementResult of the file.

    Raises:
        MetadataError: If metadata resolution fails.
        OSError: On filesystem errors.
    """
    media = create_media_from_file(file_path, config, kind)
    media, resolved = resolve_metadata(media, config.prefix_dt_pattern, read_tags_fn)
    digest = checksum_sha1(file_path)
    destination = build_destination(media, resolved, digest, config)
    logger.debug(f"{file_path.name}: sha1 {digest}, destination {destination.path}")
    return place_file(file_path, destination, config.mode, digest, clock)


def process_single_file(
    file_path: Path,
    config: OrganizerConfig,
    kind: Optional[MediaKind] = None,
    read_tags_fn: Optional[Callable] = None,
    clock: Callable[[], float] = time.time,
) -> FileResult:
    """
    Reorganize one file, turning per-file failures into a result.

    Args:
        file_path: Path to the file.
        config: Organizer configuration.
        kind: Known kind of the file.
        read_tags_fn: Metadata reader override.
        clock: Time source for collision renames.

    Returns:
        FileResult with the processing outcome.

    Raises:
        ConfigurationError: If the configuration itself is unusable.
    """
    try:
        placement = reorganize_file(file_path, config, kind, read_tags_fn, clock)
        return FileResult(source=file_path, success=True, placement=placement)

    except ConfigurationError:
        raise

    except (MetadataError, OSError) as e:
        logger.error(f"Error processing {file_path}: {e}")
        return FileResult(source=file_path, success=False, error=str(e))

    except Exception as e:
        logger.exception(f"Unexpected error processing {file_path}")
        return FileResult(source=file_path, success=False, error=f"{type(e).__name__}: {e}")

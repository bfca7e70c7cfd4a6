"""Capture timestamp resolution from embedded metadata or modification time."""

from datetime import datetime
from typing import Callable, Dict, Optional, Tuple

from loguru import logger

from mediaorg.config.settings import (
    EXIF_CREATE_DATE_TAG,
    EXIF_DATE_FORMAT,
    EXIF_DATE_LENGTH,
    EXIF_SERIAL_NUMBER_TAG,
    INVALID_DATE_SENTINEL,
)
from mediaorg.metadata.exiftool import read_tags
from mediaorg.models.media import MediaFile, ResolvedTimestamp


def parse_exif_date(value: object) -> Optional[datetime]:
    """
    Parse an exiftool date such as ``2023:05:14 10:22:03``.

    Sub-seconds and timezone offsets after the first 19 characters are
    ignored. Missing values, the ``0000`` sentinel and unparsable values
    all yield None.

    Args:
        value: Raw tag value.

    Returns:
        Naive datetime, or None.
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.startswith(INVALID_DATE_SENTINEL):
        return None
    try:
        return datetime.strptime(text[:EXIF_DATE_LENGTH], EXIF_DATE_FORMAT)
    except ValueError:
        logger.debug(f"Unparsable capture date: {text!r}")
        return None


def normalize_serial(value: object) -> Optional[str]:
    """Return the serial number trimmed of whitespace, or None when empty."""
    if value is None:
        return None
    serial = str(value).strip()
    return serial or None


def resolve_timestamp(media: MediaFile, pattern: str) -> ResolvedTimestamp:
    """
    Pick the capture timestamp of a file and format it.

    The embedded capture date wins; the modification time is the fallback.

    Args:
        media: File with its metadata already read.
        pattern: strftime pattern of the filename prefix.

    Returns:
        ResolvedTimestamp with year, month and prefix.
    """
    if media.capture_date is not None:
        dt, source = media.capture_date, 'metadata'
    else:
        dt, source = datetime.fromtimestamp(media.mtime), 'mtime'
    return ResolvedTimestamp(year=dt.year, month=dt.month, prefix=dt.strftime(pattern), source=source)


def resolve_metadata(
    media: MediaFile,
    pattern: str,
    read_tags_fn: Callable[..., Dict[str, object]] = None,
) -> Tuple[MediaFile, ResolvedTimestamp]:
    """
    Read embedded metadata (photos only) and resolve the capture timestamp.

    Videos never query exiftool: their timestamp is always the
    modification time and they carry no serial number.

    Args:
        media: Candidate file.
        pattern: strftime pattern of the filename prefix.
        read_tags_fn: Tag reader, defaults to :func:`read_tags`.

    Returns:
        Tuple of (media with metadata, resolved timestamp).

    Raises:
        MetadataError: If exiftool fails for a photo.
    """
    if media.is_video():
        logger.debug(f"{media.filename}: video, using modification time")
        return media, resolve_timestamp(media, pattern)

    tags = (read_tags_fn or read_tags)(media.path)
    media = media.with_metadata(
        capture_date=parse_exif_date(tags.get(EXIF_CREATE_DATE_TAG)),
        serial_number=normalize_serial(tags.get(EXIF_SERIAL_NUMBER_TAG)),
    )
    if media.capture_date is None:
        logger.debug(f"{media.filename}: no usable {EXIF_CREATE_DATE_TAG}, using modification time")

    resolved = resolve_timestamp(media, pattern)
    logger.debug(f"{media.filename}: {resolved.year_month} ({resolved.source}), prefix {resolved.prefix}")
    return media, resolved

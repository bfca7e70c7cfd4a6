"""Directory backups: tar archive plus SHA-1 checksum file."""

import tarfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger

from mediaorg.config.settings import (
    BACKUP_COMPRESSIONS,
    BACKUP_TIMESTAMP_FORMAT,
    CHECKSUM_FILE_SUFFIX,
    DEFAULT_BACKUP_COMPRESSION,
)
from mediaorg.exceptions import BackupError
from mediaorg.utils.hash import checksum_sha1


@dataclass
class BackupResult:
    """
    Result of a backup.

    Attributes:
        archive: Archive path.
        checksum_file: Checksum file path.
        digest: SHA-1 of the archive (None in dry-run).
        dry_run: Whether the backup was only simulated.
    """

    archive: Path
    checksum_file: Path
    digest: Optional[str] = None
    dry_run: bool = False


def archive_name(source_dir: Path, compression: str = DEFAULT_BACKUP_COMPRESSION,
                 now: Optional[datetime] = None) -> str:
    """Return ``<source-name>-<YYYYmmdd_HHMMSS><extension>``."""
    _, extension = BACKUP_COMPRESSIONS[compression]
    stamp = (now or datetime.now()).strftime(BACKUP_TIMESTAMP_FORMAT)
    return f"{source_dir.resolve().name}-{stamp}{extension}"


def checksum_path(archive: Path) -> Path:
    """Return the checksum file path of an archive."""
    return archive.with_name(archive.name + CHECKSUM_FILE_SUFFIX)


def write_checksum_file(archive: Path, digest: str) -> Path:
    """Write ``<digest>  <archive-name>`` next to the archive, sha1sum style."""
    target = checksum_path(archive)
    target.write_text(f"{digest}  {archive.name}\n")
    return target


def read_checksum_file(checksum_file: Path) -> str:
    """Return the digest recorded in a checksum file."""
    content = checksum_file.read_text().split()
    if not content:
        raise BackupError(f"Empty checksum file: {checksum_file}")
    return content[0]


def create_backup(
    source_dir: Path,
    dest_dir: Path,
    compression: str = DEFAULT_BACKUP_COMPRESSION,
    dry_run: bool = False,
    now: Optional[datetime] = None,
) -> BackupResult:
    """
    Archive a directory and write the archive's checksum.

    The archive holds the directory under its own name.

    Args:
        source_dir: Directory to back up.
        dest_dir: Directory receiving the archive and checksum file.
        compression: One of gz, bz2, xz, none.
        dry_run: If True, only log what would be created.
        now: Timestamp used in the archive name.

    Returns:
        BackupResult describing the archive.

    Raises:
        BackupError: If the source is not a directory, the destination lies
            inside it, the compression is unknown or archiving fails.
    """
    if compression not in BACKUP_COMPRESSIONS:
        raise BackupError(f"Unknown compression '{compression}'")
    if not source_dir.is_dir():
        raise BackupError(f"Source directory {source_dir} does not exist")

    source = source_dir.resolve()
    destination = dest_dir.resolve()
    if destination == source or source in destination.parents:
        raise BackupError(f"Destination {dest_dir} is inside the source directory {source_dir}")

    archive = destination / archive_name(source, compression, now)

    if dry_run:
        logger.info(f"DRY RUN - Backup: {source} -> {archive}")
        return BackupResult(archive=archive, checksum_file=checksum_path(archive), dry_run=True)

    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise BackupError(f"Unable to create destination {destination}: {e}") from e

    tar_suffix, _ = BACKUP_COMPRESSIONS[compression]
    logger.info(f"Archiving {source} -> {archive}")
    try:
        with tarfile.open(archive, f"w:{tar_suffix}") as tar:
            tar.add(str(source), arcname=source.name)
    except (OSError, tarfile.TarError) as e:
        archive.unlink(missing_ok=True)
        raise BackupError(f"Unable to archive {source}: {e}") from e

    try:
        digest = checksum_sha1(archive)
        checksum_file = write_checksum_file(archive, digest)
    except OSError as e:
        raise BackupError(f"Unable to write checksum for {archive}: {e}") from e
    logger.info(f"Checksum {digest} written to {checksum_file}")
    return BackupResult(archive=archive, checksum_file=checksum_file, digest=digest)


def verify_backup(archive: Path) -> bool:
    """
    Check an archive against its checksum file.

    Args:
        archive: Archive path.

    Returns:
        True if the recorded digest matches the archive content.

    Raises:
        BackupError: If the archive or its checksum file is missing.
    """
    checksum_file = checksum_path(archive)
    if not archive.is_file() or not checksum_file.is_file():
        raise BackupError(f"Missing archive or checksum file for {archive}")

    expected = read_checksum_file(checksum_file)
    actual = checksum_sha1(archive)
    if actual != expected:
        logger.error(f"Checksum mismatch for {archive}: expected {expected}, got {actual}")
        return False
    logger.debug(f"Checksum verified for {archive}")
    return True

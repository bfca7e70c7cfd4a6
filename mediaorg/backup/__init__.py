"""Directory backup utility."""

from mediaorg.backup.archive import (
    BackupResult,
    archive_name,
    checksum_path,
    write_checksum_file,
    read_checksum_file,
    create_backup,
    verify_backup,
)

__all__ = [
    "BackupResult",
    "archive_name",
    "checksum_path",
    "write_checksum_file",
    "read_checksum_file",
    "create_backup",
    "verify_backup",
]

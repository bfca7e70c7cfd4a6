"""Custom exceptions for media organization."""


class MediaOrgError(Exception):
    """Base class for all mediaorg errors."""

    pass


class ConfigurationError(MediaOrgError):
    """Invalid configuration (unknown option, bad mode, malformed value)."""

    pass


class MetadataError(MediaOrgError):
    """Metadata extraction failed (exiftool missing or exited non-zero)."""

    pass


class BackupError(MediaOrgError):
    """Backup could not be created (missing source, archive failure)."""

    pass

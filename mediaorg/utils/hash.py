"""Content digest utilities for identity comparison and filename fingerprints."""

import hashlib
from pathlib import Path

from mediaorg.config.settings import DIGEST_CHUNK_SIZE, SHORT_CHECKSUM_LENGTH


def checksum_sha1(filename: Path) -> str:
    """
    Compute the SHA-1 digest of a file's full contents.

    The whole file is read in chunks, so two files compare equal only when
    every byte matches.

    Args:
        filename: Path to the file to hash.

    Returns:
        Hexadecimal SHA-1 digest (40 characters).

    Raises:
        OSError: If the file cannot be read.
    """
    # usedforsecurity=False for FIPS compliance (SHA-1 used for identity, not crypto)
    sha1 = hashlib.sha1(usedforsecurity=False)
    with open(filename, 'rb') as f:
        for chunk in iter(lambda: f.read(DIGEST_CHUNK_SIZE), b''):
            sha1.update(chunk)
    return sha1.hexdigest()


def short_checksum(digest: str, length: int = SHORT_CHECKSUM_LENGTH) -> str:
    """Return the leading ``length`` hex characters of a digest."""
    return digest[:length]

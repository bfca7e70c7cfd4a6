"""Utility functions."""

from mediaorg.utils.hash import checksum_sha1, short_checksum
from mediaorg.utils.log import setup_logging

__all__ = [
    "checksum_sha1",
    "short_checksum",
    "setup_logging",
]

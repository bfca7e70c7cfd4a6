"""Wrapper around the external ``exiftool`` binary."""

import json
import shutil
import subprocess
from pathlib import Path
from typing import Dict, Iterable

from loguru import logger

from mediaorg.config.settings import EXIF_CREATE_DATE_TAG, EXIF_SERIAL_NUMBER_TAG
from mediaorg.exceptions import MetadataError

DEFAULT_TAGS = (EXIF_CREATE_DATE_TAG, EXIF_SERIAL_NUMBER_TAG)


def has_exiftool() -> bool:
    """Return ``True`` when the ``exiftool`` binary is found on PATH."""
    return shutil.which("exiftool") is not None


def read_tags(path: Path, tags: Iterable[str] = DEFAULT_TAGS) -> Dict[str, object]:
    """
    Read metadata tags from a file with exiftool.

    Runs ``exiftool -j -<tag>... <path>`` and returns the first JSON record.
    Tags absent from the file are simply missing from the mapping.

    Args:
        path: File to query.
        tags: Tag names to request.

    Returns:
        Mapping of tag name to value (``SourceFile`` included).

    Raises:
        MetadataError: If exiftool cannot be run, exits non-zero or
            prints something that is not JSON.
    """
    cmd = ['exiftool', '-j'] + [f'-{tag}' for tag in tags] + [str(path.absolute())]
    logger.debug(f"Executing exiftool command: {' '.join(cmd)}")

    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise MetadataError(f"Unable to run exiftool for {path}: {e}") from e

    if result.returncode != 0:
        detail = result.stderr.strip() or 'no error output'
        raise MetadataError(
            f"exiftool exited with status {result.returncode} for {path}: {detail}"
        )

    try:
        records = json.loads(result.stdout) if result.stdout.strip() else []
    except json.JSONDecodeError as e:
        raise MetadataError(f"Unreadable exiftool output for {path}: {e}") from e

    return records[0] if records else {}

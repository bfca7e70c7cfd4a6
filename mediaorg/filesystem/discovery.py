"""File discovery functions for finding photo and video candidates."""

import re
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Generator, Iterable, List, Optional, Tuple

from loguru import logger

from mediaorg.config.options import OrganizerConfig
from mediaorg.models.media import MediaKind

_YEAR_DIR = re.compile(r'^\d{4}$')
_MONTH_DIR = re.compile(r'^\d{2}$')


def matches_any(name: str, patterns: Iterable[str]) -> bool:
    """
    Check a file name against glob patterns, ignoring case.

    Args:
        name: File name without directory.
        patterns: Glob patterns.

    Returns:
        True if at least one pattern matches.
    """
    lowered = name.lower()
    return any(fnmatchcase(lowered, pattern.lower()) for pattern in patterns)


def classify_file(path: Path, config: OrganizerConfig) -> Optional[MediaKind]:
    """
    Classify a file by the first pattern list it matches.

    Video patterns are checked before photo patterns.

    Returns:
        MediaKind, or None when the file matches neither list.
    """
    if matches_any(path.name, config.video_patterns):
        return MediaKind.VIDEO
    if matches_any(path.name, config.photo_patterns):
        return MediaKind.PHOTO
    return None


def is_organized(path: Path, output_dir: Path) -> bool:
    """
    Check whether a file already sits in an ``<output>/<YYYY>/<MM>/`` directory.

    Args:
        path: Candidate file.
        output_dir: Output root.

    Returns:
        True if the file is part of the organized tree.
    """
    try:
        relative = path.resolve().relative_to(output_dir.resolve())
    except ValueError:
        return False
    parts = relative.parts
    return (
        len(parts) == 3
        and _YEAR_DIR.match(parts[0]) is not None
        and _MONTH_DIR.match(parts[1]) is not None
    )


def get_files(config: OrganizerConfig) -> Generator[Tuple[Path, MediaKind], None, None]:
    """
    Generate candidate files under the input directory.

    Videos are yielded first, then photos, each group sorted by path.
    Files already in the organized output tree are skipped.

    Args:
        config: Organizer configuration.

    Yields:
        Tuples of (path, kind).
    """
    input_dir = config.input_dir
    if not input_dir.is_dir():
        logger.warning(f"Input directory {input_dir} does not exist")
        return

    videos: List[Path] = []
    photos: List[Path] = []
    try:
        for file in input_dir.rglob('*'):
            if not file.is_file() or is_organized(file, config.output_dir):
                continue
            kind = classify_file(file, config)
            if kind is MediaKind.VIDEO:
                videos.append(file)
            elif kind is MediaKind.PHOTO:
                photos.append(file)
    except OSError as e:
        logger.warning(f"Filesystem access error under {input_dir}: {e}")

    logger.debug(f"{len(videos)} video(s) and {len(photos)} photo(s) found in {input_dir}")

    for file in sorted(videos):
        yield file, MediaKind.VIDEO
    for file in sorted(photos):
        yield file, MediaKind.PHOTO


"""Immutable organizer configuration built from defaults, environment, settings file and options."""

import os
import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple

from dotenv import dotenv_values
from loguru import logger

from mediaorg.config.settings import (
    DEFAULT_INPUT_DIR,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PREFIX_DT_PATTERN,
    DEFAULT_PHOTO_FILES_PATTERN,
    DEFAULT_VIDEO_FILES_PATTERN,
    DEFAULT_LOG_LEVEL,
    DEFAULT_NAMING_SCHEME,
    DEFAULT_JOBS,
    LOG_LEVELS,
    NAMING_SCHEMES,
)
from mediaorg.exceptions import ConfigurationError
from mediaorg.models.media import Mode


def parse_patterns(value: str) -> Tuple[str, ...]:
    """
    Split a comma or whitespace separated list of glob patterns.

    Args:
        value: Raw pattern list, e.g. ``"*.jpg, *.nef"``.

    Returns:
        Tuple of non-empty patterns.
    """
    return tuple(p for p in re.split(r'[,\s]+', value) if p)


DEFAULT_PHOTO_PATTERNS = parse_patterns(DEFAULT_PHOTO_FILES_PATTERN)
DEFAULT_VIDEO_PATTERNS = parse_patterns(DEFAULT_VIDEO_FILES_PATTERN)


@dataclass(frozen=True)
class OrganizerConfig:
    """
    Runtime configuration of one invocation.

    Built once at start-up and passed explicitly to every stage.

    Attributes:
        input_dir: Root scanned for candidate files.
        output_dir: Root under which ``<year>/<month>`` trees are created.
        mode: Dry-run, move or copy.
        prefix_dt_pattern: strftime pattern of the filename prefix.
        photo_patterns: Globs selecting photos.
        video_patterns: Globs selecting videos.
        log_level: One of ALL, DEBUG, INFO, WARN, ERROR, OFF.
        log_file: Optional log file path.
        disable_color: Disable colorized console output.
        naming_scheme: 'checksum' or 'parent'.
        jobs: Worker pool size.
    """

    input_dir: Path = DEFAULT_INPUT_DIR
    output_dir: Path = DEFAULT_OUTPUT_DIR
    mode: Mode = Mode.COPY
    prefix_dt_pattern: str = DEFAULT_PREFIX_DT_PATTERN
    photo_patterns: Tuple[str, ...] = field(default=DEFAULT_PHOTO_PATTERNS)
    video_patterns: Tuple[str, ...] = field(default=DEFAULT_VIDEO_PATTERNS)
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None
    disable_color: bool = False
    naming_scheme: str = DEFAULT_NAMING_SCHEME
    jobs: int = DEFAULT_JOBS

    @property
    def is_dry_run(self) -> bool:
        """Alias for mode == DRY_RUN for readability."""
        return self.mode is Mode.DRY_RUN


def _to_mode(value: str) -> Mode:
    try:
        return Mode(value.lower())
    except ValueError:
        raise ConfigurationError(
            f"Unknown mode '{value}' (expected one of: {', '.join(m.value for m in Mode)})"
        ) from None


def _to_log_level(value: str) -> str:
    level = value.upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level '{value}' (expected one of: {', '.join(LOG_LEVELS)})"
        )
    return level


def _to_pattern(value: str) -> str:
    if not value:
        raise ConfigurationError("PREFIX_DT_PATTERN must not be empty")
    # strftime raises on malformed directives on some platforms
    try:
        sample = time.strftime(value)
    except ValueError as e:
        raise ConfigurationError(f"Invalid PREFIX_DT_PATTERN '{value}': {e}") from None
    # The prefix is part of a filename
    if any(sep and sep in sample for sep in (os.sep, os.altsep)):
        raise ConfigurationError(f"PREFIX_DT_PATTERN '{value}' produces a path separator")
    return value


def _to_globs(value: str) -> Tuple[str, ...]:
    patterns = parse_patterns(value)
    if not patterns:
        raise ConfigurationError("File pattern list must not be empty")
    return patterns


def _to_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered in {'1', 'true', 'yes', 'on'}:
        return True
    if lowered in {'0', 'false', 'no', 'off', ''}:
        return False
    raise ConfigurationError(f"Invalid boolean value '{value}'")


def _to_optional_path(value: str) -> Optional[Path]:
    return Path(value) if value else None


def _to_scheme(value: str) -> str:
    scheme = value.lower()
    if scheme not in NAMING_SCHEMES:
        raise ConfigurationError(
            f"Unknown naming scheme '{value}' (expected one of: {', '.join(sorted(NAMING_SCHEMES))})"
        )
    return scheme


def _to_jobs(value: str) -> int:
    try:
        jobs = int(value)
    except ValueError:
        raise ConfigurationError(f"JOBS must be an integer, got '{value}'") from None
    if jobs < 1:
        raise ConfigurationError(f"JOBS must be at least 1, got {jobs}")
    return jobs


# Allow-list of configuration keys: KEY -> (field name, converter)
OPTION_FIELDS: Dict[str, Tuple[str, Callable[[str], object]]] = {
    'INPUT_DIR': ('input_dir', Path),
    'OUTPUT_DIR': ('output_dir', Path),
    'MODE': ('mode', _to_mode),
    'PREFIX_DT_PATTERN': ('prefix_dt_pattern', _to_pattern),
    'PHOTO_FILES_PATTERN': ('photo_patterns', _to_globs),
    'VIDEO_FILES_PATTERN': ('video_patterns', _to_globs),
    'LOG_LEVEL': ('log_level', _to_log_level),
    'LOG_FILE_PATH': ('log_file', _to_optional_path),
    'DISABLE_COLOR_OUTPUT': ('disable_color', _to_bool),
    'NAMING_SCHEME': ('naming_scheme', _to_scheme),
    'JOBS': ('jobs', _to_jobs),
}


def parse_option(text: str) -> Tuple[str, str]:
    """
    Parse a ``KEY=VALUE`` option.

    Args:
        text: Raw option string.

    Returns:
        Tuple of (key, value) with the value stripped.

    Raises:
        ConfigurationError: If the text is malformed or the key is unknown.
    """
    key, sep, value = text.partition('=')
    key = key.strip()
    if not sep or not key:
        raise ConfigurationError(f"Malformed option '{text}' (expected KEY=VALUE)")
    if key not in OPTION_FIELDS:
        raise ConfigurationError(
            f"Unknown option '{key}' (allowed: {', '.join(OPTION_FIELDS)})"
        )
    return key, value.strip()


def environment_values(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Return allow-listed configuration keys found in the environment."""
    environ = os.environ if environ is None else environ
    return {key: environ[key].strip() for key in OPTION_FIELDS if key in environ}


def load_settings_file(path: Path) -> Dict[str, str]:
    """
    Read a project-local settings file.

    The file uses dotenv syntax and is parsed without touching
    ``os.environ``. A missing file yields an empty mapping.

    Args:
        path: Settings file path.

    Returns:
        Mapping of configuration keys to raw values.

    Raises:
        ConfigurationError: If the file holds a key outside the allow-list.
    """
    if not path.is_file():
        return {}

    values = {}
    for key, value in dotenv_values(path).items():
        if key not in OPTION_FIELDS:
            raise ConfigurationError(f"Unknown setting '{key}' in {path}")
        values[key] = (value or '').strip()
    logger.debug(f"Loaded {len(values)} setting(s) from {path}")
    return values


def build_config(
    options: Iterable[str] = (),
    settings_file: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> OrganizerConfig:
    """
    Build the configuration of one invocation.

    Precedence, lowest first: defaults, environment, settings file,
    ``KEY=VALUE`` options.

    Args:
        options: ``KEY=VALUE`` strings from the command line.
        settings_file: Settings file to load when present.
        environ: Environment mapping (``os.environ`` when None).

    Returns:
        Frozen OrganizerConfig.

    Raises:
        ConfigurationError: On unknown keys or invalid values.
    """
    raw: Dict[str, str] = {}
    raw.update(environment_values(environ))
    if settings_file is not None:
        raw.update(load_settings_file(settings_file))
    for option in options:
        key, value = parse_option(option)
        raw[key] = value

    kwargs = {}
    for key, value in raw.items():
        field_name, convert = OPTION_FIELDS[key]
        kwargs[field_name] = convert(value)
    return OrganizerConfig(**kwargs)

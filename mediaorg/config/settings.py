"""Configuration settings and constants for the mediaorg package."""

import os
from pathlib import Path
from typing import Dict, Set

# Default directories
DEFAULT_INPUT_DIR = Path('.')
DEFAULT_OUTPUT_DIR = Path('.')

# Project-local settings file, loaded when present in the working directory
DEFAULT_SETTINGS_FILE = Path('.mediaorg.env')

# Timestamp prefix used in generated filenames
DEFAULT_PREFIX_DT_PATTERN = '%Y%m%d_%H%M%S'

# Candidate file globs (matched case-insensitively against file names)
DEFAULT_PHOTO_FILES_PATTERN = (
    '*.jpg,*.jpeg,*.heic,*.png,*.tif,*.tiff,*.nef,*.cr2,*.cr3,*.arw,*.dng,*.orf,*.rw2,*.raf'
)
DEFAULT_VIDEO_FILES_PATTERN = '*.mov,*.mp4,*.m4v,*.avi,*.mts,*.m2ts,*.3gp,*.mkv'

# Supported modes
MODES: Set[str] = {'dry', 'move', 'copy'}
DEFAULT_MODE = 'copy'

# Supported filename schemes
NAMING_SCHEMES: Set[str] = {'checksum', 'parent'}
DEFAULT_NAMING_SCHEME = 'checksum'

# Log levels understood by LOG_LEVEL, mapped to loguru level names.
# None means logging is switched off.
LOG_LEVELS: Dict[str, object] = {
    'ALL': 'TRACE',
    'DEBUG': 'DEBUG',
    'INFO': 'INFO',
    'WARN': 'WARNING',
    'ERROR': 'ERROR',
    'OFF': None,
}
DEFAULT_LOG_LEVEL = 'ALL'

# Log file rotation size
LOG_FILE_ROTATION = '10 MB'

# Default worker pool size
DEFAULT_JOBS: int = os.cpu_count() or 1

# Length of the checksum fragment embedded in filenames
SHORT_CHECKSUM_LENGTH: int = 10

# Read size for content digests
DIGEST_CHUNK_SIZE: int = 1024 * 1024

# exiftool reports unset dates with a zero year
INVALID_DATE_SENTINEL = '0000'

# Raw exiftool date layout (sub-seconds and offsets are ignored)
EXIF_DATE_FORMAT = '%Y:%m:%d %H:%M:%S'
EXIF_DATE_LENGTH: int = 19

# exiftool tags queried for photos
EXIF_CREATE_DATE_TAG = 'CreateDate'
EXIF_SERIAL_NUMBER_TAG = 'SerialNumber'

# Backup archive compression -> tarfile mode suffix and file extension
BACKUP_COMPRESSIONS: Dict[str, tuple] = {
    'gz': ('gz', '.tar.gz'),
    'bz2': ('bz2', '.tar.bz2'),
    'xz': ('xz', '.tar.xz'),
    'none': ('', '.tar'),
}
DEFAULT_BACKUP_COMPRESSION = 'gz'
BACKUP_TIMESTAMP_FORMAT = '%Y%m%d_%H%M%S'
CHECKSUM_FILE_SUFFIX = '.sha1'

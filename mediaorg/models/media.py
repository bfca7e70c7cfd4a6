"""Media data model for the mediaorg package."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional


class Mode(Enum):
    """Placement mode, global per invocation."""

    DRY_RUN = 'dry'
    MOVE = 'move'
    COPY = 'copy'


class MediaKind(Enum):
    """Kind of candidate file, decided by the pattern it matched."""

    PHOTO = 'photo'
    VIDEO = 'video'


class PlacementDecision(Enum):
    """Outcome of the destination collision check."""

    PROCEED = 'proceed'
    SKIP_IDENTICAL_EXISTS = 'skip_identical_exists'
    RENAME_DUE_TO_CONFLICT = 'rename_due_to_conflict'


def split_filename(filename: str):
    """
    Split a file name on its last dot.

    Args:
        filename: File name without directory.

    Returns:
        Tuple of (stem, extension). Extension is empty when there is no dot.
    """
    stem, dot, ext = filename.rpartition('.')
    if not dot:
        return filename, ''
    return stem, ext


@dataclass(frozen=True)
class MediaFile:
    """
    A candidate media file and what was read from it.

    Attributes:
        path: Path to the file.
        kind: Photo or video.
        mtime: Filesystem modification time (epoch seconds).
        capture_date: Embedded capture timestamp, when one was read.
        serial_number: Camera serial number, when one was read.
    """

    path: Path
    kind: MediaKind = MediaKind.PHOTO
    mtime: float = 0.0
    capture_date: Optional[datetime] = None
    serial_number: Optional[str] = None

    @classmethod
    def from_path(cls, path: Path, kind: MediaKind = MediaKind.PHOTO) -> "MediaFile":
        """Build a MediaFile from the filesystem, reading only its mtime."""
        return cls(path=path, kind=kind, mtime=path.stat().st_mtime)

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        return split_filename(self.path.name)[0]

    @property
    def extension(self) -> str:
        return split_filename(self.path.name)[1]

    def is_video(self) -> bool:
        """Check if this file is a video."""
        return self.kind is MediaKind.VIDEO

    def with_metadata(self, capture_date: Optional[datetime], serial_number: Optional[str]) -> "MediaFile":
        """Return a copy carrying the embedded metadata."""
        return replace(self, capture_date=capture_date, serial_number=serial_number)


@dataclass(frozen=True)
class ResolvedTimestamp:
    """
    Capture year/month and the formatted filename prefix.

    Attributes:
        year: Four digit year.
        month: Month number (1-12).
        prefix: Timestamp formatted with the configured pattern.
        source: 'metadata' or 'mtime'.
    """

    year: int
    month: int
    prefix: str
    source: str = 'mtime'

    @property
    def year_month(self) -> str:
        """Year and month as ``YYYY-MM``."""
        return f'{self.year:04d}-{self.month:02d}'


@dataclass(frozen=True)
class TargetName:
    """
    Components of a generated destination filename.

    ``render()`` joins the non-empty segments with ``-``. The optional
    epoch segment goes right before the original stem.
    """

    prefix: str
    stem: str
    extension: str = ''
    serial: Optional[str] = None
    short_checksum: Optional[str] = None
    parent: Optional[str] = None

    def render(self, epoch: Optional[int] = None) -> str:
        segments = [self.parent, self.prefix, self.serial, self.short_checksum]
        if epoch is not None:
            segments.append(str(epoch))
        segments.append(self.stem)
        name = '-'.join(s for s in segments if s)
        if self.extension:
            name += f'.{self.extension}'
        return name


@dataclass(frozen=True)
class DestinationPath:
    """
    Destination directory and generated filename of a media file.

    Attributes:
        directory: ``<output_root>/<year>/<month>``.
        name: Filename components.
        epoch: Epoch segment of an alternate name, None for the primary name.
    """

    directory: Path
    name: TargetName
    epoch: Optional[int] = None

    @property
    def filename(self) -> str:
        return self.name.render(self.epoch)

    @property
    def path(self) -> Path:
        return self.directory / self.filename

    def with_epoch(self, epoch: int) -> "DestinationPath":
        """Return the alternate destination qualified with ``epoch``."""
        return replace(self, epoch=epoch)


@dataclass(frozen=True)
class PlacementResult:
    """
    Result of placing a single file.

    Attributes:
        decision: Collision check outcome.
        destination: Final destination (alternate one after a rename).
        mode: Mode the placement ran in.
    """

    decision: PlacementDecision
    destination: DestinationPath
    mode: Mode


@dataclass
class FileResult:
    """
    Outcome of reorganizing one file, as returned by a worker.

    Attributes:
        source: Source file path.
        success: Whether processing completed.
        placement: Placement result (if successful).
        error: Error message (if failed).
    """

    source: Path = field(default_factory=Path)
    success: bool = False
    placement: Optional[PlacementResult] = None
    error: Optional[str] = None

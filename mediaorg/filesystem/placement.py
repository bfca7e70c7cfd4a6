"""Placement of files into the organized tree: collision checks, move and copy."""

import shutil
import time
from pathlib import Path
from typing import Callable

from loguru import logger

from mediaorg.exceptions import ConfigurationError
from mediaorg.models.media import DestinationPath, Mode, PlacementDecision, PlacementResult
from mediaorg.utils.hash import checksum_sha1


def decide_placement(destination: Path, source_digest: str) -> PlacementDecision:
    """
    Compare an existing destination with the source content.

    Args:
        destination: Candidate destination path.
        source_digest: SHA-1 digest of the source file.

    Returns:
        PROCEED if nothing is there, SKIP_IDENTICAL_EXISTS if the same
        content is already there, RENAME_DUE_TO_CONFLICT otherwise.
    """
    if not destination.exists():
        return PlacementDecision.PROCEED
    if checksum_sha1(destination) == source_digest:
        return PlacementDecision.SKIP_IDENTICAL_EXISTS
    return PlacementDecision.RENAME_DUE_TO_CONFLICT


def find_alternate_destination(
    destination: DestinationPath,
    clock: Callable[[], float] = time.time,
) -> DestinationPath:
    """
    Build an epoch-qualified destination that does not exist yet.

    Starts from the current epoch and counts up while the name is taken.

    Args:
        destination: Conflicting destination.
        clock: Time source returning epoch seconds.

    Returns:
        Alternate DestinationPath.
    """
    epoch = int(clock())
    alternate = destination.with_epoch(epoch)
    while alternate.path.exists():
        epoch += 1
        alternate = destination.with_epoch(epoch)
    return alternate


def transfer_file(source: Path, target: Path, mode: Mode) -> None:
    """
    Perform (or simulate) the filesystem operation for a mode.

    Args:
        source: Source file path.
        target: Destination file path.
        mode: Dry-run, move or copy.

    Raises:
        ConfigurationError: If the mode is not a known Mode.
    """
    if mode is Mode.DRY_RUN:
        logger.info(f"DRY RUN - {source} -> {target}")
    elif mode is Mode.MOVE:
        shutil.move(str(source), str(target))
        logger.info(f"Moved: {source} -> {target}")
    elif mode is Mode.COPY:
        shutil.copy2(source, target)
        logger.info(f"Copied: {source} -> {target}")
    else:
        raise ConfigurationError(f"Unknown mode: {mode!r}")


def place_file(
    source: Path,
    destination: DestinationPath,
    mode: Mode,
    source_digest: str,
    clock: Callable[[], float] = time.time,
) -> PlacementResult:
    """
    Place a file at its destination according to the mode.

    An existing destination with the same content is left alone. One with
    different content makes the file go to an epoch-qualified alternate
    name. The destination directory is only created outside dry-run.

    Args:
        source: Source file path.
        destination: Computed destination.
        mode: Dry-run, move or copy.
        source_digest: SHA-1 digest of the source file.
        clock: Time source for alternate names.

    Returns:
        PlacementResult with the decision and final destination.
    """
    if not isinstance(mode, Mode):
        raise ConfigurationError(f"Unknown mode: {mode!r}")

    decision = decide_placement(destination.path, source_digest)

    if decision is PlacementDecision.SKIP_IDENTICAL_EXISTS:
        logger.warning(f"Identical file already exists, skipping: {source} -> {destination.path}")
        return PlacementResult(decision=decision, destination=destination, mode=mode)

    if decision is PlacementDecision.RENAME_DUE_TO_CONFLICT:
        alternate = find_alternate_destination(destination, clock)
        logger.warning(
            f"Destination {destination.path} exists with different content, "
            f"renaming to {alternate.filename}"
        )
        destination = alternate

    if mode is not Mode.DRY_RUN:
        destination.directory.mkdir(parents=True, exist_ok=True)

    transfer_file(source, destination.path, mode)
    return PlacementResult(decision=decision, destination=destination, mode=mode)

"""Pytest configuration and fixtures."""

import os
from datetime import datetime
from pathlib import Path

import pytest

from mediaorg.config import OrganizerConfig, OPTION_FIELDS
from mediaorg.models import Mode


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration variables of the developer shell out of tests."""
    for key in OPTION_FIELDS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def set_mtime():
    """Return a helper setting a file's modification time to a local datetime."""
    def _set(path: Path, dt: datetime) -> None:
        ts = dt.timestamp()
        os.utime(path, (ts, ts))
    return _set


@pytest.fixture
def input_dir(tmp_path):
    directory = tmp_path / "input"
    directory.mkdir()
    return directory


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "output"


@pytest.fixture
def make_media(input_dir, set_mtime):
    """Create a media file under the input directory."""
    def _make(name: str, content: bytes = b"fake media content", mtime: datetime = None,
              directory: Path = None) -> Path:
        path = (directory or input_dir) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        if mtime is not None:
            set_mtime(path, mtime)
        return path
    return _make


@pytest.fixture
def config(input_dir, output_dir):
    """Copy-mode configuration over the temporary input/output directories."""
    return OrganizerConfig(
        input_dir=input_dir,
        output_dir=output_dir,
        mode=Mode.COPY,
        jobs=1,
    )


@pytest.fixture
def fake_exif():
    """Factory for exiftool readers returning fixed tags."""
    def _factory(create_date=None, serial=None):
        def _read(path, tags=None):
            data = {"SourceFile": str(path)}
            if create_date is not None:
                data["CreateDate"] = create_date
            if serial is not None:
                data["SerialNumber"] = serial
            return data
        return _read
    return _factory

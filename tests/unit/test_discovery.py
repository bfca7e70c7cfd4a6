"""Tests for file discovery."""

from dataclasses import replace
from pathlib import Path

import pytest

from mediaorg.filesystem.discovery import (
    classify_file,
    get_files,
    is_organized,
    matches_any,
)
from mediaorg.models import MediaKind


class TestMatchesAny:
    """Tests for matches_any function."""

    def test_case_insensitive(self):
        assert matches_any("DSC_0001.NEF", ["*.nef"]) is True
        assert matches_any("clip.mov", ["*.MOV"]) is True

    def test_no_match(self):
        assert matches_any("notes.txt", ["*.jpg", "*.nef"]) is False


class TestClassifyFile:
    """Tests for classify_file function."""

    def test_video(self, config):
        assert classify_file(Path("DSC_0002.MOV"), config) is MediaKind.VIDEO

    def test_photo(self, config):
        assert classify_file(Path("DSC_0001.NEF"), config) is MediaKind.PHOTO

    def test_neither(self, config):
        assert classify_file(Path("notes.txt"), config) is None

    def test_video_patterns_win(self, config):
        """A file matching both lists is a video."""
        config = replace(config, photo_patterns=("*.mp4",), video_patterns=("*.mp4",))
        assert classify_file(Path("a.mp4"), config) is MediaKind.VIDEO


class TestIsOrganized:
    """Tests for is_organized function."""

    def test_inside_year_month_tree(self, tmp_path):
        assert is_organized(tmp_path / "2023" / "05" / "x.jpg", tmp_path) is True

    def test_other_directory(self, tmp_path):
        assert is_organized(tmp_path / "holidays" / "x.jpg", tmp_path) is False

    def test_outside_output(self, tmp_path):
        assert is_organized(Path("/elsewhere/2023/05/x.jpg"), tmp_path / "out") is False


class TestGetFiles:
    """Tests for get_files function."""

    def test_videos_first_then_photos(self, make_media, input_dir, config):
        """Videos are enumerated before photos, each group sorted."""
        make_media("b.jpg")
        make_media("a.nef")
        make_media("z.mov")
        make_media("sub/c.mp4")
        make_media("notes.txt")

        files = list(get_files(config))

        assert files == [
            (input_dir / "sub" / "c.mp4", MediaKind.VIDEO),
            (input_dir / "z.mov", MediaKind.VIDEO),
            (input_dir / "a.nef", MediaKind.PHOTO),
            (input_dir / "b.jpg", MediaKind.PHOTO),
        ]

    def test_skips_organized_tree(self, make_media, input_dir, config):
        """Files already placed under OUTPUT_DIR/YYYY/MM are not candidates."""
        config = replace(config, output_dir=input_dir)
        make_media("new.jpg")
        make_media("2023/05/20230514_102203-1a2b3c4d5e-old.jpg")

        files = [path.name for path, _ in get_files(config)]

        assert files == ["new.jpg"]

    def test_missing_input_dir(self, tmp_path, config):
        config = replace(config, input_dir=tmp_path / "absent")
        assert list(get_files(config)) == []

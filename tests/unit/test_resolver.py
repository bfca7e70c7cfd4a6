"""Tests for capture timestamp resolution."""

from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from mediaorg.exceptions import MetadataError
from mediaorg.metadata.resolver import (
    normalize_serial,
    parse_exif_date,
    resolve_metadata,
    resolve_timestamp,
)
from mediaorg.models import MediaFile, MediaKind


class TestParseExifDate:
    """Tests for parse_exif_date function."""

    def test_standard_format(self):
        assert parse_exif_date("2023:05:14 10:22:03") == datetime(2023, 5, 14, 10, 22, 3)

    def test_ignores_subseconds_and_offset(self):
        assert parse_exif_date("2023:05:14 10:22:03.45+02:00") == datetime(2023, 5, 14, 10, 22, 3)

    def test_sentinel_is_invalid(self):
        """exiftool's zero date is treated as missing."""
        assert parse_exif_date("0000:00:00 00:00:00") is None

    @pytest.mark.parametrize("value", [None, "", "   ", "garbage", 20230514])
    def test_unusable_values(self, value):
        assert parse_exif_date(value) is None


class TestNormalizeSerial:
    """Tests for normalize_serial function."""

    def test_trims(self):
        assert normalize_serial("  ABC123 \n") == "ABC123"

    def test_numeric(self):
        assert normalize_serial(6012345) == "6012345"

    def test_empty(self):
        assert normalize_serial("   ") is None
        assert normalize_serial(None) is None


class TestResolveTimestamp:
    """Tests for resolve_timestamp function."""

    def test_uses_capture_date(self):
        media = MediaFile(path=Path("a.jpg"), mtime=0.0, capture_date=datetime(2023, 5, 14, 10, 22, 3))

        resolved = resolve_timestamp(media, "%Y%m%d_%H%M%S")

        assert (resolved.year, resolved.month) == (2023, 5)
        assert resolved.prefix == "20230514_102203"
        assert resolved.source == "metadata"

    def test_falls_back_to_mtime(self):
        mtime = datetime(2021, 12, 31, 23, 59, 58).timestamp()
        media = MediaFile(path=Path("a.jpg"), mtime=mtime)

        resolved = resolve_timestamp(media, "%Y-%m-%d")

        assert (resolved.year, resolved.month) == (2021, 12)
        assert resolved.prefix == "2021-12-31"
        assert resolved.source == "mtime"


class TestResolveMetadata:
    """Tests for resolve_metadata function."""

    def test_photo_with_metadata(self, make_media, fake_exif):
        path = make_media("DSC_0001.NEF", mtime=datetime(2020, 1, 1))
        media = MediaFile.from_path(path)

        media, resolved = resolve_metadata(
            media, "%Y%m%d_%H%M%S", fake_exif("2023:05:14 10:22:03", " ABC123 ")
        )

        assert resolved.year_month == "2023-05"
        assert resolved.prefix == "20230514_102203"
        assert media.serial_number == "ABC123"

    def test_same_metadata_same_month_regardless_of_mtime(self, make_media, fake_exif):
        """Identical capture metadata gives identical year/month."""
        reader = fake_exif("2019:07:04 08:00:00")
        first = MediaFile.from_path(make_media("a.jpg", mtime=datetime(2001, 2, 3)))
        second = MediaFile.from_path(make_media("b.jpg", mtime=datetime(2024, 11, 30)))

        _, r1 = resolve_metadata(first, "%Y%m%d", reader)
        _, r2 = resolve_metadata(second, "%Y%m%d", reader)

        assert (r1.year, r1.month) == (r2.year, r2.month) == (2019, 7)

    @pytest.mark.parametrize("create_date", [None, "0000:00:00 00:00:00"])
    def test_photo_without_date_uses_mtime(self, make_media, fake_exif, create_date):
        """Missing or zero capture date falls back to the modification time."""
        path = make_media("IMG_0001.JPG", mtime=datetime(2018, 3, 9, 14, 5, 6))

        _, resolved = resolve_metadata(MediaFile.from_path(path), "%Y%m%d_%H%M%S", fake_exif(create_date))

        assert resolved.year_month == "2018-03"
        assert resolved.prefix == "20180309_140506"
        assert resolved.source == "mtime"

    def test_video_never_queries_exiftool(self, make_media):
        path = make_media("DSC_0002.MOV", mtime=datetime(2022, 1, 3, 9, 30))
        reader = MagicMock()

        media, resolved = resolve_metadata(MediaFile.from_path(path, MediaKind.VIDEO), "%Y%m%d", reader)

        reader.assert_not_called()
        assert resolved.year_month == "2022-01"
        assert media.serial_number is None

    def test_exiftool_failure_propagates(self, make_media):
        path = make_media("IMG_0002.JPG")
        reader = MagicMock(side_effect=MetadataError("exiftool exited with status 1"))

        with pytest.raises(MetadataError):
            resolve_metadata(MediaFile.from_path(path), "%Y%m%d", reader)

    def test_default_reader_is_read_tags(self, make_media):
        """Without an override the exiftool wrapper is used."""
        path = make_media("IMG_0003.JPG")
        with pytest.MonkeyPatch.context() as mp:
            reader = MagicMock(return_value={"CreateDate": "2020:02:02 02:02:02"})
            mp.setattr("mediaorg.metadata.resolver.read_tags", reader)
            _, resolved = resolve_metadata(MediaFile.from_path(path), "%Y%m%d")

        reader.assert_called_once_with(path)
        assert resolved.prefix == "20200202"

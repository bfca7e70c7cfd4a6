"""Tests for configuration building."""

from pathlib import Path

import pytest

from mediaorg.config.options import (
    OrganizerConfig,
    build_config,
    environment_values,
    load_settings_file,
    parse_option,
    parse_patterns,
)
from mediaorg.exceptions import ConfigurationError
from mediaorg.models import Mode


class TestOrganizerConfig:
    """Tests for OrganizerConfig dataclass."""

    def test_default_values(self):
        """Default values are set correctly."""
        config = OrganizerConfig()
        assert config.input_dir == Path(".")
        assert config.output_dir == Path(".")
        assert config.mode is Mode.COPY
        assert config.prefix_dt_pattern == "%Y%m%d_%H%M%S"
        assert config.log_level == "ALL"
        assert config.naming_scheme == "checksum"
        assert config.jobs >= 1

    def test_is_dry_run_property(self):
        assert OrganizerConfig(mode=Mode.DRY_RUN).is_dry_run is True
        assert OrganizerConfig(mode=Mode.MOVE).is_dry_run is False

    def test_is_frozen(self):
        config = OrganizerConfig()
        with pytest.raises(AttributeError):
            config.mode = Mode.MOVE


class TestParsePatterns:
    """Tests for parse_patterns function."""

    def test_comma_and_space_separated(self):
        assert parse_patterns("*.jpg, *.nef  *.cr2") == ("*.jpg", "*.nef", "*.cr2")

    def test_empty(self):
        assert parse_patterns("  ,  ") == ()


class TestParseOption:
    """Tests for parse_option function."""

    def test_key_value(self):
        assert parse_option("MODE=move") == ("MODE", "move")

    def test_value_may_contain_equals(self):
        assert parse_option("INPUT_DIR=/a=b") == ("INPUT_DIR", "/a=b")

    def test_strips_whitespace(self):
        assert parse_option(" MODE = dry ") == ("MODE", "dry")

    def test_missing_equals(self):
        with pytest.raises(ConfigurationError):
            parse_option("MODE")

    def test_unknown_key(self):
        """Keys outside the allow-list are rejected."""
        with pytest.raises(ConfigurationError, match="Unknown option"):
            parse_option("RM_RF=/")

    def test_keys_are_case_sensitive(self):
        with pytest.raises(ConfigurationError):
            parse_option("mode=copy")


class TestEnvironmentValues:
    """Tests for environment_values function."""

    def test_only_allowed_keys(self):
        environ = {"MODE": "move", "HOME": "/root", "LOG_LEVEL": " INFO "}
        assert environment_values(environ) == {"MODE": "move", "LOG_LEVEL": "INFO"}


class TestLoadSettingsFile:
    """Tests for load_settings_file function."""

    def test_missing_file(self, tmp_path):
        assert load_settings_file(tmp_path / "absent.env") == {}

    def test_reads_dotenv_syntax(self, tmp_path):
        settings = tmp_path / ".mediaorg.env"
        settings.write_text('# comment\nMODE=move\nOUTPUT_DIR="/photos"\n')

        assert load_settings_file(settings) == {"MODE": "move", "OUTPUT_DIR": "/photos"}

    def test_unknown_setting(self, tmp_path):
        settings = tmp_path / ".mediaorg.env"
        settings.write_text("SOMETHING=else\n")

        with pytest.raises(ConfigurationError, match="Unknown setting"):
            load_settings_file(settings)


class TestBuildConfig:
    """Tests for build_config function."""

    def test_defaults(self):
        assert build_config(environ={}) == OrganizerConfig()

    def test_typed_values(self):
        """Values are converted to their field types."""
        config = build_config(
            [
                "INPUT_DIR=/in",
                "OUTPUT_DIR=/out",
                "MODE=DRY",
                "PHOTO_FILES_PATTERN=*.jpg,*.nef",
                "VIDEO_FILES_PATTERN=*.mov",
                "LOG_LEVEL=warn",
                "LOG_FILE_PATH=/tmp/mediaorg.log",
                "DISABLE_COLOR_OUTPUT=true",
                "NAMING_SCHEME=parent",
                "JOBS=4",
            ],
            environ={},
        )

        assert config.input_dir == Path("/in")
        assert config.output_dir == Path("/out")
        assert config.mode is Mode.DRY_RUN
        assert config.photo_patterns == ("*.jpg", "*.nef")
        assert config.video_patterns == ("*.mov",)
        assert config.log_level == "WARN"
        assert config.log_file == Path("/tmp/mediaorg.log")
        assert config.disable_color is True
        assert config.naming_scheme == "parent"
        assert config.jobs == 4

    def test_precedence(self, tmp_path):
        """Options override the settings file, which overrides the environment."""
        settings = tmp_path / ".mediaorg.env"
        settings.write_text("MODE=move\nOUTPUT_DIR=/from-settings\n")
        environ = {"MODE": "dry", "OUTPUT_DIR": "/from-env", "INPUT_DIR": "/env-in"}

        config = build_config(["OUTPUT_DIR=/from-option"], settings, environ)

        assert config.input_dir == Path("/env-in")
        assert config.mode is Mode.MOVE
        assert config.output_dir == Path("/from-option")

    @pytest.mark.parametrize("option", [
        "MODE=delete",
        "LOG_LEVEL=VERBOSE",
        "JOBS=0",
        "JOBS=many",
        "NAMING_SCHEME=random",
        "DISABLE_COLOR_OUTPUT=maybe",
        "PREFIX_DT_PATTERN=",
        "PREFIX_DT_PATTERN=%Y/%m%d",
        "PHOTO_FILES_PATTERN=,",
    ])
    def test_invalid_values(self, option):
        with pytest.raises(ConfigurationError):
            build_config([option], environ={})

    def test_invalid_environment_value(self):
        with pytest.raises(ConfigurationError):
            build_config(environ={"MODE": "shred"})

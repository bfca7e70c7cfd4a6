"""Configuration and CLI handling."""

from mediaorg.config.settings import (
    DEFAULT_INPUT_DIR,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SETTINGS_FILE,
    DEFAULT_PREFIX_DT_PATTERN,
    LOG_LEVELS,
    LOG_FILE_ROTATION,
    SHORT_CHECKSUM_LENGTH,
)
from mediaorg.config.options import (
    OrganizerConfig,
    OPTION_FIELDS,
    parse_option,
    parse_patterns,
    environment_values,
    load_settings_file,
    build_config,
)
from mediaorg.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    args_to_cli_args,
    create_backup_parser,
)

__all__ = [
    "DEFAULT_INPUT_DIR",
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_SETTINGS_FILE",
    "DEFAULT_PREFIX_DT_PATTERN",
    "LOG_LEVELS",
    "LOG_FILE_ROTATION",
    "SHORT_CHECKSUM_LENGTH",
    "OrganizerConfig",
    "OPTION_FIELDS",
    "parse_option",
    "parse_patterns",
    "environment_values",
    "load_settings_file",
    "build_config",
    "CLIArgs",
    "create_parser",
    "parse_arguments",
    "args_to_cli_args",
    "create_backup_parser",
]

"""Entry point for the backup utility.

Run with: python -m mediaorg.backup
"""

import os
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from mediaorg.backup.archive import create_backup
from mediaorg.config import build_config, create_backup_parser
from mediaorg.exceptions import BackupError, ConfigurationError
from mediaorg.utils.log import setup_logging

# Options accepted by the backup command
LOGGING_OPTIONS = {"LOG_LEVEL", "LOG_FILE_PATH", "DISABLE_COLOR_OUTPUT"}


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the backup utility.

    Returns:
        Exit code (0 for success, 1 for errors).
    """
    namespace = create_backup_parser().parse_args(argv)

    try:
        for option in namespace.option:
            key = option.partition("=")[0].strip()
            if key not in LOGGING_OPTIONS:
                raise ConfigurationError(f"Option '{key}' is not supported by mediaorg-backup")
        environ = {k: v for k, v in os.environ.items() if k in LOGGING_OPTIONS}
        config = build_config(namespace.option, environ=environ)
    except ConfigurationError as e:
        setup_logging()
        logger.error(f"Configuration error: {e}")
        return 1

    setup_logging(config.log_level, config.log_file, colorize=not config.disable_color)

    try:
        create_backup(
            Path(namespace.source),
            Path(namespace.dest),
            compression=namespace.compression,
            dry_run=namespace.dry_run,
        )
    except BackupError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

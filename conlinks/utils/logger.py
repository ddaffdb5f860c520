"""Logging setup for conlinks."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from conlinks.api.settings._constants import LOG_FILE_NAME
from conlinks.api.settings.PluginSettings import PluginSettings

LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3

_CONFIGURED = False


def configure_logging(home: Path | None = None) -> None:
    """Attach a rotating log file to the ``conlinks`` logger, once per process.

    Args:
        home: Directory holding the log file. Defaults to the settings home.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    log_dir = home if home is not None else PluginSettings.get_home_dir()
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(log_dir / LOG_FILE_NAME, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    package_logger = logging.getLogger("conlinks")
    package_logger.setLevel(logging.INFO)
    package_logger.addHandler(handler)

    _CONFIGURED = True

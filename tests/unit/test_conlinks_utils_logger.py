"""Unit tests for conlinks.utils.logger module."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from conlinks.api.settings.PluginSettings import PluginSettings
from conlinks.utils import logger as logger_module
from conlinks.utils.logger import LOG_BACKUP_COUNT, LOG_MAX_BYTES, configure_logging

pytestmark = pytest.mark.utils


@pytest.fixture
def fresh_logger(monkeypatch):
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    conlinks_logger = logging.getLogger("conlinks")
    handlers = list(conlinks_logger.handlers)
    level = conlinks_logger.level
    yield conlinks_logger
    for handler in conlinks_logger.handlers[len(handlers) :]:
        handler.close()
    conlinks_logger.handlers = handlers
    conlinks_logger.setLevel(level)


def test_configure_logging_writes_to_home(fresh_logger, tmp_path):
    configure_logging(tmp_path)
    logging.getLogger("conlinks.api.settings").info("hello")
    for handler in fresh_logger.handlers:
        handler.flush()
    assert "conlinks.api.settings - INFO - hello" in (tmp_path / "conlinks.log").read_text()


def test_configure_logging_uses_settings_home(fresh_logger, conlinks_home):
    configure_logging()
    assert (conlinks_home / "conlinks.log").exists()
    assert (PluginSettings.get_home_dir() / "conlinks.log").exists()


def test_configure_logging_only_once(fresh_logger, tmp_path):
    configure_logging(tmp_path)
    configure_logging(tmp_path)
    handlers = [h for h in fresh_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(handlers) == 1
    assert handlers[0].maxBytes == LOG_MAX_BYTES == 5 * 1024 * 1024
    assert handlers[0].backupCount == LOG_BACKUP_COUNT == 3

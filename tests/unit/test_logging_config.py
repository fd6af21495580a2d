import logging
import sys

import pytest
from loguru import logger

from utils.logging_config import configure_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    logger.remove()
    logger.add(sys.stderr)
    root.handlers[:] = handlers
    root.setLevel(level)


def test_stdlib_records_reach_loguru(restore_logging):
    messages = []

    configure_logging()
    logger.add(messages.append, level="DEBUG", format="{level} {message}")
    logging.getLogger("LibreTranslateTranslator").warning("LibreTranslate health check failed: HTTP 503")

    assert messages == ["WARNING [LibreTranslateTranslator] LibreTranslate health check failed: HTTP 503\n"]


def test_log_file_sink(restore_logging, tmp_path):
    log_file = tmp_path / "logs" / "localefill.log"

    configure_logging(log_file)
    logging.getLogger("translator.autofill").debug("Auto-filling 2 keys")
    logger.remove()

    assert "Auto-filling 2 keys" in log_file.read_text(encoding="utf-8")

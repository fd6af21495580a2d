from __future__ import annotations

import logging
from pathlib import Path

from loguru import logger


class InterceptHandler(logging.Handler):
    """Forward standard-library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(exception=record.exc_info).log(level, "[{}] {}", record.name, record.getMessage())


def configure_logging(log_file: Path | None = None) -> None:
    logger.remove()
    logger.add(lambda msg: print(msg, end=""), level="INFO")
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level="DEBUG", rotation="1 MB", retention=5)
    logging.basicConfig(handlers=[InterceptHandler()], level=logging.DEBUG, force=True)

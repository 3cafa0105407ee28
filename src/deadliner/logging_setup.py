"""Console and optional rotating-file logging for the ``deadliner`` loggers."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

_LOGGER_NAME = "deadliner"


def configure_logging(level: int = logging.INFO, log_file: Path | None = None, keep_files: int = 3) -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            filename=str(log_file),
            maxBytes=1024 * 1024,
            backupCount=max(1, keep_files),
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        logger.addHandler(handler)

    logger.debug("logging configured")
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)

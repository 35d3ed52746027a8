# === FILE: docs_archiver/logger.py ===
"""Handlers of the ``DocsArchiver`` logger.

Modules log through ``logging.getLogger(LOGGER_NAME)``; nothing is attached
until the CLI calls :func:`init_logging`.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "DocsArchiver"

#: rotation of the optional log file
MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
LOG_BACKUPS: Final[int] = 3


def _build_handlers(log_file: Optional[Union[str, Path]], fmt: str) -> list[logging.Handler]:
    formatter = logging.Formatter(fmt)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                str(log_file), maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
            )
        )
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure(
    *,
    level: Union[int, str] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Attach console (and optionally rotating file) output to the project logger.

    With *replace_handlers* the previous handlers are closed first, so the
    function can be called repeatedly without duplicating output.
    """
    archiver_logger = logging.getLogger(LOGGER_NAME)
    archiver_logger.setLevel(level)

    if replace_handlers:
        for handler in list(archiver_logger.handlers):
            archiver_logger.removeHandler(handler)
            handler.close()

    for handler in _build_handlers(log_file, log_format):
        archiver_logger.addHandler(handler)

    # records are not repeated by a root handler
    archiver_logger.propagate = False
    return archiver_logger


def init_logging(
    level: Union[int, str] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """Fresh console/file setup for one CLI run."""
    return configure(level=level, log_file=log_file)


__all__ = ["configure", "init_logging", "LOGGER_NAME", "DEFAULT_FORMAT"]

"""Timestamped, leveled messages written to stderr and an append-only log file.

Every record goes through one logger tree rooted at ``shellsuite``. Two
handlers are attached: a colored stream handler on stderr and a plain file
handler on the shared log file. Both flush after each record, so lines land
in emission order.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

ROOT_LOGGER_NAME = "shellsuite"
FATAL = logging.CRITICAL

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LEVEL_TAGS = {
    logging.DEBUG: ("[DEBUG]", "cyan"),
    logging.INFO: ("[INFO]", "blue"),
    logging.WARNING: ("[WARNING]", "yellow"),
    logging.ERROR: ("[ERROR]", "red"),
    logging.CRITICAL: ("[FATAL]", "red"),
}
_TAG_WIDTH = 12


class LevelTagFormatter(logging.Formatter):
    """Render ``<timestamp> [LEVEL]<padding> <message>`` lines."""

    def __init__(self, *, use_color: bool) -> None:
        super().__init__(datefmt=DATE_FORMAT)
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        tag, color = _LEVEL_TAGS.get(record.levelno, (f"[{record.levelname}]", None))
        padding = " " * max(1, _TAG_WIDTH - len(tag))
        if self._use_color and color is not None:
            tag = click.style(tag, fg=color)
        line = f"{self.formatTime(record, self.datefmt)} {tag}{padding}{record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def configure_reporting(log_file: Path) -> logging.Logger:
    """Attach the stderr and log-file handlers at INFO, replacing any from a previous call."""
    level = logging.INFO
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(LevelTagFormatter(use_color=True))
    logger.addHandler(console_handler)

    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(LevelTagFormatter(use_color=False))
    logger.addHandler(file_handler)
    return logger


def enable_tracing() -> None:
    """Lower the reporter to DEBUG so every external command is echoed."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    for handler in logger.handlers:
        handler.setLevel(logging.DEBUG)


def get_logger(name: str) -> logging.Logger:
    """Get logger for specific module."""
    if not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def report_fatal(message: str) -> None:
    logging.getLogger(ROOT_LOGGER_NAME).log(FATAL, message)

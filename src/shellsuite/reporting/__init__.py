"""Leveled console and log-file reporting exports."""

from .leveled_logging import (
    FATAL,
    LevelTagFormatter,
    configure_reporting,
    enable_tracing,
    get_logger,
    report_fatal,
)
from .log_file_preparation import prepare_log_file

__all__ = [
    "FATAL",
    "LevelTagFormatter",
    "configure_reporting",
    "enable_tracing",
    "get_logger",
    "report_fatal",
    "prepare_log_file",
]

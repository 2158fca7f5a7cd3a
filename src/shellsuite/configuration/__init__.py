"""Configuration domain exports."""

from .runtime_settings import (
    CONTAINER_RUNTIME_ENV_VAR,
    DEFAULT_CONTAINER_RUNTIME,
    DEFAULT_LOG_FILE,
    LOG_FILE_ENV_VAR,
    RuntimeSettings,
    load_runtime_settings,
)

__all__ = [
    "RuntimeSettings",
    "load_runtime_settings",
    "DEFAULT_LOG_FILE",
    "DEFAULT_CONTAINER_RUNTIME",
    "LOG_FILE_ENV_VAR",
    "CONTAINER_RUNTIME_ENV_VAR",
]

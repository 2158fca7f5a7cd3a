"""Tests for environment-driven runtime settings."""

from __future__ import annotations

from pathlib import Path

from shellsuite.configuration import (
    DEFAULT_CONTAINER_RUNTIME,
    DEFAULT_LOG_FILE,
    load_runtime_settings,
)


def test_load_runtime_settings_falls_back_to_defaults() -> None:
    settings = load_runtime_settings({})

    assert settings.log_file == DEFAULT_LOG_FILE == Path("/tmp/shellsuite.log")
    assert settings.container_runtime == DEFAULT_CONTAINER_RUNTIME == "docker"


def test_load_runtime_settings_reads_environment_overrides() -> None:
    settings = load_runtime_settings(
        {
            "SHELLSUITE_LOG_FILE": "/var/log/lint.log",
            "SHELLSUITE_CONTAINER_RUNTIME": "podman",
        }
    )

    assert settings.log_file == Path("/var/log/lint.log")
    assert settings.container_runtime == "podman"


def test_load_runtime_settings_ignores_blank_values() -> None:
    settings = load_runtime_settings(
        {"SHELLSUITE_LOG_FILE": "  ", "SHELLSUITE_CONTAINER_RUNTIME": ""}
    )

    assert settings.log_file == DEFAULT_LOG_FILE
    assert settings.container_runtime == DEFAULT_CONTAINER_RUNTIME


def test_load_runtime_settings_reads_process_environment_by_default(log_file: Path) -> None:
    assert load_runtime_settings().log_file == log_file

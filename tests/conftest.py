"""Shared fixtures: a supported architecture, a private log file and clean reporter handlers."""

from __future__ import annotations

import logging
import platform
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _supported_architecture(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(platform, "machine", lambda: "x86_64")


@pytest.fixture(autouse=True)
def log_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "logs" / "shellsuite.log"
    monkeypatch.setenv("SHELLSUITE_LOG_FILE", str(path))
    monkeypatch.delenv("SHELLSUITE_CONTAINER_RUNTIME", raising=False)
    monkeypatch.delenv("SUDO_UID", raising=False)
    monkeypatch.delenv("SUDO_GID", raising=False)
    return path


@pytest.fixture(autouse=True)
def _reset_reporter() -> Iterator[None]:
    yield
    logger = logging.getLogger("shellsuite")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)

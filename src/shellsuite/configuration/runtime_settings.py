"""Process-level settings resolved from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_LOG_FILE = Path("/tmp/shellsuite.log")
DEFAULT_CONTAINER_RUNTIME = "docker"

LOG_FILE_ENV_VAR = "SHELLSUITE_LOG_FILE"
CONTAINER_RUNTIME_ENV_VAR = "SHELLSUITE_CONTAINER_RUNTIME"


@dataclass(frozen=True)
class RuntimeSettings:
    """Settings that apply to the whole process rather than a single run."""

    log_file: Path
    container_runtime: str


def load_runtime_settings(environ: Mapping[str, str] | None = None) -> RuntimeSettings:
    """Read runtime settings from environment variables, falling back to defaults."""
    env = os.environ if environ is None else environ
    log_file = env.get(LOG_FILE_ENV_VAR, "").strip()
    container_runtime = env.get(CONTAINER_RUNTIME_ENV_VAR, "").strip()
    return RuntimeSettings(
        log_file=Path(log_file) if log_file else DEFAULT_LOG_FILE,
        container_runtime=container_runtime or DEFAULT_CONTAINER_RUNTIME,
    )

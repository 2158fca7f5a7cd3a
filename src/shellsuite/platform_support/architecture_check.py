"""Machine architecture gate."""

from __future__ import annotations

import platform

SUPPORTED_ARCHITECTURES = frozenset({"x86_64"})


class PlatformError(Exception):
    """Raised when the host architecture is not supported."""


def ensure_supported_architecture(machine: str | None = None) -> str:
    """Return the detected architecture, or raise when it is not supported."""
    architecture = platform.machine() if machine is None else machine
    if architecture not in SUPPORTED_ARCHITECTURES:
        raise PlatformError("Unsupported architecture.")
    return architecture

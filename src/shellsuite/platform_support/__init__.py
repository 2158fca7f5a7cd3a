"""Platform support exports."""

from .architecture_check import (
    SUPPORTED_ARCHITECTURES,
    PlatformError,
    ensure_supported_architecture,
)

__all__ = ["SUPPORTED_ARCHITECTURES", "PlatformError", "ensure_supported_architecture"]

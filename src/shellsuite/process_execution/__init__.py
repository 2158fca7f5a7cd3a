"""Subprocess execution exports."""

from .command_runner import (
    CommandCapturer,
    CommandFailedError,
    CommandRunner,
    capture_command_output,
    run_checked_command,
)

__all__ = [
    "CommandCapturer",
    "CommandFailedError",
    "CommandRunner",
    "capture_command_output",
    "run_checked_command",
]

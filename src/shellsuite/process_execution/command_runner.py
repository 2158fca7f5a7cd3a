"""Structured subprocess invocation for validators and git."""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Callable

from shellsuite.reporting import get_logger

CommandRunner = Callable[[tuple[str, ...]], None]
CommandCapturer = Callable[[tuple[str, ...]], bytes]

logger = get_logger("process_execution")


class CommandFailedError(Exception):
    """Raised when an external command cannot be started or exits non-zero."""

    def __init__(self, command: tuple[str, ...], message: str, returncode: int | None = None):
        super().__init__(message)
        self.command = command
        self.returncode = returncode


def _command_text(command: tuple[str, ...]) -> str:
    raw = shlex.join(command).encode("utf-8", errors="surrogateescape")
    return raw.decode("utf-8", errors="backslashreplace")


def run_checked_command(command: tuple[str, ...]) -> None:
    """Run one command with inherited stdio and raise on any failure."""
    logger.debug("+ %s", _command_text(command))
    try:
        subprocess.run(list(command), check=True)
    except FileNotFoundError as exc:
        raise CommandFailedError(command, f"Command not found: {_command_text(command)}") from exc
    except subprocess.CalledProcessError as exc:
        raise CommandFailedError(
            command,
            f"Command failed with exit code {exc.returncode}: {_command_text(command)}",
            returncode=exc.returncode,
        ) from exc


def capture_command_output(command: tuple[str, ...]) -> bytes:
    """Run one command and return its raw stdout; stderr is left on the terminal."""
    logger.debug("+ %s", _command_text(command))
    try:
        completed = subprocess.run(list(command), check=True, stdout=subprocess.PIPE)
    except FileNotFoundError as exc:
        raise CommandFailedError(command, f"Command not found: {_command_text(command)}") from exc
    except subprocess.CalledProcessError as exc:
        raise CommandFailedError(
            command,
            f"Command failed with exit code {exc.returncode}: {_command_text(command)}",
            returncode=exc.returncode,
        ) from exc
    return completed.stdout

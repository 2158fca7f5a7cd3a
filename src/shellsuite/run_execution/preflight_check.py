"""Validator availability check performed before any file is scanned."""

from __future__ import annotations

from shellsuite.process_execution import CommandFailedError, CommandRunner, run_checked_command
from shellsuite.validator_catalog import ValidatorSpec


class PreflightError(Exception):
    """Raised when the chosen validator cannot run its self-check."""


def run_self_check(validator: ValidatorSpec, *, run_command: CommandRunner | None = None) -> None:
    command_runner = run_command or run_checked_command
    try:
        command_runner(validator.self_check_command())
    except CommandFailedError as exc:
        raise PreflightError(f"Failed to check {validator.name} version.") from exc

"""Lint run use-case service."""

from __future__ import annotations

from collections.abc import Iterable

from shellsuite.command_options import RunConfig
from shellsuite.file_discovery import display_path, iter_candidate_files
from shellsuite.file_discovery.shell_script_detection import EntryLister
from shellsuite.process_execution import CommandFailedError, CommandRunner, run_checked_command
from shellsuite.reporting import get_logger

from .preflight_check import run_self_check
from .run_contracts import LintOutcome

logger = get_logger("run_execution")


class ValidationFailure(Exception):
    """Raised when a candidate file fails the external validator."""

    def __init__(self, file_path: str) -> None:
        super().__init__(f"Linting {display_path(file_path)}")
        self.file_path = file_path


def execute_lint_run(
    config: RunConfig,
    *,
    run_command: CommandRunner | None = None,
    list_entries: EntryLister | None = None,
) -> LintOutcome:
    """Self-check the validator, then lint each tracked shell script until one fails."""
    command_runner = run_command or run_checked_command
    run_self_check(config.validator, run_command=command_runner)

    logger.debug(
        "Linting all executables and .*sh files under %s with %s...",
        config.path,
        config.validator.name,
    )
    candidates = iter_candidate_files(config.path, list_entries=list_entries)
    linted = dispatch_candidates(config, candidates, run_command=command_runner)
    logger.info("%s validation complete.", config.validator.name)
    return LintOutcome(validator=config.validator.name, linted_files=linted)


def dispatch_candidates(
    config: RunConfig,
    candidates: Iterable[str],
    *,
    run_command: CommandRunner | None = None,
) -> tuple[str, ...]:
    """Run the validator on each candidate in order; raise on the first failing file."""
    command_runner = run_command or run_checked_command
    linted: list[str] = []
    for relative_path in candidates:
        command = config.validator.lint_command(config.flags, config.path / relative_path)
        try:
            command_runner(command)
        except CommandFailedError as exc:
            raise ValidationFailure(relative_path) from exc
        logger.info("Linting %s", display_path(relative_path))
        linted.append(relative_path)
    return tuple(linted)

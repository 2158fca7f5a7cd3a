"""Immutable run configuration and the option rules that guard it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from shellsuite.validator_catalog.validator_kinds import ValidatorSpec

FLAGS_DELIMITER = " "


class OptionUsageError(Exception):
    """Raised when command-line options are missing, malformed or out of order."""


@dataclass(frozen=True)
class RunConfig:
    """Everything one lint run needs, built once from the command line."""

    path: Path
    validator: ValidatorSpec
    flags: str
    debug: bool = False


def validate_flags(flags: str) -> str:
    """Reject flag strings that do not start with the delimiter."""
    if not flags.startswith(FLAGS_DELIMITER):
        raise OptionUsageError("Flags must start with a space.")
    return flags


def require_path_defined_first(path: Path | str | None) -> Path:
    if not path:
        raise OptionUsageError("Path must be defined first.")
    return Path(path)


def build_run_config(
    *,
    path: Path | str | None,
    validator: ValidatorSpec | None,
    flags: str | None,
    debug: bool = False,
) -> RunConfig:
    """Check that every mandatory setting is present and freeze them together."""
    if not path:
        raise OptionUsageError("Path must be defined.")
    if validator is None:
        raise OptionUsageError("Validator must be defined.")
    if not flags:
        raise OptionUsageError("Flags must be defined.")
    if not validator.self_check_args:
        raise OptionUsageError("Check must be defined.")
    return RunConfig(path=Path(path), validator=validator, flags=flags, debug=debug)

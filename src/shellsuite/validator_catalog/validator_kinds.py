"""Closed catalog of supported validators and how to invoke them."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class UnknownValidatorError(Exception):
    """Raised when a validator name is not in the catalog."""


class ValidatorKind(str, Enum):
    """Supported validators, each with its container image and self-check argument."""

    BASHATE = "bashate"
    SHELLCHECK = "shellcheck"
    SHFMT = "shfmt"

    @property
    def image(self) -> str:
        return _IMAGES[self]

    @property
    def self_check_args(self) -> tuple[str, ...]:
        return _SELF_CHECK_ARGS[self]


_IMAGES = {
    ValidatorKind.BASHATE: "textclean/bashate",
    ValidatorKind.SHELLCHECK: "koalaman/shellcheck",
    ValidatorKind.SHFMT: "mvdan/shfmt",
}

_SELF_CHECK_ARGS = {
    ValidatorKind.BASHATE: ("--show",),
    ValidatorKind.SHELLCHECK: ("--version",),
    ValidatorKind.SHFMT: ("--version",),
}


@dataclass(frozen=True)
class ValidatorSpec:
    """Resolved invocation of one validator for one source tree."""

    kind: ValidatorKind
    invocation: tuple[str, ...]
    self_check_args: tuple[str, ...]

    @property
    def name(self) -> str:
        return self.kind.value

    def self_check_command(self) -> tuple[str, ...]:
        return self.invocation + self.self_check_args

    def lint_command(self, flags: str, file_path: Path) -> tuple[str, ...]:
        """Build the argument list that lints one file with the user's flags."""
        return self.invocation + tuple(shlex.split(flags)) + (str(file_path),)


def resolve_validator(
    name: str, path: Path | str, *, container_runtime: str = "docker"
) -> ValidatorSpec:
    """Map a validator name to its invocation for the given source tree."""
    try:
        kind = ValidatorKind(name)
    except ValueError as exc:
        raise UnknownValidatorError("Invalid validator option.") from exc
    mount = f"{path}:{path}"
    return ValidatorSpec(
        kind=kind,
        invocation=(container_runtime, "run", "--rm", "-v", mount, kind.image),
        self_check_args=kind.self_check_args,
    )
